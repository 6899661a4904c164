from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.schemas.todo import TodoCreate, TodoOut
from todo_app.scripts.runner import build_parser, run
from todo_app.services.todo_service import TodoService


async def insert_todo(db: AsyncSession, user_id: int, title: str, description: str) -> TodoOut:
    todo_in = TodoCreate(user_id=user_id, title=title, description=description)
    todo = await TodoService().create_todo(db, todo_in)
    return TodoOut.model_validate(todo)


def main(argv=None) -> int:
    parser = build_parser("Create a todo for an existing user.")
    parser.add_argument("user_id", type=int)
    parser.add_argument("title")
    parser.add_argument("description")
    args = parser.parse_args(argv)
    return run(lambda db: insert_todo(db, args.user_id, args.title, args.description), args)


if __name__ == "__main__":
    raise SystemExit(main())
