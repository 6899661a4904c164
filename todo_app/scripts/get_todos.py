from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.schemas.todo import TodoOut
from todo_app.scripts.runner import build_parser, run
from todo_app.services.todo_service import TodoService


async def get_todos(db: AsyncSession, user_id: int) -> list[TodoOut]:
    todos = await TodoService().list_todos(db, user_id)
    return [TodoOut.model_validate(todo) for todo in todos]


def main(argv=None) -> int:
    parser = build_parser("Print every todo owned by a user.")
    parser.add_argument("user_id", type=int)
    args = parser.parse_args(argv)
    return run(lambda db: get_todos(db, args.user_id), args)


if __name__ == "__main__":
    raise SystemExit(main())
