from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.schemas.todo import TodoWithUser
from todo_app.scripts.runner import build_parser, run
from todo_app.services.todo_service import TodoService


async def get_todos_with_user(db: AsyncSession, user_id: int) -> list[TodoWithUser]:
    return await TodoService().list_todos_with_user(db, user_id)


def main(argv=None) -> int:
    parser = build_parser("Print a user's todos together with the owner's name and email.")
    parser.add_argument("user_id", type=int)
    args = parser.parse_args(argv)
    return run(lambda db: get_todos_with_user(db, args.user_id), args)


if __name__ == "__main__":
    raise SystemExit(main())
