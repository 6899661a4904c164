from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.schemas.user import UserOut, UserUpdate
from todo_app.scripts.runner import build_parser, run
from todo_app.services.user_service import UserService


async def update_user(db: AsyncSession, email: str, first_name: str, last_name: str) -> UserOut:
    changes = UserUpdate(first_name=first_name, last_name=last_name)
    user = await UserService().update_user(db, email, changes)
    return UserOut.model_validate(user)


def main(argv=None) -> int:
    parser = build_parser("Rename the user identified by email.")
    parser.add_argument("email")
    parser.add_argument("--first-name", required=True)
    parser.add_argument("--last-name", required=True)
    args = parser.parse_args(argv)
    return run(lambda db: update_user(db, args.email, args.first_name, args.last_name), args)


if __name__ == "__main__":
    raise SystemExit(main())
