from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.schemas.user import UserCreate, UserCreated
from todo_app.scripts.runner import build_parser, run
from todo_app.services.user_service import UserService


async def insert_user(
    db: AsyncSession,
    email: str,
    password: str,
    first_name: str,
    last_name: str,
) -> UserCreated:
    user_in = UserCreate(
        email=email,
        password=password,
        first_name=first_name,
        last_name=last_name,
    )
    user = await UserService().create_user(db, user_in)
    return UserCreated.model_validate(user)


def main(argv=None) -> int:
    parser = build_parser("Create a user and print its id and name.")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("first_name")
    parser.add_argument("last_name")
    args = parser.parse_args(argv)
    return run(
        lambda db: insert_user(db, args.email, args.password, args.first_name, args.last_name),
        args,
    )


if __name__ == "__main__":
    raise SystemExit(main())
