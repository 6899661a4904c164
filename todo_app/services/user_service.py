import logging

from sqlalchemy.ext.asyncio import AsyncSession
from todo_app.errors import ConstraintViolationError, DuplicateEmailError, NotFoundError
from todo_app.repositories.user_repo import UserRepository
from todo_app.schemas.user import UserCreate, UserUpdate
from todo_app.services.errors import translate_db_errors

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self):
        self.repo = UserRepository()

    async def create_user(self, db: AsyncSession, user_in: UserCreate):
        try:
            async with translate_db_errors(db, "insert-user"):
                user = await self.repo.create_from(db, user_in)
                await db.commit()
        except ConstraintViolationError as exc:
            # email is the only unique column the caller supplies
            raise DuplicateEmailError(user_in.email) from exc.__cause__
        logger.info("Created user %s", user.id)
        return user

    async def update_user(self, db: AsyncSession, email: str, changes: UserUpdate):
        async with translate_db_errors(db, "update-user"):
            user = await self.repo.get_by_email(db, email)
            if user is None:
                raise NotFoundError(f"No user with email {email!r}")
            for field, value in changes.model_dump().items():
                setattr(user, field, value)
            await db.commit()
        logger.info("Updated user %s", user.id)
        return user
