from sqlalchemy.ext.asyncio import AsyncSession
from todo_app.models.user import User
from todo_app.repositories.base import BaseRepository
from todo_app.schemas.user import UserCreate

class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User)

    async def create_from(self, db: AsyncSession, user_in: UserCreate) -> User:
        return await self.create(db, User(**user_in.model_dump()))

    async def get_by_email(self, db: AsyncSession, email: str) -> User | None:
        return await self.get_by(db, email=email)
