from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from todo_app.models.todo import Todo
from todo_app.models.user import User
from todo_app.repositories.base import BaseRepository
from todo_app.schemas.todo import TodoCreate

class TodoRepository(BaseRepository[Todo]):
    def __init__(self):
        super().__init__(Todo)

    async def create_from(self, db: AsyncSession, todo_in: TodoCreate) -> Todo:
        return await self.create(db, Todo(**todo_in.model_dump()))

    async def list_by_user(self, db: AsyncSession, user_id: int) -> list[Todo]:
        return await self.list(db, where={"user_id": user_id}, order_by=(Todo.id,))

    async def list_with_user(self, db: AsyncSession, user_id: int):
        """
        Todos of one user joined with the owner's name and email.
        Inner join: a todo whose owner row is missing is not returned.
        """
        stmt = (
            select(
                Todo.title,
                Todo.description,
                User.first_name,
                User.last_name,
                User.email,
            )
            .join(User, Todo.user_id == User.id)
            .where(Todo.user_id == user_id)
            .order_by(Todo.id)
        )
        res = await db.execute(stmt)
        return res.all()
