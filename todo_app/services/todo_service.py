import logging

from sqlalchemy.ext.asyncio import AsyncSession
from todo_app.repositories.todo_repo import TodoRepository
from todo_app.schemas.todo import TodoCreate, TodoWithUser
from todo_app.schemas.user import UserSummary
from todo_app.services.errors import translate_db_errors

logger = logging.getLogger(__name__)

class TodoService:
    def __init__(self):
        self.repo = TodoRepository()

    async def create_todo(self, db: AsyncSession, todo_in: TodoCreate):
        async with translate_db_errors(db, "insert-todo"):
            todo = await self.repo.create_from(db, todo_in)
            await db.commit()
        logger.info("Created todo %s for user %s", todo.id, todo.user_id)
        return todo

    async def list_todos(self, db: AsyncSession, user_id: int):
        async with translate_db_errors(db, "fetch-todos-by-user"):
            return await self.repo.list_by_user(db, user_id)

    async def list_todos_with_user(self, db: AsyncSession, user_id: int) -> list[TodoWithUser]:
        async with translate_db_errors(db, "fetch-todos-with-user"):
            rows = await self.repo.list_with_user(db, user_id)
        return [
            TodoWithUser(
                title=row.title,
                description=row.description,
                user=UserSummary(
                    first_name=row.first_name,
                    last_name=row.last_name,
                    email=row.email,
                ),
            )
            for row in rows
        ]
