from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.schemas.todo import TodoCreate, TodoOut, TodoWithUser
from todo_app.services.todo_service import TodoService
from todo_app.database import get_db

router = APIRouter()
service = TodoService()

@router.post("/", response_model=TodoOut, status_code=201)
async def create_todo(todo_in: TodoCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_todo(db, todo_in)

@router.get("/", response_model=list[TodoOut])
async def list_todos(user_id: int, db: AsyncSession = Depends(get_db)):
    return await service.list_todos(db, user_id)

@router.get("/with-user", response_model=list[TodoWithUser])
async def list_todos_with_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return await service.list_todos_with_user(db, user_id)
