from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.schemas.user import UserCreate, UserCreated, UserOut, UserUpdate
from todo_app.services.user_service import UserService
from todo_app.database import get_db

router = APIRouter()
service = UserService()

@router.post("/", response_model=UserCreated, status_code=201)
async def create_user(user_in: UserCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_user(db, user_in)

@router.patch("/{email}", response_model=UserOut)
async def update_user(email: str, changes: UserUpdate, db: AsyncSession = Depends(get_db)):
    return await service.update_user(db, email, changes)
