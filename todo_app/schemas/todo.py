from pydantic import BaseModel

from todo_app.schemas.user import UserSummary

class TodoBase(BaseModel):
    title: str
    description: str

class TodoCreate(TodoBase):
    user_id: int

class TodoOut(TodoBase):
    id: int
    user_id: int
    class Config:
        from_attributes = True

class TodoWithUser(TodoBase):
    user: UserSummary
    class Config:
        from_attributes = True
