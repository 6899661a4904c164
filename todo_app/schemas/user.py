from pydantic import BaseModel

class UserBase(BaseModel):
    first_name: str
    last_name: str

class UserCreate(UserBase):
    email: str
    password: str

class UserUpdate(UserBase):
    pass

class UserCreated(UserBase):
    """Projection returned by insert-user: no email, no password."""
    id: int
    class Config:
        from_attributes = True

class UserOut(UserBase):
    id: int
    email: str
    class Config:
        from_attributes = True

class UserSummary(UserBase):
    email: str
    class Config:
        from_attributes = True
