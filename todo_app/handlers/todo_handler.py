from fastapi import FastAPI
from mangum import Mangum
from todo_app.routers.todo_router import router as todo_router
from todo_app.routers.errors import register_error_handlers

app = FastAPI(title="Todo Lambda")
app.include_router(todo_router, prefix="/todos")
register_error_handlers(app)

handler = Mangum(app)
