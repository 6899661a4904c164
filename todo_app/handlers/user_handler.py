from fastapi import FastAPI
from mangum import Mangum
from todo_app.routers.user_router import router as user_router
from todo_app.routers.errors import register_error_handlers

app = FastAPI(title="User Lambda")
app.include_router(user_router, prefix="/users")
register_error_handlers(app)

handler = Mangum(app)
