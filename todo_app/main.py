from fastapi import FastAPI
from todo_app.routers import user_router, todo_router
from todo_app.routers.errors import register_error_handlers

app = FastAPI(title="Todo Store")

app.include_router(user_router.router, prefix="/users", tags=["Users"])
app.include_router(todo_router.router, prefix="/todos", tags=["Todos"])
register_error_handlers(app)

# Root health
@app.get("/")
async def read_root():
    return {"status": "ok"}
