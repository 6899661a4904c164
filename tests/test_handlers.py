import pytest
from httpx import ASGITransport, AsyncClient
from mangum import Mangum

from todo_app.database import get_db
from todo_app.handlers import todo_handler, user_handler

pytestmark = pytest.mark.anyio


@pytest.fixture
def override_db(sessions):
    async def override_get_db():
        async with sessions() as session:
            yield session
    apps = (todo_handler.app, user_handler.app)
    for app in apps:
        app.dependency_overrides[get_db] = override_get_db
    yield
    for app in apps:
        app.dependency_overrides.clear()


def test_handlers_wrap_apps_for_lambda():
    assert isinstance(todo_handler.handler, Mangum)
    assert isinstance(user_handler.handler, Mangum)


async def test_lambda_apps_serve_their_routes(override_db):
    async with AsyncClient(transport=ASGITransport(app=user_handler.app), base_url="http://test") as users:
        res = await users.post(
            "/users/",
            json={"email": "a@b.com", "password": "pw", "first_name": "A", "last_name": "B"},
        )
        assert res.status_code == 201
        uid = res.json()["id"]

    async with AsyncClient(transport=ASGITransport(app=todo_handler.app), base_url="http://test") as todos:
        res = await todos.post("/todos/", json={"user_id": uid + 1, "title": "t", "description": "d"})
        assert res.status_code == 409
        res = await todos.get("/todos/", params={"user_id": uid})
        assert res.json() == []


async def test_root_health(client):
    res = await client.get("/")
    assert res.json() == {"status": "ok"}
