import pytest

from todo_app.errors import ConstraintViolationError
from todo_app.repositories.todo_repo import TodoRepository
from todo_app.schemas.todo import TodoCreate
from todo_app.schemas.user import UserCreate
from todo_app.services.todo_service import TodoService
from todo_app.services.user_service import UserService

pytestmark = pytest.mark.anyio

service = TodoService()


async def make_user(db, email="jack@jack.com"):
    user_in = UserCreate(email=email, password="123456", first_name="jack", last_name="ji")
    return await UserService().create_user(db, user_in)


async def test_user_without_todos_gets_empty_list(db):
    user = await make_user(db)
    assert await service.list_todos(db, user.id) == []
    assert await service.list_todos_with_user(db, user.id) == []


async def test_inserted_todo_is_listed_for_its_user(db):
    user = await make_user(db)
    other = await make_user(db, email="other@jack.com")
    todo = await service.create_todo(
        db, TodoCreate(user_id=user.id, title="go to gym", description="do 10 pushups")
    )
    await service.create_todo(db, TodoCreate(user_id=other.id, title="read", description="a book"))
    assert todo.id is not None

    todos = await service.list_todos(db, user.id)
    assert [(t.title, t.description) for t in todos] == [("go to gym", "do 10 pushups")]


async def test_todos_with_user_projection(db):
    user = await make_user(db)
    for title in ("first", "second"):
        await service.create_todo(db, TodoCreate(user_id=user.id, title=title, description=""))

    rows = await service.list_todos_with_user(db, user.id)
    assert [row.title for row in rows] == ["first", "second"]
    for row in rows:
        assert row.user is not None
        assert row.user.email == "jack@jack.com"
        assert (row.user.first_name, row.user.last_name) == ("jack", "ji")


async def test_todo_for_missing_user_is_rejected(db):
    with pytest.raises(ConstraintViolationError):
        await service.create_todo(db, TodoCreate(user_id=999, title="orphan", description=""))
    assert await TodoRepository().count(db) == 0


async def test_todo_endpoints(client):
    user = await client.post(
        "/users/",
        json={"email": "bob@example.com", "password": "pw", "first_name": "Bob", "last_name": "B"},
    )
    uid = user.json()["id"]

    res = await client.post("/todos/", json={"user_id": uid, "title": "Buy milk", "description": "2l"})
    assert res.status_code == 201
    assert res.json()["user_id"] == uid

    res = await client.get("/todos/", params={"user_id": uid})
    assert res.status_code == 200
    assert [t["title"] for t in res.json()] == ["Buy milk"]

    res = await client.get("/todos/with-user", params={"user_id": uid})
    assert res.json() == [
        {
            "title": "Buy milk",
            "description": "2l",
            "user": {"first_name": "Bob", "last_name": "B", "email": "bob@example.com"},
        }
    ]

    res = await client.post("/todos/", json={"user_id": uid + 100, "title": "x", "description": ""})
    assert res.status_code == 409
