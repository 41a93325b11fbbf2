from tasktracker.database import SessionLocal
from tasktracker.models.task import Task
from tasktracker.models.user import User
from tasktracker.stores.task_store import TaskStore
from tasktracker.stores.user_store import UserStore


def _user(identity, name="Alice", ts=1):
    return User(id=identity, name=name, email=f"{identity}@x.com", created_at=ts, updated_at=ts)


def _task(task_id, owner, ts=1):
    return Task(
        id=task_id,
        title=f"title {task_id}",
        description="",
        is_completed=False,
        owner=owner,
        created_at=ts,
        updated_at=ts,
    )


def test_user_store_put_is_upsert(db):
    store = UserStore(db)
    assert not store.exists("u1")
    assert store.get("u1") is None

    store.put(_user("u1"))
    store.put(_user("u1", name="Alicia", ts=2))

    assert store.exists("u1")
    assert store.get("u1").name == "Alicia"
    assert db.query(User).filter(User.id == "u1").count() == 1


def test_records_survive_a_new_session(db):
    UserStore(db).put(_user("u1"))
    TaskStore(db).put(_task("t1", "u1"))

    other = SessionLocal()
    try:
        assert UserStore(other).exists("u1")
        assert TaskStore(other).get("t1").owner == "u1"
    finally:
        other.close()


def test_task_store_crud(db):
    UserStore(db).put(_user("u1"))
    store = TaskStore(db)

    store.put(_task("t1", "u1"))
    assert store.exists("t1")

    task = store.get("t1")
    task.title = "changed"
    store.put(task)
    assert store.get("t1").title == "changed"

    store.remove("t1")
    assert not store.exists("t1")
    assert store.get("t1") is None


def test_remove_missing_task_is_noop(db):
    TaskStore(db).remove("nope")


def test_list_by_owner_filters_and_orders(db):
    users = UserStore(db)
    users.put(_user("u1"))
    users.put(_user("u2"))
    store = TaskStore(db)
    store.put(_task("b", "u1", ts=2))
    store.put(_task("a", "u1", ts=3))
    store.put(_task("c", "u2", ts=1))
    store.put(_task("d", "u1", ts=2))

    assert [t.id for t in store.list_by_owner("u1")] == ["b", "d", "a"]
    assert [t.id for t in store.list_by_owner("u2")] == ["c"]
    assert store.list_by_owner("nobody") == []
