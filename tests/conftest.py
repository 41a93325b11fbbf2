import itertools
import os

# point the app at a throwaway database before anything imports the config
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_tasktracker.db")

import pytest
from fastapi.testclient import TestClient

from tasktracker.database import Base, SessionLocal, engine
from tasktracker.main import app
from tasktracker.services.tasks import TaskService
from tasktracker.services.users import UserService
from tasktracker.utils.auth import create_token


class CounterClock:
    """Deterministic time source: 1000, 1001, 1002, ..."""

    def __init__(self, start=1000):
        self._counter = itertools.count(start)
        self.last = None

    def __call__(self):
        self.last = next(self._counter)
        return self.last


# Recreate all tables for each test
@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def clock():
    return CounterClock()

@pytest.fixture
def user_service(db, clock):
    return UserService(db, clock=clock)

@pytest.fixture
def task_service(db, clock):
    ids = (f"task-{n}" for n in itertools.count(1))
    return TaskService(db, clock=clock, id_factory=lambda: next(ids))

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def auth_headers():
    def _headers(identity):
        return {"Authorization": f"Bearer {create_token(identity)}"}
    return _headers
