import concurrent.futures

from tasktracker.database import SessionLocal
from tasktracker.errors import Err, ErrorKind, Ok
from tasktracker.models.user import User
from tasktracker.schemas.user import UserPayload
from tasktracker.services.users import UserService
from tasktracker.utils.clock import MonotonicClock


def test_concurrent_duplicate_registration_stores_one_user(db):
    def register(i):
        session = SessionLocal()
        try:
            return UserService(session).create_user(
                "dup", UserPayload(name=f"User {i}", email=f"user{i}@x.com")
            )
        finally:
            session.close()

    with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(register, range(16)))

    assert sum(isinstance(r, Ok) for r in results) == 1
    errors = [r for r in results if isinstance(r, Err)]
    assert len(errors) == 15
    assert all(r.error.kind == ErrorKind.BAD_REQUEST for r in errors)
    assert db.query(User).filter(User.id == "dup").count() == 1


def test_clock_never_goes_backwards():
    readings = iter([10, 5, 12])
    clock = MonotonicClock(source=lambda: next(readings))
    assert [clock(), clock(), clock()] == [10, 10, 12]
