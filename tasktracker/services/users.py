import logging

from sqlalchemy.orm import Session
from tasktracker.errors import Err, Error, Ok, Result
from tasktracker.models.user import User
from tasktracker.schemas.user import UserPayload
from tasktracker.services.boundary import operation
from tasktracker.services.guard import AuthorizationGuard
from tasktracker.stores.task_store import TaskStore
from tasktracker.stores.user_store import UserStore
from tasktracker.utils.clock import clock as default_clock
from tasktracker.utils.validation import validate_user_payload

logger = logging.getLogger(__name__)


class UserService:
    """Registration and profile operations for the calling identity."""

    def __init__(self, db: Session, clock=default_clock):
        self.db = db
        self.clock = clock
        self.users = UserStore(db)
        self.guard = AuthorizationGuard(self.users, TaskStore(db))

    @operation()
    def create_user(self, identity: str, payload: UserPayload) -> Result:
        error = validate_user_payload(payload.name, payload.email)
        if error:
            return Err(error)

        if self.users.exists(identity):
            return Err(Error.bad_request("Invalid input: User already exists"))

        now = self.clock()
        user = User(
            id=identity,
            name=payload.name,
            email=payload.email,
            created_at=now,
            updated_at=now,
        )
        user = self.users.put(user)
        logger.info("User registered id=%s", identity)
        return Ok(user)

    @operation(mutating=False)
    def get_me(self, identity: str) -> Result:
        error = self.guard.require_registered(identity)
        if error:
            return Err(error)
        return Ok(self.users.get(identity))

    @operation()
    def update_me(self, identity: str, payload: UserPayload) -> Result:
        error = self.guard.require_registered(identity) or validate_user_payload(
            payload.name, payload.email
        )
        if error:
            return Err(error)

        user = self.users.get(identity)
        user.name = payload.name
        user.email = payload.email
        user.updated_at = self.clock()
        user = self.users.put(user)
        logger.info("User updated id=%s", identity)
        return Ok(user)
