from typing import Optional

from sqlalchemy.orm import Session
from tasktracker.models.user import User


class UserStore:
    """Users keyed by caller identity. No listing and no delete."""

    def __init__(self, db: Session):
        self.db = db

    def exists(self, identity: str) -> bool:
        return self.db.query(User.id).filter(User.id == identity).first() is not None

    def get(self, identity: str) -> Optional[User]:
        return self.db.get(User, identity)

    def put(self, user: User) -> User:
        """Insert or replace by id and commit. Returns the persisted row."""
        stored = self.db.merge(user)
        self.db.commit()
        self.db.refresh(stored)
        return stored
