from typing import List, Optional

from sqlalchemy.orm import Session
from tasktracker.models.task import Task


class TaskStore:
    """Tasks keyed by generated id, with owner-scoped listing."""

    def __init__(self, db: Session):
        self.db = db

    def exists(self, task_id: str) -> bool:
        return self.db.query(Task.id).filter(Task.id == task_id).first() is not None

    def get(self, task_id: str) -> Optional[Task]:
        return self.db.get(Task, task_id)

    def put(self, task: Task) -> Task:
        stored = self.db.merge(task)
        self.db.commit()
        self.db.refresh(stored)
        return stored

    def remove(self, task_id: str) -> None:
        task = self.db.get(Task, task_id)
        if task is None:
            return
        self.db.delete(task)
        self.db.commit()

    def list_by_owner(self, identity: str) -> List[Task]:
        # ordered for a deterministic snapshot; creation order first
        return (
            self.db.query(Task)
            .filter(Task.owner == identity)
            .order_by(Task.created_at, Task.id)
            .all()
        )
