from typing import Optional

from tasktracker.errors import Error
from tasktracker.models.task import Task
from tasktracker.stores.task_store import TaskStore
from tasktracker.stores.user_store import UserStore


class AuthorizationGuard:
    """Checks run before any mutation. Each returns None on success."""

    def __init__(self, users: UserStore, tasks: TaskStore):
        self.users = users
        self.tasks = tasks

    def require_registered(self, identity: str) -> Optional[Error]:
        if not self.users.exists(identity):
            return Error.unauthorized("Invalid operation: User does not exist")
        return None

    def require_task_exists(self, task_id: str) -> Optional[Error]:
        if not self.tasks.exists(task_id):
            return Error.not_found(f"Task not found with id {task_id}")
        return None

    @staticmethod
    def require_owner(task: Task, identity: str) -> Optional[Error]:
        if task.owner != identity:
            return Error.forbidden("Invalid operation: You are not the task owner")
        return None
