import logging

from sqlalchemy.orm import Session
from tasktracker.errors import Err, Ok, Result
from tasktracker.models.task import Task
from tasktracker.schemas.task import TaskPayload
from tasktracker.services.boundary import operation
from tasktracker.services.guard import AuthorizationGuard
from tasktracker.stores.task_store import TaskStore
from tasktracker.stores.user_store import UserStore
from tasktracker.utils.clock import clock as default_clock, new_task_id
from tasktracker.utils.validation import validate_task_payload

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Task deleted successfully"


class TaskService:
    """Owner-scoped task operations.

    Checks always run in the same order: caller registered, payload valid,
    task exists, caller owns task. The first failing check decides the error.
    """

    def __init__(self, db: Session, clock=default_clock, id_factory=new_task_id):
        self.db = db
        self.clock = clock
        self.id_factory = id_factory
        self.tasks = TaskStore(db)
        self.guard = AuthorizationGuard(UserStore(db), self.tasks)

    def _owned_task(self, identity: str, task_id: str):
        """Existence then ownership check. Returns (task, error)."""
        error = self.guard.require_task_exists(task_id)
        if error:
            return None, error
        task = self.tasks.get(task_id)
        error = self.guard.require_owner(task, identity)
        if error:
            return None, error
        return task, None

    @operation()
    def create_task(self, identity: str, payload: TaskPayload) -> Result:
        error = self.guard.require_registered(identity) or validate_task_payload(payload.title)
        if error:
            return Err(error)

        now = self.clock()
        task = Task(
            id=self.id_factory(),
            title=payload.title,
            description=payload.description or "",
            is_completed=False,
            owner=identity,
            created_at=now,
            updated_at=now,
        )
        task = self.tasks.put(task)
        logger.info("Task created id=%s owner=%s", task.id, identity)
        return Ok(task)

    @operation(mutating=False)
    def get_my_tasks(self, identity: str) -> Result:
        error = self.guard.require_registered(identity)
        if error:
            return Err(error)
        return Ok(self.tasks.list_by_owner(identity))

    @operation()
    def update_my_task(self, identity: str, task_id: str, payload: TaskPayload) -> Result:
        error = self.guard.require_registered(identity) or validate_task_payload(payload.title)
        if error:
            return Err(error)

        task, error = self._owned_task(identity, task_id)
        if error:
            return Err(error)

        task.title = payload.title
        if payload.description is not None:
            task.description = payload.description
        task.updated_at = self.clock()
        task = self.tasks.put(task)
        logger.debug("Task updated id=%s", task_id)
        return Ok(task)

    @operation()
    def toggle_my_task(self, identity: str, task_id: str) -> Result:
        error = self.guard.require_registered(identity)
        if error:
            return Err(error)

        task, error = self._owned_task(identity, task_id)
        if error:
            return Err(error)

        task.is_completed = not task.is_completed
        task.updated_at = self.clock()
        task = self.tasks.put(task)
        logger.debug("Task toggled id=%s completed=%s", task_id, task.is_completed)
        return Ok(task)

    @operation()
    def delete_my_task(self, identity: str, task_id: str) -> Result:
        error = self.guard.require_registered(identity)
        if error:
            return Err(error)

        task, error = self._owned_task(identity, task_id)
        if error:
            return Err(error)

        self.tasks.remove(task.id)
        logger.info("Task deleted id=%s owner=%s", task_id, identity)
        return Ok(DELETED_MESSAGE)
