from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from tasktracker.database import get_db
from tasktracker.routers.common import unwrap
from tasktracker.schemas.task import TaskOut, TaskPayload
from tasktracker.services.tasks import TaskService
from tasktracker.utils.auth import get_caller

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)


@router.post("/", response_model=TaskOut)
def create_task(payload: TaskPayload, caller: str = Depends(get_caller), service: TaskService = Depends(get_task_service)):
    return unwrap(service.create_task(caller, payload))

@router.get("/", response_model=List[TaskOut])
def list_tasks(caller: str = Depends(get_caller), service: TaskService = Depends(get_task_service)):
    return unwrap(service.get_my_tasks(caller))

@router.put("/{task_id}", response_model=TaskOut)
def update_task(task_id: str, payload: TaskPayload, caller: str = Depends(get_caller), service: TaskService = Depends(get_task_service)):
    return unwrap(service.update_my_task(caller, task_id, payload))

@router.post("/{task_id}/toggle", response_model=TaskOut)
def toggle_task(task_id: str, caller: str = Depends(get_caller), service: TaskService = Depends(get_task_service)):
    return unwrap(service.toggle_my_task(caller, task_id))

@router.delete("/{task_id}")
def delete_task(task_id: str, caller: str = Depends(get_caller), service: TaskService = Depends(get_task_service)):
    return {"detail": unwrap(service.delete_my_task(caller, task_id))}
