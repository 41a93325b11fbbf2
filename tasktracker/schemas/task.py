from pydantic import BaseModel, ConfigDict
from typing import Optional

class TaskPayload(BaseModel):
    # emptiness is checked by the service so it surfaces as BadRequest
    title: str = ""
    # None keeps the stored description on update
    description: Optional[str] = None

class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    is_completed: bool
    owner: str
    created_at: int
    updated_at: int
