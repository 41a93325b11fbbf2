from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from tasktracker.database import get_db
from tasktracker.routers.common import unwrap
from tasktracker.schemas.user import UserOut, UserPayload
from tasktracker.services.users import UserService
from tasktracker.utils.auth import get_caller

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.post("", response_model=UserOut)
def create_user(payload: UserPayload, caller: str = Depends(get_caller), service: UserService = Depends(get_user_service)):
    return unwrap(service.create_user(caller, payload))

@router.get("/me", response_model=UserOut)
def get_me(caller: str = Depends(get_caller), service: UserService = Depends(get_user_service)):
    return unwrap(service.get_me(caller))

@router.put("/me", response_model=UserOut)
def update_me(payload: UserPayload, caller: str = Depends(get_caller), service: UserService = Depends(get_user_service)):
    return unwrap(service.update_me(caller, payload))
