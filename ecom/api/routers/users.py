from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from ecom.data.database import get_db
from ecom.domain.errors import EntityNotFoundError
from ecom.domain.schemas import UserCreate, UserRead
from ecom.services.user_service import UserService
from ecom.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserRead, status_code=201)
def create_user(payload: UserCreate, response: Response, db: Session = Depends(get_db)):
    logger.debug(f"REST request to save User : {payload.login}")
    created = UserService(db).create_user(payload)
    response.headers["Location"] = f"/api/users/{created.login}"
    return created


@router.get("/{login}", response_model=UserRead)
def get_user(login: str, db: Session = Depends(get_db)):
    logger.debug(f"REST request to get User : {login}")
    user = UserService(db).get_user(login)
    if not user:
        raise EntityNotFoundError("user", login)
    return user
