# ecom/api/deps.py
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from ecom.data.database import get_db
from ecom.repos.user_repo import UserRepo

# token = login uzytkownika, bez weryfikacji hasla
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/authenticate")


def get_current_login(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> str:
    """
    Resolve the caller's login from `Authorization: Bearer <login>`.
    Raises 401 when the login is unknown.
    """
    login = token.strip()
    if not login or UserRepo(db).get_by_login(login) is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return login
