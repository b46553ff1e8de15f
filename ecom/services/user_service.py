from sqlalchemy.orm import Session

from ecom.data.models.user import UserModel
from ecom.data.models.user_details import UserDetailsModel
from ecom.domain.errors import BadRequestAlertException, EntityNotFoundError
from ecom.domain.schemas import UserCreate
from ecom.repos.user_repo import UserRepo
from ecom.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserModel:
        if self.repo.get_by_login(payload.login):
            raise BadRequestAlertException("Login name already used!", "userManagement", "loginexists")

        user = UserModel(login=payload.login, email=payload.email, details=UserDetailsModel())
        created = self.repo.create_user(user)
        logger.info(f"Created user {created.login} (id={created.id})")
        return created

    def get_user(self, login: str) -> UserModel | None:
        return self.repo.get_by_login(login)

    def get_or_create_details(self, login: str) -> UserDetailsModel:
        """
        Details of `login`, created (not committed) when the user has none yet.
        The caller commits together with its own mutation.
        """
        user = self.repo.get_by_login(login)
        if user is None:
            raise EntityNotFoundError("user", login)
        if user.details is None:
            logger.info(f"Creating user details for {login}")
            user.details = UserDetailsModel()
            self.repo.flush()
        return user.details
