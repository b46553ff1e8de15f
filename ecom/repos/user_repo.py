from sqlalchemy import select
from sqlalchemy.orm import Session

from ecom.data.models.user import UserModel
from ecom.data.models.user_details import UserDetailsModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_login(self, login: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.login == login)
        ).scalar_one_or_none()

    def get_details_by_login(self, login: str) -> UserDetailsModel | None:
        return self.db.execute(
            select(UserDetailsModel)
            .join(UserDetailsModel.user)
            .where(UserModel.login == login)
        ).scalar_one_or_none()

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def flush(self):
        self.db.flush()
