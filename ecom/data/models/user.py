from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from ecom.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    login = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(254), nullable=True)

    details = relationship(
        "UserDetailsModel",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
