# ecom/data/models/user_details.py
from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from ecom.data.database import Base

favorites_table = Table(
    "rel_user_details__favorites",
    Base.metadata,
    Column("user_details_id", Integer, ForeignKey("user_details.id", ondelete="CASCADE"), primary_key=True),
    Column("favorites_id", Integer, ForeignKey("product.id", ondelete="CASCADE"), primary_key=True),
)


class UserDetailsModel(Base):
    __tablename__ = "user_details"

    id = Column(Integer, primary_key=True)
    phone = Column(String(20), nullable=True)

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    cart_id = Column(Integer, ForeignKey("cart.id", ondelete="SET NULL"), nullable=True, unique=True)

    user = relationship("UserModel", back_populates="details")
    cart = relationship("CartModel", back_populates="user")
    favorites = relationship(
        "ProductModel",
        secondary=favorites_table,
        lazy="selectin",
        order_by="ProductModel.id",
    )

    @property
    def login(self) -> str | None:
        return self.user.login if self.user is not None else None
