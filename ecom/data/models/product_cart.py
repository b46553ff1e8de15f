from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship, validates

from ecom.data.database import Base


class ProductCartModel(Base):
    __tablename__ = "product_cart"

    id = Column(Integer, primary_key=True)
    quantity = Column(Integer, nullable=False)
    creation_datetime = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    product_id = Column(Integer, ForeignKey("product.id", ondelete="CASCADE"), nullable=False)
    cart_id = Column(Integer, ForeignKey("cart.id", ondelete="CASCADE"), nullable=False, index=True)

    product = relationship("ProductModel", lazy="joined")
    cart = relationship("CartModel", back_populates="lines")

    @validates("creation_datetime")
    def _creation_datetime_set_once(self, key, value):
        if self.creation_datetime is not None and value != self.creation_datetime:
            raise ValueError("creation_datetime cannot be changed once set")
        return value
