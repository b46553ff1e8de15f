from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from ecom.data.database import Base


class ProductModel(Base):
    __tablename__ = "product"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    photo_url = Column(String(1024), nullable=True)

    price = Column(Numeric(10, 2), nullable=False, default=0)
    stock = Column(Integer, nullable=False, default=0)

    category_id = Column(Integer, ForeignKey("category.id", ondelete="SET NULL"), nullable=True)
    category = relationship("CategoryModel", back_populates="products", lazy="joined")
