from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from ecom.data.database import Base


class CategoryModel(Base):
    __tablename__ = "category"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)

    products = relationship("ProductModel", back_populates="category")
