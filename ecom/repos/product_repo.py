# ecom/repos/product_repo.py
from typing import List

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from ecom.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def exists(self, product_id: int) -> bool:
        return self.db.execute(
            select(ProductModel.id).where(ProductModel.id == product_id)
        ).first() is not None

    def list_products(
        self,
        order_by,
        query: str | None = None,
        category_id: int | None = None,
    ) -> List[ProductModel]:
        stmt = select(ProductModel)
        if query:
            pattern = f"%{query}%"
            stmt = stmt.where(
                or_(ProductModel.name.ilike(pattern), ProductModel.description.ilike(pattern))
            )
        if category_id is not None:
            stmt = stmt.where(ProductModel.category_id == category_id)
        # id na koncu zeby kolejnosc byla stabilna
        stmt = stmt.order_by(order_by, ProductModel.id)
        return list(self.db.execute(stmt).unique().scalars())

    def save(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.commit()

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
