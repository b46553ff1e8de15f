from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from ecom.data.models.category import CategoryModel


class CategoryRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_category(self, category_id: int) -> CategoryModel | None:
        return self.db.get(CategoryModel, category_id)

    def exists(self, category_id: int) -> bool:
        return self.db.execute(
            select(CategoryModel.id).where(CategoryModel.id == category_id)
        ).first() is not None

    def list_categories(self) -> List[CategoryModel]:
        return list(
            self.db.execute(select(CategoryModel).order_by(CategoryModel.name, CategoryModel.id)).scalars()
        )

    def save(self, category: CategoryModel) -> CategoryModel:
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def delete(self, category: CategoryModel) -> None:
        self.db.delete(category)
        self.db.commit()
