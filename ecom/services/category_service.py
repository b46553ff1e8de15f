from typing import List

from sqlalchemy.orm import Session

from ecom.data.models.category import CategoryModel
from ecom.domain.errors import EntityNotFoundError
from ecom.domain.schemas import CategoryIn
from ecom.repos.category_repo import CategoryRepo
from ecom.utils.logging import get_logger

logger = get_logger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.repo = CategoryRepo(db)

    def exists(self, category_id: int) -> bool:
        return self.repo.exists(category_id)

    def find_all(self) -> List[CategoryModel]:
        return self.repo.list_categories()

    def find_one(self, category_id: int) -> CategoryModel | None:
        return self.repo.get_category(category_id)

    def save(self, payload: CategoryIn) -> CategoryModel:
        category = self.repo.get_category(payload.id) if payload.id is not None else None
        if category is None:
            category = CategoryModel()
        category.name = payload.name
        saved = self.repo.save(category)
        logger.info(f"Saved category {saved.id}")
        return saved

    def delete(self, category_id: int) -> None:
        category = self.repo.get_category(category_id)
        if category is None:
            raise EntityNotFoundError("category", category_id)
        self.repo.delete(category)
        logger.info(f"Deleted category {category_id}")
