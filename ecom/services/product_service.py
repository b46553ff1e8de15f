# ecom/services/product_service.py
from typing import List

from sqlalchemy.orm import Session

from ecom.data.models.product import ProductModel
from ecom.domain.errors import BadRequestAlertException, EntityNotFoundError
from ecom.domain.schemas import ProductIn, ProductPatch, SortOrder
from ecom.repos.category_repo import CategoryRepo
from ecom.repos.product_repo import ProductRepo
from ecom.repos.user_repo import UserRepo
from ecom.services.user_service import UserService
from ecom.utils.logging import get_logger

logger = get_logger(__name__)

ENTITY_NAME = "product"

SORTABLE_FIELDS = {
    "id": ProductModel.id,
    "name": ProductModel.name,
    "description": ProductModel.description,
    "photo_url": ProductModel.photo_url,
    "photoUrl": ProductModel.photo_url,
    "price": ProductModel.price,
    "stock": ProductModel.stock,
}


class ProductService:
    """
    Catalog use cases plus the favorite toggle.
    Queries return ORM objects (or None), commands commit through the repo.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)
        self.category_repo = CategoryRepo(db)
        self.user_repo = UserRepo(db)
        self.user_service = UserService(db)

    #query - odczyt
    def exists(self, product_id: int) -> bool:
        return self.repo.exists(product_id)

    def find_one(self, product_id: int) -> ProductModel | None:
        return self.repo.get_product(product_id)

    def find_all(self, sort_by: str | None = None, sort_order: SortOrder | None = None) -> List[ProductModel]:
        return self.repo.list_products(self._order_by(sort_by, sort_order))

    def find_research(
        self, query: str, sort_by: str | None = None, sort_order: SortOrder | None = None
    ) -> List[ProductModel]:
        return self.repo.list_products(self._order_by(sort_by, sort_order), query=query)

    def find_category(
        self, category_id: int, sort_by: str | None = None, sort_order: SortOrder | None = None
    ) -> List[ProductModel]:
        return self.repo.list_products(self._order_by(sort_by, sort_order), category_id=category_id)

    def find_all_favorite(self, login: str) -> List[ProductModel]:
        details = self.user_repo.get_details_by_login(login)
        if details is None:
            return []
        return list(details.favorites)

    #commands
    def save(self, payload: ProductIn) -> ProductModel:
        self._check_category(payload.category_id)

        product = self.repo.get_product(payload.id) if payload.id is not None else None
        if product is None:
            product = ProductModel()

        for field, value in payload.model_dump(exclude={"id"}).items():
            setattr(product, field, value)

        saved = self.repo.save(product)
        logger.info(f"Saved product {saved.id}")
        return saved

    def partial_update(self, payload: ProductPatch) -> ProductModel | None:
        product = self.repo.get_product(payload.id)
        if product is None:
            return None

        updates = payload.model_dump(exclude_unset=True, exclude={"id"})
        # null w PATCH oznacza "nie zmieniaj"
        updates = {k: v for k, v in updates.items() if v is not None}
        if "category_id" in updates:
            self._check_category(updates["category_id"])

        for field, value in updates.items():
            setattr(product, field, value)

        saved = self.repo.save(product)
        logger.info(f"Partially updated product {saved.id}: {sorted(updates)}")
        return saved

    def delete(self, product_id: int) -> None:
        product = self.repo.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(ENTITY_NAME, product_id)
        self.repo.delete(product)
        logger.info(f"Deleted product {product_id}")

    def toggle_favorite(self, login: str, product_id: int) -> List[ProductModel]:
        """
        Remove the product from the caller's favorites if present, add it otherwise.
        Single read-modify-write without locking: concurrent toggles may lose an update.
        """
        product = self.repo.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(ENTITY_NAME, product_id)

        try:
            details = self.user_service.get_or_create_details(login)
            if product in details.favorites:
                logger.info(f"Removing product {product_id} from favorites of {login}")
                details.favorites.remove(product)
            else:
                logger.info(f"Adding product {product_id} to favorites of {login}")
                details.favorites.append(product)
            self.repo.commit()
        except Exception as e:
            logger.error(f"Error while toggling favorite product {product_id}: {e}")
            self.repo.rollback()
            raise

        return list(details.favorites)

    def _check_category(self, category_id: int | None) -> None:
        if category_id is not None and not self.category_repo.exists(category_id):
            raise BadRequestAlertException("Category unknown", "category", "idnotfound")

    @staticmethod
    def _order_by(sort_by: str | None, sort_order: SortOrder | None):
        if sort_by is None or sort_order is None:
            return ProductModel.name.asc()

        column = SORTABLE_FIELDS.get(sort_by)
        if column is None:
            raise BadRequestAlertException(f"Cannot sort by '{sort_by}'", ENTITY_NAME, "sortinvalid")
        return column.desc() if sort_order == SortOrder.DESC else column.asc()
