# ecom/services/cart_service.py
from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from ecom.data.models.cart import CartModel
from ecom.data.models.product_cart import ProductCartModel
from ecom.domain.errors import EntityNotFoundError
from ecom.domain.schemas import CartIn
from ecom.repos.cart_repo import CartRepo
from ecom.repos.product_repo import ProductRepo
from ecom.services.user_service import UserService
from ecom.utils.logging import get_logger

logger = get_logger(__name__)

LINE_ENTITY_NAME = "productCart"


class CartService:
    """
    Use case'y dla koszyka:
    query (find_*) tylko odczyt, commands (save, add_line, update_line,
    remove_line, empty, ...) modyfikuja stan i commituja przez repo.

    Koszyk szukany tylko po loginie wywolujacego,
    update_line / remove_line nie sprawdzaja czy linia nalezy do tego koszyka.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.product_repo = ProductRepo(db)
        self.user_service = UserService(db)

    #query - odczyt
    def exists(self, cart_id: int) -> bool:
        return self.repo.exists(cart_id)

    def find_all(self) -> List[CartModel]:
        return self.repo.list_carts()

    def find_all_where_user_is_null(self) -> List[CartModel]:
        return self.repo.list_carts_without_user()

    def find_one(self, cart_id: int) -> CartModel | None:
        return self.repo.get_cart(cart_id)

    def find_one_with_eager_relationships_by_login(self, login: str) -> CartModel | None:
        return self.repo.find_one_with_eager_relationships_by_login(login)

    #commands - koszyk
    def save(self, payload: CartIn) -> CartModel:
        cart = self.repo.get_cart(payload.id) if payload.id is not None else None
        if cart is None:
            cart = CartModel()
        saved = self.repo.save_cart(cart)
        logger.info(f"Saved cart {saved.id}")
        return saved

    def partial_update(self, payload: CartIn) -> CartModel | None:
        # koszyk nie ma pol skalarnych, zostaje tylko zapis istniejacego
        cart = self.repo.get_cart(payload.id)
        if cart is None:
            return None
        return self.repo.save_cart(cart)

    def delete(self, cart_id: int) -> None:
        cart = self.repo.get_cart(cart_id)
        if cart is None:
            raise EntityNotFoundError("cart", cart_id)
        self.repo.delete_cart(cart)
        logger.info(f"Deleted cart {cart_id}")

    def empty(self, cart: CartModel) -> int:
        removed = self.repo.empty(cart)
        logger.info(f"Emptied cart {cart.id}, removed {removed} line(s)")
        return removed

    def empty_by_login(self, login: str) -> int:
        cart = self.repo.find_one_with_eager_relationships_by_login(login)
        if cart is None:
            return 0
        return self.empty(cart)

    #commands - linie koszyka
    def add_line(self, login: str, product_id: int) -> ProductCartModel:
        """
        New line with quantity 1 in the caller's cart (cart created on first add).
        An existing line for the same product is not merged: two adds give two rows.
        """
        product = self.product_repo.get_product(product_id)
        if product is None:
            raise EntityNotFoundError("product", product_id)

        try:
            cart = self._get_or_create_cart(login)
            line = ProductCartModel(
                product=product,
                quantity=1,
                creation_datetime=datetime.now(timezone.utc),
            )
            cart.add_line(line)
            created = self.repo.save_line(line)
        except Exception as e:
            logger.error(f"Error while adding product {product_id} to cart of {login}: {e}")
            self.repo.rollback()
            raise

        logger.info(f"Added product {product_id} to cart {created.cart_id} as line {created.id}")
        return created

    def update_line(self, line_id: int, quantity: int) -> ProductCartModel:
        line = self.repo.get_line(line_id)
        if line is None:
            raise EntityNotFoundError(LINE_ENTITY_NAME, line_id)

        logger.info(f"Line {line_id}: quantity {line.quantity} -> {quantity}")
        line.quantity = quantity
        return self.repo.save_line(line)

    def remove_line(self, line_id: int) -> None:
        line = self.repo.get_line(line_id)
        if line is None:
            raise EntityNotFoundError(LINE_ENTITY_NAME, line_id)

        self.repo.delete_line(line)
        logger.info(f"Removed line {line_id}")

    def increase_quantity_by_login(self, login: str, product_id: int) -> CartModel | None:
        cart = self.repo.find_one_with_eager_relationships_by_login(login)
        line = self._line_for_product(cart, product_id)
        if line is None:
            return None

        line.quantity += 1
        self.repo.commit()
        logger.info(f"Increased product {product_id} in cart {cart.id}")
        return cart

    def decrease_quantity_by_login(self, login: str, product_id: int) -> CartModel | None:
        """-1 on the caller's line for `product_id`; the line goes away at zero."""
        cart = self.repo.find_one_with_eager_relationships_by_login(login)
        line = self._line_for_product(cart, product_id)
        if line is None:
            return None

        line.quantity -= 1
        if line.quantity <= 0:
            logger.info(f"Quantity of product {product_id} reached zero, removing line {line.id}")
            cart.remove_line(line)
        self.repo.commit()
        logger.info(f"Decreased product {product_id} in cart {cart.id}")
        return cart

    def _get_or_create_cart(self, login: str) -> CartModel:
        details = self.user_service.get_or_create_details(login)
        if details.cart is None:
            logger.info(f"Creating cart for {login}")
            details.cart = CartModel()
        return details.cart

    @staticmethod
    def _line_for_product(cart: CartModel | None, product_id: int) -> ProductCartModel | None:
        if cart is None:
            return None
        # przy duplikatach bierzemy najstarsza linie (lines posortowane po id)
        return next((line for line in cart.lines if line.product_id == product_id), None)
