# ecom/repos/cart_repo.py
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, joinedload, selectinload

from ecom.data.models.cart import CartModel
from ecom.data.models.product_cart import ProductCartModel
from ecom.data.models.user import UserModel
from ecom.data.models.user_details import UserDetailsModel


class CartRepo:
    """Persistence for carts and their lines (ProductCart rows)."""

    def __init__(self, db: Session):
        self.db = db

    # carts

    def get_cart(self, cart_id: int) -> CartModel | None:
        return self.db.get(CartModel, cart_id)

    def exists(self, cart_id: int) -> bool:
        return self.db.execute(
            select(CartModel.id).where(CartModel.id == cart_id)
        ).first() is not None

    def list_carts(self) -> List[CartModel]:
        return list(self.db.execute(select(CartModel).order_by(CartModel.id)).scalars())

    def list_carts_without_user(self) -> List[CartModel]:
        owned = select(UserDetailsModel.id).where(UserDetailsModel.cart_id == CartModel.id)
        return list(
            self.db.execute(
                select(CartModel).where(~owned.exists()).order_by(CartModel.id)
            ).scalars()
        )

    def find_one_with_eager_relationships_by_login(self, login: str) -> CartModel | None:
        stmt = (
            select(CartModel)
            .join(CartModel.user)
            .join(UserDetailsModel.user)
            .where(UserModel.login == login)
            .options(selectinload(CartModel.lines).joinedload(ProductCartModel.product))
        )
        return self.db.execute(stmt).scalars().first()

    def save_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.commit()
        self.db.refresh(cart)
        return cart

    def delete_cart(self, cart: CartModel) -> None:
        # linie usuwane kaskadowo (delete-orphan)
        self.db.delete(cart)
        self.db.commit()

    def empty(self, cart: CartModel) -> int:
        """Bulk delete of every line of `cart`. Returns the number of rows removed."""
        result = self.db.execute(
            delete(ProductCartModel).where(ProductCartModel.cart_id == cart.id)
        )
        self.db.commit()
        return result.rowcount or 0

    # lines

    def get_line(self, line_id: int) -> ProductCartModel | None:
        return self.db.get(ProductCartModel, line_id)

    def save_line(self, line: ProductCartModel) -> ProductCartModel:
        self.db.add(line)
        self.db.commit()
        self.db.refresh(line)
        return line

    def delete_line(self, line: ProductCartModel) -> None:
        self.db.delete(line)
        self.db.commit()

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
