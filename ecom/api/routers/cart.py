#ecom/api/routers/cart.py
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ecom.api.deps import get_current_login
from ecom.data.database import get_db
from ecom.domain.errors import EntityNotFoundError
from ecom.domain.schemas import CartOut, ProductCartOut
from ecom.services.cart_service import CartService
from ecom.utils.logging import get_logger

logger = get_logger(__name__)

# koszyk zalogowanego uzytkownika
router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=CartOut)
def get_cart_for_current_user(
    login: str = Depends(get_current_login),
    db: Session = Depends(get_db),
):
    logger.debug(f"REST request to get Cart of {login}")
    cart = get_service(db).find_one_with_eager_relationships_by_login(login)
    if not cart:
        raise EntityNotFoundError("cart", login)
    return cart


@router.delete("", status_code=204)
def empty_cart_for_current_user(
    login: str = Depends(get_current_login),
    db: Session = Depends(get_db),
):
    logger.debug(f"REST request to empty Cart of {login}")
    get_service(db).empty_by_login(login)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/products/{product_id}", response_model=ProductCartOut, status_code=201)
def create_product_cart(
    product_id: int,
    response: Response,
    login: str = Depends(get_current_login),
    db: Session = Depends(get_db),
):
    logger.debug(f"REST request to add product to a productCart to Cart : {product_id}")
    result = get_service(db).add_line(login, product_id)
    response.headers["Location"] = f"/api/product-carts/{result.id}"
    return result


@router.patch("/products/{line_id}", response_model=ProductCartOut)
def update_quantity_product_cart(
    line_id: int,
    quantity: int = Query(...),
    login: str = Depends(get_current_login),
    db: Session = Depends(get_db),
):
    logger.debug(f"REST request to update quantity of ProductCart {line_id} to {quantity}")
    return get_service(db).update_line(line_id, quantity)


@router.delete("/products/{line_id}", status_code=204)
def delete_product_cart(
    line_id: int,
    login: str = Depends(get_current_login),
    db: Session = Depends(get_db),
):
    logger.debug(f"REST request to delete ProductCart : {line_id}")
    get_service(db).remove_line(line_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/products/{product_id}/increase", response_model=CartOut)
def increase_quantity(
    product_id: int,
    login: str = Depends(get_current_login),
    db: Session = Depends(get_db),
):
    logger.debug(f"REST request to increase quantity of product {product_id} in Cart of {login}")
    cart = get_service(db).increase_quantity_by_login(login, product_id)
    if not cart:
        raise EntityNotFoundError("productCart", product_id)
    return cart


@router.put("/products/{product_id}/decrease", response_model=CartOut)
def decrease_quantity(
    product_id: int,
    login: str = Depends(get_current_login),
    db: Session = Depends(get_db),
):
    logger.debug(f"REST request to decrease quantity of product {product_id} in Cart of {login}")
    cart = get_service(db).decrease_quantity_by_login(login, product_id)
    if not cart:
        raise EntityNotFoundError("productCart", product_id)
    return cart
