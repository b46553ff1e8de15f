#ecom/api/routers/carts.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ecom.data.database import get_db
from ecom.domain.errors import BadRequestAlertException, EntityNotFoundError
from ecom.domain.schemas import CartIn, CartOut
from ecom.services.cart_service import CartService
from ecom.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/carts", tags=["carts"])

ENTITY_NAME = "cart"


def get_service(db: Session):
    return CartService(db)


def _check_update_ids(cart_id: int, payload: CartIn, svc: CartService) -> None:
    if payload.id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")
    if payload.id != cart_id:
        raise BadRequestAlertException("Invalid ID", ENTITY_NAME, "idinvalid")
    if not svc.exists(cart_id):
        raise BadRequestAlertException("Entity not found", ENTITY_NAME, "idnotfound")


@router.post("", response_model=CartOut, status_code=201)
def create_cart(payload: CartIn, response: Response, db: Session = Depends(get_db)):
    logger.debug(f"REST request to save Cart : {payload}")
    if payload.id is not None:
        raise BadRequestAlertException("A new cart cannot already have an ID", ENTITY_NAME, "idexists")
    result = get_service(db).save(payload)
    response.headers["Location"] = f"/api/carts/{result.id}"
    return result


@router.put("/{cart_id}", response_model=CartOut)
def update_cart(cart_id: int, payload: CartIn, db: Session = Depends(get_db)):
    logger.debug(f"REST request to update Cart : {cart_id}, {payload}")
    svc = get_service(db)
    _check_update_ids(cart_id, payload, svc)
    return svc.save(payload)


@router.patch("/{cart_id}", response_model=CartOut)
def partial_update_cart(cart_id: int, payload: CartIn, db: Session = Depends(get_db)):
    logger.debug(f"REST request to partial update Cart partially : {cart_id}, {payload}")
    svc = get_service(db)
    _check_update_ids(cart_id, payload, svc)
    result = svc.partial_update(payload)
    if result is None:
        raise EntityNotFoundError(ENTITY_NAME, cart_id)
    return result


@router.get("", response_model=List[CartOut])
def get_all_carts(filter: Optional[str] = Query(None), db: Session = Depends(get_db)):
    svc = get_service(db)
    if filter == "user-is-null":
        logger.debug("REST request to get all Carts where user is null")
        return svc.find_all_where_user_is_null()
    logger.debug("REST request to get all Carts")
    return svc.find_all()


@router.get("/{cart_id}", response_model=CartOut)
def get_cart(cart_id: int, db: Session = Depends(get_db)):
    logger.debug(f"REST request to get Cart : {cart_id}")
    cart = get_service(db).find_one(cart_id)
    if not cart:
        raise EntityNotFoundError(ENTITY_NAME, cart_id)
    return cart


@router.delete("/{cart_id}", status_code=204)
def delete_cart(cart_id: int, db: Session = Depends(get_db)):
    logger.debug(f"REST request to delete Cart : {cart_id}")
    get_service(db).delete(cart_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
