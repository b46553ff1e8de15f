# ecom/api/routers/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ecom.api.deps import get_current_login
from ecom.data.database import get_db
from ecom.domain.errors import BadRequestAlertException, EntityNotFoundError
from ecom.domain.schemas import ProductIn, ProductOut, ProductPatch, SortOrder
from ecom.services.category_service import CategoryService
from ecom.services.product_service import ProductService
from ecom.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])

ENTITY_NAME = "product"


def get_service(db: Session):
    return ProductService(db)


def _check_update_ids(product_id: int, payload_id: Optional[int], svc: ProductService) -> None:
    if payload_id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")
    if payload_id != product_id:
        raise BadRequestAlertException("Invalid ID", ENTITY_NAME, "idinvalid")
    if not svc.exists(product_id):
        raise BadRequestAlertException("Entity not found", ENTITY_NAME, "idnotfound")


# ulubione przed /{product_id}, inaczej "favorite-products" trafia do parsowania int
@router.get("/favorite-products", response_model=List[ProductOut])
def get_favorite_products_for_current_user(
    login: str = Depends(get_current_login),
    db: Session = Depends(get_db),
):
    logger.debug(f"REST request to get all Favorite Products for user {login}")
    return get_service(db).find_all_favorite(login)


@router.post("/favorite-products/{product_id}", response_model=List[ProductOut])
def update_favorite_products_for_current_user(
    product_id: int,
    login: str = Depends(get_current_login),
    db: Session = Depends(get_db),
):
    logger.debug(f"REST request to update product {product_id} in Favorite Products for user {login}")
    return get_service(db).toggle_favorite(login, product_id)


@router.post("", response_model=ProductOut, status_code=201)
def create_product(payload: ProductIn, response: Response, db: Session = Depends(get_db)):
    logger.debug(f"REST request to save Product : {payload}")
    if payload.id is not None:
        raise BadRequestAlertException("A new product cannot already have an ID", ENTITY_NAME, "idexists")
    result = get_service(db).save(payload)
    response.headers["Location"] = f"/api/products/{result.id}"
    return result


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, payload: ProductIn, db: Session = Depends(get_db)):
    logger.debug(f"REST request to update Product : {product_id}, {payload}")
    svc = get_service(db)
    _check_update_ids(product_id, payload.id, svc)
    return svc.save(payload)


@router.patch("/{product_id}", response_model=ProductOut)
def partial_update_product(product_id: int, payload: ProductPatch, db: Session = Depends(get_db)):
    logger.debug(f"REST request to partial update Product partially : {product_id}, {payload}")
    svc = get_service(db)
    _check_update_ids(product_id, payload.id, svc)
    result = svc.partial_update(payload)
    if result is None:
        raise EntityNotFoundError(ENTITY_NAME, product_id)
    return result


@router.get("", response_model=List[ProductOut])
def get_products(
    query: Optional[str] = Query(None),
    category_id: Optional[int] = Query(None, alias="category"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[SortOrder] = Query(None, alias="sortOrder"),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    if query is not None:
        logger.debug(f"REST request to get Research Products for query : {query}")
        return svc.find_research(query, sort_by, sort_order)
    if category_id is not None:
        logger.debug(f"REST request to get Products for category : {category_id}")
        if CategoryService(db).find_one(category_id) is None:
            raise BadRequestAlertException("Category unknown", "category", "idnotfound")
        return svc.find_category(category_id, sort_by, sort_order)
    logger.debug("REST request to get all Products")
    return svc.find_all(sort_by, sort_order)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    logger.debug(f"REST request to get Product : {product_id}")
    product = get_service(db).find_one(product_id)
    if not product:
        raise EntityNotFoundError(ENTITY_NAME, product_id)
    return product


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    logger.debug(f"REST request to delete Product : {product_id}")
    get_service(db).delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
