# ecom/api/routers/categories.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ecom.data.database import get_db
from ecom.domain.errors import BadRequestAlertException, EntityNotFoundError
from ecom.domain.schemas import CategoryIn, CategoryOut
from ecom.services.category_service import CategoryService
from ecom.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/categories", tags=["categories"])

ENTITY_NAME = "category"


def get_service(db: Session):
    return CategoryService(db)


@router.post("", response_model=CategoryOut, status_code=201)
def create_category(payload: CategoryIn, response: Response, db: Session = Depends(get_db)):
    logger.debug(f"REST request to save Category : {payload}")
    if payload.id is not None:
        raise BadRequestAlertException("A new category cannot already have an ID", ENTITY_NAME, "idexists")
    result = get_service(db).save(payload)
    response.headers["Location"] = f"/api/categories/{result.id}"
    return result


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(category_id: int, payload: CategoryIn, db: Session = Depends(get_db)):
    logger.debug(f"REST request to update Category : {category_id}, {payload}")
    if payload.id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")
    if payload.id != category_id:
        raise BadRequestAlertException("Invalid ID", ENTITY_NAME, "idinvalid")
    svc = get_service(db)
    if not svc.exists(category_id):
        raise BadRequestAlertException("Entity not found", ENTITY_NAME, "idnotfound")
    return svc.save(payload)


@router.get("", response_model=List[CategoryOut])
def get_all_categories(db: Session = Depends(get_db)):
    logger.debug("REST request to get all Categories")
    return get_service(db).find_all()


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: int, db: Session = Depends(get_db)):
    logger.debug(f"REST request to get Category : {category_id}")
    category = get_service(db).find_one(category_id)
    if not category:
        raise EntityNotFoundError(ENTITY_NAME, category_id)
    return category


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    logger.debug(f"REST request to delete Category : {category_id}")
    get_service(db).delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
