# ecom/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ecom.domain.errors import BadRequestAlertException, EntityNotFoundError
from ecom.utils.logging import get_logger

logger = get_logger(__name__)


async def bad_request_alert_handler(request: Request, exc: BadRequestAlertException):
    logger.debug(f"{request.method} {request.url.path} -> 400 {exc.entity_name}.{exc.error_key}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_problem())


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError):
    logger.debug(f"{request.method} {request.url.path} -> 404 {exc}")
    return JSONResponse(status_code=404, content=exc.to_problem())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BadRequestAlertException, bad_request_alert_handler)
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)
