# ecom/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from ecom.api import register_exception_handlers
from ecom.api.routers import cart, carts, categories, health, products, users
from ecom.data.database import init_db
from ecom.utils.logging import get_logger
from ecom.utils.settings import APPLICATION_NAME

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Initializing database...")
    init_db()
    yield
    logger.info(f"Shutting down {APPLICATION_NAME}")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Ecom Shop Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(categories.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(cart.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
