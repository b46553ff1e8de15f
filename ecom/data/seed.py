# ecom/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from ecom.data.database import SessionLocal, init_db
from ecom.data.models import CategoryModel, ProductModel, UserDetailsModel, UserModel
from ecom.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_CATALOG = {
    "Peripherals": [
        ("Keyboard", Decimal("199.99"), 25),
        ("Mouse", Decimal("49.50"), 40),
    ],
    "Displays": [
        ("Monitor", Decimal("899.00"), 8),
    ],
}


def seed(db: Session | None = None) -> bool:
    """Insert a demo catalog and a demo user. Returns False when data already exists."""
    own_session = db is None
    db = db or SessionLocal()
    try:
        # tylko jesli baza pusta
        if db.query(ProductModel).first():
            return False

        for category_name, products in DEMO_CATALOG.items():
            category = CategoryModel(name=category_name)
            for name, price, stock in products:
                category.products.append(ProductModel(name=name, price=price, stock=stock))
            db.add(category)

        if db.query(UserModel).filter(UserModel.login == "user").first() is None:
            db.add(UserModel(login="user", email="user@localhost", details=UserDetailsModel()))

        db.commit()
        logger.info("Seeded demo catalog")
        return True
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    init_db()
    seed()
