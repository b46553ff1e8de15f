#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from ecom.data.models.user import UserModel
from ecom.data.models.user_details import UserDetailsModel, favorites_table
from ecom.data.models.category import CategoryModel
from ecom.data.models.product import ProductModel
from ecom.data.models.cart import CartModel
from ecom.data.models.product_cart import ProductCartModel

__all__ = [
    "UserModel",
    "UserDetailsModel",
    "favorites_table",
    "CategoryModel",
    "ProductModel",
    "CartModel",
    "ProductCartModel",
]
