# ecom/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class CategoryIn(BaseModel):
    """Schema for creating or replacing a category."""

    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=100)


class CategoryOut(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class ProductIn(BaseModel):
    """Schema for creating or replacing a product."""

    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    photo_url: Optional[str] = Field(None, max_length=1024)
    price: Decimal = Field(Decimal("0"), ge=0, description="Unit price (>= 0)")
    stock: int = Field(0, ge=0)
    category_id: Optional[int] = None


class ProductPatch(BaseModel):
    """Partial update: only the fields sent are applied."""

    id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    photo_url: Optional[str] = Field(None, max_length=1024)
    price: Optional[Decimal] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    category_id: Optional[int] = None


class ProductOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    photo_url: Optional[str] = None
    price: Decimal
    stock: int
    category: Optional[CategoryOut] = None

    model_config = ConfigDict(from_attributes=True)


class ProductCartOut(BaseModel):
    """A cart line."""

    id: int
    quantity: int
    creation_datetime: datetime
    product: ProductOut
    cart_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class CartIn(BaseModel):
    id: Optional[int] = None


class CartUserOut(BaseModel):
    id: int
    login: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    id: int
    lines: List[ProductCartOut] = []
    user: Optional[CartUserOut] = None

    model_config = ConfigDict(from_attributes=True)


class UserCreate(BaseModel):
    login: str = Field(..., min_length=1, max_length=50, pattern=r"^[a-zA-Z0-9_.@-]+$")
    email: Optional[str] = Field(None, max_length=254)


class UserRead(BaseModel):
    id: int
    login: str
    email: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
