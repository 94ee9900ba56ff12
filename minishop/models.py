# minishop/models.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Category(str, Enum):
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    BOOKS = "Books"


class Product(BaseModel):
    name: str = Field(..., min_length=1)
    category: Category
    price: Decimal = Field(..., ge=0)
    stock: int = Field(..., ge=0)


class Identity(BaseModel):
    name: str
    email: str
    password_hash: str
    salt: str
    iterations: int = Field(..., ge=1)


# ---------------------------
# Read models returned by operations
# ---------------------------
class CartLineView(BaseModel):
    name: str
    quantity: int
    available: bool = True
    unit_price: Optional[Decimal] = None
    line_total: Optional[Decimal] = None


class CartView(BaseModel):
    email: str
    lines: List[CartLineView] = []
    total: Decimal = Decimal("0")


class ReceiptLine(BaseModel):
    name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


class Receipt(BaseModel):
    id: str
    email: str
    lines: List[ReceiptLine]
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    currency: str = "USD"
    placed_at: datetime
