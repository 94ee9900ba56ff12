# minishop/errors.py
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field

# Operations never raise for these conditions; they return a Failure instead
# and let the caller decide how to present it.


class ErrorCode(str, Enum):
    AUTHENTICATION_REQUIRED = "authentication_required"
    ALREADY_AUTHENTICATED = "already_authenticated"
    INVALID_CREDENTIALS = "invalid_credentials"
    PRODUCT_NOT_FOUND = "product_not_found"
    INVALID_QUANTITY = "invalid_quantity"
    DUPLICATE_CART_ENTRY = "duplicate_cart_entry"
    CART_ENTRY_NOT_FOUND = "cart_entry_not_found"
    EMPTY_CART = "empty_cart"
    OUT_OF_STOCK = "out_of_stock"


DEFAULT_MESSAGES = {
    ErrorCode.AUTHENTICATION_REQUIRED: "Authentication required.",
    ErrorCode.ALREADY_AUTHENTICATED: "Logout before logging in again.",
    ErrorCode.INVALID_CREDENTIALS: "Invalid credentials.",
    ErrorCode.PRODUCT_NOT_FOUND: "Product not found.",
    ErrorCode.INVALID_QUANTITY: "Invalid quantity or out of stock.",
    ErrorCode.DUPLICATE_CART_ENTRY: "Item already exists in the cart.",
    ErrorCode.CART_ENTRY_NOT_FOUND: "Item does not exist in the cart.",
    ErrorCode.EMPTY_CART: "Cart is empty.",
    ErrorCode.OUT_OF_STOCK: "Not enough stock to complete the order.",
}


class Success(BaseModel):
    status: Literal["ok"] = "ok"
    value: Any = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel):
    status: Literal["error"] = "error"
    error: ErrorCode
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Annotated[Union[Success, Failure], Field(discriminator="status")]


def success(value: Any = None, message: str = "") -> Success:
    return Success(value=value, message=message)


def failure(code: ErrorCode, message: Optional[str] = None) -> Failure:
    return Failure(error=code, message=message or DEFAULT_MESSAGES[code])
