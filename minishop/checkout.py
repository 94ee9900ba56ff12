# minishop/checkout.py
import logging
import uuid
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional

from .cart import Cart
from .config import Settings, settings as default_settings
from .database import Catalog
from .errors import ErrorCode, Result, failure, success
from .models import Receipt, ReceiptLine
from .session import Session

logger = logging.getLogger(__name__)


def quantize(amount: Decimal, settings: Optional[Settings] = None) -> Decimal:
    s = settings or default_settings
    return amount.quantize(s.cents, rounding=ROUND_HALF_UP)


CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "JPY": "¥"}


def format_money(amount: Decimal, currency: Optional[str] = None, settings: Optional[Settings] = None) -> str:
    s = settings or default_settings
    currency = currency or s.currency
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    return f"{symbol}{quantize(Decimal(amount), s)}"


def total_with_tax(subtotal: Decimal, settings: Optional[Settings] = None) -> Decimal:
    s = settings or default_settings
    return quantize(subtotal * (1 + s.tax_rate), s)


def checkout(cart: Cart, session: Session, catalog: Catalog, settings: Optional[Settings] = None,
             orders: Optional[Dict[str, Receipt]] = None) -> Result:
    """
    Price the cart, charge tax and clear it.

    With stock tracking on, every line is checked against current stock
    before any product is touched, so a failed checkout changes nothing.
    On success the receipt is recorded in `orders` when one is given.
    """
    s = settings or default_settings
    if not session.authenticated:
        return failure(ErrorCode.AUTHENTICATION_REQUIRED)
    if len(cart) == 0:
        return failure(ErrorCode.EMPTY_CART)

    lines = list(cart.resolved_lines(catalog))
    if s.track_stock:
        for product, quantity in lines:
            if product.stock < quantity:
                logger.info("checkout blocked: %s has %d left, %d requested", product.name, product.stock, quantity)
                return failure(ErrorCode.OUT_OF_STOCK, f"Not enough stock for {product.name}.")

    subtotal = cart.compute_total(catalog)
    total = total_with_tax(subtotal, s)
    receipt = Receipt(
        id=uuid.uuid4().hex,
        email=session.identity.email,
        lines=[
            ReceiptLine(name=p.name, quantity=q, unit_price=p.price, line_total=p.price * q)
            for p, q in lines
        ],
        subtotal=quantize(subtotal, s),
        tax=total - quantize(subtotal, s),
        total=total,
        currency=s.currency,
        placed_at=datetime.now(timezone.utc),
    )

    # commit
    if s.track_stock:
        for product, quantity in lines:
            product.stock -= quantity
    if orders is not None:
        orders[receipt.id] = receipt
    cart.clear()

    logger.info("checkout completed for %s, total %s %s", receipt.email, receipt.total, receipt.currency)
    return success(receipt, f"Checkout completed. Total price: {format_money(total, s.currency, s)}")
