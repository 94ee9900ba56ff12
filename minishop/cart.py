# minishop/cart.py
import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Tuple

from .config import Settings, settings as default_settings
from .errors import ErrorCode, Result, failure, success
from .models import Product

if TYPE_CHECKING:
    from .database import Catalog

logger = logging.getLogger(__name__)


class Cart:
    """
    Product name -> requested quantity.

    Adding a product that is already in the cart is rejected rather than
    merged; remove it first to change its quantity.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.items: Dict[str, int] = {}

    def add(self, product: Product, quantity: int) -> Result:
        limit = min(product.stock, self.settings.max_quantity_per_item)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or not 1 <= quantity <= limit:
            logger.info("rejected %r x %s: stock=%d cap=%d", quantity, product.name, product.stock,
                        self.settings.max_quantity_per_item)
            return failure(ErrorCode.INVALID_QUANTITY)
        if product.name in self.items:
            logger.info("%s already in cart", product.name)
            return failure(ErrorCode.DUPLICATE_CART_ENTRY)

        self.items[product.name] = quantity
        logger.info("%d %s(s) added to the cart", quantity, product.name)
        return success({product.name: quantity}, f"{quantity} {product.name}(s) added to the cart.")

    def remove(self, product: Product) -> Result:
        if product.name not in self.items:
            return failure(ErrorCode.CART_ENTRY_NOT_FOUND)
        quantity = self.items.pop(product.name)
        logger.info("%s removed from the cart", product.name)
        return success({product.name: quantity}, f"{product.name} removed from the cart.")

    def resolved_lines(self, catalog: "Catalog") -> Iterator[Tuple[Product, int]]:
        # stale names are ignored, not surfaced
        for name, quantity in self.items.items():
            product = catalog.find_by_name(name)
            if product is None:
                logger.warning("stale cart reference ignored: %s", name)
                continue
            yield product, quantity

    def compute_total(self, catalog: "Catalog") -> Decimal:
        total = Decimal("0")
        for product, quantity in self.resolved_lines(catalog):
            total += product.price * quantity
        return total

    def clear(self) -> None:
        self.items = {}
        logger.info("cart cleared")

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, name: str) -> bool:
        return name in self.items
