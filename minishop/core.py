# minishop/core.py
import logging
from typing import List, Optional

from . import checkout as _checkout
from .database import Store
from .errors import ErrorCode, Result, failure, success
from .models import CartLineView, CartView, Category, Product
from .session import Session

logger = logging.getLogger(__name__)

# This file contains the operations exposed to callers. Each one takes the
# shared Store and the caller's own Session.


# Auth
def login(store: Store, session: Session, email: str, password: str) -> Result:
    """
    Authenticate `session` as the identity registered under `email`.

    A session that is already logged in is rejected before the email is
    looked up, so an unknown email reports AlreadyAuthenticated rather than
    InvalidCredentials. On success the session works on the identity's own
    cart, including any lines left there before a previous logout.
    """
    if session.authenticated:
        return failure(ErrorCode.ALREADY_AUTHENTICATED)
    identity = store.identities.find_by_email(email)
    if identity is None:
        logger.info("login attempt for unknown email %s", email)
        return failure(ErrorCode.INVALID_CREDENTIALS)
    return session.authenticate(identity, email, password, cart=store.cart_for(identity.email, session.settings))


def logout(store: Store, session: Session) -> Result:
    return session.logout()


# Products
def list_products(store: Store, category: Optional[Category] = None, available_only: bool = False) -> List[Product]:
    return store.catalog.list(category=category, available_only=available_only)


# Cart
def add_to_cart(store: Store, session: Session, product_name: str, quantity: int) -> Result:
    if not session.authenticated:
        return failure(ErrorCode.AUTHENTICATION_REQUIRED)
    product = store.catalog.find_by_name(product_name)
    if product is None:
        return failure(ErrorCode.PRODUCT_NOT_FOUND)
    return session.cart.add(product, quantity)


def remove_from_cart(store: Store, session: Session, product_name: str) -> Result:
    if not session.authenticated:
        return failure(ErrorCode.AUTHENTICATION_REQUIRED)
    product = store.catalog.find_by_name(product_name)
    if product is None:
        return failure(ErrorCode.PRODUCT_NOT_FOUND)
    return session.cart.remove(product)


def view_cart(store: Store, session: Session) -> Result:
    if not session.authenticated:
        return failure(ErrorCode.AUTHENTICATION_REQUIRED)
    lines = []
    for name, quantity in session.cart.items.items():
        product = store.catalog.find_by_name(name)
        if product is None:
            lines.append(CartLineView(name=name, quantity=quantity, available=False))
            continue
        lines.append(CartLineView(name=name, quantity=quantity, unit_price=product.price,
                                  line_total=product.price * quantity))
    total = session.cart.compute_total(store.catalog)
    return success(CartView(email=session.identity.email, lines=lines, total=total))


# Checkout
def checkout(store: Store, session: Session) -> Result:
    return _checkout.checkout(session.cart, session, store.catalog, settings=session.cart.settings,
                              orders=store.orders)


# Orders
def list_orders(store: Store, session: Session) -> Result:
    if not session.authenticated:
        return failure(ErrorCode.AUTHENTICATION_REQUIRED)
    email = session.identity.email
    return success([o for o in store.orders.values() if o.email == email])
