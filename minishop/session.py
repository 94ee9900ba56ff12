# minishop/session.py
import logging
from typing import Optional

from .cart import Cart
from .config import Settings
from .errors import ErrorCode, Result, failure, success
from .models import Identity
from .security import verify_password

logger = logging.getLogger(__name__)


class Session:
    """
    One caller's login state and the cart it is working on.

    States are Anonymous (identity is None) and Authenticated. There is no
    process-wide session: every caller owns one of these and hands it to the
    operations in `minishop.core`. Once authenticated, `cart` is the cart that
    belongs to the identity, so it survives logout and is picked up again on
    the next login.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings
        self.identity: Optional[Identity] = None
        self.cart = Cart(settings)

    @property
    def authenticated(self) -> bool:
        return self.identity is not None

    def authenticate(self, identity: Identity, email: str, password: str, cart: Optional[Cart] = None) -> Result:
        if self.identity is not None:
            logger.info("login for %s rejected: %s is still logged in", email, self.identity.email)
            return failure(ErrorCode.ALREADY_AUTHENTICATED)
        if identity.email != email or not verify_password(password, identity.password_hash, identity.salt,
                                                         identity.iterations):
            logger.info("invalid credentials for %s", email)
            return failure(ErrorCode.INVALID_CREDENTIALS)

        self.identity = identity
        if cart is not None:
            self.cart = cart
        logger.info("welcome, %s", identity.name)
        return success(identity.email, f"Welcome, {identity.name}!")

    def logout(self) -> Result:
        if self.identity is None:
            return failure(ErrorCode.AUTHENTICATION_REQUIRED, "No user logged in.")
        email = self.identity.email
        self.identity = None
        # detach; the identity's cart stays with the store
        self.cart = Cart(self.settings)
        logger.info("%s logged out", email)
        return success(email, "Logged out successfully.")
