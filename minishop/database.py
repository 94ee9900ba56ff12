# minishop/database.py
import logging
from decimal import Decimal
from typing import Dict, List, Optional, Protocol

from pydantic import BaseModel

from .cart import Cart
from .config import Settings
from .models import Category, Identity, Product, Receipt
from .security import hash_password

logger = logging.getLogger(__name__)

# This file holds the in-memory stores: catalog, identities and order history.


class Catalog:
    def __init__(self, products: Optional[List[Product]] = None):
        self.products: List[Product] = list(products or [])

    def find_by_name(self, name: str) -> Optional[Product]:
        return next((p for p in self.products if p.name == name), None)

    def list(self, category: Optional[Category] = None, available_only: bool = False) -> List[Product]:
        out = []
        for p in self.products:
            if category and p.category != category:
                continue
            if available_only and p.stock <= 0:
                continue
            out.append(p)
        return out

    def __len__(self) -> int:
        return len(self.products)


class IdentityDirectory:
    def __init__(self, identities: Optional[List[Identity]] = None):
        self.identities: List[Identity] = list(identities or [])

    def find_by_email(self, email: str) -> Optional[Identity]:
        return next((i for i in self.identities if i.email == email), None)

    def __len__(self) -> int:
        return len(self.identities)


# ---------------------------
# Storage collaborator
# ---------------------------
class Snapshot(BaseModel):
    products: List[Product] = []
    identities: List[Identity] = []


class Storage(Protocol):
    def load(self) -> Snapshot: ...

    def save(self, snapshot: Snapshot) -> None: ...


class MemoryStorage:
    """Storage that keeps a deep copy of the last saved snapshot."""

    def __init__(self, snapshot: Optional[Snapshot] = None):
        self._snapshot = snapshot.model_copy(deep=True) if snapshot else Snapshot()

    def load(self) -> Snapshot:
        return self._snapshot.model_copy(deep=True)

    def save(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot.model_copy(deep=True)


# ---------------------------
# Store: state shared by every session
# ---------------------------
class Store:
    def __init__(self, catalog: Catalog, identities: IdentityDirectory, storage: Optional[Storage] = None):
        self.catalog = catalog
        self.identities = identities
        self.storage = storage
        self.orders: Dict[str, Receipt] = {}
        self.carts: Dict[str, Cart] = {}

    @classmethod
    def from_storage(cls, storage: Storage) -> "Store":
        snapshot = storage.load()
        logger.debug("loaded %d products and %d identities", len(snapshot.products), len(snapshot.identities))
        return cls(Catalog(snapshot.products), IdentityDirectory(snapshot.identities), storage=storage)

    def snapshot(self) -> Snapshot:
        return Snapshot(products=self.catalog.products, identities=self.identities.identities)

    def save(self) -> None:
        if self.storage is None:
            raise RuntimeError("store has no storage attached")
        self.storage.save(self.snapshot())

    def cart_for(self, email: str, settings: Optional[Settings] = None) -> Cart:
        """The cart owned by `email`, created empty on first use."""
        if email not in self.carts:
            self.carts[email] = Cart(settings)
        return self.carts[email]

    def register_identity(self, name: str, email: str, password: str) -> Identity:
        if self.identities.find_by_email(email) is not None:
            raise ValueError(f"identity already registered: {email}")
        password_hash, salt, iterations = hash_password(password)
        identity = Identity(name=name, email=email, password_hash=password_hash, salt=salt, iterations=iterations)
        self.identities.identities.append(identity)
        return identity


# ---------------------------
# Seed data
# ---------------------------
SEED_USERS = [
    ("John Doe", "john@gmail.com", "john123"),
    ("Jane Smith", "jane@gmail.com", "jane456"),
]

SEED_PRODUCTS = [
    ("iPhone 12", Category.ELECTRONICS, "999", 5),
    ("Nike Air Max", Category.CLOTHING, "150", 10),
    ("JavaScript: The Good Parts", Category.BOOKS, "25", 20),
]


def seed_snapshot() -> Snapshot:
    products = [
        Product(name=name, category=category, price=Decimal(price), stock=stock)
        for name, category, price, stock in SEED_PRODUCTS
    ]
    identities = []
    for name, email, password in SEED_USERS:
        password_hash, salt, iterations = hash_password(password)
        identities.append(Identity(name=name, email=email, password_hash=password_hash, salt=salt, iterations=iterations))
    return Snapshot(products=products, identities=identities)


def seeded_store() -> Store:
    return Store.from_storage(MemoryStorage(seed_snapshot()))
