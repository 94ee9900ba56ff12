# minishop/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=ROOT_DIR / ".env")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

# money is quantized under the default decimal context (28 digits)
MAX_DECIMALS = 8


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int) -> int:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        raise RuntimeError(f"{keys[0]} must be an integer, got {v!r}")


def _get_decimal(*keys: str, default: str) -> Decimal:
    v = _get_env(*keys, default=default)
    try:
        d = Decimal(v)
    except InvalidOperation:
        raise RuntimeError(f"{keys[0]} must be a decimal number, got {v!r}")
    if not d.is_finite():
        raise RuntimeError(f"{keys[0]} must be a finite number, got {v!r}")
    return d


def _get_bool(*keys: str, default: bool) -> bool:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    if v.lower() in _TRUE:
        return True
    if v.lower() in _FALSE:
        return False
    raise RuntimeError(f"{keys[0]} must be a boolean, got {v!r}")


@dataclass(frozen=True)
class Settings:
    tax_rate: Decimal = Decimal("0.15")
    max_quantity_per_item: int = 10
    decimals: int = 2
    currency: str = "USD"
    track_stock: bool = True
    hash_iterations: int = 100_000
    log_level: str = "INFO"

    def __post_init__(self):
        if not self.tax_rate.is_finite() or self.tax_rate < 0:
            raise RuntimeError("MINISHOP_TAX_RATE must be a finite, non-negative number")
        if self.max_quantity_per_item < 1:
            raise RuntimeError("MINISHOP_MAX_QUANTITY_PER_ITEM must be at least 1")
        if not 0 <= self.decimals <= MAX_DECIMALS:
            raise RuntimeError(f"MINISHOP_DECIMALS must be between 0 and {MAX_DECIMALS}")
        if self.hash_iterations < 1:
            raise RuntimeError("MINISHOP_HASH_ITERATIONS must be at least 1")

    @property
    def cents(self) -> Decimal:
        """Quantum used to round money amounts for display."""
        return Decimal(1).scaleb(-self.decimals)


def load_settings() -> Settings:
    s = Settings(
        tax_rate=_get_decimal("MINISHOP_TAX_RATE", "TAX_RATE", default="0.15"),
        max_quantity_per_item=_get_int("MINISHOP_MAX_QUANTITY_PER_ITEM", "MAX_QUANTITY_PER_ITEM", default=10),
        decimals=_get_int("MINISHOP_DECIMALS", "DECIMALS", default=2),
        currency=_get_env("MINISHOP_CURRENCY", "CURRENCY", default="USD") or "USD",
        track_stock=_get_bool("MINISHOP_TRACK_STOCK", default=True),
        hash_iterations=_get_int("MINISHOP_HASH_ITERATIONS", default=100_000),
        log_level=(_get_env("MINISHOP_LOG_LEVEL", "LOG_LEVEL", default="INFO") or "INFO").upper(),
    )
    return s


settings = load_settings()
