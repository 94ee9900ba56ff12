# tests/test_display.py
from rich.console import Console

from minishop import core, display
from minishop.config import Settings
from minishop.database import seeded_store
from minishop.session import Session


def render(fn, *args):
    out = Console(record=True, width=120)
    fn(*args, out=out)
    return out.export_text()


def test_show_products():
    text = render(display.show_products, seeded_store().catalog.products)
    assert "iPhone 12" in text
    assert "$999.00" in text


def test_show_products_empty():
    assert "No products found" in render(display.show_products, [])


def test_show_cart_and_receipt():
    store, s = seeded_store(), Session()
    core.login(store, s, "john@gmail.com", "john123")
    core.add_to_cart(store, s, "iPhone 12", 1)

    text = render(display.show_cart, core.view_cart(store, s).value)
    assert "john@gmail.com" in text
    assert "$999.00" in text

    receipt = core.checkout(store, s).value
    text = render(display.show_receipt, receipt)
    assert "$1148.85" in text

    assert "Your cart is empty" in render(display.show_cart, core.view_cart(store, s).value)


def test_receipt_uses_its_own_currency():
    store, s = seeded_store(), Session()
    core.login(store, s, "john@gmail.com", "john123")
    core.add_to_cart(store, s, "Nike Air Max", 1)
    receipt = core.checkout(store, s).value.model_copy(update={"currency": "EUR"})

    text = render(display.show_receipt, receipt)
    assert "€172.50" in text
    assert "$" not in text


def test_products_with_custom_decimals():
    out = Console(record=True, width=120)
    display.show_products(seeded_store().catalog.products, out=out, settings=Settings(decimals=0))
    text = out.export_text()
    assert "$999" in text
    assert "$999.00" not in text
