# tests/test_checkout.py
from decimal import Decimal

from minishop.checkout import checkout, format_money, total_with_tax
from minishop.config import Settings
from minishop.database import seeded_store
from minishop.errors import ErrorCode
from minishop.session import Session


def logged_in():
    store = seeded_store()
    session = Session()
    john = store.identities.find_by_email("john@gmail.com")
    assert session.authenticate(john, "john@gmail.com", "john123").ok
    return store, session


def test_requires_authentication():
    store = seeded_store()
    session = Session()
    session.cart.add(store.catalog.find_by_name("iPhone 12"), 1)
    r = checkout(session.cart, session, store.catalog)
    assert r.error == ErrorCode.AUTHENTICATION_REQUIRED
    assert len(session.cart) == 1


def test_empty_cart():
    store, session = logged_in()
    r = checkout(session.cart, session, store.catalog)
    assert r.error == ErrorCode.EMPTY_CART
    assert r.message == "Cart is empty."


def test_total_includes_tax_and_clears_cart():
    store, session = logged_in()
    session.cart.add(store.catalog.find_by_name("Nike Air Max"), 3)
    session.cart.add(store.catalog.find_by_name("JavaScript: The Good Parts"), 1)
    subtotal = session.cart.compute_total(store.catalog)

    r = checkout(session.cart, session, store.catalog)
    assert r.ok
    receipt = r.value
    assert receipt.subtotal == Decimal("475.00")
    assert receipt.total == (subtotal * Decimal("1.15")).quantize(Decimal("0.01"))
    assert receipt.total == Decimal("546.25")
    assert receipt.tax == Decimal("71.25")
    assert receipt.email == "john@gmail.com"
    assert len(session.cart) == 0


def test_rounding_is_half_up_to_cents():
    assert total_with_tax(Decimal("0.10")) == Decimal("0.12")
    assert total_with_tax(Decimal("0.30")) == Decimal("0.35")
    assert total_with_tax(Decimal("100"), Settings(tax_rate=Decimal("0"))) == Decimal("100.00")


def test_decrements_stock_and_records_order():
    store, session = logged_in()
    iphone = store.catalog.find_by_name("iPhone 12")
    session.cart.add(iphone, 2)
    orders = {}
    r = checkout(session.cart, session, store.catalog, orders=orders)
    assert r.ok
    assert iphone.stock == 3
    assert list(orders) == [r.value.id]


def test_out_of_stock_changes_nothing():
    store, session = logged_in()
    iphone = store.catalog.find_by_name("iPhone 12")
    nike = store.catalog.find_by_name("Nike Air Max")
    session.cart.add(nike, 2)
    session.cart.add(iphone, 5)
    iphone.stock = 4

    r = checkout(session.cart, session, store.catalog)
    assert r.error == ErrorCode.OUT_OF_STOCK
    assert nike.stock == 10
    assert iphone.stock == 4
    assert session.cart.items == {"Nike Air Max": 2, "iPhone 12": 5}


def test_stock_untouched_when_tracking_disabled():
    store = seeded_store()
    s = Settings(track_stock=False)
    session = Session(s)
    john = store.identities.find_by_email("john@gmail.com")
    session.authenticate(john, "john@gmail.com", "john123")
    iphone = store.catalog.find_by_name("iPhone 12")
    session.cart.add(iphone, 5)

    r = checkout(session.cart, session, store.catalog, settings=s)
    assert r.ok
    assert iphone.stock == 5


def test_stale_lines_are_left_out_of_receipt():
    store, session = logged_in()
    session.cart.add(store.catalog.find_by_name("Nike Air Max"), 1)
    session.cart.items["Discontinued"] = 2
    r = checkout(session.cart, session, store.catalog)
    assert r.ok
    assert [line.name for line in r.value.lines] == ["Nike Air Max"]
    assert r.value.total == Decimal("172.50")


def test_cart_of_only_stale_lines_checks_out_at_zero():
    store, session = logged_in()
    session.cart.items["Discontinued"] = 2
    orders = {}
    r = checkout(session.cart, session, store.catalog, orders=orders)
    assert r.ok
    assert r.value.lines == []
    assert r.value.total == Decimal("0.00")
    assert list(orders) == [r.value.id]
    assert len(session.cart) == 0


def test_message_uses_configured_currency_and_decimals():
    store = seeded_store()
    s = Settings(currency="EUR", decimals=3)
    session = Session(s)
    john = store.identities.find_by_email("john@gmail.com")
    session.authenticate(john, "john@gmail.com", "john123")
    session.cart.add(store.catalog.find_by_name("JavaScript: The Good Parts"), 1)

    r = checkout(session.cart, session, store.catalog, settings=s)
    assert r.value.currency == "EUR"
    assert r.value.total == Decimal("28.750")
    assert r.message == "Checkout completed. Total price: €28.750"


def test_format_money():
    assert format_money(Decimal("999")) == "$999.00"
    assert format_money(Decimal("1.005"), "GBP") == "£1.01"
    assert format_money(Decimal("5"), "CHF") == "CHF 5.00"
