# minishop/display.py
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .checkout import format_money
from .config import Settings
from .models import CartView, Product, Receipt

console = Console()


# ---------------------------
# Renderables
# ---------------------------
def products_table(products: List[Product], settings: Optional[Settings] = None) -> Table:
    table = Table(
        title="Products Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("Name", style="bold", width=28)
    table.add_column("Category", width=12)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Stock", justify="right", width=8)

    for p in products:
        table.add_row(p.name, p.category.value, format_money(p.price, settings=settings), str(p.stock))
    return table


def cart_panel(cart: CartView, settings: Optional[Settings] = None) -> Panel:
    title = Text()
    title.append("Shopping Cart - ", style="bold")
    title.append(cart.email, style="bold cyan")
    title.append(f" - Total: {format_money(cart.total, settings=settings)}", style="bold green")

    if not cart.lines:
        return Panel("Your cart is empty", title=title, style="blue")

    table = Table(box=box.ROUNDED, header_style="bold blue", show_lines=True)
    table.add_column("Product", style="bold", width=30)
    table.add_column("Qty", justify="right", width=8)
    table.add_column("Price", justify="right", width=12)
    table.add_column("Subtotal", justify="right", width=12)

    for line in cart.lines:
        if not line.available:
            table.add_row(f"[red]Missing product: {line.name}[/red]", str(line.quantity), "-", "-")
            continue
        table.add_row(line.name, str(line.quantity), format_money(line.unit_price, settings=settings),
                      format_money(line.line_total, settings=settings))
    return Panel(table, title=title, border_style="blue")


def receipt_panel(receipt: Receipt, settings: Optional[Settings] = None) -> Panel:
    def money(amount):
        return format_money(amount, receipt.currency, settings)

    table = Table(box=box.SIMPLE, header_style="bold yellow")
    table.add_column("Product", width=30)
    table.add_column("Qty", justify="right", width=6)
    table.add_column("Line total", justify="right", width=12)
    for line in receipt.lines:
        table.add_row(line.name, str(line.quantity), money(line.line_total))
    table.add_row("Subtotal", "", money(receipt.subtotal))
    table.add_row("Tax", "", money(receipt.tax))
    table.add_row("[bold]Total[/bold]", "", f"[bold green]{money(receipt.total)}[/bold green]")
    return Panel(table, title=f"Order {receipt.id[:12]} - {receipt.email}", border_style="green")


# ---------------------------
# Printers
# ---------------------------
def show_products(products: List[Product], out: Optional[Console] = None, settings: Optional[Settings] = None):
    out = out or console
    if not products:
        out.print("[italic yellow]No products found[/italic yellow]")
        return
    out.print(products_table(products, settings))


def show_cart(cart: CartView, out: Optional[Console] = None, settings: Optional[Settings] = None):
    (out or console).print(cart_panel(cart, settings))


def show_receipt(receipt: Receipt, out: Optional[Console] = None, settings: Optional[Settings] = None):
    (out or console).print(receipt_panel(receipt, settings))
