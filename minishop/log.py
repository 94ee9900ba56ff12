# minishop/log.py
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import settings


def configure_logging(level: Optional[str] = None, console: Optional[Console] = None) -> None:
    """Route minishop's log records to a rich console handler."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(name)s | %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )
