"""Common CLI utilities and the main app group."""

import logging
import os
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from symdoc.config import SymdocConfig
from symdoc.models import SymbolIdentity

console = Console(stderr=True)
_configured = False


def _load_env_file(env_path: Path | None = None) -> None:
    """
    Load SYMDOC_* settings from a .env file if it exists.

    Args:
        env_path: Optional path to .env file. If None, looks for .env in current directory.
    """
    if env_path is None:
        env_path = Path.cwd() / ".env"

    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        # Existing environment wins
        if key and key not in os.environ:
            os.environ[key] = value


_load_env_file()


def configure_logging(*, verbose: bool = False) -> None:
    """Configure logging with Rich handler. Call once at startup."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                tracebacks_show_locals=verbose,
            )
        ],
        force=True,
    )

    _configured = True


def build_identity(
    page: Path,
    name: str,
    config: SymdocConfig,
    short_name: str | None = None,
    role: str = "py:function",
    url: str | None = None,
) -> SymbolIdentity:
    """
    Resolve the identity of a symbol documented in a local page.

    Args:
        page: Local HTML file; its filename stands in for the page URL.
        name: Fully-qualified symbol name.
        config: Supplies the base URL and package prefix.
        short_name: Explicit short name; derived from name when None.
        role: Inventory role of the symbol.
        url: Page URL, absolute or relative to the base URL. Defaults to
            "<page filename>#<name>".

    Returns:
        Resolved SymbolIdentity.

    Raises:
        ValidationError: If name or role are invalid.
    """
    item = SymbolIdentity.from_inventory(
        name,
        role,
        url or f"{page.name}#$",
        base_url=config.base_url,
        package=config.package or None,
    )
    if short_name:
        item = item.model_copy(update={"short_name": short_name})
    return item


@click.group(help="Extract symbol documentation from Sphinx reference pages.")
def app() -> None:
    """
    Entry point for the symdoc CLI.

    Commands work on locally saved HTML pages and never touch the network.
    """
