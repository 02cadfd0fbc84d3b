"""Command-line interface for symdoc.

Commands are organized into modules by functionality:

- render: render and inspect a symbol from a locally saved HTML page
"""

# Import command modules to register them with the app
from symdoc.cli import render  # noqa: F401
from symdoc.cli._common import app

__all__ = ["app"]
