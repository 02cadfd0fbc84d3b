"""Rendering commands for locally saved documentation pages."""

import logging
from collections.abc import Callable
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from symdoc.cli._common import app, build_identity, configure_logging
from symdoc.config import load_config
from symdoc.exceptions import SymdocError
from symdoc.models import ALLOWED_ROLES, DocDetail, SymbolIdentity
from symdoc.services.parser import DocDetailParser
from symdoc.services.renderer import MarkdownRenderer

LOGGER = logging.getLogger(__name__)

output_console = Console()


def symbol_options(command: Callable) -> Callable:
    """Options shared by every command that resolves a symbol in a page."""
    options = [
        click.argument(
            "page",
            type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
        ),
        click.option("--name", "-n", required=True, help="Fully-qualified symbol name (e.g., numpy.linspace)"),
        click.option(
            "--short-name",
            default=None,
            help="Short name for the citation line. Defaults to the name without the SYMDOC_PACKAGE prefix.",
        ),
        click.option(
            "--role",
            type=click.Choice(sorted(ALLOWED_ROLES)),
            default="py:function",
            show_default=True,
            help="Inventory role of the symbol",
        ),
        click.option(
            "--url",
            default=None,
            help="Canonical URL, absolute or relative to SYMDOC_BASE_URL. Defaults to <page filename>#<name>.",
        ),
        click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging"),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _load(
    page: Path,
    name: str,
    short_name: str | None,
    role: str,
    url: str | None,
) -> tuple[SymbolIdentity, str]:
    try:
        config = load_config()
        item = build_identity(page, name, config, short_name=short_name, role=role, url=url)
    except SymdocError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1) from e
    return item, page.read_text(encoding="utf-8")


@app.command("render", help="Render one symbol from a saved HTML page.")
@symbol_options
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["markdown", "json", "signature"], case_sensitive=False),
    default="markdown",
    show_default=True,
    help="markdown document, DocDetail as JSON, or the bare signature",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Output file. Prints to stdout when omitted.",
)
def render(
    page: Path,
    name: str,
    short_name: str | None,
    role: str,
    url: str | None,
    verbose: bool,
    output_format: str,
    output: Path | None,
) -> None:
    """Extract a symbol's documentation and print it."""
    configure_logging(verbose=verbose)
    item, html = _load(page, name, short_name, role, url)

    detail = DocDetailParser().parse(html, item)
    if detail.is_empty:
        LOGGER.warning(f"No documentation data extracted for {item.name} from {page}")

    output_format = output_format.lower()
    if output_format == "signature":
        if not detail.signature:
            click.echo(f"Error: no signature found for {item.name}", err=True)
            raise SystemExit(1)
        content = detail.signature
    elif output_format == "json":
        content = detail.model_dump_json(indent=2)
    else:
        content = MarkdownRenderer().render(item, detail)

    if output:
        output.write_text(content + "\n", encoding="utf-8")
        LOGGER.info(f"Saved {output_format} for {item.name} to {output}")
    else:
        click.echo(content)


def summary_table(item: SymbolIdentity, detail: DocDetail, strategy: str | None) -> Table:
    """Key facts about one extraction, for display."""
    table = Table(title=item.display_name, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Type", item.kind)
    table.add_row("Full name", item.name)
    table.add_row("URL", item.url)
    table.add_row("Located by", strategy or "-")
    table.add_row("Signature", detail.signature or "-")
    table.add_row("Description paragraphs", str(len(detail.description)))
    table.add_row("Parameters", str(len(detail.parameters)))
    table.add_row("Returns", str(len(detail.returns)))
    return table


@app.command("inspect", help="Summarise what can be extracted for a symbol.")
@symbol_options
def inspect_symbol(
    page: Path,
    name: str,
    short_name: str | None,
    role: str,
    url: str | None,
    verbose: bool,
) -> None:
    """Show which locator strategy matched and how much was extracted."""
    configure_logging(verbose=verbose)
    item, html = _load(page, name, short_name, role, url)

    detail, strategy = DocDetailParser().parse_with_strategy(html, item)
    output_console.print(summary_table(item, detail, strategy))
