"""Locate the nodes that document one symbol inside a Sphinx page.

Locator Strategies
==================
Generated pages do not always carry the anchor a symbol's URL points at.
Locating is modelled as a registry of strategies tried in order; the first
one that returns a node wins.

To add a new strategy:
1. Create a function: _locate_<name>(soup, anchor) -> Tag | None
2. Register it in LOCATOR_STRATEGIES at the position it should be tried

Every strategy returns None when it does not apply, so the locator never
raises; a page nothing matches yields an empty LocatedSymbol.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from symdoc.utils import extract_fragment

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocatorStrategy:
    """Registration for one way of finding a symbol's signature node.

    Attributes:
        name: Short identifier (e.g., "fragment")
        description: When this strategy applies
        locate: Function returning the signature node, or None
    """

    name: str
    description: str
    locate: Callable[[BeautifulSoup, str | None], Tag | None]


@dataclass(frozen=True)
class LocatedSymbol:
    """Nodes found for a symbol.

    Attributes:
        signature_node: Element whose text is the declaration line
        detail_node: Element holding the prose and field lists
        strategy: Name of the strategy that matched, None if none did
    """

    signature_node: Tag | None = None
    detail_node: Tag | None = None
    strategy: str | None = None


def _locate_fragment(soup: BeautifulSoup, anchor: str | None) -> Tag | None:
    if not anchor:
        return None
    return soup.find(id=anchor)


def _locate_first_section(soup: BeautifulSoup, anchor: str | None) -> Tag | None:
    # Only pages addressed without a fragment are documented by their first section
    if anchor:
        return None
    return soup.find("section")


def _locate_first_python_definition(soup: BeautifulSoup, anchor: str | None) -> Tag | None:
    definitions = soup.select_one("dl.py")
    if definitions is None:
        return None
    return definitions.find("dt", recursive=False)


LOCATOR_STRATEGIES: list[LocatorStrategy] = [
    LocatorStrategy(
        name="fragment",
        description="Element whose id equals the URL fragment.",
        locate=_locate_fragment,
    ),
    LocatorStrategy(
        name="first_section",
        description="First <section> of a page addressed without a fragment.",
        locate=_locate_first_section,
    ),
    LocatorStrategy(
        name="first_python_definition",
        description="First <dt> of the first dl.py, for pages missing the expected anchor.",
        locate=_locate_first_python_definition,
    ),
]


def find_signature_node(soup: BeautifulSoup, anchor: str | None) -> tuple[Tag | None, str | None]:
    """Try each registered strategy in order.

    Args:
        soup: Parsed page
        anchor: URL fragment, or None

    Returns:
        The first node found and the name of the strategy that found it
    """
    for strategy in LOCATOR_STRATEGIES:
        node = strategy.locate(soup, anchor)
        if node is not None:
            LOGGER.debug(f"Located signature node using strategy: {strategy.name}")
            return node, strategy.name

    LOGGER.debug(f"No locator strategy matched anchor {anchor!r}")
    return None, None


def enclosing_definition(node: Tag) -> Tag | None:
    """Nearest <dl> containing node, including node itself."""
    if node.name == "dl":
        return node
    return node.find_parent("dl")


def find_detail_node(signature_node: Tag) -> Tag | None:
    """Find the <dd> that holds the body documenting signature_node."""
    sibling = signature_node.find_next_sibling()
    if sibling is not None and sibling.name == "dd":
        return sibling

    definition = enclosing_definition(signature_node)
    if definition is None:
        return None
    return definition.find("dd", recursive=False)


def locate_symbol(soup: BeautifulSoup, url: str) -> LocatedSymbol:
    """Locate the signature and detail nodes for the symbol at url.

    Args:
        soup: Parsed page
        url: Canonical symbol URL, possibly with a fragment

    Returns:
        LocatedSymbol; members are None where nothing was found
    """
    signature_node, strategy = find_signature_node(soup, extract_fragment(url))
    if signature_node is None:
        return LocatedSymbol()

    return LocatedSymbol(
        signature_node=signature_node,
        detail_node=find_detail_node(signature_node),
        strategy=strategy,
    )
