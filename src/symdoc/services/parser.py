"""Extract a DocDetail for one symbol from a complete Sphinx page.

The extraction process:
1. Locate the signature and detail nodes (see locator.LOCATOR_STRATEGIES)
2. Normalise the signature text
3. Collect description paragraphs and Parameters/Returns field lists

Nothing here performs I/O; callers pass the full page HTML.
"""

import logging

from bs4 import BeautifulSoup

from symdoc.models import DocDetail, SymbolIdentity
from symdoc.services.fields import extract_description, extract_field_lists
from symdoc.services.locator import LocatedSymbol, locate_symbol
from symdoc.services.signature import normalize_signature
from symdoc.utils import log_with_correlation

LOGGER = logging.getLogger(__name__)


class DocDetailParser:
    """Parse symbol documentation out of generated reference pages.

    Pages vary across symbol kinds and Sphinx versions, so every missing
    structure degrades to an empty field instead of an error.

    Usage:
        parser = DocDetailParser()
        detail = parser.parse(html, item)
    """

    def parse(self, html: str, item: SymbolIdentity) -> DocDetail:
        """Extract the documentation of item from html.

        Args:
            html: Complete page HTML
            item: Identity of the requested symbol

        Returns:
            DocDetail; empty when nothing could be extracted
        """
        detail, _ = self.parse_with_strategy(html, item)
        return detail

    def parse_with_strategy(self, html: str, item: SymbolIdentity) -> tuple[DocDetail, str | None]:
        """Extract like parse, also reporting which locator strategy matched.

        Returns:
            (DocDetail, strategy name or None when no signature node was found)
        """
        if not html or not html.strip():
            return DocDetail(), None

        try:
            soup = BeautifulSoup(html, "html.parser")
            located = locate_symbol(soup, item.url)
            detail = self._extract(located, item)
        except Exception as e:
            log_with_correlation(
                LOGGER,
                logging.WARNING,
                f"Documentation extraction failed for {item.name}: {e}",
                symbol=item.name,
            )
            return DocDetail(), None

        if detail.is_empty:
            LOGGER.debug(f"No documentation data extracted for {item.name}")
        return detail, located.strategy

    def _extract(self, located: LocatedSymbol, item: SymbolIdentity) -> DocDetail:
        signature = None
        if located.signature_node is not None:
            signature = normalize_signature(located.signature_node.get_text(), item)

        parameters, returns = extract_field_lists(located.detail_node)
        return DocDetail(
            signature=signature,
            description=tuple(extract_description(located.detail_node)),
            parameters=tuple(parameters),
            returns=tuple(returns),
        )


def parse_doc_detail(html: str, item: SymbolIdentity) -> DocDetail:
    """Extract the documentation of item from html with a default parser."""
    return DocDetailParser().parse(html, item)
