"""Service layer for symdoc.

This module provides the extraction pipeline:
- DocDetailParser: locate a symbol in a page and extract its DocDetail
- MarkdownRenderer: render a DocDetail as the canonical Markdown document
- enhance_signature: type-annotated declaration for display
"""

from symdoc.services.parser import DocDetailParser, parse_doc_detail
from symdoc.services.renderer import MarkdownRenderer, build_markdown
from symdoc.services.signature import enhance_signature, normalize_signature

__all__ = [
    "DocDetailParser",
    "MarkdownRenderer",
    "build_markdown",
    "enhance_signature",
    "normalize_signature",
    "parse_doc_detail",
]
