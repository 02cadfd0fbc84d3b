"""Extract symbol documentation from Sphinx reference pages as Markdown."""

from symdoc.models import ALLOWED_ROLES, DocDetail, FieldEntry, SymbolIdentity
from symdoc.services import (
    DocDetailParser,
    MarkdownRenderer,
    build_markdown,
    enhance_signature,
    normalize_signature,
    parse_doc_detail,
)

__version__ = "0.1.0"

__all__ = [
    "ALLOWED_ROLES",
    "DocDetail",
    "DocDetailParser",
    "FieldEntry",
    "MarkdownRenderer",
    "SymbolIdentity",
    "build_markdown",
    "enhance_signature",
    "normalize_signature",
    "parse_doc_detail",
]
