"""Signature cleanup and type-annotated declaration synthesis."""

import re
from collections.abc import Sequence

from symdoc.models import FieldEntry, SymbolIdentity
from symdoc.utils import normalize_whitespace

DECLARATION_KEYWORD = "def"

_TRAILING_GLYPH_RE = re.compile(r"[#¶]$")
_SOURCE_LABEL_RE = re.compile(r"\[source\]\s*$", re.IGNORECASE)
_SPACE_BEFORE_PAREN_RE = re.compile(r"\s+\(")
_CALL_SHAPE_RE = re.compile(r"^([^(]+)\((.*)\)\s*$")


def _strip_trailing_artifacts(signature: str) -> str:
    """Remove permalink glyphs and "[source]" labels until neither trails."""
    previous = None
    while signature != previous:
        previous = signature
        signature = _SOURCE_LABEL_RE.sub("", signature).strip()
        signature = _TRAILING_GLYPH_RE.sub("", signature).strip()
    return signature


def _qualifier_breaks(name: str) -> list[tuple[str, str]]:
    """Every (qualifier, rest) pair whose join is a dotted tail of name, innermost split first."""
    parts = name.split(".")
    pairs = []
    for split in range(len(parts) - 1, 0, -1):
        rest = ".".join(parts[split:])
        pairs.extend((".".join(parts[start:split]), rest) for start in range(split))
    return pairs


def _join_qualifier_prefix(signature: str, item: SymbolIdentity) -> str:
    """Turn "numpy. linspace" or "ndarray. any" back into a dotted name."""
    for qualifier, rest in _qualifier_breaks(item.name):
        pattern = r"\b" + re.escape(qualifier) + r"\.\s+(?=" + re.escape(rest) + r"(?!\w))"
        signature = re.sub(pattern, f"{qualifier}.", signature)
    return signature


def _qualify(signature: str, item: SymbolIdentity) -> str:
    """Make sure the signature carries the fully-qualified name."""
    if item.name in signature:
        return signature
    if signature.startswith(item.short_name):
        return f"{item.name}{signature[len(item.short_name) :]}"
    if item.short_name not in signature:
        return f"{item.name} {signature}".strip()
    return signature


def normalize_signature(text: str, item: SymbolIdentity) -> str | None:
    """
    Derive a clean, fully-qualified signature from a signature node's text.

    Args:
        text: Full text content of the signature node.
        item: Identity of the symbol the node documents.

    Returns:
        Cleaned signature, or None when nothing is left after cleanup.
    """
    signature = normalize_whitespace(text)
    signature = _TRAILING_GLYPH_RE.sub("", signature)
    signature = _join_qualifier_prefix(signature, item)
    signature = _SPACE_BEFORE_PAREN_RE.sub("(", signature)
    signature = _strip_trailing_artifacts(signature)

    if not signature:
        return None
    return _qualify(signature, item)


def _find_entry(entries: Sequence[FieldEntry], name: str) -> FieldEntry | None:
    return next((entry for entry in entries if entry.name == name), None)


def _annotate(fragment: str, parameters: Sequence[FieldEntry]) -> str:
    name, has_default, default = fragment.partition("=")
    name = name.strip()
    default = default.strip() if has_default else ""

    entry = _find_entry(parameters, name)
    annotation = f": {entry.type}" if entry is not None and entry.type else ""

    if default:
        return f"{name}{annotation} = {default}"
    return f"{name}{annotation}"


def enhance_signature(
    signature: str,
    parameters: Sequence[FieldEntry],
    returns: Sequence[FieldEntry],
) -> str:
    """
    Rewrite a signature as a type-annotated declaration for display.

    Arguments are split on every comma with no bracket tracking, so a default
    such as ``(1, 2)`` comes out as two fragments. Callers needing the exact
    documented signature should use the unenhanced one.

    Args:
        signature: Normalised signature, e.g. ``pkg.fn(a, b=1)``.
        parameters: Parsed parameter entries supplying argument types.
        returns: Parsed return entries; the first one's type is used.

    Returns:
        Declaration such as ``def pkg.fn(a: int, b: int = 1) -> bool:``.
    """
    match = _CALL_SHAPE_RE.match(signature)
    if not match:
        return f"{DECLARATION_KEYWORD} {signature}:"

    name = match.group(1).strip()
    arguments = match.group(2).strip()

    fragments = [part.strip() for part in arguments.split(",") if part.strip()] if arguments else []
    enhanced = ", ".join(_annotate(fragment, parameters) for fragment in fragments)

    return_type = f" -> {returns[0].type}" if returns and returns[0].type else ""

    return f"{DECLARATION_KEYWORD} {name}({enhanced}){return_type}:"
