"""Prose and field-list extraction from a symbol's detail node.

numpydoc renders a symbol body as a <dd> holding paragraphs, optional
admonitions, and one or more field lists:

    <dd>
      <p>Return evenly spaced numbers over a specified interval.</p>
      <dl class="field-list">
        <dt class="field-odd">Parameters<span class="colon">:</span></dt>
        <dd class="field-odd">
          <dl>
            <dt><strong>start</strong><span class="classifier">array_like</span></dt>
            <dd><p>The starting value of the sequence.</p></dd>
          </dl>
        </dd>
      </dl>
    </dd>
"""

import copy
from collections.abc import Iterator
from itertools import takewhile

from bs4 import Tag

from symdoc.models import FieldEntry
from symdoc.utils import normalize_whitespace


def _has_class(node: Tag, name: str, css_class: str) -> bool:
    return node.name == name and css_class in (node.get("class") or [])


def _is_field_list(node: Tag) -> bool:
    return _has_class(node, "dl", "field-list")


def _is_admonition(node: Tag) -> bool:
    return _has_class(node, "div", "admonition")


def _element_children(node: Tag) -> Iterator[Tag]:
    return (child for child in node.children if isinstance(child, Tag))


def _next_dd(term: Tag) -> Tag | None:
    sibling = term.find_next_sibling()
    if sibling is not None and sibling.name == "dd":
        return sibling
    return None


def extract_description(detail_node: Tag | None) -> list[str]:
    """
    Collect the prose paragraphs of a detail node.

    Only direct children are considered. Everything from the first field list
    onward belongs to parameters/returns, and admonitions are not part of the
    description.

    Args:
        detail_node: The symbol's <dd>, or None.

    Returns:
        Normalised paragraph texts in document order.
    """
    if detail_node is None:
        return []

    prose = takewhile(lambda child: not _is_field_list(child), _element_children(detail_node))
    paragraphs = (child for child in prose if not _is_admonition(child) and child.name == "p")
    texts = (normalize_whitespace(paragraph.get_text()) for paragraph in paragraphs)
    return [text for text in texts if text]


def _entry_from_term(term: Tag) -> FieldEntry:
    classifiers = [normalize_whitespace(span.get_text()) for span in term.select("span.classifier")]

    name_node = copy.copy(term)
    for span in name_node.select("span.classifier"):
        span.decompose()

    description_node = _next_dd(term)
    description = None
    if description_node is not None:
        paragraphs = [normalize_whitespace(p.get_text()) for p in description_node.find_all("p")]
        paragraphs = [text for text in paragraphs if text]
        description = " ".join(paragraphs) if paragraphs else normalize_whitespace(description_node.get_text())

    return FieldEntry(
        name=normalize_whitespace(name_node.get_text()),
        type=", ".join(text for text in classifiers if text) or None,
        description=description or None,
    )


def parse_field_definition(container: Tag | None) -> list[FieldEntry]:
    """
    Parse the itemised entries of one field-list body.

    Args:
        container: The <dd> paired with a "Parameters" or "Returns" term.

    Returns:
        One FieldEntry per term of the first nested <dl>, in document order.
    """
    if container is None:
        return []

    inner = container.find("dl")
    if inner is None:
        return []

    return [_entry_from_term(term) for term in inner.find_all("dt", recursive=False)]


def _heading(term: Tag) -> str:
    text = normalize_whitespace(term.get_text())
    return text.removesuffix(":").lower()


def _field_sections(field_list: Tag) -> Iterator[tuple[str, Tag | None]]:
    """Pair each direct <dt> heading with the <dd> at the same position."""
    terms = field_list.find_all("dt", recursive=False)
    bodies = field_list.find_all("dd", recursive=False)
    for index, term in enumerate(terms):
        yield _heading(term), bodies[index] if index < len(bodies) else None


def extract_field_lists(detail_node: Tag | None) -> tuple[list[FieldEntry], list[FieldEntry]]:
    """
    Collect parameter and return entries from every field list in a detail node.

    Field lists are searched at any depth. Headings other than "Parameters"
    and "Returns" (e.g. "Raises") are ignored.

    Args:
        detail_node: The symbol's <dd>, or None.

    Returns:
        (parameters, returns), each concatenated across field lists.
    """
    if detail_node is None:
        return [], []

    sections = [
        section
        for field_list in detail_node.select("dl.field-list")
        for section in _field_sections(field_list)
    ]
    return _entries_under(sections, "parameters"), _entries_under(sections, "returns")


def _entries_under(sections: list[tuple[str, Tag | None]], heading: str) -> list[FieldEntry]:
    return [entry for title, body in sections if title == heading for entry in parse_field_definition(body)]
