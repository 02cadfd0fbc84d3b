"""Render extracted documentation as Markdown.

The section order, heading text, fence language and citation line form the
output contract consumers match against:

    ```python
    def numpy.linspace(start: array_like, ...) -> ndarray:
    ```

    Return evenly spaced numbers over a specified interval.

    ## Parameters

    **start** : *array_like*
    > The starting value of the sequence.

    ## Returns

    **samples** : *ndarray*
    > There are `num` equally spaced samples.

    Source: [linspace](https://numpy.org/doc/stable/...#numpy.linspace)
"""

from collections.abc import Sequence

from symdoc.models import DocDetail, FieldEntry, SymbolIdentity
from symdoc.services.signature import enhance_signature

FENCE_LANGUAGE = "python"
PARAMETERS_HEADING = "## Parameters"
RETURNS_HEADING = "## Returns"


def format_field_entry(entry: FieldEntry) -> list[str]:
    """Lines for one entry: bold name and italic type, quoted description, blank separator."""
    first_line = f"**{entry.name}**"
    if entry.type:
        first_line += f" : *{entry.type}*"

    lines = [first_line]
    if entry.description:
        lines.append(f"> {entry.description}")
    lines.append("")
    return lines


def _field_section(heading: str, entries: Sequence[FieldEntry]) -> list[str]:
    if not entries:
        return []

    lines = [heading, ""]
    for entry in entries:
        lines.extend(format_field_entry(entry))
    lines.append("")
    return lines


class MarkdownRenderer:
    """Render a (SymbolIdentity, DocDetail) pair to one Markdown document.

    Rendering is deterministic; the same inputs always give the same string.

    Usage:
        renderer = MarkdownRenderer()
        markdown = renderer.render(item, detail)
    """

    def render(self, item: SymbolIdentity, detail: DocDetail) -> str:
        """Render the fixed section sequence, ending with the citation line.

        Args:
            item: Identity of the documented symbol
            detail: Extracted documentation, possibly empty

        Returns:
            Markdown trimmed of leading and trailing blank lines
        """
        lines: list[str] = []
        lines.extend(self._signature_block(detail))

        if detail.description:
            lines.append("\n\n".join(detail.description))
            lines.append("")

        lines.extend(_field_section(PARAMETERS_HEADING, detail.parameters))
        lines.extend(_field_section(RETURNS_HEADING, detail.returns))
        lines.append(self.citation(item))

        return "\n".join(lines).strip()

    def citation(self, item: SymbolIdentity) -> str:
        """Link back to the canonical page, labelled with the short name."""
        return f"Source: [{item.short_name}]({item.url})"

    def _signature_block(self, detail: DocDetail) -> list[str]:
        if not detail.signature:
            return []

        declaration = enhance_signature(detail.signature, detail.parameters, detail.returns)
        return [f"```{FENCE_LANGUAGE}", declaration, "```", ""]


def build_markdown(item: SymbolIdentity, detail: DocDetail) -> str:
    """Render detail for item with a default MarkdownRenderer."""
    return MarkdownRenderer().render(item, detail)
