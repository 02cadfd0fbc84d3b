"""Tests for description and field-list extraction."""

from bs4 import BeautifulSoup

from symdoc.models import FieldEntry
from symdoc.services.fields import extract_description, extract_field_lists, parse_field_definition


def _dd(html: str):
    return BeautifulSoup(f"<dd>{html}</dd>", "html.parser").dd


def _field_list(*sections: tuple[str, str]) -> str:
    body = "".join(f"<dt>{heading}<span class='colon'>:</span></dt><dd>{content}</dd>" for heading, content in sections)
    return f"<dl class='field-list simple'>{body}</dl>"


def _entries(*terms: str) -> str:
    return "<dl>" + "".join(terms) + "</dl>"


class TestExtractDescription:
    """Tests for extract_description."""

    def test_collects_paragraphs_in_order(self):
        """Test that direct paragraphs are returned in document order."""
        detail = _dd("<p>First  line\n continues.</p><p>Second.</p>")
        assert extract_description(detail) == ["First line continues.", "Second."]

    def test_stops_at_field_list(self):
        """Test that paragraphs after the first field list are not prose."""
        detail = _dd("<p>Intro.</p>" + _field_list(("Parameters", "")) + "<p>Examples follow.</p>")
        assert extract_description(detail) == ["Intro."]

    def test_skips_admonitions(self):
        """Test that note and warning boxes are left out."""
        detail = _dd(
            "<p>Before.</p><div class='admonition note'><p class='admonition-title'>Note</p><p>Aside.</p></div>"
            "<p>After.</p>"
        )
        assert extract_description(detail) == ["Before.", "After."]

    def test_direct_children_only(self):
        """Test that paragraphs nested in wrappers are ignored."""
        detail = _dd("<div class='versionchanged'><p>Changed in 1.20.</p></div><p>Kept.</p>")
        assert extract_description(detail) == ["Kept."]

    def test_drops_empty_paragraphs(self):
        """Test that whitespace-only paragraphs are skipped."""
        assert extract_description(_dd("<p> </p><p>Text</p><p>\n</p>")) == ["Text"]

    def test_none_detail(self):
        """Test that a missing detail node gives no description."""
        assert extract_description(None) == []


class TestParseFieldDefinition:
    """Tests for parse_field_definition."""

    def test_name_type_and_description(self):
        """Test a fully documented entry."""
        container = _dd(
            _entries("<dt><strong>start</strong><span class='classifier'>array_like</span></dt>"
                     "<dd><p>The starting value.</p></dd>")
        )
        assert parse_field_definition(container) == [
            FieldEntry(name="start", type="array_like", description="The starting value.")
        ]

    def test_multiple_classifiers_are_comma_joined(self):
        """Test that several classifier spans join with a comma."""
        container = _dd(
            _entries("<dt><strong>x</strong><span class='classifier'>int</span>"
                     "<span class='classifier'>optional</span></dt><dd>X.</dd>")
        )
        assert parse_field_definition(container)[0].type == "int, optional"

    def test_paragraphs_joined_with_spaces(self):
        """Test that multi-paragraph descriptions become one line."""
        container = _dd(_entries("<dt>step</dt><dd><p>Only returned if <em>retstep</em>.</p><p>Spacing.</p></dd>"))
        assert parse_field_definition(container)[0].description == "Only returned if retstep. Spacing."

    def test_raw_text_without_paragraphs(self):
        """Test the fallback to the whole content text."""
        container = _dd(_entries("<dt>out</dt><dd>  Alternate\n output array. </dd>"))
        entry = parse_field_definition(container)[0]
        assert entry.description == "Alternate output array."
        assert entry.type is None

    def test_missing_content_gives_no_description(self):
        """Test that a term without a following <dd> is still an entry."""
        container = _dd(_entries("<dt>a</dt><dt>b</dt><dd>B.</dd>"))
        assert parse_field_definition(container) == [
            FieldEntry(name="a"),
            FieldEntry(name="b", description="B."),
        ]

    def test_preserves_document_order(self):
        """Test that entries follow the order of their terms."""
        names = ["zeta", "alpha", "mu", "beta"]
        container = _dd(_entries(*(f"<dt>{name}</dt><dd>{name}.</dd>" for name in names)))
        assert [entry.name for entry in parse_field_definition(container)] == names

    def test_classifier_removal_leaves_source_untouched(self):
        """Test that the name is computed on a copy of the term."""
        container = _dd(_entries("<dt><strong>x</strong><span class='classifier'>int</span></dt><dd>X.</dd>"))
        parse_field_definition(container)
        assert container.select_one("span.classifier") is not None

    def test_no_nested_list(self):
        """Test content without a nested <dl>."""
        assert parse_field_definition(_dd("<p>Nothing itemised.</p>")) == []

    def test_none_container(self):
        """Test a missing container."""
        assert parse_field_definition(None) == []


class TestExtractFieldLists:
    """Tests for extract_field_lists."""

    def test_parameters_and_returns(self):
        """Test that Parameters and Returns sections are routed separately."""
        detail = _dd(
            _field_list(
                ("Parameters", _entries("<dt>a</dt><dd>A.</dd><dt>b</dt><dd>B.</dd>")),
                ("Returns", _entries("<dt>out</dt><dd>Out.</dd>")),
            )
        )
        parameters, returns = extract_field_lists(detail)
        assert [p.name for p in parameters] == ["a", "b"]
        assert [r.name for r in returns] == ["out"]

    def test_headings_are_case_insensitive(self):
        """Test that heading case varies across generator versions."""
        detail = _dd(_field_list(("PARAMETERS", _entries("<dt>a</dt><dd>A.</dd>"))))
        assert [p.name for p in extract_field_lists(detail)[0]] == ["a"]

    def test_other_headings_ignored(self):
        """Test that sections such as Raises are skipped."""
        detail = _dd(_field_list(("Raises", _entries("<dt>ValueError</dt><dd>Bad input.</dd>"))))
        assert extract_field_lists(detail) == ([], [])

    def test_nested_field_lists_are_found(self):
        """Test the deep search for field lists inside wrappers."""
        detail = _dd("<div class='wrapper'>" + _field_list(("Returns", _entries("<dt>out</dt><dd>O.</dd>"))) + "</div>")
        assert [r.name for r in extract_field_lists(detail)[1]] == ["out"]

    def test_concatenates_across_field_lists(self):
        """Test that several field-list blocks contribute in order."""
        detail = _dd(
            _field_list(("Parameters", _entries("<dt>a</dt><dd>A.</dd>")))
            + "<p>Between.</p>"
            + _field_list(("Parameters", _entries("<dt>b</dt><dd>B.</dd>")))
        )
        assert [p.name for p in extract_field_lists(detail)[0]] == ["a", "b"]

    def test_absent_field_lists(self):
        """Test that a body without field lists yields empty sequences."""
        assert extract_field_lists(_dd("<p>Just prose.</p>")) == ([], [])

    def test_none_detail(self):
        """Test a missing detail node."""
        assert extract_field_lists(None) == ([], [])
