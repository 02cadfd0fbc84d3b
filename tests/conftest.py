"""Pytest configuration and shared fixtures for symdoc tests."""

from pathlib import Path

import pytest

from symdoc.models import SymbolIdentity

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Pure logic tests with no I/O")
    config.addinivalue_line("markers", "integration: Tests reading fixture pages or driving the CLI")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Apply default markers to tests without explicit markers.

    Unmarked tests default to unit.
    """
    for item in items:
        marker_names = [m.name for m in item.iter_markers()]
        if any(m in marker_names for m in ("unit", "integration")):
            continue
        item.add_marker(pytest.mark.unit)


def load_fixture(name: str) -> str:
    """Read a saved documentation page from tests/fixtures."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def linspace_page() -> Path:
    """Path to the saved numpy.linspace page."""
    return FIXTURES_DIR / "numpy.linspace.html"


@pytest.fixture
def linspace_html(linspace_page: Path) -> str:
    """HTML of the numpy.linspace page."""
    return linspace_page.read_text(encoding="utf-8")


@pytest.fixture
def linspace_item() -> SymbolIdentity:
    """Identity of numpy.linspace."""
    return SymbolIdentity(
        name="numpy.linspace",
        short_name="linspace",
        role="py:function",
        url="https://numpy.org/doc/stable/reference/generated/numpy.linspace.html#numpy.linspace",
        display_name="numpy.linspace",
    )


@pytest.fixture
def ndarray_any_html() -> str:
    """HTML of the numpy.ndarray.any page."""
    return load_fixture("numpy.ndarray.any.html")


@pytest.fixture
def ndarray_any_item() -> SymbolIdentity:
    """Identity of numpy.ndarray.any."""
    return SymbolIdentity(
        name="numpy.ndarray.any",
        short_name="ndarray.any",
        role="py:method",
        url="https://numpy.org/doc/stable/reference/generated/numpy.ndarray.any.html#numpy.ndarray.any",
        display_name="numpy.ndarray.any",
    )


@pytest.fixture
def pkg_fn_item() -> SymbolIdentity:
    """Identity of a small synthetic function, pkg.fn."""
    return SymbolIdentity(
        name="pkg.fn",
        short_name="fn",
        role="py:function",
        url="https://docs.example.com/pkg.fn.html#pkg.fn",
        display_name="pkg.fn",
    )
