"""Tests for the documentation search engine."""

import pytest

from docinherit.doc_finder import DocFinder, NoOverriddenMethods
from docinherit.hierarchy_index import HierarchyIndex
from docinherit.method_symbol import MethodSymbol


def create_method(
    uid: str, overrides: str | None = None, implements: tuple[str, ...] = ()
) -> MethodSymbol:
    """Create a MethodSymbol for testing."""
    return MethodSymbol(
        uid=uid,
        name="run",
        kind="method",
        owner=uid.split("#")[0],
        overrides=overrides,
        implements=implements,
    )


@pytest.fixture
def finder() -> DocFinder:
    """Fixture providing a finder over M -> S, M implements I."""
    methods = [
        create_method("M#run", overrides="S#run", implements=("I#run",)),
        create_method("S#run"),
        create_method("I#run"),
        create_method("Lone#run"),
    ]
    return DocFinder(HierarchyIndex({}, {m.uid: m for m in methods}))


def test_search_includes_self_by_default(finder: DocFinder) -> None:
    """Verify that the starting method is checked first when included."""
    m = finder.symbol_table.uid_to_method["M#run"]
    assert finder.search(m, lambda c: c.uid) == "M#run"


def test_search_excluding_self(finder: DocFinder) -> None:
    """Verify that ancestor-only searches never examine the start method."""
    m = finder.symbol_table.uid_to_method["M#run"]
    visited: list[str] = []

    def criteria(c: MethodSymbol) -> str | None:
        visited.append(c.uid)
        return None

    assert finder.search(m, criteria, include_self=False) is None
    assert visited == ["S#run", "I#run"]


def test_search_stops_at_first_match(finder: DocFinder) -> None:
    """Verify that the closest matching ancestor wins."""
    m = finder.symbol_table.uid_to_method["M#run"]
    visited: list[str] = []

    def criteria(c: MethodSymbol) -> str | None:
        visited.append(c.uid)
        return c.uid if c.uid != "M#run" else None

    assert finder.search(m, criteria) == "S#run"
    assert visited == ["M#run", "S#run"]


def test_search_require_override_without_ancestors(finder: DocFinder) -> None:
    """Verify that a method overriding nothing raises NoOverriddenMethods."""
    m = finder.symbol_table.uid_to_method["Lone#run"]
    with pytest.raises(NoOverriddenMethods):
        finder.search_require_override(m, lambda c: c.uid)


def test_search_require_override_no_match(finder: DocFinder) -> None:
    """Verify that overriding methods with no match yield None, not an error."""
    m = finder.symbol_table.uid_to_method["M#run"]
    assert finder.search_require_override(m, lambda c: None) is None


def test_search_require_override_skips_self(finder: DocFinder) -> None:
    """Verify that the override-requiring search looks at ancestors only."""
    m = finder.symbol_table.uid_to_method["M#run"]
    assert finder.search_require_override(m, lambda c: c.uid) == "S#run"


def test_search_never_fails_without_ancestors(finder: DocFinder) -> None:
    """Verify that the plain search returns None rather than raising."""
    m = finder.symbol_table.uid_to_method["Lone#run"]
    assert finder.search(m, lambda c: None, include_self=False) is None
