"""Tests for the in-memory symbol table."""

import pytest

from docinherit.doc_tag import DocTag
from docinherit.hierarchy_index import HierarchyIndex
from docinherit.method_symbol import MethodSymbol
from docinherit.type_symbol import TypeSymbol


@pytest.fixture
def index() -> HierarchyIndex:
    """Fixture providing a small exception hierarchy and a generic type."""
    types = [
        TypeSymbol("java.lang.Exception", "Exception", "class"),
        TypeSymbol(
            "java.io.IOException", "IOException", "class", "java.lang.Exception"
        ),
        TypeSymbol(
            "java.io.FileNotFoundException",
            "FileNotFoundException",
            "class",
            "java.io.IOException",
        ),
        TypeSymbol("a.Marker", "Marker", "interface"),
        TypeSymbol("a.Tagged", "Tagged", "class", "java.lang.Exception", ("a.Marker",)),
        TypeSymbol("a.Base", "Base", "class", type_parameters=("X",)),
        TypeSymbol("a.Mid", "Mid", "class", "a.Base", type_arguments={"X": "Y"}),
        TypeSymbol(
            "a.Sub",
            "Sub",
            "class",
            "a.Mid",
            type_arguments={"Y": "java.io.IOException"},
        ),
        TypeSymbol("b.Dup", "Dup", "class"),
        TypeSymbol("c.Dup", "Dup", "class"),
    ]
    methods = [
        MethodSymbol("a.Base#read()", "read", "method", "a.Base", ("X",)),
    ]
    return HierarchyIndex({t.uid: t for t in types}, {m.uid: m for m in methods})


def test_resolve_type(index: HierarchyIndex) -> None:
    """Verify resolution by uid and by unique simple name."""
    t = index.resolve_type("IOException")
    assert t is not None
    assert t.uid == "java.io.IOException"
    assert index.resolve_type("Dup") is None  # ambiguous
    assert index.resolve_type("Missing") is None


def test_is_same_type(index: HierarchyIndex) -> None:
    """Verify same-type checks with textual fallback."""
    assert index.is_same_type("IOException", "java.io.IOException")
    assert not index.is_same_type("IOException", "java.lang.Exception")
    assert index.is_same_type("X", "X")
    assert not index.is_same_type("X", "java.io.IOException")


def test_is_subtype(index: HierarchyIndex) -> None:
    """Verify transitive subtype checks through classes and interfaces."""
    assert index.is_subtype("java.io.FileNotFoundException", "java.lang.Exception")
    assert index.is_subtype("java.io.IOException", "java.io.IOException")
    assert index.is_subtype("a.Tagged", "a.Marker")
    assert not index.is_subtype("java.lang.Exception", "java.io.IOException")
    assert not index.is_subtype("Unknown", "java.lang.Exception")


def test_instantiated_thrown_types(index: HierarchyIndex) -> None:
    """Verify that type variables are bound through chained bindings."""
    m = index.uid_to_method["a.Base#read()"]
    assert index.declared_thrown_types(m) == ["X"]
    assert index.instantiated_thrown_types("a.Sub", m) == ["java.io.IOException"]
    assert index.instantiated_thrown_types(None, m) == ["X"]


def test_resolve_exception_symbol(index: HierarchyIndex) -> None:
    """Verify that exception tags resolve to types or type variables."""
    m = index.uid_to_method["a.Base#read()"]
    tv = index.resolve_exception_symbol(m, DocTag("throws", "X"))
    assert tv is not None
    assert tv.kind == "typevar"
    assert index.fully_qualified_name(tv) == "X"
    io = index.resolve_exception_symbol(m, DocTag("throws", "IOException"))
    assert io is not None
    assert index.fully_qualified_name(io) == "java.io.IOException"
    assert index.simple_name(io) == "IOException"
    assert index.resolve_exception_symbol(m, DocTag("throws", "Nope")) is None
