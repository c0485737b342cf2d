"""Tests for the ancestor walker."""

from unittest.mock import MagicMock

from docinherit.ancestor_walker import AncestorWalker
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


def build_index(*methods: MethodSymbol) -> HierarchyIndex:
    """Index methods without any types."""
    return HierarchyIndex({}, {m.uid: m for m in methods})


def walk(index: HierarchyIndex, uid: str) -> list[str]:
    """Return the uids yielded by a walker started at `uid`."""
    walker = AncestorWalker(
        index.uid_to_method[uid], index.overridden_method, index.implemented_methods
    )
    return [m.uid for m in walker]


def test_superclass_chain_before_own_interfaces() -> None:
    """Verify that m -> S(I3), I1, I2 is walked as S, I3, I1, I2."""
    index = build_index(
        create_method("M#run", overrides="S#run", implements=("I1#run", "I2#run")),
        create_method("S#run", implements=("I3#run",)),
        create_method("I1#run"),
        create_method("I2#run"),
        create_method("I3#run"),
    )
    assert walk(index, "M#run") == ["S#run", "I3#run", "I1#run", "I2#run"]


def test_interfaces_are_walked_depth_first() -> None:
    """Verify that an interface subtree is exhausted before its sibling."""
    index = build_index(
        create_method("M#run", implements=("I1#run", "I2#run")),
        create_method("I1#run", implements=("J1#run",)),
        create_method("J1#run", implements=("K1#run",)),
        create_method("K1#run"),
        create_method("I2#run", implements=("J2#run",)),
        create_method("J2#run"),
    )
    assert walk(index, "M#run") == [
        "I1#run",
        "J1#run",
        "K1#run",
        "I2#run",
        "J2#run",
    ]


def test_long_superclass_chain() -> None:
    """Verify that the whole superclass chain precedes any interface."""
    index = build_index(
        create_method("C#run", overrides="B#run", implements=("I#run",)),
        create_method("B#run", overrides="A#run"),
        create_method("A#run", implements=("J#run",)),
        create_method("I#run"),
        create_method("J#run"),
    )
    assert walk(index, "C#run") == ["B#run", "A#run", "J#run", "I#run"]


def test_no_ancestors_yields_nothing() -> None:
    """Verify that a method overriding nothing has no ancestors."""
    index = build_index(create_method("M#run"))
    walker = AncestorWalker(
        index.uid_to_method["M#run"],
        index.overridden_method,
        index.implemented_methods,
    )
    assert not walker.has_next()
    assert list(walker) == []


def test_never_yields_start_or_duplicates() -> None:
    """Verify that an interface reachable along two paths is yielded once."""
    index = build_index(
        create_method("M#run", implements=("I1#run", "I2#run")),
        create_method("I1#run", implements=("J#run",)),
        create_method("I2#run", implements=("J#run",)),
        create_method("J#run"),
    )
    result = walk(index, "M#run")
    assert result == ["I1#run", "J#run", "I2#run"]
    assert "M#run" not in result


def test_interface_lookup_is_lazy() -> None:
    """Verify that interface methods are looked up only when needed."""
    index = build_index(
        create_method("M#run", overrides="S#run", implements=("I#run",)),
        create_method("S#run"),
        create_method("I#run"),
    )
    implemented = MagicMock(side_effect=index.implemented_methods)
    walker = AncestorWalker(
        index.uid_to_method["M#run"], index.overridden_method, implemented
    )
    # the superclass method is known without asking for interfaces
    assert implemented.call_count == 0
    assert [m.uid for m in walker] == ["S#run", "I#run"]
    looked_up = [c.args[0].uid for c in implemented.call_args_list]
    assert looked_up == ["S#run", "M#run", "I#run"]


def test_unknown_interface_uids_are_skipped() -> None:
    """Verify that implemented methods missing from the index are ignored."""
    index = build_index(create_method("M#run", implements=("Missing#run",)))
    assert walk(index, "M#run") == []


def test_superclass_reached_twice_is_yielded_once() -> None:
    """Verify that a superclass method also reached via an interface is not repeated."""
    index = build_index(
        create_method("M#run", overrides="S#run", implements=("I#run",)),
        create_method("S#run"),
        create_method("I#run", overrides="S#run"),
    )
    assert walk(index, "M#run") == ["S#run", "I#run"]
