"""Lazy traversal of the methods overridden or implemented by a method."""

from collections.abc import Callable, Iterator, Sequence

from docinherit.method_symbol import MethodSymbol

OverriddenLookup = Callable[[MethodSymbol], MethodSymbol | None]
ImplementedLookup = Callable[
    [MethodSymbol, MethodSymbol | None], Sequence[MethodSymbol]
]


class _ImplementedMethodsCursor:
    """Iterates the interface methods of one method, looked up on first use."""

    def __init__(
        self,
        method: MethodSymbol,
        lookup: ImplementedLookup,
        context: Callable[[], MethodSymbol | None],
    ) -> None:
        self.method = method
        self._lookup = lookup
        self._context = context
        self._iterator: Iterator[MethodSymbol] | None = None
        self._peeked: MethodSymbol | None = None

    def _ensure(self) -> Iterator[MethodSymbol]:
        if self._iterator is None:
            self._iterator = iter(self._lookup(self.method, self._context()))
        return self._iterator

    def has_next(self) -> bool:
        if self._peeked is None:
            self._peeked = next(self._ensure(), None)
        return self._peeked is not None

    def pop(self) -> MethodSymbol:
        self.has_next()
        m, self._peeked = self._peeked, None
        if m is None:
            raise StopIteration
        return m


class AncestorWalker:
    """Iterates ancestor methods in documentation-inheritance order.

    The superclass chain is followed first; when it ends, implemented interface
    methods are explored depth-first, resuming at the most recently entered
    method that still has unvisited interface methods. The starting method is
    never yielded. The override relation must be acyclic.
    """

    def __init__(
        self,
        method: MethodSymbol,
        overridden_method: OverriddenLookup,
        implemented_methods: ImplementedLookup,
    ) -> None:
        """Initialize the walker and position it on the first ancestor."""
        self._overridden_method = overridden_method
        self._implemented_methods = implemented_methods
        self._path: list[_ImplementedMethodsCursor] = []
        self._visited: set[str] = {method.uid}
        self._next: MethodSymbol | None = method
        self._advance()

    def __iter__(self) -> "AncestorWalker":
        return self

    def __next__(self) -> MethodSymbol:
        if self._next is None:
            raise StopIteration
        current = self._next
        self._advance()
        return current

    def has_next(self) -> bool:
        """Check whether at least one more ancestor remains."""
        return self._next is not None

    def _advance(self) -> None:
        current = self._next
        if current is None:
            return
        super_method = self._overridden_method(current)
        self._path.append(
            _ImplementedMethodsCursor(
                current, self._implemented_methods, lambda: self._next
            )
        )
        if super_method is not None and super_method.uid not in self._visited:
            self._visit(super_method)
            return
        while self._path:
            cursor = self._path[-1]
            if not cursor.has_next():
                self._path.pop()
                continue
            candidate = cursor.pop()
            # ancestors reachable along several paths are visited once
            if candidate.uid not in self._visited:
                self._visit(candidate)
                return
        self._next = None  # end of hierarchy

    def _visit(self, method: MethodSymbol) -> None:
        self._visited.add(method.uid)
        self._next = method
