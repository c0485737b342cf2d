"""Search engine for documentation inherited through the override hierarchy."""

import logging
from collections.abc import Callable
from typing import TypeVar

from docinherit.ancestor_walker import AncestorWalker
from docinherit.method_symbol import MethodSymbol
from docinherit.symbol_table import SymbolTable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NoOverriddenMethods(Exception):
    """Raised when a method neither overrides nor implements anything."""


class DocFinder:
    """Finds the nearest method in a hierarchy that satisfies a criteria.

    A criteria maps a candidate method to a payload, or to None when the
    candidate does not match. Candidates are tried in order of decreasing
    priority and the first match wins.
    """

    def __init__(self, symbol_table: SymbolTable) -> None:
        """Initialize the finder with the symbol table used for lookups."""
        self.symbol_table = symbol_table

    def ancestors(self, method: MethodSymbol) -> AncestorWalker:
        """Return a fresh iterator over the ancestors of `method`."""
        return AncestorWalker(
            method,
            self.symbol_table.overridden_method,
            self.symbol_table.implemented_methods,
        )

    def search(
        self,
        method: MethodSymbol,
        criteria: Callable[[MethodSymbol], T | None],
        *,
        include_self: bool = True,
    ) -> T | None:
        """Return the first payload produced by `criteria`, or None."""
        return self._search(method, criteria, include_self=include_self)

    def search_require_override(
        self,
        method: MethodSymbol,
        criteria: Callable[[MethodSymbol], T | None],
    ) -> T | None:
        """Search ancestors only, failing if there are none.

        Raises NoOverriddenMethods when `method` does not override or implement
        anything, which is distinct from a None result (nothing matched).
        """
        return self._search(
            method, criteria, include_self=False, require_override=True
        )

    def _search(
        self,
        method: MethodSymbol,
        criteria: Callable[[MethodSymbol], T | None],
        *,
        include_self: bool,
        require_override: bool = False,
    ) -> T | None:
        # Checked before the method itself is examined.
        walker = self.ancestors(method)
        if require_override and not walker.has_next():
            raise NoOverriddenMethods(method.uid)
        if include_self:
            r = criteria(method)
            if r is not None:
                return r
        for ancestor in walker:
            r = criteria(ancestor)
            if r is not None:
                logger.debug("Resolved %s from ancestor %s", method.uid, ancestor.uid)
                return r
        return None
