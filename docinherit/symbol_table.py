"""Interface of the symbol table consumed by documentation inheritance."""

from collections.abc import Sequence
from typing import Protocol

from docinherit.doc_tag import DocTag
from docinherit.method_symbol import MethodSymbol
from docinherit.type_symbol import TypeSymbol


class SymbolTable(Protocol):
    """Type-system queries needed to resolve inherited documentation."""

    def overridden_method(self, method: MethodSymbol) -> MethodSymbol | None:
        """Return the single superclass method overridden by `method`, if any."""
        ...

    def implemented_methods(
        self, method: MethodSymbol, context: MethodSymbol | None
    ) -> Sequence[MethodSymbol]:
        """Return the interface methods `method` implements, in declaration order."""
        ...

    def is_same_type(self, t1: str, t2: str) -> bool:
        """Check whether two type names denote the same type."""
        ...

    def is_subtype(self, t1: str, t2: str) -> bool:
        """Check whether `t1` is a subtype of `t2`."""
        ...

    def declared_thrown_types(self, method: MethodSymbol) -> list[str]:
        """Return the thrown types exactly as declared."""
        ...

    def instantiated_thrown_types(
        self, context_type: str | None, method: MethodSymbol
    ) -> list[str]:
        """Return the thrown types as seen from `context_type`."""
        ...

    def resolve_exception_symbol(
        self, method: MethodSymbol, tag: DocTag
    ) -> TypeSymbol | None:
        """Resolve the exception named by a throws tag on `method`."""
        ...

    def resolve_type(self, type_name: str) -> TypeSymbol | None:
        """Resolve a type name to its declaration."""
        ...

    def fully_qualified_name(self, element: TypeSymbol) -> str:
        """Return the fully-qualified name of a type."""
        ...

    def simple_name(self, element: TypeSymbol) -> str:
        """Return the simple name of a type."""
        ...
