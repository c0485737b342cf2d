"""In-memory symbol table over uid-indexed types and methods."""

from collections.abc import Sequence

from docinherit.comment_helper import exception_name
from docinherit.doc_tag import DocTag
from docinherit.method_symbol import MethodSymbol
from docinherit.type_symbol import TypeSymbol


class HierarchyIndex:
    """Answers override, subtype and exception lookups for loaded symbols."""

    def __init__(
        self,
        uid_to_type: dict[str, TypeSymbol],
        uid_to_method: dict[str, MethodSymbol],
    ) -> None:
        """Initialize the index and its simple-name lookup table."""
        self.uid_to_type = uid_to_type
        self.uid_to_method = uid_to_method
        self.simple_names: dict[str, list[str]] = {}
        for uid, t in uid_to_type.items():
            self.simple_names.setdefault(t.name, []).append(uid)

    def overridden_method(self, method: MethodSymbol) -> MethodSymbol | None:
        """Return the superclass method overridden by `method`."""
        if not method.overrides:
            return None
        return self.uid_to_method.get(method.overrides)

    def implemented_methods(
        self, method: MethodSymbol, context: MethodSymbol | None = None
    ) -> Sequence[MethodSymbol]:
        """Return interface methods implemented by `method`, in declaration order."""
        del context  # implementations are recorded per method
        return [
            self.uid_to_method[uid]
            for uid in method.implements
            if uid in self.uid_to_method
        ]

    def resolve_type(self, type_name: str) -> TypeSymbol | None:
        """Resolve a type name by uid, falling back to a unique simple name."""
        t = self.uid_to_type.get(type_name)
        if t:
            return t
        candidates = self.simple_names.get(type_name.split(".")[-1], [])
        if len(candidates) == 1:
            return self.uid_to_type[candidates[0]]
        return None

    def is_same_type(self, t1: str, t2: str) -> bool:
        """Check whether two type names denote the same type."""
        a = self.resolve_type(t1)
        b = self.resolve_type(t2)
        if a is None or b is None:
            return t1 == t2
        return a.uid == b.uid

    def is_subtype(self, t1: str, t2: str) -> bool:
        """Check whether `t1` is `t2` or transitively extends/implements it."""
        current = self.resolve_type(t1)
        target = self.resolve_type(t2)
        if current is None or target is None:
            return t1 == t2
        pending = [current]
        seen: set[str] = set()
        while pending:
            t = pending.pop()
            if t.uid == target.uid:
                return True
            if t.uid in seen:
                continue
            seen.add(t.uid)
            for parent in [t.superclass, *t.interfaces]:
                p = self.resolve_type(parent) if parent else None
                if p is not None:
                    pending.append(p)
        return False

    def declared_thrown_types(self, method: MethodSymbol) -> list[str]:
        """Return the thrown types exactly as declared by `method`."""
        return list(method.thrown_types)

    def instantiated_thrown_types(
        self, context_type: str | None, method: MethodSymbol
    ) -> list[str]:
        """Return `method`'s thrown types with type variables bound in context."""
        bindings = self.type_bindings(context_type or method.owner)
        out = []
        for name in method.thrown_types:
            seen = set()
            # Bindings may chain through intermediate type variables.
            while name in bindings and name not in seen:
                seen.add(name)
                name = bindings[name]
            out.append(name)
        return out

    def type_bindings(self, type_uid: str) -> dict[str, str]:
        """Collect type-variable bindings visible from a type and its ancestors.

        Bindings declared closer to `type_uid` win over those further up.
        """
        bindings: dict[str, str] = {}
        pending = [type_uid]
        seen: set[str] = set()
        while pending:
            uid = pending.pop(0)
            if uid in seen:
                continue
            seen.add(uid)
            t = self.uid_to_type.get(uid)
            if t is None:
                continue
            for var, bound in t.type_arguments.items():
                bindings.setdefault(var, bound)
            pending.extend(p for p in [t.superclass, *t.interfaces] if p)
        return bindings

    def resolve_exception_symbol(
        self, method: MethodSymbol, tag: DocTag
    ) -> TypeSymbol | None:
        """Resolve the exception named by a throws tag.

        Type variables declared by the owning type resolve to a typevar symbol
        named after the variable.
        """
        name = exception_name(tag)
        owner = self.uid_to_type.get(method.owner)
        if owner and name in owner.type_parameters:
            return TypeSymbol(uid=name, name=name, kind="typevar")
        return self.resolve_type(name)

    def fully_qualified_name(self, element: TypeSymbol) -> str:
        """Return the fully-qualified name of a type."""
        return element.uid

    def simple_name(self, element: TypeSymbol) -> str:
        """Return the simple name of a type."""
        return element.name
