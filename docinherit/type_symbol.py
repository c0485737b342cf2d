"""Data models for representing declared types."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TypeSymbol:
    """Represents a class, interface or type variable."""

    uid: str  # fully-qualified name; bare variable name for typevars
    name: str
    kind: str  # class/interface/typevar
    superclass: str | None = None
    interfaces: tuple[str, ...] = field(default_factory=tuple)
    type_parameters: tuple[str, ...] = field(default_factory=tuple)
    # Bindings of type variables declared by ancestors, e.g. {"X": "a.b.IOError"}
    type_arguments: dict[str, str] = field(default_factory=dict, hash=False)
