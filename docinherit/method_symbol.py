"""Data models for representing documented methods and constructors."""

from dataclasses import dataclass, field

from docinherit.doc_tag import DocTag


@dataclass(frozen=True)
class MethodSymbol:
    """Represents a declared method or constructor."""

    uid: str
    name: str
    kind: str  # method/constructor
    owner: str  # uid of the declaring type
    thrown_types: tuple[str, ...] = field(default_factory=tuple)
    tags: tuple[DocTag, ...] = field(default_factory=tuple)
    overrides: str | None = None  # superclass method uid
    implements: tuple[str, ...] = field(default_factory=tuple)  # interface method uids
    signature: str = ""
