"""Data model for a single inherited exception tag."""

from dataclasses import dataclass, field

from docinherit.doc_tag import ContentNode, DocTag
from docinherit.method_symbol import MethodSymbol


@dataclass(frozen=True)
class ThrowsInheritance:
    """Outcome of resolving {@inheritDoc} for one exception tag.

    `tag` and `method` are None when no ancestor documents the exception.
    `overrides_something` is False when the method overrides nothing at all,
    so callers can skip inheritance-specific warnings.
    """

    tag: DocTag | None
    method: MethodSymbol | None
    description: tuple[ContentNode, ...] = field(default_factory=tuple)
    overrides_something: bool = True
