"""Data models for documentation tags and their content nodes."""

from dataclasses import dataclass, field

THROWS_KINDS = frozenset({"throws", "exception"})


@dataclass(frozen=True)
class TextNode:
    """Plain text inside a tag description."""

    text: str


@dataclass(frozen=True)
class LinkNode:
    """An inline link to another symbol."""

    signature: str
    label: str = ""


@dataclass(frozen=True)
class InheritDocNode:
    """Placeholder meaning "copy content from the nearest ancestor here"."""


ContentNode = TextNode | LinkNode | InheritDocNode


@dataclass(frozen=True)
class DocTag:
    """Represents one block tag of a documentation comment."""

    kind: str  # see/throws/exception/param/return/...
    name: str = ""  # exception name for throws tags, signature for see tags
    description: tuple[ContentNode, ...] = field(default_factory=tuple)
    location: str = ""  # e.g. "Base.java:12", used for diagnostics

    @property
    def is_throws(self) -> bool:
        """Whether this is a @throws or @exception tag."""
        return self.kind in THROWS_KINDS
