"""Predicates for checking executable member kinds."""


def is_method_kind(kind: str) -> bool:
    """Check if the kind represents a method (which can inherit docs)."""
    return kind.lower() == "method"


def is_constructor_kind(kind: str) -> bool:
    """Check if the kind represents a constructor."""
    return kind.lower() == "constructor"
