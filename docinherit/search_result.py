"""Data models for documentation search results."""

from dataclasses import dataclass

from docinherit.doc_tag import DocTag
from docinherit.method_symbol import MethodSymbol


@dataclass(frozen=True)
class SearchResult:
    """Tags found on the nearest ancestor satisfying a search criteria."""

    tags: tuple[DocTag, ...]
    method: MethodSymbol
