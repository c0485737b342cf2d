"""Inheritance of @see documentation."""

from dataclasses import dataclass

from docinherit.comment_helper import first_sentence, reference, see_tags
from docinherit.doc_finder import DocFinder
from docinherit.doc_tag import ContentNode, DocTag
from docinherit.is_method_kind import is_method_kind
from docinherit.method_symbol import MethodSymbol
from docinherit.search_result import SearchResult


@dataclass(frozen=True)
class SeeInheritance:
    """The see tag inherited from an ancestor, with its referenced content."""

    method: MethodSymbol
    tag: DocTag
    content: list[ContentNode]


def _extract(method: MethodSymbol) -> SearchResult | None:
    tags = see_tags(method)
    if not tags:
        return None
    return SearchResult(tuple(tags), method)


def resolve_reference_inheritance(
    method: MethodSymbol,
    finder: DocFinder,
    *,
    first_sentence_only: bool = False,
) -> SeeInheritance | None:
    """Find the see documentation `method` inherits from its nearest ancestor.

    Only the first see tag of that ancestor is inherited.
    """
    result = finder.search(method, _extract, include_self=False)
    if result is None:
        return None
    tag = result.tags[0]
    content = reference(tag) or []
    if first_sentence_only:
        content = first_sentence(content)
    return SeeInheritance(result.method, tag, content)


def resolve_reference_tags_for_display(
    method: MethodSymbol, finder: DocFinder
) -> tuple[MethodSymbol, list[DocTag]]:
    """Return the see tags to display for `method` and the method owning them.

    Methods without see tags show those of their nearest documented ancestor.
    Constructors never inherit.
    """
    tags = see_tags(method)
    if tags or not is_method_kind(method.kind):
        return method, tags
    result = finder.search(method, _extract, include_self=False)
    if result is None:
        return method, tags
    return result.method, list(result.tags)
