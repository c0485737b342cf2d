"""Inheritance and rendering of @throws documentation."""

import logging
from collections.abc import Sequence
from functools import partial

from docinherit.comment_helper import (
    description,
    exception_name,
    has_inherit_doc,
    is_inherit_doc_only,
    throws_tags,
)
from docinherit.diagnostic_report import (
    INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG,
    DiagnosticReport,
)
from docinherit.doc_finder import DocFinder, NoOverriddenMethods
from docinherit.doc_tag import ContentNode, DocTag, InheritDocNode
from docinherit.is_method_kind import is_method_kind
from docinherit.method_symbol import MethodSymbol
from docinherit.search_result import SearchResult
from docinherit.tag_writer import TagWriter
from docinherit.throws_inheritance import ThrowsInheritance

logger = logging.getLogger(__name__)

TagPairs = list[tuple[DocTag, MethodSymbol]]


class UnresolvedExceptionError(Exception):
    """Raised when an exception tag names a type that cannot be resolved."""


class ThrowsPolicy:
    """Resolves and renders the exceptions documented for a method.

    Exceptions are identified by the instantiated type name when the method's
    thrown types are substituted in the current context, else by the resolved
    fully-qualified name, else by the text written in the tag.
    """

    def __init__(
        self,
        finder: DocFinder,
        reporter: DiagnosticReport,
        writer: TagWriter,
        *,
        dedupe_within_call: bool = True,
    ) -> None:
        """Initialize the policy with its collaborators."""
        self.finder = finder
        self.symbols = finder.symbol_table
        self.reporter = reporter
        self.writer = writer
        self.dedupe_within_call = dedupe_within_call

    def inherit(self, method: MethodSymbol, tag: DocTag) -> ThrowsInheritance:
        """Find the nearest ancestor tag documenting the exception of `tag`.

        Raises UnresolvedExceptionError if the exception cannot be resolved.
        """
        symbol = self.symbols.resolve_exception_symbol(method, tag)
        if symbol is None:
            msg = f"Cannot resolve exception {exception_name(tag)!r} on {method.uid}"
            raise UnresolvedExceptionError(msg)
        return self._inherit(method, self.symbols.fully_qualified_name(symbol))

    def render(
        self,
        method: MethodSymbol,
        already_documented: set[str],
        context_type: str | None = None,
    ) -> list[str]:
        """Render all exception documentation for `method`.

        Identities of rendered exceptions are added to `already_documented`.
        """
        declared = self.symbols.declared_thrown_types(method)
        instantiated = self.symbols.instantiated_thrown_types(context_type, method)
        substitutions = self.substituted_thrown_types(declared, instantiated)

        own_tags = [(t, method) for t in throws_tags(method)]
        out = self._tags_output(own_tags, already_documented, substitutions)
        out += self._inherit_declared(
            method, declared, instantiated, already_documented, substitutions
        )
        out += self._link_undocumented(instantiated, already_documented)
        return out

    def substituted_thrown_types(
        self, declared: Sequence[str], instantiated: Sequence[str]
    ) -> dict[str, str]:
        """Map declared thrown type names to their instantiated replacements."""
        if list(declared) == list(instantiated):
            return {}
        return {
            d: i
            for d, i in zip(declared, instantiated, strict=False)
            if not self.symbols.is_same_type(d, i)
        }

    def flatten(self, tags: TagPairs, *, report: bool = True) -> TagPairs:
        """Expand tags consisting only of {@inheritDoc} into the ancestor tags.

        A single tag can stand for several tags of the ancestor it inherits
        from. Tags mixing {@inheritDoc} with other content are reported and
        dropped; they are reported only when `report` is set, so a tag found
        again through a descendant is not reported twice.
        """
        result: TagPairs = []
        for tag, holder in tags:
            result.extend(self._expand(tag, holder, report=report))
        return result

    def _expand(
        self, tag: DocTag, holder: MethodSymbol, *, report: bool
    ) -> TagPairs:
        body = description(tag)
        if not has_inherit_doc(body):
            return [(tag, holder)]
        if not is_inherit_doc_only(body):
            if report:
                self.reporter.report(
                    tag.location, INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG
                )
            return []
        exception = self._exception_type(holder, tag)
        r = self.finder.search(
            holder, partial(self._extract, targets=(exception,)), include_self=False
        )
        if r is None or len(r.tags) <= 1:
            # the description is resolved when the tag is written
            return [(tag, holder)]
        return [(t, r.method) for t in r.tags]

    def _tags_output(
        self,
        tags: TagPairs,
        already_documented: set[str],
        substitutions: dict[str, str],
        *,
        report: bool = True,
    ) -> list[str]:
        out: list[str] = []
        documented_in_this_call: set[str] = set()
        for tag, holder in self.flatten(tags, report=report):
            name = exception_name(tag)
            symbol = self.symbols.resolve_exception_symbol(holder, tag)
            fqn = self.symbols.fully_qualified_name(symbol) if symbol else None
            substitute = substitutions.get(name)
            seen = already_documented
            if self.dedupe_within_call:
                seen = already_documented | documented_in_this_call
            if any(k in seen for k in (name, fqn, substitute) if k):
                continue
            if not already_documented and not documented_in_this_call:
                out.append(self.writer.throws_header())
            resolved = self._resolve_description(holder, tag)
            out.append(
                self.writer.throws_tag_output(holder, tag, resolved, substitute)
            )
            documented_in_this_call.add(substitute or fqn or name)
        already_documented |= documented_in_this_call
        return out

    def _inherit_declared(
        self,
        method: MethodSymbol,
        declared: Sequence[str],
        instantiated: Sequence[str],
        already_documented: set[str],
        substitutions: dict[str, str],
    ) -> list[str]:
        if not is_method_kind(method.kind):
            # only methods inherit documentation
            return []
        found: TagPairs = []
        for i, exception in enumerate(instantiated):
            targets = (exception,)
            if i < len(declared) and declared[i] != exception:
                targets += (declared[i],)
            r = self.finder.search(
                method, partial(self._extract, targets=targets), include_self=False
            )
            if r is None:
                continue
            for t in r.tags:
                if (t, r.method) not in found:
                    found.append((t, r.method))
        # ancestor tag errors belong to the ancestor's own render
        return self._tags_output(
            found, already_documented, substitutions, report=False
        )

    def _link_undocumented(
        self, instantiated: Sequence[str], already_documented: set[str]
    ) -> list[str]:
        out: list[str] = []
        for exception in instantiated:
            symbol = self.symbols.resolve_type(exception)
            if symbol is None:
                continue
            keys = (
                exception,
                self.symbols.fully_qualified_name(symbol),
                self.symbols.simple_name(symbol),
            )
            if any(k in already_documented for k in keys):
                continue
            if not already_documented:
                out.append(self.writer.throws_header())
            out.append(self.writer.throws_type_output(exception))
            already_documented.add(self.symbols.simple_name(symbol))
        return out

    def _inherit(self, method: MethodSymbol, exception: str) -> ThrowsInheritance:
        try:
            r = self.finder.search_require_override(
                method, partial(self._extract, targets=(exception,))
            )
        except NoOverriddenMethods:
            return ThrowsInheritance(None, None, (), overrides_something=False)
        if r is None:
            return ThrowsInheritance(None, None, (), overrides_something=True)
        # one-to-many is handled by flatten; here only the first tag counts
        first = r.tags[0]
        return ThrowsInheritance(first, r.method, tuple(description(first)), True)

    def _resolve_description(
        self, holder: MethodSymbol, tag: DocTag
    ) -> tuple[ContentNode, ...]:
        """Replace {@inheritDoc} in a tag description with ancestor content."""
        body = description(tag)
        if not has_inherit_doc(body):
            return tuple(body)
        inherited = self._inherit(holder, self._exception_type(holder, tag))
        replacement: tuple[ContentNode, ...] = ()
        if inherited.tag is not None and inherited.method is not None:
            replacement = self._resolve_description(inherited.method, inherited.tag)
        else:
            logger.debug(
                "Nothing to inherit for @throws %s on %s",
                exception_name(tag),
                holder.uid,
            )
        out: list[ContentNode] = []
        for node in body:
            if isinstance(node, InheritDocNode):
                out.extend(replacement)
            else:
                out.append(node)
        return tuple(out)

    def _exception_type(self, holder: MethodSymbol, tag: DocTag) -> str:
        symbol = self.symbols.resolve_exception_symbol(holder, tag)
        if symbol is None:
            return exception_name(tag)
        return self.symbols.fully_qualified_name(symbol)

    def _extract(
        self, method: MethodSymbol, targets: tuple[str, ...]
    ) -> SearchResult | None:
        tags = []
        for tag in throws_tags(method):
            candidate = self.symbols.resolve_exception_symbol(method, tag)
            if candidate is None:
                continue
            name = self.symbols.fully_qualified_name(candidate)
            if any(
                self.symbols.is_same_type(name, t) or self.symbols.is_subtype(name, t)
                for t in targets
            ):
                tags.append(tag)
        return SearchResult(tuple(tags), method) if tags else None
