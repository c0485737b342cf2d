"""Rendering of one method's documentation with inherited tags resolved."""

from typing import Any

from docinherit.comment_helper import reference, see_tags
from docinherit.diagnostic_report import DiagnosticReport
from docinherit.doc_finder import DocFinder
from docinherit.hierarchy_index import HierarchyIndex
from docinherit.markdown_tag_writer import MarkdownTagWriter
from docinherit.method_symbol import MethodSymbol
from docinherit.see_policy import (
    resolve_reference_inheritance,
    resolve_reference_tags_for_display,
)
from docinherit.throws_policy import ThrowsPolicy


class MethodDocRenderer:
    """Renders member sections, merging documentation from ancestors."""

    def __init__(
        self,
        index: HierarchyIndex,
        writer: MarkdownTagWriter,
        reporter: DiagnosticReport,
        config: dict[str, Any],
    ) -> None:
        """Initialize the renderer and the policies it drives."""
        self.index = index
        self.writer = writer
        self.finder = DocFinder(index)
        self.throws = ThrowsPolicy(
            self.finder,
            reporter,
            writer,
            dedupe_within_call=config["throws"]["dedupe_within_call"],
        )
        self.first_sentence = config["inheritance"]["first_sentence"]

    def render(
        self, method: MethodSymbol, context_type: str | None = None
    ) -> list[str]:
        """Render the section for one method or constructor.

        Each call uses its own set of already-documented exceptions.
        """
        parts = [f"### {method.name}", ""]
        if method.signature:
            parts += [f"```java\n{method.signature.rstrip()}\n```", ""]

        overridden = self.index.overridden_method(method)
        if overridden is not None:
            parts += [f"**Overrides:** {self.writer.link(overridden.uid)}", ""]
        specified = self.index.implemented_methods(method)
        if specified:
            links = ", ".join(self.writer.link(m.uid) for m in specified)
            parts += [f"**Specified by:** {links}", ""]

        exceptions = self.throws.render(method, set(), context_type)
        if exceptions:
            parts += [*exceptions, ""]

        holder, tags = resolve_reference_tags_for_display(method, self.finder)
        parts += self.writer.see_tag_output(holder, tags)
        return parts

    def summary_see(self, method: MethodSymbol) -> str:
        """Return the first see reference of `method`, inherited if needed."""
        own = see_tags(method)
        if own:
            return self.writer.render_nodes(reference(own[0]) or [])
        inherited = resolve_reference_inheritance(
            method, self.finder, first_sentence_only=self.first_sentence
        )
        if inherited is None:
            return ""
        return self.writer.render_nodes(inherited.content)
