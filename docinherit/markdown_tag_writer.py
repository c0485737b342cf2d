"""Markdown output for resolved documentation tags."""

from collections.abc import Sequence
from typing import Any

from docinherit.comment_helper import description, exception_name, reference_signature
from docinherit.doc_tag import ContentNode, DocTag, InheritDocNode, LinkNode, TextNode
from docinherit.link_target import LinkTarget
from docinherit.method_symbol import MethodSymbol


class MarkdownTagWriter:
    """Writes exception and see-also entries as Markdown lines."""

    def __init__(
        self, uid_targets: dict[str, LinkTarget], config: dict[str, Any]
    ) -> None:
        """Initialize the writer with link targets and render settings."""
        self.uid_targets = uid_targets
        self.throws_heading = config["render"]["throws_header"]
        self.see_heading = config["render"]["see_header"]

    def throws_header(self) -> str:
        """Return the exceptions heading."""
        return f"{self.throws_heading}\n"

    def throws_tag_output(
        self,
        holder: MethodSymbol,
        tag: DocTag,
        description: Sequence[ContentNode],
        substitute: str | None = None,
    ) -> str:
        """Return one exception entry, optionally under a substituted type."""
        del holder
        et = self.link(substitute or exception_name(tag))
        ed = self.render_nodes(description)
        return f"- {et}: {ed}" if ed else f"- {et}"

    def throws_type_output(self, type_name: str) -> str:
        """Return a bare exception entry."""
        return f"- {self.link(type_name)}"

    def see_tag_output(
        self, holder: MethodSymbol, tags: Sequence[DocTag]
    ) -> list[str]:
        """Return the see-also block, or nothing when there are no tags."""
        del holder
        if not tags:
            return []
        parts = [self.see_heading, ""]
        for t in tags:
            label = self.render_nodes(description(t))
            sig = reference_signature(t)
            if sig:
                target = self.uid_targets.get(sig) or self._type_target(sig)
                text = label or (target.title if target else sig)
                parts.append(
                    f"- [{text}]({target.page_path})" if target else f"- `{text}`"
                )
            else:
                parts.append(f"- {label}")
        parts.append("")
        return parts

    def link(self, name: str, label: str = "") -> str:
        """Render a symbol name as a link, or as code if it has no page."""
        t = self.uid_targets.get(name) or self._type_target(name)
        if t is None:
            return f"`{label or name}`"
        return f"[{label or t.title}]({t.page_path})"

    def render_nodes(self, nodes: Sequence[ContentNode]) -> str:
        """Render description nodes as inline Markdown."""
        out = []
        for n in nodes:
            if isinstance(n, TextNode):
                out.append(n.text)
            elif isinstance(n, LinkNode):
                out.append(self.link(n.signature, n.label))
            elif isinstance(n, InheritDocNode):
                continue  # unresolved placeholder renders as nothing
        return " ".join(s.strip() for s in out if s.strip())

    def _type_target(self, name: str) -> LinkTarget | None:
        # a.b.Foo#bar(int) -> a.b.Foo
        if "#" in name:
            return self.uid_targets.get(name.split("#", 1)[0])
        matches = [
            t for uid, t in self.uid_targets.items() if uid.split(".")[-1] == name
        ]
        return matches[0] if len(matches) == 1 else None
