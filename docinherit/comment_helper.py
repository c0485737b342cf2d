"""Accessors projecting kind-specific payloads out of documentation tags."""

import re
from collections.abc import Iterable, Sequence

from docinherit.doc_tag import (
    ContentNode,
    DocTag,
    InheritDocNode,
    LinkNode,
    TextNode,
)
from docinherit.method_symbol import MethodSymbol

WS_RE = re.compile(r"[ \t\n\r\f]+")
SENTENCE_END_RE = re.compile(r"[.!?](?=\s|$)")


def exception_name(tag: DocTag) -> str:
    """Return the textual exception name of a throws tag."""
    if not tag.is_throws:
        msg = f"Not an exception tag: @{tag.kind}"
        raise ValueError(msg)
    return tag.name


def reference_signature(tag: DocTag) -> str | None:
    """Return the normalized signature referenced by a see tag."""
    if tag.kind != "see" or not tag.name:
        return None
    return normalize_signature(tag.name)


def reference(tag: DocTag) -> list[ContentNode] | None:
    """Return the referenced content of a see tag.

    A see tag either names a signature (rendered as a link followed by its
    label) or holds free text.
    """
    if tag.kind != "see":
        return None
    nodes: list[ContentNode] = []
    if tag.name:
        nodes.append(LinkNode(normalize_signature(tag.name)))
    nodes.extend(tag.description)
    return nodes


def description(tag: DocTag) -> list[ContentNode]:
    """Return the description body of a tag."""
    return list(tag.description)


def has_inherit_doc(nodes: Iterable[ContentNode]) -> bool:
    """Check if any node is the inheritance placeholder."""
    return any(isinstance(n, InheritDocNode) for n in nodes)


def is_inherit_doc_only(nodes: Sequence[ContentNode]) -> bool:
    """Check if the description is exactly one inheritance placeholder."""
    return len(nodes) == 1 and isinstance(nodes[0], InheritDocNode)


def first_sentence(nodes: Sequence[ContentNode]) -> list[ContentNode]:
    """Return the nodes up to and including the end of the first sentence."""
    out: list[ContentNode] = []
    for n in nodes:
        if isinstance(n, TextNode):
            m = SENTENCE_END_RE.search(n.text)
            if m:
                out.append(TextNode(n.text[: m.end()]))
                return out
        out.append(n)
    return out


def see_tags(method: MethodSymbol) -> list[DocTag]:
    """Return the see tags of a method, in source order."""
    return [t for t in method.tags if t.kind == "see"]


def throws_tags(method: MethodSymbol) -> list[DocTag]:
    """Return the @throws and @exception tags of a method, in source order."""
    return [t for t in method.tags if t.is_throws]


def normalize_signature(sig: str) -> str:
    """Normalize whitespace in a referenced signature.

    Collapses whitespace runs to at most one space, dropping it entirely after
    `(`, `<` and `.` and before `,`, `>`, `)` and `.`. A trailing `/` is removed.
    """
    if not WS_RE.search(sig) and not sig.endswith("/"):
        return sig
    out: list[str] = []
    last = ""
    for ch in sig:
        if WS_RE.fullmatch(ch):
            if last not in ("", "(", "<", " ", "."):
                out.append(" ")
                last = " "
            continue
        if ch in ",>)." and last == " ":
            out.pop()
        out.append(ch)
        last = ch
    if last == "/":
        out.pop()
    return "".join(out)
