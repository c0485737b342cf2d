"""Parsing of inline tag markup inside tag descriptions."""

import re

from docinherit.doc_tag import ContentNode, InheritDocNode, LinkNode, TextNode

INLINE_TAG_RE = re.compile(r"\{@(inheritDoc|link|linkplain)(?:\s+([^}]*))?\}")


def parse_description(raw: object) -> tuple[ContentNode, ...]:
    """Parse a description into content nodes.

    Accepts a string with `{@inheritDoc}` and `{@link sig label}` inline tags,
    or a list of such strings and `{"link": ..., "label": ...}` /
    `{"inheritDoc": true}` mappings.
    """
    if raw is None:
        return ()
    if isinstance(raw, list):
        nodes: list[ContentNode] = []
        for x in raw:
            nodes.extend(_parse_item(x))
        return tuple(nodes)
    return tuple(_parse_text(str(raw)))


def _parse_item(x: object) -> list[ContentNode]:
    if isinstance(x, dict):
        if x.get("inheritDoc"):
            return [InheritDocNode()]
        if x.get("link"):
            return [LinkNode(str(x["link"]), str(x.get("label") or ""))]
        return []
    return _parse_text(str(x))


def _parse_text(text: str) -> list[ContentNode]:
    nodes: list[ContentNode] = []
    pos = 0
    for m in INLINE_TAG_RE.finditer(text):
        before = text[pos : m.start()].strip()
        if before:
            nodes.append(TextNode(before))
        if m.group(1) == "inheritDoc":
            nodes.append(InheritDocNode())
        else:
            sig, _, label = (m.group(2) or "").strip().partition(" ")
            nodes.append(LinkNode(sig, label.strip()))
        pos = m.end()
    rest = text[pos:].strip()
    if rest:
        nodes.append(TextNode(rest))
    return nodes
