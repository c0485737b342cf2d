"""Utilities for mapping symbol uids to page paths and anchors."""

import re

# Keep letters, digits, underscore and dash.
PATH_SAFE_RE = re.compile(r"[^A-Za-z0-9_-]+")


def path_safe(name: str) -> str:
    """Make a stable path segment from a name.

    Nested types `Outer$Inner` become `Outer-Inner`; generic arguments are
    dropped.
    """
    name = re.sub(r"<.*>", "", name)
    name = name.replace("$", "-")
    name = PATH_SAFE_RE.sub("-", name).strip("-")
    return name or "Unknown"


def page_path_for_uid(api_root: str, type_uid: str) -> str:
    """Generate the page path for a type: a.b.Foo -> /api/a/b/Foo."""
    parts = [path_safe(p) for p in type_uid.split(".")]
    return f"{api_root.rstrip('/')}/{'/'.join(parts)}"


def member_anchor(name: str) -> str:
    """Generate an anchor slug for a member heading."""
    s = re.sub(r"[^a-z0-9]+", "-", name.strip().lower())
    return s.strip("-") or "member"
