"""Logic for rendering type pages with their members' documentation."""

from docinherit.hierarchy_index import HierarchyIndex
from docinherit.is_method_kind import is_constructor_kind, is_method_kind
from docinherit.md_table import md_table
from docinherit.method_symbol import MethodSymbol
from docinherit.render_method_docs import MethodDocRenderer
from docinherit.type_symbol import TypeSymbol


def render_type_page(
    t: TypeSymbol,
    index: HierarchyIndex,
    renderer: MethodDocRenderer,
    *,
    include_inherited: bool = True,
) -> str:
    """Render a type page (class or interface) in Markdown."""
    parts = ["---", f"uid: {t.uid}", "---", ""]
    parts += [f"# {t.kind.capitalize()} {t.name}", ""]
    if t.superclass:
        parts += [f"**Extends:** {renderer.writer.link(t.superclass)}", ""]
    if t.interfaces:
        links = ", ".join(renderer.writer.link(i) for i in t.interfaces)
        parts += [f"**Implements:** {links}", ""]

    members = sorted(
        (m for m in index.uid_to_method.values() if m.owner == t.uid),
        key=lambda m: (not is_constructor_kind(m.kind), m.name.lower(), m.uid),
    )
    rows = [
        [f"`{m.name}`", renderer.summary_see(m)]
        for m in members
        if is_method_kind(m.kind)
    ]
    if rows:
        parts += ["## Method Summary", "", md_table(["Method", "See Also"], rows), ""]

    constructors = [m for m in members if is_constructor_kind(m.kind)]
    methods = [m for m in members if is_method_kind(m.kind)]
    for title, group in (("Constructors", constructors), ("Methods", methods)):
        if group:
            parts += [f"## {title}", ""]
            for m in group:
                parts += renderer.render(m, context_type=t.uid)

    if include_inherited:
        inherited = inherited_methods(t, index)
        if inherited:
            parts += ["## Inherited Methods", ""]
            for m in inherited:
                parts += renderer.render(m, context_type=t.uid)

    return "\n".join(parts).rstrip() + "\n"


def inherited_methods(t: TypeSymbol, index: HierarchyIndex) -> list[MethodSymbol]:
    """Return superclass methods visible on `t` that no nearer class overrides."""
    overridden: set[str] = set()
    names: set[str] = set()
    result: list[MethodSymbol] = []
    current: TypeSymbol | None = t
    seen: set[str] = set()
    while current is not None and current.uid not in seen:
        seen.add(current.uid)
        declared = [
            m
            for m in index.uid_to_method.values()
            if m.owner == current.uid and is_method_kind(m.kind)
        ]
        for m in sorted(declared, key=lambda m: m.uid):
            if current is not t and m.uid not in overridden and m.name not in names:
                result.append(m)
            names.add(m.name)
            if m.overrides:
                overridden.add(m.overrides)
        current = index.uid_to_type.get(current.superclass or "")
    return result
