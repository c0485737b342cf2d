"""Logic for mapping uids to link targets."""

from docinherit.hierarchy_index import HierarchyIndex
from docinherit.link_target import LinkTarget
from docinherit.page_path_for_uid import member_anchor, page_path_for_uid


def build_link_targets(index: HierarchyIndex, api_root: str) -> dict[str, LinkTarget]:
    """Build a map of type and method uids to link targets.

    Types get their own page; methods are anchors on their owner's page.
    """
    targets: dict[str, LinkTarget] = {}
    for uid, t in index.uid_to_type.items():
        page = page_path_for_uid(api_root, uid)
        targets[uid] = LinkTarget(title=t.name, page_path=page)
    for uid, m in index.uid_to_method.items():
        owner = targets.get(m.owner)
        if owner is None:
            continue
        title = f"{index.uid_to_type[m.owner].name}.{m.name}"
        targets[uid] = LinkTarget(
            title=title, page_path=f"{owner.page_path}#{member_anchor(m.name)}"
        )
    return targets
