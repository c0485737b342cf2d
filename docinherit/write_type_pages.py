"""Logic for writing type pages to disk."""

import logging
from pathlib import Path

from docinherit.hierarchy_index import HierarchyIndex
from docinherit.link_target import LinkTarget
from docinherit.render_method_docs import MethodDocRenderer
from docinherit.render_type_page import render_type_page

logger = logging.getLogger(__name__)


def output_file_for_page(out_root: Path, page_path: str) -> Path:
    """Determine the output file for a page path, creating parent folders."""
    # /api/a/b/Foo -> out_root/api/a/b/Foo.md
    p = out_root / (page_path.lstrip("/") + ".md")
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def write_type_pages(
    index: HierarchyIndex,
    uid_targets: dict[str, LinkTarget],
    renderer: MethodDocRenderer,
    out_root: Path,
    *,
    include_inherited: bool = True,
) -> int:
    """Write one page per type and return the number of pages written."""
    written = 0
    types = sorted(index.uid_to_type.values(), key=lambda t: t.uid)
    logger.info("Writing %d type pages...", len(types))
    for t in types:
        md = render_type_page(t, index, renderer, include_inherited=include_inherited)
        out_file = output_file_for_page(out_root, uid_targets[t.uid].page_path)
        out_file.write_text(md, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            logger.info("  ... wrote %d/%d types", written, len(types))
    return written
