"""Render Markdown API pages with documentation inherited through type hierarchies.

Reads one or more InheritanceHierarchy YAML files (types, methods and their doc
comments), resolves @see and @throws documentation from overridden and
implemented methods, and writes one Markdown page per type.
"""

import argparse
import logging
import sys
from pathlib import Path

from docinherit.load_hierarchy import HierarchyLoadError
from docinherit.run_rendering import run_rendering

logger = logging.getLogger("docinherit")


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the rendering pipeline."""
    ap = argparse.ArgumentParser(
        description="Render inherited documentation to Markdown pages.",
    )
    ap.add_argument(
        "hierarchy",
        type=Path,
        nargs="+",
        help="InheritanceHierarchy YAML file(s) describing types and methods",
    )
    ap.add_argument(
        "--out-dir",
        type=Path,
        required=True,
        help="Output directory for generated Markdown pages",
    )
    ap.add_argument(
        "--config",
        default=None,
        help="Optional YAML configuration file merged over the defaults",
    )
    ap.add_argument(
        "--api-root",
        default=None,
        help="Page path root for generated pages (default: /api)",
    )
    ap.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Write a JSON diagnostics report to this path",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return run_rendering(args)
    except HierarchyLoadError:
        logger.exception("Could not load hierarchy")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
