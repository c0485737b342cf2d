"""Orchestration logic for rendering inherited documentation to Markdown."""

import argparse
import logging

from docinherit.build_link_targets import build_link_targets
from docinherit.compute_config_hash import compute_config_hash
from docinherit.diagnostic_report import DiagnosticReport
from docinherit.load_config import load_config
from docinherit.load_hierarchy import load_hierarchy
from docinherit.markdown_tag_writer import MarkdownTagWriter
from docinherit.render_method_docs import MethodDocRenderer
from docinherit.write_type_pages import write_type_pages

logger = logging.getLogger(__name__)


def run_rendering(args: argparse.Namespace) -> int:
    """Execute the full rendering pipeline.

    Returns 1 when unsuppressed documentation errors were reported, else 0.
    """
    config = load_config(args.config)
    if args.api_root:
        config["render"]["api_root"] = args.api_root

    index = load_hierarchy(args.hierarchy)
    uid_targets = build_link_targets(index, config["render"]["api_root"])
    reporter = DiagnosticReport(
        compute_config_hash(config),
        messages=config["messages"],
        suppressed=config["suppressed_errors"],
    )
    writer = MarkdownTagWriter(uid_targets, config)
    renderer = MethodDocRenderer(index, writer, reporter, config)

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    written = write_type_pages(
        index,
        uid_targets,
        renderer,
        out_root,
        include_inherited=config["render"]["include_inherited_members"],
    )

    if args.report:
        reporter.generate_report(str(args.report))

    logger.info("Generated %d Markdown pages into: %s", written, out_root)
    failures = [d for d in reporter.diagnostics if d.code not in reporter.suppressed]
    if failures:
        logger.warning("%d documentation error(s) reported", len(failures))
        return 1
    return 0
