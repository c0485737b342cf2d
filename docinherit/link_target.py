"""Data models for representing link targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkTarget:
    """Where a type or member is documented."""

    title: str
    page_path: str  # e.g. /api/java/io/IOException or /api/a/Base#read
