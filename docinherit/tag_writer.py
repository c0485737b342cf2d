"""Interface of the writer that turns resolved tags into output lines."""

from collections.abc import Sequence
from typing import Protocol

from docinherit.doc_tag import ContentNode, DocTag
from docinherit.method_symbol import MethodSymbol


class TagWriter(Protocol):
    """Produces rendered output for resolved documentation tags."""

    def throws_header(self) -> str:
        """Return the heading written before the first exception entry."""
        ...

    def throws_tag_output(
        self,
        holder: MethodSymbol,
        tag: DocTag,
        description: Sequence[ContentNode],
        substitute: str | None = None,
    ) -> str:
        """Return one documented exception entry."""
        ...

    def throws_type_output(self, type_name: str) -> str:
        """Return a bare entry for a declared but undocumented exception."""
        ...

    def see_tag_output(self, holder: MethodSymbol, tags: Sequence[DocTag]) -> list[str]:
        """Return the see-also block for `tags` declared on `holder`."""
        ...
