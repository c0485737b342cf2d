"""Utility for generating Markdown tables."""


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table; empty when there are no rows."""
    if not rows:
        return ""
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join(["---"] * len(headers)) + "|",
    ]
    for r in rows:
        cells = [c.replace("|", "\\|") for c in r]
        lines.append("| " + " | ".join(cells) + " |")
    return "\n".join(lines)
