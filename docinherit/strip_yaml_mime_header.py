"""Utility for removing YAML MIME headers from hierarchy files."""

YAML_MIME_PREFIX = "### YamlMime:"


def strip_yaml_mime_header(text: str) -> tuple[str | None, str]:
    """Split off the `### YamlMime:<Kind>` header line, if present.

    Returns the declared kind (or None) and the remaining content.
    """
    lines = text.splitlines()
    if lines and lines[0].startswith(YAML_MIME_PREFIX):
        kind = lines[0][len(YAML_MIME_PREFIX) :].strip() or None
        return kind, "\n".join(lines[1:]).lstrip("\n")
    return None, text
