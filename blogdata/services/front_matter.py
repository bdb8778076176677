"""Front matter parsing for markdown posts.

A post may start with a block of ``key: value`` lines fenced by ``---``
lines. Everything after the closing fence is the body. Values are plain
strings; there is no YAML typing.
"""

import re

_FRONT_MATTER_RE = re.compile(r"\A---\s*\n(.*?)\n---\s*\n(.*)\Z", re.DOTALL)
_DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}-")

_QUOTE_CHARS = ("'", '"')


def _strip_quotes(value: str) -> str:
    """Remove one pair of matching surrounding quotes, if present."""
    if len(value) >= 2 and value[0] in _QUOTE_CHARS and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_metadata(block: str) -> dict[str, str]:
    """Parse ``key: value`` lines into a dict.

    Splits on the first colon only, so values may contain colons
    (``date: 2024-01-15T10:00:00Z``). Lines without a colon are skipped and
    a repeated key keeps its last value.
    """
    metadata: dict[str, str] = {}
    for line in block.split("\n"):
        key, sep, value = line.partition(":")
        if not sep:
            continue
        metadata[key.strip()] = _strip_quotes(value.strip())
    return metadata


def extract_front_matter(content: str) -> tuple[dict[str, str], str]:
    """Split a document into (metadata, body).

    A document without a leading ``---`` block is returned as-is with empty
    metadata.
    """
    match = _FRONT_MATTER_RE.match(content)
    if not match:
        return {}, content
    return parse_metadata(match.group(1)), match.group(2)


def derive_slug(filename: str, extension: str = ".md") -> str:
    """Derive a post slug from its filename.

    ``2024-01-15-my-post.md`` -> ``my-post``
    """
    slug = _DATE_PREFIX_RE.sub("", filename, count=1)
    if extension and slug.endswith(extension):
        slug = slug[: -len(extension)]
    return slug
