"""Minimal markdown-to-HTML conversion for post bodies.

Handles headers, bold, italic, links, paragraphs and line breaks with an
ordered list of regex substitutions. Input is not HTML-escaped.
"""

import re
from typing import NamedTuple


class MarkdownRule(NamedTuple):
    name: str
    pattern: re.Pattern[str]
    replacement: str


# Applied top to bottom. Headers go most-specific first, and bold must run
# before italic because both use "*".
MARKDOWN_RULES: tuple[MarkdownRule, ...] = (
    MarkdownRule("h3", re.compile(r"^### (.*$)", re.MULTILINE), r"<h3>\1</h3>"),
    MarkdownRule("h2", re.compile(r"^## (.*$)", re.MULTILINE), r"<h2>\1</h2>"),
    MarkdownRule("h1", re.compile(r"^# (.*$)", re.MULTILINE), r"<h1>\1</h1>"),
    MarkdownRule("bold", re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    MarkdownRule("italic", re.compile(r"\*(.*?)\*"), r"<em>\1</em>"),
    MarkdownRule(
        "link", re.compile(r"\[([^\]]+)\]\(([^)]+)\)"), r'<a href="\2">\1</a>'
    ),
    MarkdownRule("paragraph", re.compile(r"\n\n"), "</p><p>"),
    MarkdownRule("line_break", re.compile(r"\n"), "<br>"),
)

# Run in sequence: removing "<p></p>" can expose another empty pair.
_EMPTY_PARAGRAPH_PATTERNS = (re.compile(r"<p></p>"), re.compile(r"<p>\s*</p>"))


def apply_rules(text: str, rules: tuple[MarkdownRule, ...] = MARKDOWN_RULES) -> str:
    """Run each substitution over the whole text, in order."""
    for rule in rules:
        text = rule.pattern.sub(rule.replacement, text)
    return text


def markdown_to_html(markdown: str | None) -> str:
    """Convert a post body to an HTML fragment wrapped in ``<p>``."""
    if not markdown:
        return ""
    html = f"<p>{apply_rules(markdown)}</p>"
    for pattern in _EMPTY_PARAGRAPH_PATTERNS:
        html = pattern.sub("", html)
    return html
