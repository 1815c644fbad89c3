from __future__ import annotations

import re

import markdown

TAG_RE = re.compile(r"<[^>]+>")

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "codehilite"]
MARKDOWN_EXTENSION_CONFIGS = {"codehilite": {"guess_lang": False}}


def render_markdown(text: str) -> str:
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS, extension_configs=MARKDOWN_EXTENSION_CONFIGS)
    return md.convert(text)


def strip_tags(html_text: str) -> str:
    return TAG_RE.sub("", html_text)


def summarize(html_text: str, limit: int = 200) -> str:
    summary = strip_tags(html_text).strip().replace("\n", " ")
    return summary[:limit] + ("..." if len(summary) > limit else "")
