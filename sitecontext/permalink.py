from __future__ import annotations

import datetime as dt
import re
from pathlib import PurePosixPath
from typing import Iterable, Optional

from .content import slugify

DEFAULT_PERMALINK = "/:year/:month/:day/:title.html"

PERMALINK_STYLES = {
    "date": DEFAULT_PERMALINK,
    "pretty": "/:year/:month/:day/:title/",
    "ordinal": "/:year/:y_day/:title.html",
    "none": "/:title.html",
}

MARKDOWN_SUFFIXES = {".md", ".markdown", ".mdown", ".mkd", ".mkdn"}

SLASH_RUN_RE = re.compile(r"/{2,}")


def expand_style(pattern: str) -> str:
    return PERMALINK_STYLES.get(pattern.strip(), pattern)


def permalink_tokens(title: str, date: dt.datetime, categories: Iterable[str] = ()) -> dict[str, str]:
    return {
        ":year": f"{date.year:04d}",
        ":short_year": f"{date.year % 100:02d}",
        ":month": f"{date.month:02d}",
        ":i_month": str(date.month),
        ":day": f"{date.day:02d}",
        ":i_day": str(date.day),
        ":y_day": f"{date.timetuple().tm_yday:03d}",
        ":title": title,
        ":slug": slugify(title),
        ":categories": "/".join(slugify(name) for name in categories),
    }


def resolve_permalink(
    pattern: Optional[str], title: str, date: dt.datetime, categories: Iterable[str] = ()
) -> str:
    """Substitute ``title``, ``date`` and ``categories`` into a permalink pattern.

    Tokens are replaced literally, longest first. Unknown tokens such as
    ``:foo`` are kept as written. The result is always root-relative.
    """
    template = expand_style(pattern or DEFAULT_PERMALINK)
    tokens = permalink_tokens(title, date, categories)
    token_re = re.compile("|".join(re.escape(token) for token in sorted(tokens, key=len, reverse=True)))
    url = token_re.sub(lambda match: tokens[match.group(0)], template)
    url = SLASH_RUN_RE.sub("/", url)
    if not url.startswith("/"):
        url = "/" + url
    return url


def page_url(source: str) -> str:
    """Map a page source path onto its output URL, turning markdown into html."""
    path = PurePosixPath(source)
    if path.suffix.lower() in MARKDOWN_SUFFIXES:
        path = path.with_suffix(".html")
    return "/" + path.as_posix().lstrip("/")


def raw_url(source: str) -> str:
    return "/" + PurePosixPath(source).as_posix().lstrip("/")


def output_path(url: str) -> str:
    """Relative output file for ``url``; directory URLs get an ``index.html``."""
    relative = url.lstrip("/")
    if not relative or url.endswith("/"):
        return relative + "index.html"
    return relative
