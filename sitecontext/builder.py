from __future__ import annotations

import datetime as dt
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Callable, Optional

from .classify import Classified
from .config import SiteConfig
from .content import coerce_date, get_categories, parse_list, split_date_prefix
from .errors import RenderError
from .models import NonProcessedPage, Page, Post
from .permalink import MARKDOWN_SUFFIXES, page_url, raw_url, resolve_permalink
from .render import summarize

Renderer = Callable[[str], str]


def render_body(item: Classified, renderer: Renderer) -> str:
    if PurePosixPath(item.source).suffix.lower() not in MARKDOWN_SUFFIXES:
        return item.body.rstrip()
    try:
        html_content = renderer(item.body)
    except Exception as exc:
        raise RenderError(item.source, exc) from exc
    return html_content.rstrip()


def _pattern(meta: dict) -> Optional[str]:
    value = meta.get("permalink")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def build_post(item: Classified, config: SiteConfig, renderer: Renderer, now: dt.datetime) -> Post:
    prefix_date, name = split_date_prefix(PurePosixPath(item.source).stem)
    meta = dict(item.metadata or {})
    date = prefix_date or coerce_date(meta.get("date")) or now
    if not meta.get("title"):
        meta["title"] = name
    meta["date"] = date.isoformat()
    categories = tuple(get_categories(meta))
    tags = tuple(parse_list(meta.get("tags")))

    content = render_body(item, renderer)
    if "excerpt" not in meta:
        meta["excerpt"] = str(meta.get("summary") or meta.get("description") or summarize(content))
    url = resolve_permalink(_pattern(meta) or config.permalink, name, date, categories)
    return Post(
        source=item.source,
        date=date,
        content=content,
        url=url,
        metadata=MappingProxyType(meta),
        categories=categories,
        tags=tags,
    )


def build_page(item: Classified, renderer: Renderer, now: dt.datetime) -> Page:
    name = PurePosixPath(item.source).stem
    meta = dict(item.metadata or {})
    if not meta.get("title"):
        meta["title"] = name
    content = render_body(item, renderer)
    pattern = _pattern(meta)
    if pattern:
        url = resolve_permalink(pattern, name, coerce_date(meta.get("date")) or now)
    else:
        url = page_url(item.source)
    return Page(
        source=item.source,
        directory=item.directory,
        content=content,
        url=url,
        metadata=MappingProxyType(meta),
    )


def build_raw(item: Classified) -> NonProcessedPage:
    return NonProcessedPage(source=item.source, directory=item.directory, raw=item.raw, url=raw_url(item.source))
