from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping, Union

from .config import SiteConfig
from .permalink import output_path


@dataclass(frozen=True)
class Post:
    source: str
    date: dt.datetime
    content: str
    url: str
    metadata: Mapping[str, Any] = field(compare=False)
    categories: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()

    kind: ClassVar[str] = "post"

    @property
    def title(self) -> str:
        return str(self.metadata.get("title", ""))

    @property
    def output_path(self) -> str:
        return output_path(self.url)


@dataclass(frozen=True)
class Page:
    source: str
    directory: str
    content: str
    url: str
    metadata: Mapping[str, Any] = field(compare=False)

    kind: ClassVar[str] = "page"

    @property
    def title(self) -> str:
        return str(self.metadata.get("title", ""))

    @property
    def output_path(self) -> str:
        return output_path(self.url)


@dataclass(frozen=True)
class NonProcessedPage:
    """A file copied to the output untouched."""

    source: str
    directory: str
    raw: bytes
    url: str

    kind: ClassVar[str] = "raw"

    @property
    def output_path(self) -> str:
        return output_path(self.url)


PageItem = Union[Page, NonProcessedPage]


@dataclass(frozen=True, eq=False)
class SiteContext:
    """Everything the template stage needs from one build pass.

    ``pages`` mixes processed pages and pass-through files in source order;
    switch on ``kind`` to tell them apart. ``directory_index`` maps a source
    directory to the positions of its processed pages in ``pages``.
    """

    source_folder: str
    output_folder: str
    config: SiteConfig
    time: dt.datetime
    posts: tuple[Post, ...] = ()
    pages: tuple[PageItem, ...] = ()
    directory_index: Mapping[str, tuple[int, ...]] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return str(self.config.get("title", ""))

    def directory_pages(self, page: PageItem) -> tuple[Page, ...]:
        if page.kind != Page.kind:
            return ()
        return tuple(self.pages[index] for index in self.directory_index.get(page.directory, ()))

    @property
    def categories(self) -> dict[str, tuple[Post, ...]]:
        return _index_posts(self.posts, "categories")

    @property
    def tags(self) -> dict[str, tuple[Post, ...]]:
        return _index_posts(self.posts, "tags")


def _index_posts(posts: tuple[Post, ...], attribute: str) -> dict[str, tuple[Post, ...]]:
    grouped: dict[str, list[Post]] = {}
    for post in posts:
        for name in getattr(post, attribute):
            grouped.setdefault(name, []).append(post)
    return {name: tuple(items) for name, items in grouped.items()}
