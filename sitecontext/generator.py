from __future__ import annotations

import datetime as dt
import enum
import logging
import time
from pathlib import PurePath
from types import MappingProxyType
from typing import Callable, Optional

from .builder import Renderer, build_page, build_post, build_raw
from .classify import OUTPUT_DIR, Classified, ContentKind, classify, is_excluded
from .config import SiteConfig, load_site_config
from .errors import FileSystemError
from .fs import LocalFileSystem, PathLike, relative_posix
from .grouping import group_by_directory
from .models import PageItem, Post, SiteContext
from .render import render_markdown

logger = logging.getLogger(__name__)


class BuildStage(enum.Enum):
    INITIALIZED = "initialized"
    CONFIGURED = "configured"
    FILES_ENUMERATED = "files_enumerated"
    CLASSIFIED = "classified"
    RENDERED = "rendered"
    GROUPED = "grouped"
    COMPLETE = "complete"


class SiteContextGenerator:
    """Build a fresh :class:`SiteContext` from a site source directory.

    Every call to :meth:`build_context` re-reads the configuration and every
    source file; nothing is cached between calls.
    """

    def __init__(
        self,
        fs=None,
        renderer: Renderer = render_markdown,
        clock: Optional[Callable[[], dt.datetime]] = None,
    ) -> None:
        self.fs = fs if fs is not None else LocalFileSystem()
        self.renderer = renderer
        self.clock = clock or dt.datetime.now

    def build_context(self, root: PathLike) -> SiteContext:
        return _BuildPass(self, self.fs.path(root)).run()


class _BuildPass:
    def __init__(self, generator: SiteContextGenerator, root: PurePath) -> None:
        self.fs = generator.fs
        self.renderer = generator.renderer
        self.root = root
        self.now = generator.clock()
        self.stage = BuildStage.INITIALIZED
        self.config = SiteConfig()
        self.sources: list[str] = []
        self.items: list[Classified] = []
        self.posts: list[Post] = []
        self.pages: list[PageItem] = []
        self.directory_index: dict[str, tuple[int, ...]] = {}

    def advance(self, stage: BuildStage) -> None:
        self.stage = stage
        logger.debug("Build of %s reached stage %s", self.root, stage.value)

    def run(self) -> SiteContext:
        start = time.perf_counter()
        self.configure()
        self.enumerate_files()
        self.classify_files()
        self.render()
        self.group()
        context = SiteContext(
            source_folder=str(self.root),
            output_folder=str(self.root / OUTPUT_DIR),
            config=self.config,
            time=self.now,
            posts=tuple(self.posts),
            pages=tuple(self.pages),
            directory_index=MappingProxyType(self.directory_index),
        )
        self.advance(BuildStage.COMPLETE)
        logger.info(
            "Built context for %s: %d posts, %d pages in %.2fs",
            self.root,
            len(self.posts),
            len(self.pages),
            time.perf_counter() - start,
        )
        return context

    def configure(self) -> None:
        if not self.fs.exists(self.root):
            raise FileSystemError(f"Site directory not found: {self.root}")
        if not self.fs.is_dir(self.root):
            raise FileSystemError(f"Site path is not a directory: {self.root}")
        try:
            self.config = load_site_config(self.fs, self.root)
        except OSError as exc:
            raise FileSystemError(f"Cannot read config in {self.root}: {exc}") from exc
        self.advance(BuildStage.CONFIGURED)

    def enumerate_files(self) -> None:
        try:
            paths = self.fs.list_files(self.root)
        except OSError as exc:
            raise FileSystemError(f"Cannot list {self.root}: {exc}") from exc
        for source in sorted(relative_posix(path, self.root) for path in paths):
            if is_excluded(source):
                logger.debug("Skipping reserved path %s", source)
                continue
            self.sources.append(source)
        self.advance(BuildStage.FILES_ENUMERATED)

    def classify_files(self) -> None:
        for source in self.sources:
            try:
                data = self.fs.read_bytes(self.root / source)
            except OSError as exc:
                raise FileSystemError(f"Cannot read {source}: {exc}") from exc
            item = classify(source, data)
            logger.debug("Classified %s as %s", source, item.kind.value)
            self.items.append(item)
        self.advance(BuildStage.CLASSIFIED)

    def render(self) -> None:
        for item in self.items:
            if item.kind is ContentKind.POST:
                self.posts.append(build_post(item, self.config, self.renderer, self.now))
            elif item.kind is ContentKind.PAGE:
                self.pages.append(build_page(item, self.renderer, self.now))
            else:
                self.pages.append(build_raw(item))
        self.posts.sort(key=lambda post: post.source)
        self.posts.sort(key=lambda post: post.date, reverse=True)
        self.advance(BuildStage.RENDERED)

    def group(self) -> None:
        self.directory_index = group_by_directory(self.pages)
        self.advance(BuildStage.GROUPED)


def build_context(root: PathLike, fs=None) -> SiteContext:
    return SiteContextGenerator(fs).build_context(root)
