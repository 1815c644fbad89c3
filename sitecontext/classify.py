from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any, Optional

from .content import parse_front_matter


POSTS_DIR = "_posts"
OUTPUT_DIR = "_site"


class ContentKind(enum.Enum):
    POST = "post"
    PAGE = "page"
    RAW = "raw"


@dataclass(frozen=True)
class Classified:
    source: str
    kind: ContentKind
    raw: bytes
    metadata: Optional[dict[str, Any]] = None
    body: str = ""

    @property
    def directory(self) -> str:
        parent = PurePosixPath(self.source).parent.as_posix()
        return "" if parent == "." else parent


def is_post(source: str) -> bool:
    parts = PurePosixPath(source).parts
    return len(parts) > 1 and parts[0] == POSTS_DIR


def is_excluded(source: str) -> bool:
    """Whether a root-relative path is reserved by the generator.

    Hidden paths and anything under an underscore-prefixed name are skipped,
    except for the posts directory itself at the top level. That also covers
    the config file, the output directory and plugin directories.
    """
    parts = PurePosixPath(source).parts
    for index, part in enumerate(parts):
        if part.startswith("."):
            return True
        if part.startswith("_"):
            if index == 0 and part == POSTS_DIR and len(parts) > 1:
                continue
            return True
    return False


def classify(source: str, data: bytes) -> Classified:
    if is_post(source):
        meta, body = parse_front_matter(data.decode("utf-8", errors="replace"))
        return Classified(source, ContentKind.POST, data, meta or {}, body)

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return Classified(source, ContentKind.RAW, data)
    meta, body = parse_front_matter(text)
    if meta is None:
        return Classified(source, ContentKind.RAW, data)
    return Classified(source, ContentKind.PAGE, data, meta, body)
