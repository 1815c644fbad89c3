from __future__ import annotations

from typing import Sequence

from .models import Page, PageItem


def group_by_directory(pages: Sequence[PageItem]) -> dict[str, tuple[int, ...]]:
    """Index processed pages by their exact source directory.

    Values are positions in ``pages``; pass-through files are left out.
    """
    groups: dict[str, list[int]] = {}
    for index, page in enumerate(pages):
        if page.kind != Page.kind:
            continue
        groups.setdefault(page.directory, []).append(index)
    return {directory: tuple(indices) for directory, indices in groups.items()}
