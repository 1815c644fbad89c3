"""Shared pytest fixtures."""

import datetime as dt

import pytest

from sitecontext import MemoryFileSystem, SiteContextGenerator

SITE_ROOT = "/site"
FIXED_NOW = dt.datetime(2024, 3, 9, 14, 30)


def to_page_content(content: str) -> str:
    """Prefix ``content`` with a front matter block whose closing marker shares its line."""
    return "---\ntitle: Title\n---" + content


@pytest.fixture
def fs():
    return MemoryFileSystem()


@pytest.fixture
def generator(fs):
    return SiteContextGenerator(fs)


@pytest.fixture
def fixed_generator(fs):
    """Generator whose build clock is pinned to ``FIXED_NOW``."""
    return SiteContextGenerator(fs, clock=lambda: FIXED_NOW)
