"""Exceptions raised while building a site context."""

from __future__ import annotations


class SiteContextError(Exception):
    """Base exception for all site context errors."""


class ConfigurationError(SiteContextError):
    """Raised when a site configuration file cannot be parsed."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Invalid config file {path}: {message}")
        self.path = path


class FileSystemError(SiteContextError):
    """Raised when the site root or a source file cannot be read."""


class RenderError(SiteContextError):
    """Raised when the markdown renderer fails on a source file."""

    def __init__(self, source: str, cause: BaseException) -> None:
        super().__init__(f"Failed to render {source}: {cause}")
        self.source = source
