from .config import SiteConfig, load_site_config
from .errors import ConfigurationError, FileSystemError, RenderError, SiteContextError
from .fs import LocalFileSystem, MemoryFileSystem
from .generator import BuildStage, SiteContextGenerator, build_context
from .models import NonProcessedPage, Page, PageItem, Post, SiteContext

__all__ = [
    "BuildStage",
    "ConfigurationError",
    "FileSystemError",
    "LocalFileSystem",
    "MemoryFileSystem",
    "NonProcessedPage",
    "Page",
    "PageItem",
    "Post",
    "RenderError",
    "SiteConfig",
    "SiteContext",
    "SiteContextError",
    "SiteContextGenerator",
    "build_context",
    "load_site_config",
]
