from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import PurePath
from types import MappingProxyType
from typing import Any, Mapping, Optional

import yaml

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

from .errors import ConfigurationError
from .permalink import DEFAULT_PERMALINK

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ("_config.yml", "_config.yaml", "_config.toml", "_config.json")


@dataclass(frozen=True)
class SiteConfig:
    permalink: str = DEFAULT_PERMALINK
    data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    source: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: Optional[str] = None) -> SiteConfig:
        permalink = data.get("permalink")
        if permalink is None:
            permalink = DEFAULT_PERMALINK
        elif not isinstance(permalink, str) or not permalink.strip():
            logger.warning("Ignoring invalid permalink %r in %s", permalink, source or "config")
            permalink = DEFAULT_PERMALINK
        return cls(permalink=permalink.strip(), data=MappingProxyType(dict(data)), source=source)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)


def parse_config(text: str, name: str) -> dict:
    suffix = PurePath(name).suffix.lower()
    try:
        if suffix == ".toml":
            data = toml.loads(text)
        elif suffix in {".yml", ".yaml"}:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (toml.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigurationError(name, str(exc)) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(name, "config must be a mapping")
    return data


def load_site_config(fs, root: PurePath) -> SiteConfig:
    """Load the first config file found at the site root.

    A missing file gives the defaults. So does an unparsable one, after a
    warning: a broken config never aborts a build.
    """
    for name in CONFIG_FILE_NAMES:
        path = root / name
        if not fs.exists(path) or fs.is_dir(path):
            continue
        try:
            text = fs.read_bytes(path).decode("utf-8")
            data = parse_config(text, name)
        except UnicodeDecodeError as exc:
            logger.warning("Config file %s is not UTF-8 (%s); using defaults.", path, exc)
            return SiteConfig(source=str(path))
        except ConfigurationError as exc:
            logger.warning("%s; using defaults.", exc)
            return SiteConfig(source=str(path))
        logger.debug("Loaded site config from %s", path)
        return SiteConfig.from_mapping(data, source=str(path))
    return SiteConfig()
