"""Site configuration loading tests."""

import logging

import pytest

from sitecontext import MemoryFileSystem, SiteConfig, load_site_config
from sitecontext.config import parse_config
from sitecontext.errors import ConfigurationError
from sitecontext.fs import LocalFileSystem
from sitecontext.permalink import DEFAULT_PERMALINK

from .conftest import SITE_ROOT


def load(files):
    fs = MemoryFileSystem({f"{SITE_ROOT}/{name}": text for name, text in files.items()})
    return load_site_config(fs, fs.path(SITE_ROOT))


def test_missing_config_uses_defaults():
    config = load({"index.md": "hi"})

    assert config == SiteConfig()
    assert config.permalink == DEFAULT_PERMALINK
    assert config.source is None


def test_yaml_config():
    config = load({"_config.yml": "permalink: /blog/:year/:title.html\ntitle: My Site\n"})

    assert config.permalink == "/blog/:year/:title.html"
    assert config.get("title") == "My Site"
    assert config.source == f"{SITE_ROOT}/_config.yml"


def test_toml_and_json_configs():
    assert load({"_config.toml": 'permalink = "/:title.html"\n'}).permalink == "/:title.html"
    assert load({"_config.json": '{"permalink": "pretty"}'}).permalink == "pretty"


def test_yml_takes_precedence():
    config = load({"_config.yml": "permalink: /a/:title\n", "_config.json": '{"permalink": "/b/:title"}'})

    assert config.permalink == "/a/:title"


def test_unparsable_config_falls_back_to_defaults(caplog):
    with caplog.at_level(logging.WARNING, logger="sitecontext.config"):
        config = load({"_config.yml": "permalink: [unclosed\n"})

    assert config.permalink == DEFAULT_PERMALINK
    assert "using defaults" in caplog.text


def test_non_mapping_config_falls_back_to_defaults():
    assert load({"_config.yml": "- a\n- b\n"}).permalink == DEFAULT_PERMALINK


def test_invalid_permalink_value_is_ignored():
    assert load({"_config.yml": "permalink: 42\n"}).permalink == DEFAULT_PERMALINK


def test_empty_config_file():
    assert load({"_config.yml": ""}).permalink == DEFAULT_PERMALINK


def test_parse_config_raises_configuration_error():
    with pytest.raises(ConfigurationError, match="_config.json"):
        parse_config("{nope", "_config.json")


def test_config_is_read_only():
    config = load({"_config.yml": "title: Site\n"})

    with pytest.raises(TypeError):
        config.data["title"] = "Other"


def test_local_config(tmp_path):
    (tmp_path / "_config.yml").write_text("permalink: none\n", encoding="utf-8")

    assert load_site_config(LocalFileSystem(), tmp_path).permalink == "none"
