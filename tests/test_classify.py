"""Content classification tests."""

import pytest

from sitecontext.classify import ContentKind, classify, is_excluded, is_post


@pytest.mark.parametrize(
    ("source", "excluded"),
    [
        ("index.md", False),
        ("docs/page.md", False),
        ("_posts/2012-01-01-a.md", False),
        ("_posts/nested/a.md", False),
        ("_config.yml", True),
        ("_site/index.html", True),
        ("_layouts/default.html", True),
        ("_plugins/thing.py", True),
        ("docs/_drafts/a.md", True),
        (".git/config", True),
        ("docs/.hidden", True),
        ("_posts/.DS_Store", True),
        ("_posts/_sub/2012-01-01-a.md", True),
    ],
)
def test_exclusion_policy(source, excluded):
    assert is_excluded(source) is excluded


def test_only_first_segment_makes_a_post():
    assert is_post("_posts/a.md")
    assert not is_post("blog/_posts/a.md")
    assert not is_post("a.md")


def test_post_is_classified_without_front_matter():
    item = classify("_posts/SomeFile.md", b"# Title")

    assert item.kind is ContentKind.POST
    assert item.metadata == {}
    assert item.body == "# Title"


def test_page_needs_front_matter():
    page = classify("SubFolder/a.md", b"---\ntitle: A\n---\n# A")
    raw = classify("SubFolder/b.md", b"# B")

    assert page.kind is ContentKind.PAGE
    assert page.metadata == {"title": "A"}
    assert page.directory == "SubFolder"
    assert raw.kind is ContentKind.RAW
    assert raw.raw == b"# B"


def test_binary_files_are_passed_through():
    data = b"\x89PNG\r\n\x1a\n\xff\xfe"

    item = classify("img/logo.png", data)

    assert item.kind is ContentKind.RAW
    assert item.raw == data
    assert item.directory == "img"


def test_root_files_have_empty_directory():
    assert classify("index.md", b"---\n---\nhi").directory == ""


def test_undecodable_post_is_still_a_post():
    item = classify("_posts/a.md", b"\xff\xfe# T")

    assert item.kind is ContentKind.POST
    assert item.body.endswith("# T")


def test_broken_front_matter_makes_a_raw_page():
    unterminated = classify("docs/a.md", b"---\ntitle: A\n# A\n")
    broken_yaml = classify("docs/b.md", b"---\ntitle: [oops\n---\n# B\n")

    assert unterminated.kind is ContentKind.RAW
    assert broken_yaml.kind is ContentKind.RAW
