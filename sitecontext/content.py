from __future__ import annotations

import datetime as dt
import logging
import re
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

FRONT_MATTER_MARKER = "---"
DATE_PREFIX_RE = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})-(?P<name>.+)$")


def slugify(text: str) -> str:
    text = text.lower()
    text = re.sub(r"[^\w]+", "-", text, flags=re.UNICODE)
    text = text.strip("-_").replace("_", "-")
    return text or "post"


def parse_list(value: object) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    value = str(value).strip()
    if value.startswith("[") and value.endswith("]"):
        inner = value[1:-1]
        items = [item.strip().strip("'\"") for item in inner.split(",")]
    else:
        items = [item.strip() for item in value.split(",")]
    return [item for item in items if item]


def parse_front_matter(text: str) -> tuple[Optional[dict[str, Any]], str]:
    """Split ``text`` into its front matter mapping and body.

    The mapping is ``None`` when the text carries no usable front matter:
    no opening marker on the first line, no closing marker, or a block that
    is not a YAML mapping. In that case the body is the whole text.
    Text following the closing marker on the same line starts the body.
    """
    clean_text = text.lstrip("\ufeff")
    lines = clean_text.splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_MARKER:
        return None, clean_text

    end = None
    for i in range(1, len(lines)):
        if lines[i].startswith(FRONT_MATTER_MARKER):
            end = i
            break
    if end is None:
        logger.debug("Unterminated front matter block")
        return None, clean_text

    try:
        data = yaml.safe_load("".join(lines[1:end]))
    except yaml.YAMLError as exc:
        logger.debug("Ignoring malformed front matter: %s", exc)
        return None, clean_text
    if data is None:
        data = {}
    if not isinstance(data, dict):
        logger.debug("Front matter is not a mapping: %s", type(data).__name__)
        return None, clean_text

    meta = {str(key).strip().lower(): value for key, value in data.items()}
    rest = lines[end][len(FRONT_MATTER_MARKER) :]
    if rest.strip():
        body = rest + "".join(lines[end + 1 :])
    else:
        body = "".join(lines[end + 1 :])
    return meta, body


def split_date_prefix(stem: str) -> tuple[Optional[dt.datetime], str]:
    """Return the ``yyyy-MM-dd-`` date embedded in a file stem and the rest."""
    match = DATE_PREFIX_RE.match(stem)
    if not match:
        return None, stem
    try:
        date = dt.datetime(int(match.group("year")), int(match.group("month")), int(match.group("day")))
    except ValueError:
        return None, stem
    return date, match.group("name")


def _naive(value: dt.datetime) -> dt.datetime:
    if value.tzinfo is None:
        return value
    return value.replace(tzinfo=None)


def coerce_date(value: object) -> Optional[dt.datetime]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, dt.datetime):
        return _naive(value)
    if isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time())
    date_value = str(value).strip()
    if not date_value:
        return None
    try:
        return _naive(dt.datetime.fromisoformat(date_value))
    except ValueError:
        pass
    for fmt in ("%Y-%m-%d %H:%M", "%Y-%m-%d %H:%M:%S %z", "%Y/%m/%d"):
        try:
            return _naive(dt.datetime.strptime(date_value, fmt))
        except ValueError:
            continue
    logger.debug("Unrecognized date value: %r", date_value)
    return None


def get_categories(meta: dict) -> list[str]:
    if meta.get("categories"):
        return parse_list(meta["categories"])
    if meta.get("category"):
        return parse_list(meta["category"])
    return []
