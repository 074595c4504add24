"""Configuration helpers for the blog listing notifier."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


DEFAULT_DATABASE_PATH = "blog.db"
DEFAULT_LISTING_URL_FILE = "url.txt"
DEFAULT_WEBHOOK_URL_FILE = "webhook.txt"
DEFAULT_ARTICLES_PER_RUN = 3
DEFAULT_QUIET_WEEKDAY = 4  # Friday
DEFAULT_ARTICLE_PATH_PREFIX = "/articles/"

WEEKDAY_NAMES = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

load_dotenv()


@dataclass(slots=True)
class Settings:
    """Runtime configuration loaded from environment variables."""

    listing_url: Optional[str] = None
    webhook_url: Optional[str] = None
    database_path: str = DEFAULT_DATABASE_PATH
    articles_per_run: int = DEFAULT_ARTICLES_PER_RUN
    quiet_weekday: Optional[int] = DEFAULT_QUIET_WEEKDAY
    article_path_prefix: str = DEFAULT_ARTICLE_PATH_PREFIX

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""

        return cls(
            listing_url=_get_text(
                "BLOG_LISTING_URL", "BLOG_LISTING_URL_FILE", DEFAULT_LISTING_URL_FILE
            ),
            webhook_url=_get_text(
                "BLOG_WEBHOOK_URL", "BLOG_WEBHOOK_URL_FILE", DEFAULT_WEBHOOK_URL_FILE
            ),
            database_path=os.getenv("BLOG_DB", DEFAULT_DATABASE_PATH),
            articles_per_run=_get_int("BLOG_ARTICLES_PER_RUN", DEFAULT_ARTICLES_PER_RUN),
            quiet_weekday=_get_weekday("BLOG_QUIET_WEEKDAY", DEFAULT_QUIET_WEEKDAY),
            article_path_prefix=os.getenv(
                "BLOG_ARTICLE_PATH_PREFIX", DEFAULT_ARTICLE_PATH_PREFIX
            ),
        )


def _get_text(var_name: str, file_var_name: str, default_file: str) -> Optional[str]:
    """Read a trimmed value from ``var_name`` or from the file named by ``file_var_name``."""

    raw_value = os.getenv(var_name)
    if raw_value and raw_value.strip():
        return raw_value.strip()

    path = Path(os.getenv(file_var_name, default_file))
    if not path.is_file():
        return None
    value = path.read_text(encoding="utf-8").strip()
    return value or None


def _get_int(var_name: str, default: int) -> int:
    """Read an integer environment variable, falling back to ``default``."""

    raw_value = os.getenv(var_name)
    if raw_value is None:
        return default
    try:
        value = int(raw_value)
    except ValueError:
        return default
    return max(0, value)


def _get_weekday(var_name: str, default: Optional[int]) -> Optional[int]:
    """Read a weekday as ``0``-``6`` (Monday is 0) or an English day name.

    ``none`` or an empty value disables the quiet day. Anything unrecognised
    falls back to ``default``.
    """

    raw_value = os.getenv(var_name)
    if raw_value is None:
        return default
    value = raw_value.strip().lower()
    if value in ("", "none"):
        return None
    if value in WEEKDAY_NAMES:
        return WEEKDAY_NAMES.index(value)
    try:
        weekday = int(value)
    except ValueError:
        return default
    if 0 <= weekday <= 6:
        return weekday
    return default
