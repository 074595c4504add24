"""Shared fixtures for the blog notifier tests."""

from __future__ import annotations

from datetime import date
from typing import Iterator

import pytest

from blog_notifier import config, storage

BASE_URL = "https://blog.example.com/articles"
WEBHOOK_URL = "https://hooks.example.com/services/T000/B000/XXX"


@pytest.fixture
def conn(tmp_path) -> Iterator:
    """Open a fresh on-disk database for each test."""
    with storage.connect(str(tmp_path / "blog.db")) as connection:
        yield connection


@pytest.fixture
def settings(tmp_path) -> config.Settings:
    return config.Settings(
        listing_url=BASE_URL,
        webhook_url=WEBHOOK_URL,
        database_path=str(tmp_path / "blog.db"),
    )


def make_article(day: int, title: str = "", month: int = 1) -> storage.ArticleRecord:
    return storage.ArticleRecord(
        title=title or f"Post {month:02d}-{day:02d}",
        url=f"{BASE_URL}/post-{month:02d}-{day:02d}",
        date=date(2023, month, day),
    )
