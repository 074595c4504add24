"""SQLite persistence for articles discovered on the blog listing page."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ArticleRecord:
    """Representation of an article stored in the database."""

    title: str
    url: str
    date: date
    read: bool = False


SCHEMA = """
CREATE TABLE IF NOT EXISTS articles (
    title TEXT NOT NULL,
    url TEXT NOT NULL,
    date DATE NOT NULL,
    read BOOLEAN DEFAULT FALSE,
    UNIQUE (url, title)
);
"""


@contextmanager
def connect(path: str) -> Iterator[sqlite3.Connection]:
    """Context manager returning a SQLite connection with the schema in place."""

    db_path = Path(path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(db_path)
    try:
        initialize_database(connection)
        yield connection
    finally:
        connection.close()


def initialize_database(conn: sqlite3.Connection) -> None:
    """Create the necessary database tables if they do not exist."""

    conn.executescript(SCHEMA)


def _is_duplicate(exc: sqlite3.IntegrityError) -> bool:
    return "UNIQUE constraint failed" in str(exc)


def save_articles(conn: sqlite3.Connection, articles: Iterable[ArticleRecord]) -> int:
    """Insert ``articles`` in a single transaction, skipping known ones.

    Returns the number of rows inserted. Errors other than a duplicate
    ``(url, title)`` roll the whole transaction back and propagate.
    """

    inserted = 0
    with conn:
        cursor = conn.cursor()
        for article in articles:
            try:
                cursor.execute(
                    "INSERT INTO articles (title, url, date) VALUES (?, ?, ?)",
                    (article.title, article.url, article.date.isoformat()),
                )
            except sqlite3.IntegrityError as exc:
                if not _is_duplicate(exc):
                    raise
                LOGGER.debug("Skipping known article %s", article.url)
                continue
            inserted += 1
    return inserted


def get_unread_urls(conn: sqlite3.Connection, limit: int) -> List[str]:
    """Return up to ``limit`` unread article URLs, oldest first."""

    if limit <= 0:
        return []
    cursor = conn.execute(
        "SELECT url FROM articles WHERE read = 0 ORDER BY date LIMIT ?",
        (limit,),
    )
    return [row[0] for row in cursor.fetchall()]


def mark_as_read(conn: sqlite3.Connection, url: str) -> int:
    """Flag every article with ``url`` as read and return the rows touched."""

    with conn:
        cursor = conn.execute("UPDATE articles SET read = 1 WHERE url = ?", (url,))
    return cursor.rowcount


def get_article(conn: sqlite3.Connection, url: str) -> Optional[ArticleRecord]:
    """Load a single article by URL, mainly for inspection."""

    row = conn.execute(
        "SELECT title, url, date, read FROM articles WHERE url = ? ORDER BY rowid LIMIT 1",
        (url,),
    ).fetchone()
    if row is None:
        return None
    title, article_url, raw_date, read = row
    return ArticleRecord(
        title=title,
        url=article_url,
        date=date.fromisoformat(raw_date),
        read=bool(read),
    )
