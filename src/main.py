"""Entry point for the blog listing notifier workflow."""

from __future__ import annotations

import logging
import sqlite3
import sys
from datetime import date
from typing import Optional

import requests

from blog_notifier import config, listing, notifier, storage

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
LOGGER = logging.getLogger(__name__)

FATAL_ERRORS = (
    listing.ListingError,
    notifier.NotificationError,
    requests.RequestException,
    sqlite3.Error,
)


def should_fetch(today: date, quiet_weekday: Optional[int]) -> bool:
    """Return whether the listing page should be scraped on ``today``."""

    return quiet_weekday is None or today.weekday() != quiet_weekday


def fetch_and_store(settings: config.Settings, conn: sqlite3.Connection) -> int:
    """Scrape the listing page and persist newly discovered articles."""

    articles = listing.fetch_articles(settings.listing_url, settings.article_path_prefix)
    if articles is None:
        LOGGER.warning("Listing fetch aborted, nothing stored")
        return 0

    inserted = storage.save_articles(conn, articles)
    LOGGER.info("Found %d articles, %d new", len(articles), inserted)
    return inserted


def notify_unread(settings: config.Settings, conn: sqlite3.Connection) -> int:
    """Send the oldest unread articles to the webhook and mark them read.

    The first failure aborts the loop; the failing article stays unread.
    """

    urls = storage.get_unread_urls(conn, settings.articles_per_run)
    for url in urls:
        LOGGER.info("Notifying article: %s", url)
        notifier.send_webhook_message(url, settings.webhook_url)
        storage.mark_as_read(conn, url)
    return len(urls)


def run(
    settings: config.Settings,
    conn: sqlite3.Connection,
    today: Optional[date] = None,
) -> int:
    """Run one fetch-and-notify pass and return the number of notified articles."""

    today = today or date.today()
    if should_fetch(today, settings.quiet_weekday):
        fetch_and_store(settings, conn)
    else:
        LOGGER.info("Skipping listing fetch on %s", today.strftime("%A"))
    return notify_unread(settings, conn)


def main() -> None:
    settings = config.Settings.from_env()
    try:
        with storage.connect(settings.database_path) as conn:
            notified = run(settings, conn)
    except FATAL_ERRORS:
        LOGGER.exception("Run aborted")
        sys.exit(1)

    LOGGER.info("Notified %d articles", notified)
    print("finish")


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    main()
