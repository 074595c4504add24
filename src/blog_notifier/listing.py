"""Utilities for downloading the blog listing page and extracting articles."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from .storage import ArticleRecord

LOGGER = logging.getLogger(__name__)

LISTING_DATE_PATTERN = re.compile(r"^\d{4}\.\d{2}\.\d{2}$")


class ListingError(RuntimeError):
    """Raised when the listing page cannot be turned into articles."""


def fetch_listing_html(url: str, timeout: int = 20) -> Optional[str]:
    """Download the raw HTML for the listing page.

    Returns ``None`` when the server answers with anything but 200; transport
    failures propagate as :class:`requests.RequestException`.
    """

    response = requests.get(url, timeout=timeout)
    if response.status_code != 200:
        LOGGER.error("Listing page %s returned status %s", url, response.status_code)
        return None
    return response.text


def parse_listing_date(value: str) -> date:
    """Convert a ``YYYY.MM.DD`` listing date into a calendar date."""

    cleaned = value.strip()
    if not LISTING_DATE_PATTERN.match(cleaned):
        raise ListingError(f"Unexpected listing date: {value!r}")
    try:
        return datetime.strptime(cleaned, "%Y.%m.%d").date()
    except ValueError as exc:
        raise ListingError(f"Unexpected listing date: {value!r}") from exc


def build_article_url(base_url: str, href: str, path_prefix: str = "/articles/") -> str:
    """Join ``href`` onto ``base_url`` after dropping the listing path prefix."""

    path = href.replace(path_prefix, "", 1) if path_prefix else href
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def parse_listing(
    html: str, base_url: str, path_prefix: str = "/articles/"
) -> List[ArticleRecord]:
    """Extract articles from every ``.article-list`` container in ``html``."""

    soup = BeautifulSoup(html, "html.parser")
    articles: List[ArticleRecord] = []
    for container in soup.select(".article-list"):
        for item in container.find_all("li"):
            link = item.find("a")
            if link is None:
                LOGGER.warning("Skipping listing item without a link: %s", item.get_text(strip=True))
                continue

            date_tag = item.select_one(".date")
            published = parse_listing_date(date_tag.get_text() if date_tag else "")
            articles.append(
                ArticleRecord(
                    title=link.get("title", ""),
                    url=build_article_url(base_url, link.get("href", ""), path_prefix),
                    date=published,
                )
            )
    return articles


def fetch_articles(
    listing_url: Optional[str], path_prefix: str = "/articles/"
) -> Optional[List[ArticleRecord]]:
    """Fetch and parse the listing page.

    Returns ``None`` when the page could not be retrieved.
    """

    if not listing_url:
        raise ListingError("Listing URL is not configured")

    html = fetch_listing_html(listing_url)
    if html is None:
        return None
    return parse_listing(html, listing_url, path_prefix)
