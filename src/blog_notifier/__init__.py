"""Automation utilities for forwarding new blog articles to a chat webhook."""

__all__ = [
    "config",
    "listing",
    "storage",
    "notifier",
]
