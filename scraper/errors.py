from __future__ import annotations


class ScraperError(Exception):
    """Base class for errors raised by the page scraper."""


class NetworkError(ScraperError):
    """The page could not be fetched (DNS, connection, timeout or HTTP status)."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f"{self.message} ({self.url})"
