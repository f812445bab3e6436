from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Optional

import httpx
from loguru import logger

from scraper.errors import NetworkError
from scraper.utils.config_loader import ScraperConfig


@dataclass
class FetchResult:
    url: str
    final_url: str
    status_code: int
    content: str
    redirect_count: int = 0


class PageFetcher:
    """Single GET per page with a fixed User-Agent and timeout; no retries."""

    def __init__(
        self,
        user_agent: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.client = client
        self._owns_client = client is None

    @classmethod
    def from_config(cls, config: ScraperConfig, client: Optional[httpx.AsyncClient] = None) -> "PageFetcher":
        return cls(config.user_agent, timeout=config.request_timeout, client=client)

    async def __aenter__(self) -> "PageFetcher":
        if self.client is None:
            self.client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout=self.timeout),
                follow_redirects=True,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client and self.client is not None:
            await self.client.aclose()
            self.client = None

    async def fetch(self, url: str) -> FetchResult:
        """GET ``url``; the whole exchange, redirects and body included, must finish within ``timeout``."""
        if self.client is None:
            raise RuntimeError("HTTP client is not initialized")

        logger.info(f"Fetching: {url}")
        start = time.perf_counter()

        try:
            # httpx timeouts apply per connect/read/write step; wait_for bounds the request as a whole
            resp = await asyncio.wait_for(
                self.client.get(
                    url,
                    headers={"User-Agent": self.user_agent},
                    timeout=self.timeout,
                    follow_redirects=True,
                ),
                timeout=self.timeout,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            raise NetworkError(url, f"Request timed out after {self.timeout:g}s") from exc
        except httpx.InvalidURL as exc:
            raise NetworkError(url, f"Invalid URL: {exc}") from exc
        except httpx.TransportError as exc:
            raise NetworkError(url, f"Connection failed: {exc}") from exc
        except httpx.RequestError as exc:
            raise NetworkError(url, f"Request failed: {exc}") from exc
        finally:
            elapsed = time.perf_counter() - start
            logger.debug(f"GET {url} finished in {elapsed:.3f}s")

        if not resp.is_success:
            raise NetworkError(
                url,
                f"Request failed with status code {resp.status_code}",
                status_code=resp.status_code,
            )

        return FetchResult(
            url=url,
            final_url=str(resp.url),
            status_code=resp.status_code,
            content=resp.text or "",
            redirect_count=len(resp.history),
        )


async def fetch_page(
    url: str,
    config: ScraperConfig,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Fetch ``url`` with a fetcher built from ``config`` and return the body."""
    async with PageFetcher.from_config(config, client=client) as fetcher:
        result = await fetcher.fetch(url)

    if result.redirect_count:
        logger.info(f"Followed {result.redirect_count} redirect(s) to {result.final_url}")
    logger.debug(f"Received {len(result.content)} chars (status={result.status_code})")
    return result.content
