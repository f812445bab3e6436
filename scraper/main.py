import argparse
import asyncio
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import httpx
from loguru import logger

from scraper.errors import NetworkError
from scraper.fetcher import fetch_page
from scraper.models import ExtractedPage
from scraper.parsing.html_extractor import extract_page
from scraper.storage.json_writer import JsonFileWriter
from scraper.utils.config_loader import ScraperConfig, load_config
from scraper.utils.logger import LOG_LEVELS, setup_logger


@dataclass(frozen=True)
class ScrapeOutcome:
    page: ExtractedPage
    output_path: Path


async def scrape(
    url: str,
    config: ScraperConfig,
    client: Optional[httpx.AsyncClient] = None,
    writer: Optional[JsonFileWriter] = None,
) -> ScrapeOutcome:
    """Fetch, extract and persist one page. Nothing is written if the fetch fails."""
    html = await fetch_page(url, config, client=client)
    page = extract_page(url, html)

    writer = writer or JsonFileWriter(config.output_dir)
    output_path = writer.save_page(page)

    return ScrapeOutcome(page=page, output_path=output_path)


def _log_summary(outcome: ScrapeOutcome) -> None:
    page = outcome.page
    logger.info(f"Successfully parsed {page.url}")
    logger.info(f"Title: {page.title}")
    logger.info(f"Links: {len(page.links)}")
    logger.info(f"Images: {len(page.images)}")
    logger.info(f"Paragraphs: {len(page.paragraphs)}")
    logger.info(f"Word Count: {page.word_count}")
    logger.info(f"Saved to: {outcome.output_path}")


async def run(
    url: str,
    config: ScraperConfig,
    client: Optional[httpx.AsyncClient] = None,
    writer: Optional[JsonFileWriter] = None,
) -> int:
    try:
        outcome = await scrape(url, config, client=client, writer=writer)
    except (NetworkError, OSError) as e:
        logger.error(f"Failed to parse webpage: {e}")
        return 1

    _log_summary(outcome)
    return 0


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scrape-page",
        description="Fetch a web page and save its structured content as JSON.",
    )
    parser.add_argument("url", nargs="?", help="Absolute URL to scrape (default: configured target_url)")
    parser.add_argument("--output-dir", help="Directory for the JSON file (default: current directory)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (case-insensitive)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    config = load_config()
    overrides = {
        "output_dir": args.output_dir,
        "request_timeout": args.timeout,
        "log_level": args.log_level,
    }
    config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    setup_logger(config.log_level, config.log_path)

    url = args.url or config.target_url
    return asyncio.run(run(url, config))


if __name__ == "__main__":
    sys.exit(main())
