import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from scraper.utils.logger import reset_logger


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test from an empty directory with no scraper/server env overrides."""

    for key in list(os.environ.keys()):
        if key.upper().startswith("SCRAPER_") or key == "PORT":
            monkeypatch.delenv(key, raising=False)

    # no stray .env is discovered and output files land in tmp_path
    monkeypatch.chdir(tmp_path)

    yield

    reset_logger()


MINIMAL_PAGE = (
    "<html><head><title>T</title></head>"
    "<body><p>Hello world</p><a href=\"https://x.com\">Link</a></body></html>"
)


@pytest.fixture
def minimal_page() -> str:
    return MINIMAL_PAGE
