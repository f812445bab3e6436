import os
import tempfile
import time
from pathlib import Path
from typing import Callable, Union

from loguru import logger

from scraper.models import ExtractedPage
from scraper.utils.url_utils import get_hostname


FALLBACK_HOSTNAME = "page"


class JsonFileWriter:
    def __init__(
        self,
        output_dir: Union[str, Path] = ".",
        clock: Callable[[], float] = time.time,
    ):
        self.output_dir = Path(output_dir)
        self.clock = clock

    def build_filename(self, url: str) -> str:
        """``{hostname}_{epoch-millis}.json`` for the page URL."""
        hostname = get_hostname(url) or FALLBACK_HOSTNAME
        epoch_ms = int(self.clock() * 1000)
        return f"{hostname}_{epoch_ms}.json"

    def save_page(self, page: ExtractedPage) -> Path:
        """Write ``page`` as indented UTF-8 JSON, replacing any file with the same name.

        The payload goes to a temporary file in ``output_dir`` that is renamed onto
        the target, so a failed write leaves no partial JSON behind. Filesystem
        errors are logged and re-raised as the original ``OSError``.
        """
        path = self.output_dir / self.build_filename(page.url)
        payload = page.to_json(indent=2)
        tmp_path = None

        try:
            os.makedirs(self.output_dir, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.output_dir, prefix=f".{path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, path)
        except OSError as exc:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            logger.error(f"Could not write {path}: {exc}")
            raise

        logger.debug(f"Wrote {len(payload)} chars to {path}")
        return path
