from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values, find_dotenv, load_dotenv


PathLike = Union[str, Path]


def _resolve_dotenv(dotenv_path: PathLike | None) -> str:
    if dotenv_path is not None:
        return str(dotenv_path)
    return find_dotenv(usecwd=True)


def load_environment(dotenv_path: PathLike | None = None, *, override: bool = False) -> bool:
    """Load variables from a .env file into ``os.environ``.

    Args:
        dotenv_path: Explicit path to the .env file. If omitted, the first
            .env found walking up from the current working directory is used.
        override: Whether to overwrite variables already set in the process.

    Returns:
        True if an env file was found and loaded, otherwise False.
    """

    path = _resolve_dotenv(dotenv_path)
    if not path or not Path(path).is_file():
        return False

    return load_dotenv(dotenv_path=path, override=override)


def read_dotenv_values(dotenv_path: PathLike | None = None) -> Dict[str, Optional[str]]:
    """Return the parsed contents of a .env file without touching ``os.environ``.

    A missing file yields an empty mapping.
    """

    path = _resolve_dotenv(dotenv_path)
    if not path or not Path(path).is_file():
        return {}

    return dict(dotenv_values(path))
