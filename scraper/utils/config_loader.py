import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from scraper.utils.env_loader import load_environment


ENV_PREFIX = "SCRAPER_"
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
DEFAULT_TARGET_URL = "https://sh-cdn001.akamaized.net/goldbetlive/it/sport/1?status=live"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "config.yaml"


class ScraperConfig(BaseSettings):
    target_url: str = DEFAULT_TARGET_URL
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float = 10.0
    output_dir: str = "."

    log_level: str = "INFO"
    log_path: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")


def _load_yaml_config(config_path: Union[str, Path, None] = None) -> Dict[str, Any]:
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(config_path: Union[str, Path, None] = None) -> ScraperConfig:
    """Build the scraper configuration.

    Precedence: environment (including a discovered .env) -> YAML file -> defaults.
    """
    load_environment()
    file_data = _load_yaml_config(config_path)
    scraper_settings: Dict[str, Any] = file_data.get("scraper") or {}

    # pydantic-settings matches env names case-insensitively; YAML only fills the rest
    env_names = {name.upper() for name in os.environ}
    file_values = {
        key: value
        for key, value in scraper_settings.items()
        if value is not None and f"{ENV_PREFIX}{key.upper()}" not in env_names
    }

    return ScraperConfig(**file_values)


def get_scraper_user_agent() -> str:
    """Return the configured User-Agent header value."""
    config = load_config()
    return config.user_agent
