from scraper.utils.config_loader import (
    DEFAULT_TARGET_URL,
    DEFAULT_USER_AGENT,
    get_scraper_user_agent,
    load_config,
)


def test_load_config_defaults_from_packaged_file():
    config = load_config()

    assert config.user_agent == DEFAULT_USER_AGENT
    assert config.target_url == DEFAULT_TARGET_URL
    assert config.request_timeout == 10.0
    assert config.output_dir == "."
    assert config.log_path is None


def test_load_config_prefers_environment(monkeypatch, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("scraper:\n  request_timeout: 3\n  output_dir: from-yaml\n")
    monkeypatch.setenv("SCRAPER_REQUEST_TIMEOUT", "7")

    config = load_config(config_file)

    assert config.request_timeout == 7.0
    assert config.output_dir == "from-yaml"


def test_load_config_reads_dotenv(monkeypatch, tmp_path):
    monkeypatch.delenv("SCRAPER_OUTPUT_DIR", raising=False)
    (tmp_path / ".env").write_text("SCRAPER_OUTPUT_DIR=/srv/pages\n")

    config = load_config(tmp_path / "missing.yaml")

    assert config.output_dir == "/srv/pages"


def test_get_scraper_user_agent_prefers_environment(monkeypatch):
    monkeypatch.setenv("SCRAPER_USER_AGENT", "CustomBot/2.0")

    assert get_scraper_user_agent() == "CustomBot/2.0"


def test_get_scraper_user_agent_falls_back_to_config_file():
    assert get_scraper_user_agent() == DEFAULT_USER_AGENT


def test_load_config_lowercase_environment_beats_yaml(monkeypatch, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("scraper:\n  output_dir: from-yaml\n")
    monkeypatch.setenv("scraper_output_dir", "from-env")

    config = load_config(config_file)

    assert config.output_dir == "from-env"
