import pytest

from modules.helpers import logging_helper
from modules.helpers.config_helper import ConfigHelper


def _write_config(path, text):
    path.write_text(text, encoding="utf-8")
    # Force a re-read even when the mtime resolution hides the rewrite.
    ConfigHelper._config = None


@pytest.fixture
def isolated_config(monkeypatch, tmp_path):
    config_path = tmp_path / "config.ini"
    monkeypatch.setattr(ConfigHelper, "_config_path", config_path)
    monkeypatch.setattr(ConfigHelper, "_config", None)
    monkeypatch.setattr(ConfigHelper, "_config_mtime", None)
    yield config_path
    ConfigHelper._config = None


def test_database_path_reads_config_and_falls_back(isolated_config):
    assert ConfigHelper.get_database_path() == "characters.db"

    _write_config(isolated_config, "[Database]\npath =  campaign/characters.db \n")

    assert ConfigHelper.get_database_path() == "campaign/characters.db"
    assert ConfigHelper.get("Database", "missing", fallback="x") == "x"
    assert ConfigHelper.getboolean("Logging", "enabled") is False


def test_logging_writes_to_configured_file(isolated_config, tmp_path):
    log_dir = tmp_path / "logs"
    _write_config(
        isolated_config,
        f"[Logging]\nenabled = True\ndirectory = {log_dir}\nlevel = DEBUG\n",
    )

    _, enabled = logging_helper.ensure_logger()
    assert enabled
    logging_helper.log_info("sheet saved", func_name="tests.logging")

    content = (log_dir / "magecharacterdesigner.log").read_text(encoding="utf-8")
    assert "tests.logging - sheet saved" in content

    _write_config(isolated_config, "[Logging]\nenabled = False\n")
    _, enabled = logging_helper.ensure_logger()
    assert not enabled
