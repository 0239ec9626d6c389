"""Tests for config loading (YAML + env)."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from bugtracker.config import AppConfig, LoggingConfig, StoreConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("STORE_REPORTS_DIR", "STORE_ENCODING", "STORE_WRAP_WIDTH", "LOGGING_LEVEL", "LOGGING_FORMAT"):
        monkeypatch.delenv(key, raising=False)


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    """load_config returns defaults when the file does not exist."""
    config = load_config(tmp_path / "config.yaml")
    assert isinstance(config, AppConfig)
    assert config.store.reports_dir == "."
    assert config.store.encoding == "utf-8"
    assert config.store.wrap_width == 50
    assert config.logging.level == "WARNING"


def test_yaml_values_loaded(tmp_path: Path) -> None:
    """Store and logging sections are read from YAML."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "store:\n"
        "  reports_dir: /var/bugs\n"
        "  wrap_width: 72\n"
        "logging:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.store.reports_dir == "/var/bugs"
    assert config.store.wrap_width == 72
    assert config.logging.level == "DEBUG"
    assert config.store.encoding == "utf-8"


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    """An empty file behaves like no file."""
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path).store.wrap_width == 50


def test_env_substitution(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """${VAR} and $VAR in YAML values are replaced from the environment."""
    monkeypatch.setenv("BUGS_HOME", str(tmp_path / "reports"))
    monkeypatch.setenv("BUGS_LEVEL", "INFO")
    path = tmp_path / "config.yaml"
    path.write_text(
        "store:\n  reports_dir: ${BUGS_HOME}\nlogging:\n  level: $BUGS_LEVEL\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.store.reports_dir == str(tmp_path / "reports")
    assert config.logging.level == "INFO"


def test_unknown_variable_left_as_is(tmp_path: Path) -> None:
    """A reference to an unset variable is kept verbatim."""
    path = tmp_path / "config.yaml"
    path.write_text("store:\n  reports_dir: ${BUGTRACKER_UNSET_VAR}\n", encoding="utf-8")
    assert load_config(path).store.reports_dir == "${BUGTRACKER_UNSET_VAR}"


def test_env_overrides_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """STORE_* and LOGGING_* variables override defaults."""
    monkeypatch.setenv("STORE_WRAP_WIDTH", "60")
    monkeypatch.setenv("LOGGING_LEVEL", "ERROR")
    assert StoreConfig().wrap_width == 60
    assert LoggingConfig().level == "ERROR"


def test_wrap_width_must_be_positive() -> None:
    """wrap_width below 1 is rejected."""
    with pytest.raises(ValidationError):
        StoreConfig(wrap_width=0)


def test_reports_path_expands_user() -> None:
    """reports_path expands ~."""
    assert StoreConfig(reports_dir="~/bugs").reports_path == Path("~/bugs").expanduser()


@pytest.mark.parametrize("body", ["- store\n- logging\n", "just a string\n", "42\n"])
def test_non_mapping_top_level_rejected(tmp_path: Path, body: str) -> None:
    """A list or scalar at the top level raises ValueError naming the file."""
    path = tmp_path / "config.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError, match="config.yaml"):
        load_config(path)
