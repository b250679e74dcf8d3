from __future__ import annotations

import logging
from pathlib import Path

import pytest

from chainrecon.config import (
    ConfigurationError,
    MissingConfigurationError,
    get_database_config,
    get_log_level,
    get_storage_config,
    require_env_var,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_raises_when_any_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR"])

    assert "MISSING_VAR" in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_database_uri_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///custom.db")

    assert get_database_config().uri == "sqlite+pysqlite:///custom.db"


def test_database_uri_defaults_to_data_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.setenv("CHAINRECON_DATA_DIR", str(tmp_path / "data"))

    uri = get_database_config().uri

    assert uri == f"sqlite+pysqlite:///{(tmp_path / 'data').resolve() / 'chainrecon.db'}"
    assert get_storage_config().resolve_data_dir().is_dir()


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, logging.INFO), ("debug", logging.DEBUG), (" WARNING ", logging.WARNING)],
)
def test_log_level_from_environment(
    monkeypatch: pytest.MonkeyPatch, value: str | None, expected: int
) -> None:
    if value is None:
        monkeypatch.delenv("CHAINRECON_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("CHAINRECON_LOG_LEVEL", value)

    assert get_log_level() == expected


def test_log_level_rejects_unknown_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHAINRECON_LOG_LEVEL", "loud")

    with pytest.raises(ConfigurationError):
        get_log_level()
