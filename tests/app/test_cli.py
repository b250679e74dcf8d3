from __future__ import annotations

from pathlib import Path

import pytest

from chainrecon.domain.ingestion import ReconcileRecordsResult
from chainrecon.ui import cli as cli_module

FEED_PATH = Path(__file__).resolve().parents[1] / "data" / "feed.jsonl"


def test_cli_replay_passes_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_replay(path: Path, **kwargs: object) -> ReconcileRecordsResult:
        captured["path"] = path
        captured.update(kwargs)
        return ReconcileRecordsResult()

    monkeypatch.setattr(cli_module, "replay_feed", fake_replay)

    cli_module.main(["--database-uri", "sqlite+pysqlite:///:memory:", "replay", str(FEED_PATH)])

    assert captured == {"path": FEED_PATH, "database_uri": "sqlite+pysqlite:///:memory:"}


def test_cli_init_db(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_initialise(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(cli_module, "initialise_database", fake_initialise)

    cli_module.main(["init-db"])

    assert captured == {"database_uri": None}


def test_cli_missing_feed_exits_with_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        cli_module.main(["replay", str(tmp_path / "absent.jsonl")])

    assert exc.value.code == 2


def test_cli_fatal_error_exits_with_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_replay(*_: object, **__: object) -> ReconcileRecordsResult:
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(cli_module, "replay_feed", failing_replay)

    with pytest.raises(SystemExit) as exc:
        cli_module.main(["replay", str(FEED_PATH)])

    assert exc.value.code == 1


def test_cli_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHAINRECON_LOG_LEVEL", "chatty")

    with pytest.raises(SystemExit) as exc:
        cli_module.main(["init-db"])

    assert exc.value.code == 2
