# This test file runs the seed CLI end to end against an in-memory database.

from __future__ import annotations

import json
import sys

import pytest

from scripts.seed_database import main


def test_seed_cli_prints_summary(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["seed_database.py", "--database-url", "sqlite://"])
    main()

    assert json.loads(capsys.readouterr().out) == {"authors": 4, "news": 11}


def test_seed_cli_exits_non_zero_without_schema(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        sys, "argv", ["seed_database.py", "--database-url", "sqlite://", "--skip-schema"]
    )
    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
