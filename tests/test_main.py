# tests/test_main.py

from __future__ import annotations

import pytest

from taskflow import main
from taskflow.config import Settings


@pytest.mark.parametrize("error", [OSError("read-only file system"), PermissionError("denied")])
def test_run_exits_when_store_cannot_be_initialised(monkeypatch: pytest.MonkeyPatch, error: Exception) -> None:
    def _fail(settings):
        raise error

    monkeypatch.setattr(main.Settings, "from_env", classmethod(lambda cls: Settings(database_url="sqlite://")))
    monkeypatch.setattr(main, "setup_logging", lambda level: None)
    monkeypatch.setattr(main, "create_app", _fail)

    with pytest.raises(SystemExit) as exc:
        main.run()
    assert exc.value.code == 1
