from __future__ import annotations

import pytest

import main


def test_main_runs_uvicorn_with_settings(sandbox_project, monkeypatch):
    calls = []
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.setattr(main, "configure_logging", lambda level: None)
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    main.main()

    assert len(calls) == 1
    app, kwargs = calls[0]
    assert kwargs == {"host": "0.0.0.0", "port": 8123, "log_level": "info"}
    assert set(app.state.repositories) == {"memory", "file"}


def test_main_exits_when_data_file_is_invalid(sandbox_project, data_file, monkeypatch, caplog):
    data_file.parent.mkdir(parents=True, exist_ok=True)
    data_file.write_text('{"a":', encoding="utf-8")
    monkeypatch.setattr(main, "configure_logging", lambda level: None)
    monkeypatch.setattr(main.uvicorn, "run", lambda *a, **k: pytest.fail("server must not start"))

    with pytest.raises(SystemExit) as info:
        main.main()

    assert info.value.code == 1
    assert "unable to create file storage" in caplog.text


def test_main_exits_when_data_file_cannot_be_opened(sandbox_project, monkeypatch):
    monkeypatch.setenv("KV_DATA_FILE", str(sandbox_project))
    monkeypatch.setattr(main, "configure_logging", lambda level: None)
    monkeypatch.setattr(main.uvicorn, "run", lambda *a, **k: pytest.fail("server must not start"))

    with pytest.raises(SystemExit) as info:
        main.main()

    assert info.value.code == 1
