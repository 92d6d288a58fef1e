from __future__ import annotations

from pathlib import Path

from config import DEFAULT_POLL_INTERVAL_S, JsonConfigStore


def test_config_read_write(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    store = JsonConfigStore(path=path)

    assert store.get_always_on_top() is False
    assert store.get_poll_interval() == DEFAULT_POLL_INTERVAL_S

    store.set_always_on_top(True)
    store.set_poll_interval(1.5)

    reloaded = JsonConfigStore(path=path)
    assert reloaded.get_always_on_top() is True
    assert reloaded.get_poll_interval() == 1.5


def test_config_invalid_json_fallback(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{invalid", encoding="utf-8")

    store = JsonConfigStore(path=path)
    assert store.get_always_on_top() is False
    assert store.get_poll_interval() == DEFAULT_POLL_INTERVAL_S


def test_config_bad_interval_fallback(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"poll_interval_s": "soon"}', encoding="utf-8")
    assert JsonConfigStore(path=path).get_poll_interval() == DEFAULT_POLL_INTERVAL_S

    path.write_text('{"poll_interval_s": -1}', encoding="utf-8")
    assert JsonConfigStore(path=path).get_poll_interval() == DEFAULT_POLL_INTERVAL_S
