"""Simple JSON-based config store."""

from __future__ import annotations

import json
from pathlib import Path

DEFAULT_POLL_INTERVAL_S = 0.3


class JsonConfigStore:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path or Path.home() / ".config" / "call_number_formatter" / "config.json"
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def get_always_on_top(self) -> bool:
        data = self._read_all()
        return bool(data.get("always_on_top", False))

    def set_always_on_top(self, value: bool) -> None:
        data = self._read_all()
        data["always_on_top"] = bool(value)
        self._write_all(data)

    def get_poll_interval(self) -> float:
        data = self._read_all()
        try:
            value = float(data.get("poll_interval_s", DEFAULT_POLL_INTERVAL_S))
        except (TypeError, ValueError):
            return DEFAULT_POLL_INTERVAL_S
        return value if value > 0 else DEFAULT_POLL_INTERVAL_S

    def set_poll_interval(self, seconds: float) -> None:
        data = self._read_all()
        data["poll_interval_s"] = float(seconds)
        self._write_all(data)

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict) -> None:
        self._path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
