"""Core data models for the app."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MonitorState(str, Enum):
    IDLE = "IDLE"
    PROCESSING = "PROCESSING"


@dataclass
class SessionCounter:
    count: int = 0

    def increment(self) -> int:
        self.count += 1
        return self.count

    def reset(self) -> None:
        self.count = 0


@dataclass
class FormatEvent:
    original: str
    formatted: str
    count: int
