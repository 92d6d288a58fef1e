"""Call number recognition and formatting.

A call number is copied as ``(<digits>)<digits>``, for example ``(1)23456``.
The catalogue expects it as the digits without parentheses behind a fixed
``00`` prefix, so ``(1)23456`` becomes ``00123456``.
"""

from __future__ import annotations

import re

CALL_NUMBER_PATTERN = re.compile(r"\((\d+)\)(\d+)", re.ASCII)
CALL_NUMBER_PREFIX = "00"

PLACEHOLDER_TEXT = "Copy call number"
IDLE_STATUS_TEXT = "Monitoring clipboard for call numbers..."


def try_format(text: str) -> str | None:
    """Return the formatted leftmost call number in ``text``, or ``None``."""
    if not text:
        return None
    match = CALL_NUMBER_PATTERN.search(text)
    if match is None:
        return None
    return f"{CALL_NUMBER_PREFIX}{match.group(1)}{match.group(2)}"


def status_text(count: int) -> str:
    if count <= 0:
        return IDLE_STATUS_TEXT
    plural = "s" if count > 1 else ""
    return f"Formatted > {count} < call number{plural}."
