"""Text width helpers with proper Unicode width handling."""

from typing import List

from wcwidth import wcwidth


def _char_width(ch: str) -> int:
    w = wcwidth(ch)
    if w is None or w < 0:
        return 0
    return w


def display_width(text: str) -> int:
    """Return visual width of text accounting for wide/narrow characters."""
    return sum(_char_width(ch) for ch in text)


def trim_display(text: str, width: int) -> str:
    """Trim text so visible width doesn't exceed specified width."""
    acc = []
    used = 0
    for ch in text:
        w = _char_width(ch)
        if used + w > width:
            break
        acc.append(ch)
        used += w
    return "".join(acc)


def pad_display(text: str, width: int) -> str:
    """Trim and pad with spaces to exact visible width."""
    trimmed = trim_display(text, width)
    trimmed_width = display_width(trimmed)
    if trimmed_width < width:
        trimmed += " " * (width - trimmed_width)
    return trimmed


def ellipsize(text: str, width: int) -> str:
    """Trim to width, marking the cut with an ellipsis."""
    if display_width(text) <= width:
        return text
    if width <= 1:
        return trim_display(text, width)
    return trim_display(text, width - 1) + "…"


__all__ = ["display_width", "trim_display", "pad_display", "ellipsize"]
