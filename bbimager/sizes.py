"""Formatting and filtering helpers for destination listings."""

from __future__ import annotations

_KB = 1024.0
_MB = 1024.0 * _KB
_GB = 1024.0 * _MB
_TB = 1024.0 * _GB


def format_size(size: int) -> str:
    """Render a byte count with a binary unit and two decimals."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size < _KB:
        return f"{size} B"
    for limit, divisor, unit in ((_MB, _KB, "KB"), (_GB, _MB, "MB"), (_TB, _GB, "GB")):
        if size < limit:
            return f"{size / divisor:.2f} {unit}"
    return f"{size / _TB:.2f} TB"


def matches_search(label: str, search: str) -> bool:
    """Case-insensitive substring match used to filter listings."""
    return search.lower() in label.lower()