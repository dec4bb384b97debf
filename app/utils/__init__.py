"""Utility helpers for reusable functionality."""

from .datetime import (
    add_minutes,
    combine_local,
    ensure_app_naive_datetime,
    ensure_app_timezone,
    format_clock,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
)
from .retry import retry_read

__all__ = [
    "add_minutes",
    "combine_local",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "format_clock",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "retry_read",
]
