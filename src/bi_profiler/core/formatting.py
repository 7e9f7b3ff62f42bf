"""Display formatting for profiled values.

Turns raw statistics into the short strings the dashboard shows next to a
column: abbreviated numbers, percentages, file sizes and dates.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from bi_profiler.analysis.typing.coercion import to_timestamp

if TYPE_CHECKING:
    from bi_profiler.dataset.models import Column

_ABBREVIATIONS: list[tuple[float, str]] = [(1e9, "B"), (1e6, "M"), (1e3, "K")]

_CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}

_SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]

DEFAULT_DATE_FORMAT = "%b %d, %Y"


def format_number(value: float, decimals: int = 2) -> str:
    """Format a number with K/M/B abbreviations.

    Example:
        format_number(1234567) -> "1.23M"
    """
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    abs_value = abs(value)

    for threshold, suffix in _ABBREVIATIONS:
        if abs_value >= threshold:
            return f"{sign}{abs_value / threshold:.{decimals}f}{suffix}"

    return f"{sign}{abs_value:.{decimals}f}"


def format_currency(value: float, currency: str = "USD") -> str:
    """Format a monetary amount with thousands separators and two decimals."""
    symbol = _CURRENCY_SYMBOLS.get(currency.upper())
    sign = "-" if value < 0 else ""
    amount = f"{abs(value):,.2f}"
    if symbol:
        return f"{sign}{symbol}{amount}"
    return f"{sign}{currency.upper()} {amount}"


def format_percentage(value: float, decimals: int = 2) -> str:
    """Format a ratio as a percentage (0.125 -> "12.50%")."""
    return f"{value * 100:.{decimals}f}%"


def format_file_size(size_bytes: int) -> str:
    """Format a byte count using 1024-based units."""
    if size_bytes <= 0:
        return "0 Bytes"

    index = 0
    scaled = float(size_bytes)
    while scaled >= 1024 and index < len(_SIZE_UNITS) - 1:
        scaled /= 1024
        index += 1
    # Drop trailing zeros: 1.50 -> 1.5, 2.00 -> 2
    return f"{scaled:.2f}".rstrip("0").rstrip(".") + f" {_SIZE_UNITS[index]}"


def format_date(value: datetime | date | str, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a date-like value with a strftime pattern.

    Raises:
        ValueError: If a string value is not a recognizable date
    """
    timestamp = to_timestamp(value)
    if timestamp is None:
        raise ValueError(f"Not a date: {value!r}")
    return timestamp.strftime(fmt)


def format_value(value: Any, decimals: int = 2) -> str:
    """Format a single statistic for display."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime | date):
        return format_date(value)
    if isinstance(value, int | float):
        return format_number(value, decimals)
    return str(value)


def describe_column(column: Column, decimals: int = 2) -> dict[str, str]:
    """Render a column's statistics as display strings.

    Only statistics present on the column are included.
    """
    stats = column.stats
    summary = {
        "name": column.name,
        "type": column.type.value,
        "count": f"{stats.count:,}",
        "nulls": format_percentage(stats.null_ratio, decimals),
        "unique": f"{stats.unique_count:,}",
    }

    for key in ("min", "max", "mean", "median", "std_dev", "mode"):
        value = getattr(stats, key)
        if value is not None:
            summary[key] = format_value(value, decimals)

    return summary
