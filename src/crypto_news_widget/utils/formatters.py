from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

Number = Union[int, float, Decimal]
Timestamp = Union[datetime, int, float, str]

_LARGE_NUMBER_STEPS = (
    (Decimal("1e12"), "T"),
    (Decimal("1e9"), "B"),
    (Decimal("1e6"), "M"),
    (Decimal("1e3"), "K"),
)


def to_decimal(value) -> Optional[Decimal]:
    """Best-effort conversion to Decimal; None for anything unreadable or non-finite."""
    if value is None or isinstance(value, bool):
        return None
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return None
    return result if result.is_finite() else None


def format_price(price: Number) -> str:
    """Two decimals for prices of at least 1, six below that; thousands-grouped."""
    value = to_decimal(price) or Decimal(0)
    if value >= 1:
        return f"{value:,.2f}"
    return f"{value:,.6f}"


def format_large_number(num: Number) -> str:
    value = to_decimal(num) or Decimal(0)
    for threshold, suffix in _LARGE_NUMBER_STEPS:
        if value >= threshold:
            return f"{value / threshold:.2f}{suffix}"
    if value == value.to_integral_value():
        return str(int(value))
    return str(value.normalize())


def parse_timestamp(ts: Optional[Timestamp]) -> Optional[datetime]:
    """Coerce a datetime, epoch milliseconds or ISO-8601 string to an aware UTC datetime."""
    if ts is None or isinstance(ts, bool):
        return None
    if isinstance(ts, datetime):
        return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)
    if isinstance(ts, (int, float)):
        try:
            return datetime.fromtimestamp(ts / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(ts, str):
        text = ts.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    return None


def format_date(ts: Optional[Timestamp], now: Optional[datetime] = None) -> str:
    """Relative age of a timestamp: "Just now", "3h ago", "2d ago", else "Jan 5"."""
    date = parse_timestamp(ts)
    if date is None:
        return "Recently"

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    diff_seconds = abs((now - date).total_seconds())
    diff_hours = int(diff_seconds // 3600)
    diff_days = int(diff_seconds // 86400)

    if diff_hours < 1:
        return "Just now"
    if diff_hours < 24:
        return f"{diff_hours}h ago"
    if diff_days < 7:
        return f"{diff_days}d ago"

    local = date.astimezone()
    return f"{local.strftime('%b')} {local.day}"
