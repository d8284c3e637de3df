from __future__ import annotations

from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

ONE_DECIMAL = Decimal("0.1")


def strip_or_empty(value):
    return (value or "").strip()


def text_or_empty(value):
    if value is None:
        return ""
    return str(value)


def parse_date(value) -> date | None:
    """
    Accetta una data, una stringa ISO (YYYY-MM-DD) o None.
    Le stringhe non valide diventano None invece di sollevare.
    """
    if isinstance(value, date):
        return value
    raw = strip_or_empty(value) if isinstance(value, str) else ""
    if not raw:
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None


def format_date(value: date | None) -> str:
    return value.isoformat() if value else ""


def parse_month(value) -> str:
    raw = strip_or_empty(value) if isinstance(value, str) else ""
    if len(raw) >= 7 and raw[4] == "-" and raw[:4].isdigit() and raw[5:7].isdigit():
        return raw[:7]
    return ""


def format_month(value: date) -> str:
    return value.strftime("%Y-%m")


def parse_int(value, default: int = 0) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            return int(Decimal(str(value)))
        except (InvalidOperation, ValueError):
            return default


def parse_optional_int(value) -> int | None:
    if value is None or value == "":
        return None
    parsed = parse_int(value, default=-1)
    return None if parsed < 0 else parsed


def parse_decimal(value, default: Decimal = Decimal("0")) -> Decimal:
    if value is None or value == "":
        return default
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return default
    if not number.is_finite():
        return default
    # importi e obiettivi non sono mai negativi
    return max(number, Decimal("0"))


def round_one_decimal(value: Decimal) -> Decimal:
    return value.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


def percentage(part, whole) -> Decimal:
    whole = Decimal(whole)
    if not whole:
        return round_one_decimal(Decimal("0"))
    return round_one_decimal(Decimal(part) / whole * Decimal("100"))


def day_window(today: date, before: int, after: int = 0) -> tuple[date, date]:
    return today - timedelta(days=before), today + timedelta(days=after)


def month_bounds(today: date) -> tuple[date, date]:
    start = today.replace(day=1)
    if start.month == 12:
        next_month = start.replace(year=start.year + 1, month=1)
    else:
        next_month = start.replace(month=start.month + 1)
    return start, next_month - timedelta(days=1)
