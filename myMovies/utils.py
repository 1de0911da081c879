from __future__ import annotations
import sys
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from myMovies import settings
from myMovies.errors import ParseError


def _write_log(level: str, message: str) -> None:
    path = settings.LOG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with path.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {level:<5} {message}\n")


def log_debug(message: str) -> None:
    """Append timestamped message to the log file (only when DEBUG is on)."""
    if settings.DEBUG:
        _write_log("DEBUG", message)


def log_error(message: str) -> None:
    """Append an ERROR line to the log file and echo it to stderr."""
    _write_log("ERROR", message)
    print(f"{settings.APP_NAME}: {message}", file=sys.stderr)


def reset_log() -> None:
    """Start a fresh log file for this session."""
    settings.LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    settings.LOG_PATH.write_text("", encoding="utf-8")


def text_has_content(text: Optional[str]) -> bool:
    """True if *text* holds at least one non-whitespace character."""
    return text is not None and text.strip() != ""


def parse_date(text: Optional[str], field: str) -> Optional[date]:
    """
    Parse ``YYYY-MM-DD`` text into a date.

    Blank text means "no value" and returns None.
    Raises ParseError naming *field* otherwise.
    """
    if not text_has_content(text):
        return None
    try:
        return datetime.strptime(text.strip(), settings.DATE_FORMAT).date()
    except ValueError:
        raise ParseError(field, text, "date (YYYY-MM-DD)") from None


def parse_decimal(text: Optional[str], field: str) -> Optional[Decimal]:
    """Parse decimal text; blank → None, NaN/Infinity are rejected."""
    if not text_has_content(text):
        return None
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        raise ParseError(field, text, "number") from None
    if not value.is_finite():
        raise ParseError(field, text, "number")
    return value


def format_field(value: Any) -> str:
    """Text shown to the user / written to file for a field value ('' for None)."""
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
