"""Date pattern mini-language: tokenizer and renderer.

A pattern is a run of field letters and literal text, in the style of
ICU / ``intl`` date patterns::

    yyyy-MM-dd'T'HH:mm:ss.SSS   ->   2025-04-08T13:52:05.123

Field letters (a run of the same letter is one field; its length picks
the width or the name variant):

    G  era               AD / Anno Domini (4+)
    y  year              yy -> two digits, otherwise zero padded to width
    M  month             M, MM numeric; MMM short; MMMM full; MMMMM initial
    L  month             same as M
    d  day of month      zero padded to width
    D  day of year       zero padded to width
    E  weekday           E..EEE short; EEEE full; EEEEE+ shortest
    Q  quarter           Q, QQ numeric; QQQ -> Q2; QQQQ -> 2nd quarter
    a  AM/PM marker
    h  hour 1-12         H  hour 0-23
    k  hour 1-24         K  hour 0-11
    m  minute            s  second
    S  fraction          leading digits of the microsecond fraction
    Z  UTC offset        +0600; ZZZZZ -> +06:00
    z  zone abbreviation

Text between single quotes is literal, ``''`` is a literal quote, and an
unterminated quote runs to the end of the pattern.  Every other
character, including unlisted letters, is copied through.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from timeparts.domain.month import Month
from timeparts.domain.weekday import Weekday

_QUOTE = "'"
_ORDINALS = ("1st", "2nd", "3rd", "4th")


class TokenKind(StrEnum):
    """Kinds of pattern tokens."""

    FIELD = "field"
    LITERAL = "literal"


@dataclass(frozen=True)
class Token:
    """One pattern token: a field letter run or a literal text segment."""

    kind: TokenKind
    text: str

    @property
    def letter(self) -> str:
        return self.text[0]

    @property
    def width(self) -> int:
        return len(self.text)


# ---------------------------------------------------------------------------
# Field renderers
# ---------------------------------------------------------------------------


def _pad(value: int, width: int) -> str:
    return f"{value:0{width}d}"


def _era(value: datetime, width: int) -> str:
    return "Anno Domini" if width >= 4 else "AD"


def _year(value: datetime, width: int) -> str:
    if width == 2:
        return _pad(value.year % 100, 2)
    return _pad(value.year, width)


def _month(value: datetime, width: int) -> str:
    month = Month(value.month)
    if width >= 5:
        return month.full_name[0]
    if width == 4:
        return month.full_name
    if width == 3:
        return month.short_name
    return _pad(value.month, width)


def _day(value: datetime, width: int) -> str:
    return _pad(value.day, width)


def _day_of_year(value: datetime, width: int) -> str:
    return _pad(value.timetuple().tm_yday, width)


def _weekday(value: datetime, width: int) -> str:
    weekday = Weekday(value.isoweekday())
    if width >= 5:
        return weekday.shortest_name
    if width == 4:
        return weekday.full_name
    return weekday.short_name


def _quarter(value: datetime, width: int) -> str:
    quarter = (value.month - 1) // 3 + 1
    if width >= 4:
        return f"{_ORDINALS[quarter - 1]} quarter"
    if width == 3:
        return f"Q{quarter}"
    return _pad(quarter, width)


def _am_pm(value: datetime, width: int) -> str:
    return "AM" if value.hour < 12 else "PM"


def _hour_12(value: datetime, width: int) -> str:
    return _pad(value.hour % 12 or 12, width)


def _hour_24(value: datetime, width: int) -> str:
    return _pad(value.hour, width)


def _hour_1_24(value: datetime, width: int) -> str:
    return _pad(value.hour or 24, width)


def _hour_0_11(value: datetime, width: int) -> str:
    return _pad(value.hour % 12, width)


def _minute(value: datetime, width: int) -> str:
    return _pad(value.minute, width)


def _second(value: datetime, width: int) -> str:
    return _pad(value.second, width)


def _fraction(value: datetime, width: int) -> str:
    digits = _pad(value.microsecond, 6)
    if width <= 6:
        return digits[:width]
    return digits + "0" * (width - 6)


def _offset(value: datetime, width: int) -> str:
    delta = value.utcoffset()
    total = int(delta.total_seconds()) // 60 if delta is not None else 0
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total), 60)
    if width == 5:
        return f"{sign}{hours:02d}:{minutes:02d}"
    return f"{sign}{hours:02d}{minutes:02d}"


def _zone_name(value: datetime, width: int) -> str:
    return value.tzname() or ""


FIELD_RENDERERS: dict[str, Callable[[datetime, int], str]] = {
    "G": _era,
    "y": _year,
    "M": _month,
    "L": _month,
    "d": _day,
    "D": _day_of_year,
    "E": _weekday,
    "Q": _quarter,
    "a": _am_pm,
    "h": _hour_12,
    "H": _hour_24,
    "k": _hour_1_24,
    "K": _hour_0_11,
    "m": _minute,
    "s": _second,
    "S": _fraction,
    "Z": _offset,
    "z": _zone_name,
}


# ---------------------------------------------------------------------------
# Tokenizer / renderer
# ---------------------------------------------------------------------------


def _read_quoted(pattern: str, start: int) -> tuple[str, int]:
    """Read quoted text beginning after the quote at *start*.

    Returns the unescaped text and the index just past the closing quote
    (or the end of the pattern when the quote is unterminated).
    """
    chars: list[str] = []
    i = start + 1
    while i < len(pattern):
        if pattern[i] == _QUOTE:
            if i + 1 < len(pattern) and pattern[i + 1] == _QUOTE:
                chars.append(_QUOTE)
                i += 2
                continue
            return "".join(chars), i + 1
        chars.append(pattern[i])
        i += 1
    return "".join(chars), i


@functools.lru_cache(maxsize=256)
def tokenize(pattern: str) -> tuple[Token, ...]:
    """Split *pattern* into field and literal tokens.

    Adjacent literal characters are merged into a single token.

    Examples:
        >>> [t.text for t in tokenize("HH'h'mm")]
        ['HH', 'h', 'mm']
    """
    tokens: list[Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(Token(TokenKind.LITERAL, "".join(literal)))
            literal.clear()

    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == _QUOTE:
            if i + 1 < len(pattern) and pattern[i + 1] == _QUOTE:
                literal.append(_QUOTE)
                i += 2
                continue
            text, i = _read_quoted(pattern, i)
            literal.append(text)
            continue
        if char in FIELD_RENDERERS:
            end = i
            while end < len(pattern) and pattern[end] == char:
                end += 1
            flush()
            tokens.append(Token(TokenKind.FIELD, pattern[i:end]))
            i = end
            continue
        literal.append(char)
        i += 1
    flush()
    return tuple(tokens)


def render(tokens: tuple[Token, ...], value: datetime) -> str:
    """Render tokenized *tokens* against *value*."""
    parts: list[str] = []
    for token in tokens:
        if token.kind is TokenKind.LITERAL:
            parts.append(token.text)
        else:
            parts.append(FIELD_RENDERERS[token.letter](value, token.width))
    return "".join(parts)


def format_datetime(value: datetime, pattern: str) -> str:
    """Render *value* using *pattern*.

    Examples:
        >>> format_datetime(datetime(2025, 4, 8, 13, 52, 5), "yyyy-MM-dd HH:mm:ss")
        '2025-04-08 13:52:05'
        >>> format_datetime(datetime(2025, 4, 8, 13, 52, 5), "hh:mm a")
        '01:52 PM'
    """
    return render(tokenize(pattern), value)
