"""Functions that convert the text content of an element (or the value
of an attribute) to a Python value. Each raises the appropriate
ReadError subclass, carrying the offending text, if the conversion
fails.
"""

import re
from datetime import date, datetime
from enum import Enum
from typing import Callable, Type, TypeVar

import dateutil.parser as dp

from tcxread.exceptions import DateParseError, ParseBoolError, ParseFloatError, ParseIntError, UnknownEnumValueError

E = TypeVar('E', bound=Enum)

_UNSIGNED_REGEX = re.compile(r'\+?[0-9]+')

# xsd:double lexical space, ASCII digits only.
_FLOAT_REGEX = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?|[+-]?(inf|infinity|nan)',
                          re.IGNORECASE)

# RFC 3339 section 5.6. The "T" may be lower case or (per the note in that section) a space. A seconds value of 60
# is a leap second.
_RFC3339_REGEX = re.compile(
    r'\d{4}-\d{2}-\d{2}'
    r'[Tt ]'
    r'([01]\d|2[0-3]):[0-5]\d:([0-5]\d|60)(\.\d+)?'
    r'([Zz]|[+-]([01]\d|2[0-3]):[0-5]\d)',
    re.ASCII
)

_DATE_REGEX = re.compile(r'\d{4}-\d{2}-\d{2}', re.ASCII)

_BOOLEANS = {
    'true': True,
    'false': False,
    '1': True,
    '0': False
}


def _unsigned_parser(kind: str, bits: int) -> Callable[[str], int]:
    max_value = 2 ** bits - 1
    max_digits = len(str(max_value))

    def parse(text: str) -> int:
        if _UNSIGNED_REGEX.fullmatch(text) is None:
            raise ParseIntError(kind, text)
        # Only significant digits are passed to int(), so it never sees a very long string.
        digits = text.lstrip('+').lstrip('0')
        if len(digits) > max_digits:
            raise ParseIntError(kind, text)
        value = int(digits) if digits else 0
        if value > max_value:
            raise ParseIntError(kind, text)
        return value

    parse.__name__ = f'parse_{kind}'
    parse.__doc__ = f'Parse text as an unsigned {bits}-bit integer.'
    return parse


parse_u8 = _unsigned_parser('u8', 8)
parse_u16 = _unsigned_parser('u16', 16)
parse_u32 = _unsigned_parser('u32', 32)


def parse_f64(text: str) -> float:
    if _FLOAT_REGEX.fullmatch(text) is None:
        raise ParseFloatError(text)
    return float(text)


def parse_bool(text: str) -> bool:
    """Parse an xsd:boolean ("true", "false", "1" or "0")."""
    try:
        return _BOOLEANS[text]
    except KeyError:
        raise ParseBoolError(text) from None


def parse_datetime(text: str) -> datetime:
    """Parse a strict RFC 3339 timestamp. The UTC offset given in the
    text is preserved in the returned (timezone-aware) datetime.

    A leap second (seconds value 60) is read as the last microsecond of
    the preceding second, since datetime cannot represent it.
    """
    match = _RFC3339_REGEX.fullmatch(text)
    if match is None:
        raise DateParseError(text, 'not an RFC 3339 timestamp')
    leap_second = match.group(2) == '60'
    # isoparse only understands upper case "T" and "Z" and a "T" separator.
    if leap_second:
        normalised = text[:10] + 'T' + text[11:17] + '59' + match.group(4).upper()
    else:
        normalised = text[:10] + 'T' + text[11:].upper()
    try:
        dt = dp.isoparse(normalised)
    except ValueError as e:
        raise DateParseError(text, str(e)) from None
    if leap_second:
        dt = dt.replace(microsecond=999999)
    return dt


def parse_date(text: str) -> date:
    """Parse an xsd:date in the form YYYY-MM-DD."""
    if _DATE_REGEX.fullmatch(text) is None:
        raise DateParseError(text, 'not a YYYY-MM-DD date')
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise DateParseError(text, str(e)) from None


def parse_string(text: str) -> str:
    return text


def enum_parser(enum: Type[E]) -> Callable[[str], E]:
    """Return a function that converts the exact (case-sensitive) literal
    of a member of `enum` to that member.
    """

    def parse(text: str) -> E:
        try:
            return enum(text)
        except ValueError:
            raise UnknownEnumValueError(enum, text) from None

    parse.__name__ = f'parse_{enum.__name__}'
    return parse
