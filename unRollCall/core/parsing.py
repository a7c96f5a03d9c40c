"""Numeric field parsing shared by the processors."""

from typing import Any

from .exceptions import ParseError


def parse_code_number(value: Any, field: str = 'value') -> int:
    """
    Parse a code number stored as a float-formatted string, like '17.0'.

    The value is read as a float and truncated, so '17.0' and '17' both
    give 17 while 'abc', '' and None raise ParseError.
    """
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        raise ParseError(field, value) from None


def parse_strict_int(value: Any, field: str = 'value') -> int:
    """Parse a plain decimal integer such as '2'; '2.0' is rejected."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ParseError(field, value, f"Field '{field}' value {value!r} is not an integer") from None


def parse_cell_int(value: Any, field: str = 'value') -> int:
    """Parse a spreadsheet cell that may hold a number or its text form."""
    if isinstance(value, bool):
        raise ParseError(field, value)
    if isinstance(value, int):
        return value
    return parse_code_number(value, field)
