"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_SPACE = "\t\n\v\f\r "


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def is_valid_token(token: str) -> bool:
    """True if ``token`` is an optional sign followed by one or more digits."""
    digits = token[1:] if token[:1] in ("-", "+") else token
    return bool(digits) and all("0" <= ch <= "9" for ch in digits)


def parse_int(text: str) -> int:
    """Read a leading integer: skip whitespace, take a sign, then digits.

    Anything after the digits is ignored; no digits gives 0.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Split each argument on spaces and return the numbers in order.

    Raises InputError for a malformed token, a number outside the 32-bit
    signed range, or a repeated number.
    """
    numbers: list[int] = []
    for arg in args:
        for token in arg.split(" "):
            if not token:
                continue
            if not is_valid_token(token):
                raise InputError(f"not an integer: {token!r}")
            number = parse_int(token)
            if not INT_MIN <= number <= INT_MAX:
                raise InputError(f"out of range: {token!r}")
            numbers.append(number)
    if len(set(numbers)) != len(numbers):
        raise InputError("duplicate numbers")
    return numbers