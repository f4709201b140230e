"""Validation and parsing of the simulation's command-line arguments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the simulation arguments cannot be accepted."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one banquet, times in milliseconds."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat_n: int = 0
    count_each: bool = False


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of the given width."""
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


def _all_digits(text: str) -> bool:
    return all(char in _DIGITS for char in text)


def is_valid_number(text: str) -> bool:
    """Return True for an optionally signed string of decimal digits."""
    if not text:
        return False
    head, rest = text[0], text[1:]
    if head in "+-":
        return bool(rest) and _all_digits(rest)
    return head in _DIGITS and _all_digits(rest)


def parse_long(text: str) -> int:
    """Read a leading signed decimal integer, ignoring anything after it.

    Leading whitespace is skipped and a string without digits yields 0.
    The result wraps like a 64-bit signed integer.
    """
    remaining = text.lstrip(_WHITESPACE)
    sign = 1
    if remaining[:1] in ("+", "-"):
        if remaining[0] == "-":
            sign = -1
        remaining = remaining[1:]
    value = 0
    for char in remaining:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
    return _wrap(sign * value, 64)


def _as_int(text: str) -> int:
    return _wrap(parse_long(text), 32)


def parse_arguments(args: Sequence[str]) -> Settings:
    """Build the banquet settings from the arguments after the program name.

    Expects number of philosophers, time to die, time to eat, time to sleep
    and, optionally, how many times each philosopher must eat.
    """
    if len(args) not in (4, 5):
        raise ArgumentError(f"expected 4 or 5 arguments, got {len(args)}")
    if not all(is_valid_number(arg) for arg in args[:3]):
        raise ArgumentError("arguments must be whole numbers")

    count_each = len(args) == 5
    settings = Settings(
        number_of_philosophers=_as_int(args[0]),
        time_to_die=_as_int(args[1]),
        time_to_eat=_as_int(args[2]),
        time_to_sleep=_as_int(args[3]),
        must_eat_n=_as_int(args[4]) if count_each else 0,
        count_each=count_each,
    )
    if settings.number_of_philosophers < 1:
        raise ArgumentError("there must be at least one philosopher")
    if settings.time_to_die < 0:
        raise ArgumentError("time to die cannot be negative")
    if settings.time_to_sleep < 0:
        raise ArgumentError("time to sleep cannot be negative")
    if settings.must_eat_n < 0:
        raise ArgumentError("number of meals cannot be negative")
    return settings