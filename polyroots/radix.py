"""Conversion of digit strings in bases 2 through 36 to BigInt values."""

from functools import reduce

from polyroots.common import PolyRootsError, typechecked
from polyroots.bigint import BigInt, InvalidDigit, add, multiply_digit

MIN_BASE = 2
MAX_BASE = 36

class InvalidBase(PolyRootsError, ValueError):
    """A base outside [MIN_BASE, MAX_BASE]."""
    pass

def digit_value(ch, base):
    """The value of one digit character: 0-9, then a-z (or A-Z) for 10-35."""
    if "0" <= ch <= "9":
        value = ord(ch) - ord("0")
    elif "a" <= ch.lower() <= "z":
        value = 10 + ord(ch.lower()) - ord("a")
    else:
        raise InvalidDigit("{!r} is not a digit".format(ch))
    if value >= base:
        raise InvalidDigit("{!r} is not a digit in base {}".format(ch, base))
    return value

@typechecked
def convert_to_decimal(value : str, base : int) -> BigInt:
    """Interpret `value` as a numeral in `base` and return its value.

    This is a left fold of `acc * base + digit` starting from zero, so the
    empty string converts to zero.
    """
    if not (MIN_BASE <= base <= MAX_BASE):
        raise InvalidBase("base {} is outside [{}, {}]".format(base, MIN_BASE, MAX_BASE))
    return reduce(
        lambda acc, ch: add(multiply_digit(acc, base), BigInt.from_int(digit_value(ch, base))),
        value,
        BigInt.ZERO)
