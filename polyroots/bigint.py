"""Arbitrary-precision signed decimal integers.

A BigInt is a sign flag plus a tuple of decimal digits stored least
significant first.  Every BigInt handed out by this module is well-formed:
 - the digit tuple is never empty, and zero is exactly (0,)
 - there are no most-significant zero digits other than that single zero
 - zero is never negative

Important functions:
 - add, subtract, multiply: sign-aware arithmetic
 - add_magnitudes, subtract_magnitudes, multiply_digit: unsigned primitives
 - compare_magnitudes: compare absolute values, returning LT, EQ, or GT
"""

from functools import total_ordering

from polyroots.common import PolyRootsError

LT = -1
EQ =  0
GT =  1

class InvalidDigit(PolyRootsError, ValueError):
    """A character does not denote a digit in the requested base."""
    pass

@total_ordering
class BigInt(object):
    __slots__ = ("digits", "negative")

    def __init__(self, digits=(0,), negative=False):
        self.digits = tuple(digits)
        self.negative = negative

    @staticmethod
    def from_decimal_string(s):
        """Parse an optionally signed base-10 literal such as "-00120".

        Leading zeros are dropped and "-0" is zero.  The empty string is
        zero as well.
        """
        if not s:
            return BigInt.ZERO
        negative = s[0] == "-"
        if negative:
            s = s[1:]
        if not s:
            raise InvalidDigit("no digits after '-'")
        for c in s:
            if c not in "0123456789":
                raise InvalidDigit("{!r} is not a decimal digit".format(c))
        return BigInt([ord(c) - ord("0") for c in reversed(s)], negative).normalize()

    @staticmethod
    def from_int(n):
        return BigInt.from_decimal_string(str(n))

    def is_zero(self):
        return self.digits == (0,)

    def normalize(self):
        """Strip most-significant zeros and clear the sign of zero."""
        digits = list(self.digits) or [0]
        while len(digits) > 1 and digits[-1] == 0:
            digits.pop()
        negative = self.negative and digits != [0]
        if len(digits) == len(self.digits) and negative == self.negative:
            return self
        return BigInt(digits, negative)

    def magnitude(self):
        return BigInt(self.digits) if self.negative else self

    def __neg__(self):
        return negate(self)

    def __abs__(self):
        return self.magnitude()

    def __add__(self, other):
        if isinstance(other, int):
            other = BigInt.from_int(other)
        return add(self, other)

    def __radd__(self, other):
        if isinstance(other, int):
            return add(BigInt.from_int(other), self)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, int):
            other = BigInt.from_int(other)
        return subtract(self, other)

    def __rsub__(self, other):
        if isinstance(other, int):
            return subtract(BigInt.from_int(other), self)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, int):
            other = BigInt.from_int(other)
        return multiply(self, other)

    def __rmul__(self, other):
        if isinstance(other, int):
            return multiply(BigInt.from_int(other), self)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, int):
            other = BigInt.from_int(other)
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.negative == other.negative and self.digits == other.digits

    def __lt__(self, other):
        if isinstance(other, int):
            other = BigInt.from_int(other)
        if not isinstance(other, BigInt):
            return NotImplemented
        if self.negative != other.negative:
            return self.negative
        cmp = compare_magnitudes(self, other)
        return cmp == GT if self.negative else cmp == LT

    def __hash__(self):
        # equal to hash(int(self)), since BigInts compare equal to ints
        return hash(int(self))

    def __bool__(self):
        return not self.is_zero()

    def __int__(self):
        n = 0
        for d in reversed(self.digits):
            n = n * 10 + d
        return -n if self.negative else n

    def __str__(self):
        s = "".join(chr(ord("0") + d) for d in reversed(self.digits))
        return "-" + s if self.negative and not self.is_zero() else s

    def __repr__(self):
        return "BigInt({!r})".format(str(self))

BigInt.ZERO = BigInt((0,))
BigInt.ONE  = BigInt((1,))

def negate(a):
    if a.is_zero():
        return a
    return BigInt(a.digits, not a.negative)

def compare_magnitudes(a, b):
    """Compare |a| and |b|, returning LT, EQ, or GT.

    Relies on well-formedness: a longer digit tuple is a larger magnitude.
    """
    if len(a.digits) != len(b.digits):
        return GT if len(a.digits) > len(b.digits) else LT
    for i in reversed(range(len(a.digits))):
        if a.digits[i] != b.digits[i]:
            return GT if a.digits[i] > b.digits[i] else LT
    return EQ

def add_magnitudes(a, b):
    """|a| + |b|, non-negative."""
    result = []
    carry = 0
    for i in range(max(len(a.digits), len(b.digits))):
        d1 = a.digits[i] if i < len(a.digits) else 0
        d2 = b.digits[i] if i < len(b.digits) else 0
        total = d1 + d2 + carry
        carry = total // 10
        result.append(total % 10)
    if carry:
        result.append(carry)
    return BigInt(result)

def subtract_magnitudes(a, b):
    """|a| - |b|, non-negative.

    The caller must ensure |a| >= |b|.  This is not checked: if it does not
    hold, the final borrow is dropped and the result is not |a| - |b|.
    """
    result = []
    borrow = 0
    for i in range(len(a.digits)):
        d2 = b.digits[i] if i < len(b.digits) else 0
        diff = a.digits[i] - d2 - borrow
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    return BigInt(result).normalize()

def add(a, b):
    if a.negative == b.negative:
        res = add_magnitudes(a, b)
        return BigInt(res.digits, a.negative)
    cmp = compare_magnitudes(a, b)
    if cmp == EQ:
        return BigInt.ZERO
    if cmp == GT:
        res = subtract_magnitudes(a, b)
        return BigInt(res.digits, a.negative)
    res = subtract_magnitudes(b, a)
    return BigInt(res.digits, b.negative)

def subtract(a, b):
    return add(a, negate(b))

def multiply_digit(a, d):
    """|a| * d for a small non-negative int d.

    The result is always non-negative, whatever the sign of `a`; callers
    apply the sign themselves.  `multiply` only passes single decimal digits,
    but any small `d` works (radix conversion passes the base).
    """
    assert d >= 0, "multiplier must be non-negative, got {}".format(d)
    if d == 0:
        return BigInt.ZERO
    result = []
    carry = 0
    for digit in a.digits:
        prod = digit * d + carry
        carry = prod // 10
        result.append(prod % 10)
    while carry:
        result.append(carry % 10)
        carry //= 10
    return BigInt(result)

def multiply(a, b):
    """Schoolbook product: one shifted multiply_digit per digit of b."""
    result = BigInt.ZERO
    for i, d in enumerate(b.digits):
        if d == 0:
            continue
        partial = multiply_digit(a, d)
        result = add(result, BigInt((0,) * i + partial.digits))
    return BigInt(result.digits, a.negative != b.negative).normalize()
