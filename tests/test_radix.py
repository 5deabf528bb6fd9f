import random
import string
import unittest

from polyroots.bigint import BigInt, InvalidDigit
from polyroots.radix import convert_to_decimal, digit_value, InvalidBase, MIN_BASE, MAX_BASE

SYMBOLS = string.digits + string.ascii_lowercase

def render(n, base):
    """Render a non-negative int in `base` by repeated division."""
    if n == 0:
        return "0"
    out = []
    while n:
        n, d = divmod(n, base)
        out.append(SYMBOLS[d])
    return "".join(reversed(out))

class TestDigitValue(unittest.TestCase):

    def test_values(self):
        self.assertEqual(digit_value("0", 10), 0)
        self.assertEqual(digit_value("9", 10), 9)
        self.assertEqual(digit_value("a", 16), 10)
        self.assertEqual(digit_value("F", 16), 15)
        self.assertEqual(digit_value("z", 36), 35)
        self.assertEqual(digit_value("Z", 36), 35)

    def test_out_of_base(self):
        with self.assertRaises(InvalidDigit):
            digit_value("2", 2)
        with self.assertRaises(InvalidDigit):
            digit_value("g", 16)

    def test_not_alphanumeric(self):
        for ch in "-+. _":
            with self.assertRaises(InvalidDigit):
                digit_value(ch, 36)

class TestConversion(unittest.TestCase):

    def test_examples(self):
        self.assertEqual(str(convert_to_decimal("A", 16)), "10")
        self.assertEqual(str(convert_to_decimal("101", 2)), "5")
        self.assertEqual(str(convert_to_decimal("ff", 16)), "255")
        self.assertEqual(str(convert_to_decimal("zz", 36)), "1295")
        self.assertEqual(str(convert_to_decimal("0042", 10)), "42")

    def test_empty_is_zero(self):
        self.assertEqual(convert_to_decimal("", 10), BigInt.ZERO)

    def test_large_value(self):
        s = "1" * 200
        self.assertEqual(int(convert_to_decimal(s, 2)), int(s, 2))
        self.assertEqual(int(convert_to_decimal("Z" * 50, 36)), 36 ** 50 - 1)

    def test_invalid_base(self):
        for base in [0, 1, 37, -10]:
            with self.assertRaises(InvalidBase):
                convert_to_decimal("1", base)

    def test_invalid_digit(self):
        with self.assertRaises(InvalidDigit):
            convert_to_decimal("12", 2)
        with self.assertRaises(InvalidDigit):
            convert_to_decimal("-5", 10)

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            convert_to_decimal("1", 99)
        with self.assertRaises(ValueError):
            convert_to_decimal("9", 8)

    def test_round_trip(self):
        rng = random.Random(36)
        for _ in range(200):
            base = rng.randint(MIN_BASE, MAX_BASE)
            length = rng.randint(1, 30)
            s = SYMBOLS[rng.randrange(1, base)] + "".join(SYMBOLS[rng.randrange(base)] for _ in range(length - 1))
            value = convert_to_decimal(s, base)
            self.assertFalse(value.negative)
            self.assertEqual(render(int(value), base), s)

    def test_argument_types_checked(self):
        with self.assertRaises(TypeError):
            convert_to_decimal(101, 2)
        with self.assertRaises(TypeError):
            convert_to_decimal("101", "2")
