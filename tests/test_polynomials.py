import random
import unittest

from polyroots.bigint import BigInt
from polyroots.polynomials import Polynomial, expand_with_root, from_roots

def ints(xs):
    return [int(x) for x in xs]

def roots_of(*values):
    return [BigInt.from_int(v) for v in values]

class TestPolynomials(unittest.TestCase):

    def test_no_roots(self):
        self.assertEqual(ints(from_roots([])), [1])
        self.assertEqual(from_roots([]), Polynomial.ONE)

    def test_root_zero(self):
        self.assertEqual(ints(from_roots(roots_of(0))), [0, 1])

    def test_two_roots(self):
        self.assertEqual(ints(from_roots(roots_of(2, 3))), [6, -5, 1])

    def test_mixed_signs(self):
        # (x + 1)(x - 1)(x - 4) = x^3 - 4x^2 - x + 4
        self.assertEqual(ints(from_roots(roots_of(-1, 1, 4))), [4, -1, -4, 1])

    def test_repeated_root(self):
        self.assertEqual(ints(from_roots(roots_of(-2, -2, -2))), [8, 12, 6, 1])

    def test_expand_with_root(self):
        coefficients = roots_of(6, -5, 1)
        result = expand_with_root(coefficients, BigInt.from_int(1))
        self.assertEqual(ints(result), [-6, 11, -6, 1])
        self.assertEqual(ints(coefficients), [6, -5, 1])

    def test_coefficients_are_well_formed(self):
        for c in from_roots(roots_of(5, -5, 0, 5)):
            assert not (c.is_zero() and c.negative)

    def test_large_roots(self):
        a = 10 ** 30 + 7
        b = -(3 ** 70)
        self.assertEqual(ints(from_roots(roots_of(a, b))), [a * b, -(a + b), 1])

    def test_roots_are_zeros(self):
        rng = random.Random(5)
        for _ in range(20):
            values = [rng.randrange(-10**12, 10**12) for _ in range(rng.randint(1, 6))]
            poly = from_roots(roots_of(*values))
            self.assertEqual(poly.degree, len(values))
            self.assertEqual(poly.get_coefficient(poly.degree), BigInt.ONE)
            for v in values:
                self.assertEqual(poly.evaluate(BigInt.from_int(v)), BigInt.ZERO)

    def test_evaluate(self):
        poly = from_roots(roots_of(2, 3))
        self.assertEqual(int(poly.evaluate(BigInt.from_int(10))), 56)
        self.assertEqual(int(poly.evaluate(BigInt.from_int(-1))), 12)

    def test_method_expansion(self):
        poly = Polynomial.ONE.expand_with_root(BigInt.from_int(2)).expand_with_root(BigInt.from_int(3))
        self.assertEqual(poly, from_roots(roots_of(2, 3)))

    def test_get_coefficient_past_end(self):
        self.assertEqual(Polynomial.ONE.get_coefficient(3), BigInt.ZERO)

    def test_str(self):
        self.assertEqual(str(from_roots(roots_of(2, 3))), "x^2 - 5x + 6")
        self.assertEqual(str(from_roots(roots_of(0))), "x")
        self.assertEqual(str(from_roots(roots_of(-1, 1, 4))), "x^3 - 4x^2 - x + 4")
        self.assertEqual(str(Polynomial(roots_of(3, 0, -1))), "-x^2 + 3")
        self.assertEqual(str(Polynomial.ONE), "1")
        self.assertEqual(str(Polynomial(roots_of(0, 0))), "0")

    def test_single_root_terms(self):
        # constant term is -root, leading term is 1
        result = expand_with_root([BigInt.ONE], BigInt.from_int(7))
        self.assertEqual(ints(result), [-7, 1])
        result = expand_with_root([BigInt.ONE], BigInt.from_int(-7))
        self.assertEqual(ints(result), [7, 1])

    def test_expand_keeps_top_coefficient(self):
        coefficients = roots_of(4, 0, 3)
        result = expand_with_root(coefficients, BigInt.from_int(2))
        # (3x^2 + 4)(x - 2) = 3x^3 - 6x^2 + 4x - 8
        self.assertEqual(ints(result), [-8, 4, -6, 3])
