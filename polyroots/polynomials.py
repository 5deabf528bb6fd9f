"""Polynomials of one variable with BigInt coefficients.

Coefficients are stored lowest degree first: terms[i] multiplies x^i.
"""

from functools import reduce

from polyroots.bigint import BigInt, add, subtract, multiply

def expand_with_root(coefficients, root):
    """Multiply the polynomial `coefficients` by (x - root).

    Each c_i x^i contributes c_i x^(i+1) and -root*c_i x^i.  Returns a list
    one longer than `coefficients`.
    """
    result = [BigInt.ZERO] * (len(coefficients) + 1)
    for i, c in enumerate(coefficients):
        result[i + 1] = add(result[i + 1], c)
        result[i] = subtract(result[i], multiply(c, root))
    return result

def from_roots(roots):
    """The monic polynomial whose roots are exactly `roots` (with multiplicity)."""
    return Polynomial(reduce(expand_with_root, roots, [BigInt.ONE]))

class Polynomial(object):
    __slots__ = ("terms",)

    def __init__(self, terms=()):
        self.terms = tuple(terms)

    def __hash__(self):
        return hash(self.terms)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.terms == other.terms

    def __len__(self):
        return len(self.terms)

    def __iter__(self):
        return iter(self.terms)

    def __str__(self):
        if not self.terms:
            return "0"
        s = ""
        for i in reversed(range(len(self.terms))):
            c = self.terms[i]
            if not c and (i > 0 or s):
                continue
            mag = abs(c)
            term = ("" if i > 0 and mag == BigInt.ONE else str(mag))
            if i > 1:
                term += "x^{}".format(i)
            elif i == 1:
                term += "x"
            if not s:
                s = ("-" if c.negative else "") + term
            else:
                s += (" - " if c.negative else " + ") + term
        return s

    def __repr__(self):
        return "Polynomial({!r})".format(self.terms)

    @property
    def degree(self):
        return len(self.terms) - 1

    def get_coefficient(self, i):
        if i >= len(self.terms):
            return BigInt.ZERO
        return self.terms[i]

    def expand_with_root(self, root):
        return Polynomial(expand_with_root(self.terms, root))

    def evaluate(self, x):
        """Value at x, by Horner's rule."""
        result = BigInt.ZERO
        for c in reversed(self.terms):
            result = add(multiply(result, x), c)
        return result

Polynomial.ONE = Polynomial([BigInt.ONE])
