"""The root-expansion problem: n root entries of which the first k are used.

Important functions:
 - select_entries: the entries that actually contribute roots
 - root_values: those entries converted to BigInt
 - solve: the coefficients of the product of (x - root)
"""

from collections import namedtuple

from polyroots.common import PolyRootsError
from polyroots.radix import convert_to_decimal
from polyroots.polynomials import from_roots
from polyroots.logging import step, note

class InputError(PolyRootsError, ValueError):
    """The input text does not describe a problem."""
    pass

class InsufficientRoots(PolyRootsError, ValueError):
    """More roots were requested than were supplied."""
    pass

RootEntry = namedtuple("RootEntry", ["base", "digits"])

class Problem(object):
    """`count` root entries were announced and the first `used` are wanted."""

    def __init__(self, count, used, entries=()):
        self.count = count
        self.used = used
        self.entries = tuple(RootEntry(*e) for e in entries)

    def __eq__(self, other):
        return (isinstance(other, Problem) and
            (self.count, self.used, self.entries) == (other.count, other.used, other.entries))

    def __repr__(self):
        return "Problem({!r}, {!r}, {!r})".format(self.count, self.used, self.entries)

def select_entries(problem):
    if problem.count < 0 or problem.used < 0:
        raise InputError("root counts must be non-negative, got n={} k={}".format(problem.count, problem.used))
    if problem.used > problem.count:
        raise InsufficientRoots("{} roots requested but only {} announced".format(problem.used, problem.count))
    if problem.used > len(problem.entries):
        raise InsufficientRoots("{} roots requested but only {} supplied".format(problem.used, len(problem.entries)))
    ignored = len(problem.entries) - problem.used
    if ignored:
        note("ignoring {} trailing root entries".format(ignored))
    return problem.entries[:problem.used]

def root_values(problem):
    with step("converting roots", k=problem.used):
        roots = []
        for e in select_entries(problem):
            r = convert_to_decimal(e.digits, e.base)
            note("{} (base {}) = {}".format(e.digits, e.base, r))
            roots.append(r)
        return roots

def solve(problem):
    """Return the Polynomial with the selected roots, lowest degree first."""
    roots = root_values(problem)
    with step("expanding polynomial", degree=len(roots)):
        return from_roots(roots)
