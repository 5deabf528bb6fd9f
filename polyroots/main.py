#!/usr/bin/env python

"""
Main entry point for polyroots. Run with --help for options.
"""

import sys
import argparse

from polyroots import opts
from polyroots.common import PolyRootsError, open_maybe_stdin, open_maybe_stdout
from polyroots.parse import parse_problem
from polyroots.problem import solve
from polyroots import logging

profile = opts.Option("profile", str, "", description="Write per-step timings to this file", metavar="PATH")

def format_coefficients(poly):
    """The output line for a polynomial: every coefficient, lowest degree
    first, each followed by a single space."""
    return "Polynomial coefficients: " + "".join("{} ".format(c) for c in poly) + "\n"

def run():
    """Entry point for the polyroots executable.

    This procedure reads sys.argv and writes the coefficients.
    """

    parser = argparse.ArgumentParser(description='Coefficients of the monic polynomial with the given roots.')
    parser.add_argument("-o", "--output", metavar="FILE", default="-", help="Output file, use '-' for stdout (the default)")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    parser.add_argument("file", nargs="?", default=None, help="Input file (omit to use stdin)")
    args = parser.parse_args()
    opts.read(args)

    try:
        with logging.step("reading input", file=args.file or "stdin"):
            with open_maybe_stdin(args.file or "-") as f:
                input_text = f.read()
        with logging.step("parsing"):
            problem = parse_problem(input_text)
        poly = solve(problem)
    except (PolyRootsError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    with open_maybe_stdout(args.output) as out:
        out.write(format_coefficients(poly))

    if profile.value:
        logging.dump_profile(profile.value)

if __name__ == "__main__":
    run()
