"""Progress messages and per-step timings, written to stderr.

 - step(name, **details): context manager around one stage of a run; nested
   steps indent the messages logged inside them
 - note(msg): log one message at the current indentation
 - dump_profile(path): write the time spent in each step
"""

from collections import defaultdict
from contextlib import contextmanager
import sys
import time

from polyroots.opts import Option

verbose = Option("verbose", bool, False, description="Log progress to stderr")

_open_steps = []
_seconds = defaultdict(float)

def note(msg):
    if verbose.value:
        print("  " * len(_open_steps) + msg, file=sys.stderr)

@contextmanager
def step(name, **details):
    if details:
        note("{} ({})...".format(name, ", ".join("{}={}".format(k, v) for k, v in sorted(details.items()))))
    else:
        note("{}...".format(name))
    _open_steps.append(name)
    key = " > ".join(_open_steps)
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        _seconds[key] += elapsed
        _open_steps.pop()
        note("done with {} in {:.3f}s".format(name, elapsed))

def timings():
    """Seconds spent per step, keyed by "outer > inner" paths."""
    return dict(_seconds)

def dump_profile(path):
    with open(path, "w") as f:
        for key in sorted(_seconds, key=_seconds.get, reverse=True):
            f.write("{:10.4f}s {}\n".format(_seconds[key], key))
