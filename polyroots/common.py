"""Utility functions and classes shared across polyroots.

Important functions and classes:
 - PolyRootsError: root of every error this package raises on purpose
 - @typechecked: decorator to perform runtime typechecking
 - open_maybe_stdin / open_maybe_stdout: treat "-" as the standard streams
"""

# builtins
from contextlib import contextmanager
from functools import wraps
import sys
import os
import inspect
import tempfile
import shutil

class PolyRootsError(Exception):
    """Base class for all errors reported to the user."""
    pass

def typechecked(f):
    """Check, at every call, that arguments and the return value are
    instances of the classes in f's annotations.  Unannotated parameters
    are not checked."""
    params = inspect.getfullargspec(f).args
    hints = f.__annotations__
    def check(name, value):
        ty = hints.get(name)
        if ty is not None and not isinstance(value, ty):
            raise TypeError("{}() expects {} to be {}, not {}".format(
                f.__name__, name, ty.__name__, type(value).__name__))
    @wraps(f)
    def g(*args, **kwargs):
        for name, value in list(zip(params, args)) + list(kwargs.items()):
            check(name, value)
        ret = f(*args, **kwargs)
        check("return", ret)
        return ret
    return g

@contextmanager
def AtomicWriteableFile(dst, mode="w"):
    """A writeable file handle that does not overwrite until it is closed.

    If the block raises, nothing is written to `dst`.
    """
    tmp_fd, tmp_path = tempfile.mkstemp(text=True)
    with os.fdopen(tmp_fd, mode) as f:
        yield f
        f.flush()
        os.fsync(tmp_fd)
    shutil.move(src=tmp_path, dst=dst)

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    The caller is responsible for closing the returned handle:

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)

def open_maybe_stdout(f : str, mode="w"):
    """Open file f, or open standard output if f is "-".

    Regular files are opened through AtomicWriteableFile.
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdout.fileno()), mode)
    return AtomicWriteableFile(f, mode)

def read_file(filename):
    """Returns the file contents as a single string."""
    with open(filename, "r") as f:
        return f.read()
