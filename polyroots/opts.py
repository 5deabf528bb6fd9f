"""Command-line tunables declared next to the code that reads them.

A module declares `Option(...)` at import time; `main.run` passes its
argparse group to `setup` and the parsed namespace to `read`.  Code reads
the current setting from `.value`.
"""

_OPTS = []

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str), "unsupported option type {}".format(type)
        self.name = name
        self.type = type
        self.default = default
        self.value = default
        self.description = description
        self.metavar = metavar
        _OPTS.append(self)

    def __bool__(self):
        raise Exception("read {}.value instead of testing the Option".format(self.name))

    @property
    def dest(self):
        return self.name.replace("-", "_")

def setup(parser):
    for o in _OPTS:
        if o.type is bool:
            parser.add_argument("--" + o.name, dest=o.dest, action="store_true", default=o.default, help=o.description)
        else:
            parser.add_argument("--" + o.name, dest=o.dest, metavar=o.metavar, default=o.default, help=o.description)

def read(args):
    for o in _OPTS:
        o.value = getattr(args, o.dest)
