"""Parser for problem descriptions.

The input is whitespace-separated:

    n k
    base_1 digits_1
    ...
    base_n digits_n

The important functions are:
 - tokenize: str -> token stream
 - parse_problem: str -> Problem
"""

# 3rd party
from ply import lex, yacc

# ours
from polyroots.problem import Problem, RootEntry, InputError

tokens = ("SYMBOLS",)

# Lexer ########################################################################

def make_lexer():

    def t_SYMBOLS(t):
        r"[0-9A-Za-z]+"
        return t

    def t_newline(t):
        r"\n+"
        t.lexer.lineno += len(t.value)

    t_ignore = " \t\r"

    def t_error(t):
        raise InputError("on line {}: illegal character {}".format(t.lexer.lineno, repr(t.value[0])))

    return lex.lex()

_lexer = make_lexer()

def _fresh_lexer():
    lexer = _lexer.clone() # lexer objects are stateful
    lexer.lineno = 1
    return lexer

def tokenize(s):
    lexer = _fresh_lexer()
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Parser #######################################################################

def _decimal(text, what, line):
    if not all("0" <= c <= "9" for c in text):
        raise InputError("on line {}: {} must be a decimal integer, not {!r}".format(line, what, text))
    return int(text)

def make_parser():
    start = "problem"

    def p_problem(p):
        """problem : SYMBOLS SYMBOLS entries"""
        count = _decimal(p[1], "the number of roots", p.lineno(1))
        used = _decimal(p[2], "the number of roots to use", p.lineno(2))
        entries = p[3]
        if len(entries) < count:
            raise InputError("expected {} root entries, found {}".format(count, len(entries)))
        p[0] = Problem(count, used, entries[:count])

    def p_entries(p):
        """entries : empty
                   | entries entry"""
        if len(p) > 2:
            p[1].append(p[2])
            p[0] = p[1]
        else:
            p[0] = []

    def p_entry(p):
        """entry : SYMBOLS SYMBOLS"""
        p[0] = RootEntry(_decimal(p[1], "a base", p.lineno(1)), p[2])

    def p_empty(p):
        'empty :'
        pass

    def p_error(p):
        if p is None:
            raise InputError("unexpected end of input")
        raise InputError("on line {}: unexpected {!r}".format(p.lineno, p.value))

    return yacc.yacc(debug=False, write_tables=False)

_parser = make_parser()

def parse_problem(s):
    """Parse a string as a Problem."""
    return _parser.parse(s, lexer=_fresh_lexer())
