"""
sconf - parse, build, inspect and pretty-print S-expressions.

    >>> from sconf import parse, dumps, size
    >>> cfg = parse('(window (width 80) (title "main"))')
    >>> size(cfg)
    3
"""
from .convert import Char, Symbol, from_python, to_python
from .dump import dump, dumps
from .errors import (ErrorCode, NestingError, SexprError, UnexpectedEofError,
                     error_description, last_error)
from .node import (Kind, Sexpr, append, append_many, at, destroy, equal, first,
                   get_string_value, get_symbol_value, is_bool, is_char,
                   is_double, is_empty, is_false, is_int, is_list, is_nil,
                   is_string, is_symbol, is_true, last, new_bool, new_char,
                   new_double, new_false, new_int, new_list, new_nil,
                   new_string, new_symbol, new_true, remove, size)
from .sexpr import DEFAULT_MAX_DEPTH, SexprParser, load, parse, parse_with_length

# keep in step with setup.py
__version__ = '1.0.0'


def version():
    return __version__
