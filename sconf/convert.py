"""
Python <-> Sexpr conversion.

Lists become python lists, nil becomes None, symbols become Symbol and chars
become Char (both str subclasses that remember what they were), everything
else the obvious python type.
"""
from .node import (Kind, append, destroy, new_bool, new_char, new_double,
                   new_int, new_list, new_nil, new_string, new_symbol)


class Symbol(str):
    def __repr__(self):
        return f'Symbol({str(self)!r})'


class Char(str):
    def __new__(cls, c):
        if len(c) != 1:
            raise ValueError(f'a char is exactly one character, got {c!r}')
        return super().__new__(cls, c)

    def __repr__(self):
        return f'Char({str(self)!r})'


def _atom_to_python(sexp):
    kind = sexp.kind
    if kind == Kind.NIL:
        return None
    elif kind == Kind.BOOL:
        return bool(sexp.value)
    elif kind == Kind.CHAR:
        return Char(chr(sexp.value))
    elif kind == Kind.SYMBOL:
        return Symbol(sexp.value)
    return sexp.value


def to_python(sexp):
    """Convert a Sexpr tree into the equivalent python object"""
    if sexp is None:
        return None
    if sexp.kind != Kind.LIST:
        return _atom_to_python(sexp)
    root = []
    todo = [(sexp, root)]
    while todo:
        lst, out = todo.pop()
        for child in lst.children():
            if child.kind == Kind.LIST:
                sub = []
                out.append(sub)
                todo.append((child, sub))
            else:
                out.append(_atom_to_python(child))
    return root


def _atom_from_python(obj):
    if obj is None:
        return new_nil()
    # bool before int: True is an int too
    elif isinstance(obj, bool):
        return new_bool(obj)
    elif isinstance(obj, int):
        return new_int(obj)
    elif isinstance(obj, float):
        return new_double(obj)
    elif isinstance(obj, Symbol):
        return new_symbol(obj)
    elif isinstance(obj, Char):
        return new_char(obj)
    elif isinstance(obj, str):
        return new_string(obj)
    raise TypeError(f"can't convert {type(obj).__name__} to an S-expression")


def from_python(obj):
    '''
    Convert a python object into the equivalent Sexpr tree.  Returns None
    (with OUT_OF_MEMORY recorded) if any node can't be allocated; whatever
    was built so far is destroyed.
    '''
    if not isinstance(obj, (list, tuple)):
        return _atom_from_python(obj)
    root = new_list()
    if root is None:
        return None
    todo = [(obj, root)]
    while todo:
        items, lst = todo.pop()
        for itm in items:
            if isinstance(itm, (list, tuple)):
                sub = new_list()
                if sub is not None:
                    todo.append((itm, sub))
            else:
                sub = _atom_from_python(itm)
            if sub is None:
                destroy(root)
                return None
            append(lst, sub)
    return root
