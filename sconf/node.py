"""
S-expression values and the list operations over them.

Every value is a Sexpr node.  A LIST node keeps its first child in .value and
the children are chained through .next.  .prev is a back-reference to the
previous sibling, except on the head child of a list, where it points at the
tail of the chain instead; that is what makes append() O(1).
"""
from enum import IntEnum
from functools import wraps

from .errors import ErrorCode, set_error


class Kind(IntEnum):
    NIL = 0
    LIST = 1
    STRING = 2
    CHAR = 3
    INT = 4
    DOUBLE = 5
    SYMBOL = 6
    BOOL = 7


class Sexpr:
    """A single S-expression object"""

    __slots__ = ('kind', 'value', 'next', 'prev')

    def __init__(self, kind, value=None):
        self.kind = kind
        self.value = value
        self.next = None
        self.prev = None

    def __repr__(self):
        if self.kind == Kind.LIST:
            return f'Sexpr({self.kind.name}, size={size(self)})'
        if self.kind == Kind.CHAR:
            return f'Sexpr({self.kind.name}, {chr(self.value)!r})'
        return f'Sexpr({self.kind.name}, {self.value!r})'

    def children(self):
        if self.kind != Kind.LIST:
            return
        child = self.value
        while child is not None:
            # grab next first so the caller may remove() what we yield
            following = child.next
            yield child
            child = following


def _checks_alloc(f):
    @wraps(f)
    def _checks_alloc_wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except MemoryError:
            set_error(ErrorCode.OUT_OF_MEMORY)
            return None
    return _checks_alloc_wrapper


def _text(text):
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode('utf-8', 'replace')
    if not isinstance(text, str):
        raise TypeError(f'expected str, got {type(text).__name__}')
    return str(text)


@_checks_alloc
def new_list():
    return Sexpr(Kind.LIST)


@_checks_alloc
def new_nil():
    return Sexpr(Kind.NIL)


@_checks_alloc
def new_bool(b):
    return Sexpr(Kind.BOOL, 1 if b else 0)


def new_true():
    return new_bool(True)


def new_false():
    return new_bool(False)


@_checks_alloc
def new_int(i):
    if isinstance(i, float) or not hasattr(i, '__index__'):
        raise TypeError(f'expected int, got {type(i).__name__}')
    return Sexpr(Kind.INT, int(i))


@_checks_alloc
def new_double(d):
    return Sexpr(Kind.DOUBLE, float(d))


@_checks_alloc
def new_char(c):
    if isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f'a char is exactly one character, got {c!r}')
        c = ord(c)
    elif not isinstance(c, int):
        raise TypeError(f'expected a character, got {type(c).__name__}')
    return Sexpr(Kind.CHAR, c)


@_checks_alloc
def new_symbol(sym):
    return Sexpr(Kind.SYMBOL, _text(sym))


@_checks_alloc
def new_string(s):
    return Sexpr(Kind.STRING, _text(s))


# predicates: all of them accept None

def is_nil(sexp):
    return sexp is not None and sexp.kind == Kind.NIL


def is_list(sexp):
    return sexp is not None and sexp.kind == Kind.LIST


def is_bool(sexp):
    return sexp is not None and sexp.kind == Kind.BOOL


def is_true(sexp):
    return is_bool(sexp) and sexp.value == 1


def is_false(sexp):
    return is_bool(sexp) and sexp.value == 0


def is_int(sexp):
    return sexp is not None and sexp.kind == Kind.INT


def is_double(sexp):
    return sexp is not None and sexp.kind == Kind.DOUBLE


def is_char(sexp):
    return sexp is not None and sexp.kind == Kind.CHAR


def is_string(sexp):
    return sexp is not None and sexp.kind == Kind.STRING


def is_symbol(sexp):
    return sexp is not None and sexp.kind == Kind.SYMBOL


def get_string_value(sexp):
    if not is_string(sexp):
        return None
    return sexp.value


def get_symbol_value(sexp):
    if not is_symbol(sexp):
        return None
    return sexp.value


# list mechanics

def _list_arg(lst):
    if lst is None:
        return False
    if lst.kind != Kind.LIST:
        set_error(ErrorCode.NOT_A_LIST)
        return False
    return True


def append(lst, itm):
    '''
    Add itm at the end of lst in constant time.  The head's prev is the
    tail shortcut: a lone head points at itself.
    '''
    if itm is None or not _list_arg(lst):
        return False

    child = lst.value
    if child is None:
        lst.value = itm
        itm.prev = itm
    else:
        tail = child.prev
        tail.next = itm
        itm.prev = tail
        child.prev = itm
    return True


def append_many(lst, items):
    if not _list_arg(lst):
        return False
    for itm in items:
        if not append(lst, itm):
            return False
    return True


def remove(lst, itm):
    '''
    Unlink itm from lst.  itm is not destroyed: the caller owns it again.
    Returns False if lst is empty or itm isn't one of its children.
    '''
    if itm is None or not _list_arg(lst):
        return False

    child = lst.value
    if child is None:
        return False
    if not any(c is itm for c in lst.children()):
        return False

    if itm is child:
        head = itm.next
        lst.value = head
        if head is not None:
            # the old head's prev is the tail: hand the shortcut on
            head.prev = itm.prev
    else:
        itm.prev.next = itm.next
        if itm.next is not None:
            itm.next.prev = itm.prev
        else:
            child.prev = itm.prev

    itm.next = None
    itm.prev = None
    return True


def size(lst):
    if not _list_arg(lst):
        return -1
    sz = 0
    tmp = lst.value
    while tmp is not None:
        sz += 1
        tmp = tmp.next
    return sz


def at(lst, idx):
    if not _list_arg(lst):
        return None
    if idx < 0:
        set_error(ErrorCode.INDEX_OUT_OF_BOUND)
        return None

    curr_idx = 0
    tmp = lst.value
    while tmp is not None:
        if curr_idx == idx:
            return tmp
        curr_idx += 1
        tmp = tmp.next
    set_error(ErrorCode.INDEX_OUT_OF_BOUND)
    return None


def first(lst):
    if not _list_arg(lst):
        return None
    return lst.value


def last(lst):
    if not _list_arg(lst) or lst.value is None:
        return None
    return lst.value.prev


def is_empty(lst):
    if not _list_arg(lst):
        return False
    return lst.value is None


def destroy(sexp):
    '''
    Drop everything sexp owns: list children (recursively) and text.
    Walks with an explicit stack, so nesting depth doesn't matter.
    '''
    if sexp is None:
        return
    todo = [sexp]
    while todo:
        cur = todo.pop()
        if cur.kind == Kind.LIST:
            child = cur.value
            while child is not None:
                following = child.next
                todo.append(child)
                child = following
        cur.value = None
        cur.next = None
        cur.prev = None


def equal(a, b):
    """Structural comparison of two trees: same kinds, same values, same shape"""
    todo = [(a, b)]
    while todo:
        x, y = todo.pop()
        if x is None or y is None:
            if x is not y:
                return False
            continue
        if x.kind != y.kind:
            return False
        if x.kind != Kind.LIST:
            if x.value != y.value:
                return False
            continue
        xs, ys = list(x.children()), list(y.children())
        if len(xs) != len(ys):
            return False
        todo.extend(zip(xs, ys))
    return True
