"""
Recursive-descent S-expression parser.

Parsing works on text that is entirely in memory.  A NUL character counts as
end of input, as does running off the declared length.  One top-level value is
read; whatever follows it is left alone.
"""
import math
import re
import string

from .buffer import TokenBuffer
from .errors import ErrorCode, NestingError, SexprError, UnexpectedEofError, set_error
from .log import _debug
from .node import (destroy, append, new_char, new_double, new_false, new_int,
                   new_list, new_nil, new_string, new_symbol, new_true)

DEFAULT_MAX_DEPTH = 256
MAX_TOKEN = 127

WHITESPACE = ' \t\n\v\f\r'
ALNUM = string.ascii_letters + string.digits
KEYWORDS = {
    'true': new_true,
    'yes': new_true,
    'false': new_false,
    'no': new_false,
    'nil': new_nil,
}

# the part of a number token strtod() would consume
NUMBER_PREFIX = re.compile(
    r'(?P<sign>[-+]?)'
    r'(?:0[xX](?P<hex>[0-9a-fA-F]+)'
    r'|(?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?))')


class SexprParser:
    """An S-expression parser"""

    def __init__(self, data, length=None, max_depth=DEFAULT_MAX_DEPTH):
        if isinstance(data, (bytes, bytearray)):
            if length is not None:
                data = data[:length]
            data = bytes(data).decode('utf-8', 'replace')
        elif length is not None:
            data = data[:length]
        self.data = data.split('\0', 1)[0]
        self.len = len(self.data)
        self.off = 0
        self.max_depth = max_depth
        self.buff = TokenBuffer()

    def peekc(self):
        if self.off >= self.len:
            return ''
        return self.data[self.off]

    def getc(self):
        c = self.peekc()
        if c:
            self.off += 1
        return c

    def skip(self):
        '''skip whitespace and ;-comments'''
        while True:
            c = self.peekc()
            if c and c in WHITESPACE:
                self.off += 1
            elif c == ';':
                while c and c != '\n':
                    c = self.getc()
            else:
                return

    def parse(self):
        try:
            return self.parse_value(0)
        finally:
            self.buff.clear()

    def parse_value(self, depth):
        self.skip()
        c = self.peekc()
        if not c:
            raise UnexpectedEofError(f'{self.off}: unexpected EOF')
        elif c == '(':
            self.off += 1
            itm = self.parse_list(depth + 1)
        elif c == ')':
            raise SexprError(f'{self.off}: unexpected )')
        elif c == '"':
            self.off += 1
            itm = self.parse_string()
        elif c == '\\':
            self.off += 1
            itm = self.parse_char()
        elif c in string.digits or c == '-':
            itm = self.parse_number()
        else:
            itm = self.parse_symbol()
        # constructors hand back None when allocation failed
        if itm is None:
            raise MemoryError
        return itm

    def parse_list(self, depth):
        if depth > self.max_depth:
            raise NestingError(f'{self.off}: lists nested deeper than {self.max_depth}')
        lst = new_list()
        if lst is None:
            raise MemoryError
        try:
            while True:
                self.skip()
                c = self.peekc()
                if c == ')':
                    self.off += 1
                    return lst
                elif not c:
                    raise UnexpectedEofError(f'{self.off}: EOF while inside list')
                append(lst, self.parse_value(depth))
        except Exception:
            destroy(lst)
            raise

    def parse_string(self):
        self.buff.reset()
        while True:
            c = self.getc()
            if not c:
                raise UnexpectedEofError(f'{self.off}: unexpected EOF inside string')
            elif c == '"':
                return new_string(self.buff.value())
            elif c == '\\':
                c = self.getc()
                if c == 'n':
                    self.buff.append('\n')
                elif c == 'r':
                    self.buff.append('\r')
                elif c == '"':
                    self.buff.append('"')
                elif not c:
                    raise UnexpectedEofError(f'{self.off}: unexpected EOF inside string')
                else:
                    self.buff.append('\\')
                    self.buff.append(c)
            else:
                self.buff.append(c)

    def parse_char(self):
        c = self.getc()
        if not c:
            raise UnexpectedEofError(f'{self.off}: unexpected EOF after \\')
        return new_char(c)

    def parse_number(self):
        self.buff.reset()
        floating = False
        while True:
            c = self.getc()
            self.buff.append(c)
            if c == '.':
                floating = True
            c = self.peekc()
            if len(self.buff) >= MAX_TOKEN or not c or not (c in ALNUM or c in '-.'):
                break
        return self.convert_number(self.buff.value(), floating)

    def convert_number(self, token, floating):
        m = NUMBER_PREFIX.match(token)
        if m is None:
            _debug(lambda: f"{self.off}: no number in '{token}', using 0")
            val = 0
        elif m.group('hex') is not None:
            val = int(m.group('hex'), 16)
            if m.group('sign') == '-':
                val = -val
        elif floating or any(e in m.group('dec') for e in 'eE'):
            val = float(m.group(0))
        else:
            val = int(m.group(0))

        if floating:
            return new_double(val)
        if isinstance(val, float):
            if not math.isfinite(val):
                _debug(lambda: f"{self.off}: '{token}' overflows an integer, using 0")
                return new_int(0)
            val = int(val)
        return new_int(val)

    def parse_symbol(self):
        self.buff.reset()
        while True:
            self.buff.append(self.getc())
            c = self.peekc()
            if not c or c in WHITESPACE or c in '()' or len(self.buff) >= MAX_TOKEN:
                break

        sym = self.buff.value()
        keyword = KEYWORDS.get(sym)
        if keyword is not None:
            return keyword()
        return new_symbol(sym)


def _parse(parser):
    try:
        return parser.parse()
    except SexprError as e:
        _debug(lambda: f"parse failed: {e}")
        if e.code is not None:
            set_error(e.code)
    except RecursionError:
        _debug("parse failed: recursion limit hit")
    except MemoryError:
        set_error(ErrorCode.OUT_OF_MEMORY)
    return None


def parse_with_length(data, length, max_depth=DEFAULT_MAX_DEPTH):
    '''
    Parse one value from the first length characters (or bytes) of data.
    Returns None on failure; see last_error() for the advisory reason.
    '''
    if data is None or length == 0:
        return None
    return _parse(SexprParser(data, length, max_depth))


def parse(text, max_depth=DEFAULT_MAX_DEPTH):
    if not text:
        return None
    return _parse(SexprParser(text, max_depth=max_depth))


def load(stream, max_depth=DEFAULT_MAX_DEPTH):
    '''read all of stream (text or binary), then parse it'''
    content = stream.read()
    if not content:
        return None
    return parse_with_length(content, len(content), max_depth)
