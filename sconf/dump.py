"""
Pretty-printer for Sexpr trees.

A list nested below the top level starts on a new line, indented by
(level - 1) * indent spaces.  Strings are written between quotes exactly as
stored, so a string holding a raw '"' won't read back the same.
"""
import io

from .node import Kind


def format_double(d):
    r = repr(d)
    if 'e' in r:
        mantissa, exponent = r.split('e')
        if '.' not in mantissa:
            mantissa += '.0'
        # '+' would end a number token when read back
        r = f"{mantissa}e{exponent.lstrip('+')}"
    return r


def _atom(sexp):
    kind = sexp.kind
    if kind == Kind.SYMBOL:
        return sexp.value
    elif kind == Kind.STRING:
        return f'"{sexp.value}"'
    elif kind == Kind.INT:
        return str(sexp.value)
    elif kind == Kind.DOUBLE:
        return format_double(sexp.value)
    elif kind == Kind.NIL:
        return 'nil'
    elif kind == Kind.BOOL:
        return 'true' if sexp.value else 'false'
    elif kind == Kind.CHAR:
        return '\\' + chr(sexp.value)
    raise ValueError(f'unknown kind {kind!r}')


def dump(fp, sexp, indent=1):
    if fp is None or sexp is None:
        return
    todo = [(sexp, 1)]
    while todo:
        cur, level = todo.pop()
        if isinstance(cur, str):
            fp.write(cur)
        elif cur.kind != Kind.LIST:
            fp.write(_atom(cur))
        else:
            if level > 1:
                fp.write('\n')
            fp.write(' ' * ((level - 1) * indent) + '(')
            parts = []
            for child in cur.children():
                if parts:
                    parts.append((' ', level))
                parts.append((child, level + 1))
            todo.append((')', level))
            todo.extend(reversed(parts))


def dumps(sexp, indent=1):
    out = io.StringIO()
    dump(out, sexp, indent)
    return out.getvalue()
