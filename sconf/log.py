"""
Debug output hook.

Everything in sconf reports through _debug(), which is a no-op until
enable_debug() is called.  Pass a lambda instead of a string when building
the message is not free; it is only evaluated when debugging is on.
"""
import sys


def _debug_noop(*args):
    pass


def _debug_stderr(arg):
    f = arg
    if not callable(arg):
        f = lambda: arg
    print("DEBUG: ", f(), file=sys.stderr)


_hook = _debug_noop


def _debug(arg):
    _hook(arg)


def enable_debug():
    global _hook
    _hook = _debug_stderr


def disable_debug():
    global _hook
    _hook = _debug_noop


def debugging():
    return _hook is not _debug_noop
