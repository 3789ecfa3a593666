"""Error codes, the per-thread last-error slot, and parse exceptions."""
import threading
from enum import IntEnum


class ErrorCode(IntEnum):
    OK = 0
    OUT_OF_MEMORY = 1
    INDEX_OUT_OF_BOUND = 2
    NOT_A_LIST = 3
    UNEXPECTED_EOF = 4


_descriptions = {
    ErrorCode.OK: "ok",
    ErrorCode.OUT_OF_MEMORY: "failed to allocate memory",
    ErrorCode.INDEX_OUT_OF_BOUND: "index out of bound",
    ErrorCode.NOT_A_LIST: "is not a list",
    ErrorCode.UNEXPECTED_EOF: "unexpected end of input",
}


class SexprError(Exception):
    """Raised by SexprParser when the input can't be turned into a value"""
    code = None


class UnexpectedEofError(SexprError):
    code = ErrorCode.UNEXPECTED_EOF


class NestingError(SexprError):
    pass


_state = threading.local()


def last_error():
    '''
    The most recent error recorded on this thread.  Advisory only: not
    every failing operation records one, and nothing ever resets it.
    '''
    return getattr(_state, 'code', ErrorCode.OK)


def set_error(code):
    _state.code = ErrorCode(code)


def error_description(code):
    try:
        return _descriptions[ErrorCode(code)]
    except ValueError:
        return "???"
