#!/usr/bin/env python
#
# sconf - poke at S-expression files from the shell
#
# Commands: check, dump, get, size, help, debug
#
# handy aliases:
#    sexplint - sconf check *.scm
#    sexpfmt  - sconf dump -

import sys

from . import log
from .config import defaults, load_config
from .dump import dump
from .errors import ErrorCode, SexprError, error_description, last_error
from .log import _debug
from .node import at, is_list, size as list_size
from .sexpr import SexprParser

settings = dict(defaults)


class UsageError(Exception):
    pass


def _read(filename):
    if filename == '-':
        return sys.stdin.read()
    with open(filename, 'rb') as f:
        return f.read()


def _parse(filename):
    '''
    read and parse filename; any failure comes out as SexprError or OSError
    '''
    content = _read(filename)
    try:
        return SexprParser(content, max_depth=settings['max_depth']).parse()
    except RecursionError:
        raise SexprError("lists nested too deeply for this interpreter")
    except MemoryError:
        raise SexprError(error_description(ErrorCode.OUT_OF_MEMORY))


def _load(filename):
    '''read and parse filename, or print why not and exit'''
    try:
        return _parse(filename)
    except OSError as e:
        print(f"{filename}: {e.strerror}")
    except SexprError as e:
        print(f"{filename}: {e}")
    sys.exit(1)


def check(args):
    '''Usage: check <file> [<file> ...]
    Parse each file and report whether it holds a valid S-expression.
    '''
    if not args:
        raise UsageError()
    failed = 0
    for filename in args:
        try:
            _parse(filename)
        except OSError as e:
            print(f"{filename}: {e.strerror}")
            failed += 1
        except SexprError as e:
            print(f"{filename}: {e}")
            failed += 1
        else:
            print(f"{filename}: ok")
    if failed:
        sys.exit(1)


def dump_cmd(args):
    '''Usage: dump <file>
    Pretty-print the S-expression in file ('-' for stdin).
    '''
    if len(args) != 1:
        raise UsageError()
    sexp = _load(args[0])
    dump(sys.stdout, sexp, settings['indent'])
    print()


def get(args):
    '''Usage: get <file> <index> [<index> ...]
    Walk down the lists in file, one index per level, and print what's there.
    '''
    if len(args) < 2:
        raise UsageError()
    try:
        path = [int(a) for a in args[1:]]
    except ValueError:
        raise UsageError()
    sexp = _load(args[0])
    for idx in path:
        _debug(lambda: f"at {idx} of {sexp!r}")
        if not is_list(sexp):
            print(error_description(ErrorCode.NOT_A_LIST))
            sys.exit(1)
        sexp = at(sexp, idx)
        if sexp is None:
            print(error_description(last_error()))
            sys.exit(1)
    dump(sys.stdout, sexp, settings['indent'])
    print()


def size(args):
    '''Usage: size <file>
    Print how many elements the top-level list in file has.
    '''
    if len(args) != 1:
        raise UsageError()
    sexp = _load(args[0])
    if not is_list(sexp):
        print(error_description(ErrorCode.NOT_A_LIST))
        sys.exit(1)
    print(list_size(sexp))


def debug(args):
    '''Usage: debug <command> [<args> ...]
    Run command with DEBUG: output on stderr.
    '''
    log.enable_debug()
    _dispatch([sys.argv[0]] + args)


def help(args):
    '''Usage: help <command>
    Shows help on the specified command.
    '''

    if len(args) < 1:
        print(help.__doc__)
        print(f"Valid commands: {CommandList}")
        sys.exit(0)
    cmd = args[0]
    cmdfunc = Commands.get(cmd, None)
    if cmdfunc is None:
        print(f"Unknown command {cmd}.  Valid ones: {CommandList}")
        sys.exit(1)
    print(f"Help on {cmd}:\n")
    print(cmdfunc.__doc__)


Commands = {'check': check,
            'dump': dump_cmd,
            'get': get,
            'size': size,
            'debug': debug,
            'help': help,
           }

CommandList = ', '.join(sorted(Commands.keys()))


def _dispatch(args):

    _debug(lambda: f"args={args}")
    if len(args) <= 1:
        print(f"Must specify a command.  Valid ones: {CommandList}")
        return
    cmd = args[1]
    cmdargs = args[2:]
    _debug(lambda: f"cmd={cmd} cmdargs={cmdargs}")
    cmdfunc = Commands.get(cmd, None)
    if not cmdfunc:
        print(f"Unknown command {cmd}.  Valid ones: {CommandList}")
        return
    try:
        cmdfunc(cmdargs)
    except UsageError:
        print(cmdfunc.__doc__)
        sys.exit(1)


def main():
    # main program
    settings.update(load_config())
    if settings['debug']:
        log.enable_debug()
    try:
        _dispatch(sys.argv)
    except KeyboardInterrupt:
        print("Interrupted.")
