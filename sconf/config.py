"""
Settings for the sconf tool, read from a ConfigObj rc file.

    indent = 2        # printer indent width
    max_depth = 256   # deepest list nesting the parser accepts
    debug = false     # print DEBUG: lines on stderr

The file is $SCONFRC if set, else ~/.sconfrc.  A missing file is fine.
"""
import os
from pathlib import Path

from configobj import ConfigObj

from .log import _debug
from .sexpr import DEFAULT_MAX_DEPTH

DEFAULT_INDENT = 1

defaults = {
    'indent': DEFAULT_INDENT,
    'max_depth': DEFAULT_MAX_DEPTH,
    'debug': False,
}


def rc_path():
    rc = os.environ.get('SCONFRC')
    if rc:
        return Path(rc)
    return Path(os.environ.get('HOME', '')) / '.sconfrc'


def _typed(config, key, convert):
    if key not in config:
        return defaults[key]
    try:
        value = convert(key)
    except (ValueError, TypeError):
        _debug(lambda: f"bad value {config[key]!r} for {key}, using {defaults[key]!r}")
        return defaults[key]
    return value


def load_config(path=None):
    '''
    Read the rc file and return a plain dict holding every key in defaults,
    converted to the right type.
    '''
    if path is None:
        path = rc_path()
    _debug(lambda: f"reading config from {path}")
    config = ConfigObj(infile=str(path))
    settings = {
        'indent': _typed(config, 'indent', config.as_int),
        'max_depth': _typed(config, 'max_depth', config.as_int),
        'debug': _typed(config, 'debug', config.as_bool),
    }
    for key, lowest in (('indent', 0), ('max_depth', 1)):
        if settings[key] < lowest:
            _debug(lambda: f"{key} must be at least {lowest}, using {defaults[key]}")
            settings[key] = defaults[key]
    return settings
