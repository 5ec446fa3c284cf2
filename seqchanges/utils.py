# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import sys

import colorama

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_text(f):
    """Read and return text from filename.

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows), which
            reads as an empty string.
            Alternatively a file-like object can be passed.

    Files are decoded as UTF-8, a UnicodeDecodeError is raised
    for anything else.
    """
    if f == EXPLICIT_MISSING_FILE:
        return ''
    if isinstance(f, str):
        # Keep line endings as they are, they are part of the diff
        with io.open(f, encoding='utf-8', newline='') as fo:
            return fo.read()
    return f.read()


def setup_std_streams():
    """Make printing changed values to the terminal safe.

    Characters the terminal encoding cannot represent are printed
    as backslash escapes instead of raising. Output captured by
    tests or redirected by the caller is left alone.
    """
    if not os.getenv('PYTHONIOENCODING'):
        for name in ('stdout', 'stderr'):
            stream = getattr(sys, name)
            if stream is getattr(sys, '__%s__' % name) and hasattr(stream, 'reconfigure'):
                stream.reconfigure(errors='backslashreplace')
    if sys.platform.startswith('win'):
        # after the reconfigure, colorama wraps the final streams
        colorama.init()
