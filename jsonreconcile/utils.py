# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

# Naming the null device stands for a document that does not exist
if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


_placeholders = {
    'empty': dict,
    'null': lambda: None,
}


def _placeholder(kind, option):
    if kind not in _placeholders:
        raise ValueError('%s must be one of %s, got %r' % (
            option, ', '.join(sorted(_placeholders)), kind))
    return _placeholders[kind]()


def read_document(source, on_null='empty', on_empty=None):
    """Load a JSON document from a filename or a readable file object.

    The null device (EXPLICIT_MISSING_FILE) reads as the placeholder
    named by on_null: 'empty' gives {} and 'null' gives None.
    A blank file is an error unless on_empty names a placeholder
    the same way.
    """
    if source == EXPLICIT_MISSING_FILE:
        return _placeholder(on_null, 'on_null')

    if isinstance(source, str):
        with io.open(source, encoding='utf-8') as f:
            text = f.read()
    else:
        text = source.read()
        if isinstance(text, bytes):
            text = text.decode('utf-8')

    if on_empty is not None and not text.strip():
        return _placeholder(on_empty, 'on_empty')
    return json.loads(text)


def setup_std_streams():
    """Prepare stdout/err for printing changes.

    Characters the terminal cannot encode are escaped instead of
    raising, and ANSI colors are enabled on Windows.
    """
    if not os.getenv('PYTHONIOENCODING'):
        for name in ('stdout', 'stderr'):
            stream = getattr(sys, name)
            # Leave captured or redirected streams alone
            if stream is getattr(sys, '__%s__' % name) and hasattr(stream, 'reconfigure'):
                stream.reconfigure(errors='backslashreplace')
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
