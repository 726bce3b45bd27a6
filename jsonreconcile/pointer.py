# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""JSON Pointer (RFC 6901) paths as used in changesets.

Paths are built from the root ``""`` by appending ``"/" + segment``.
Object keys are escaped, array indices are written as plain decimals.
"""

import re

from .changeset_format import Missing

__all__ = [
    "escape_key", "unescape_segment", "append_segment",
    "split_pointer", "join_pointer", "resolve_pointer",
]


# Valid array index token, no leading zeros
r_array_index = re.compile(r"^(0|[1-9][0-9]*)$")


def escape_key(key):
    "Escape an object key for use as a pointer segment."
    # Order matters, '~' must be replaced first to avoid escaping the '~1's
    return key.replace("~", "~0").replace("/", "~1")


def unescape_segment(segment):
    "Reverse escape_key."
    return segment.replace("~1", "/").replace("~0", "~")


def append_segment(path, segment):
    """Extend path with one segment.

    Integers are array indices and are appended as is,
    strings are object keys and are escaped.
    """
    if isinstance(segment, int) and not isinstance(segment, bool):
        return "%s/%d" % (path, segment)
    return "%s/%s" % (path, escape_key(segment))


def split_pointer(path):
    """Split a path on the form '/foo/ba~1r' into ['foo', 'ba~1r'].

    Segments are returned still escaped. The root path '' gives [],
    while '/' is the single empty key [''].
    """
    if path == "":
        return []
    if not path.startswith("/"):
        raise ValueError("JSON pointer must be empty or start with '/': %r" % (path,))
    return path[1:].split("/")


def join_pointer(segments):
    "Join escaped segments ['foo', 'bar'] into '/foo/bar'."
    return "".join("/" + s for s in segments)


def _child(value, segment):
    if isinstance(value, dict):
        return value.get(unescape_segment(segment), Missing)
    elif isinstance(value, list):
        if not r_array_index.match(segment):
            return Missing
        index = int(segment)
        if index >= len(value):
            return Missing
        return value[index]
    return Missing


def resolve_pointer(document, path, default=Missing):
    """Look up the value at path in document.

    Returns default when any segment along the way does not resolve,
    a dangling path is never an error.
    """
    value = document
    for segment in split_pointer(path):
        value = _child(value, segment)
        if value is Missing:
            return default
    return value
