# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import math

from .changeset_format import ChangesetBuilder, Missing, validate_changeset
from .pointer import append_segment, resolve_pointer

__all__ = ["diff", "values_equal"]


def is_number(x):
    "True for int and float, but not bool."
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def numbers_equal(x, y):
    "Compare two numbers as doubles, so that 1 == 1.0."
    try:
        fx, fy = float(x), float(y)
    except OverflowError:
        # Integers beyond float range
        return x == y
    if math.isnan(fx) and math.isnan(fy):
        return True
    return fx == fy


def values_equal(x, y):
    """Compare a scalar from the source document with the value found
    at the same path in the target document.

    A mismatch of types is never equal, in particular bools
    are not numbers and numbers are not strings.
    """
    if x is None:
        return y is None
    elif isinstance(x, bool):
        return isinstance(y, bool) and x == y
    elif is_number(x):
        return is_number(y) and numbers_equal(x, y)
    elif isinstance(x, str):
        return isinstance(y, str) and x == y
    raise TypeError("Not a scalar value: %r" % (x,))


def diff_scalar(value, target, path, builder):
    comp = resolve_pointer(target, path)
    if comp is Missing:
        builder.delete(path, copy.deepcopy(value))
    elif not values_equal(value, comp):
        builder.update(path, copy.deepcopy(value), copy.deepcopy(comp))


def diff_list(value, target, path, builder):
    # Index aligned, items appended in target are not visited
    for i, item in enumerate(value):
        diff_value(item, target, append_segment(path, i), builder)


def diff_dict(value, target, path, builder):
    for key in sorted(value):
        if not isinstance(key, str):
            raise TypeError("Object keys must be strings, got %r at %r" % (key, path))
        diff_value(value[key], target, append_segment(path, key), builder)

    # Keys new in target are recorded as a whole, without recursing
    comp = resolve_pointer(target, path)
    if isinstance(comp, dict):
        for key in sorted(set(comp) - set(value)):
            builder.create(append_segment(path, key), copy.deepcopy(comp[key]))


def diff_value(value, target, path, builder):
    """Record the changes for the source subtree value at path.

    target is the whole target document, looked up by absolute path.
    """
    if isinstance(value, dict):
        diff_dict(value, target, path, builder)
    elif isinstance(value, list):
        diff_list(value, target, path, builder)
    elif value is None or isinstance(value, (bool, int, float, str)):
        diff_scalar(value, target, path, builder)
    else:
        raise TypeError("Can only diff json-like values, got %s at %r" % (
            type(value).__name__, path))


def diff(a, b, path=""):
    """Compute the changeset turning json-like value a into b.

    path is the location of a and b within their documents and is
    prepended to every path in the changeset. Lookups into b are
    relative to b itself.
    """
    builder = ChangesetBuilder(prefix=path)
    diff_value(a, b, "", builder)
    d = builder.validated()

    # We can turn this off for performance after the library has been well tested:
    validate_changeset(d)

    return d
