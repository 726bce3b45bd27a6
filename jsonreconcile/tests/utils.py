# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from jsonreconcile import diff
from jsonreconcile.changeset_format import is_valid_changeset, OpType


def check_no_changes(a):
    "Check that a document compared with itself or a copy has no changes."
    assert diff(a, a) == {}
    assert diff(a, _copy_json(a)) == {}


def _copy_json(v):
    if isinstance(v, dict):
        return {k: _copy_json(x) for k, x in v.items()}
    elif isinstance(v, list):
        return [_copy_json(x) for x in v]
    return v


def changes_by_op(changes):
    "Map op name to sorted list of paths, for compact asserts."
    result = {OpType.CREATE: [], OpType.UPDATE: [], OpType.DELETE: []}
    for path, e in changes.items():
        result[e.op].append(path)
    for paths in result.values():
        paths.sort()
    return result


def check_changeset(changes):
    assert is_valid_changeset(changes)
    # Every path is a string starting at the root
    for path in changes:
        assert path == "" or path.startswith("/")


class RecordingWorker(object):
    """Duck typed worker recording the calls it gets."""

    def __init__(self, name="recorder"):
        self.name = name
        self.calls = []

    def __repr__(self):
        return "RecordingWorker(%r)" % self.name

    def create(self, value, path):
        self.calls.append(("create", path, value))
        return self.name

    def update(self, old, new, path):
        self.calls.append(("update", path, old, new))
        return self.name

    def delete(self, value, path):
        self.calls.append(("delete", path, value))
        return self.name
