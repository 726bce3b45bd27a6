# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import ChangesetFormatError


# Sentinel to allow None as a value
Missing = object()


class OpType:
    "Collection of valid values for the op field in changeset operations."
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Operation(dict):
    """A single change at one path.

    Minimal dict subclass providing attribute access to the operation
    keys. The "from" key is reachable as ``operation.from_`` since
    ``from`` is a reserved word. A side that is absent is a missing key,
    so None remains a valid value.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        key = "from" if name == "from_" else name
        try:
            return self[key]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        key = "from" if name == "from_" else name
        self[key] = value


def op_create(value):
    "Create an operation recording a new value."
    return Operation({"op": OpType.CREATE, "to": value})

def op_update(old, new):
    "Create an operation recording a value changed from old to new."
    return Operation({"op": OpType.UPDATE, "from": old, "to": new})

def op_delete(value):
    "Create an operation recording a removed value."
    return Operation({"op": OpType.DELETE, "from": value})


class Changeset(dict):
    """Mapping from JSON pointer path to Operation.

    The result of one diff pass. Order of paths carries no meaning.
    """

    def _filtered(self, op):
        return Changeset((p, e) for p, e in self.items() if e.op == op)

    def creates(self):
        return self._filtered(OpType.CREATE)

    def updates(self):
        return self._filtered(OpType.UPDATE)

    def deletes(self):
        return self._filtered(OpType.DELETE)

    def sorted_items(self):
        return sorted(self.items(), key=lambda x: x[0])


class ChangesetBuilder(object):

    # Valid values for the op field
    OPS = (
        OpType.CREATE,
        OpType.UPDATE,
        OpType.DELETE,
        )

    def __init__(self, prefix=""):
        self._changes = Changeset()
        self._prefix = prefix

    def validated(self):
        return self._changes

    def append(self, path, entry):
        path = self._prefix + path

        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, Operation)
        assert entry.get("op") in ChangesetBuilder.OPS
        assert path not in self._changes, 'multiple operations for path: %r' % path

        self._changes[path] = entry

    def create(self, path, value):
        self.append(path, op_create(value))

    def update(self, path, old, new):
        self.append(path, op_update(old, new))

    def delete(self, path, value):
        self.append(path, op_delete(value))


def is_valid_changeset(changeset):
    """Checks wheter a changeset is well formed.

    Returns a boolean indicating the well-formedness of the changeset.
    """
    try:
        validate_changeset(changeset)
    except ChangesetFormatError:
        return False
    return True


def validate_changeset(changeset):
    """Check wheter a changeset (mapping of path to operation) is well formed.

    Raises a ChangesetFormatError if not well formed.
    """
    if not isinstance(changeset, dict):
        raise ChangesetFormatError("Changeset must be a dict.")
    for path, e in changeset.items():
        if not isinstance(path, str) or not (path == "" or path.startswith("/")):
            raise ChangesetFormatError(
                "Changeset path '{}' is not a JSON pointer.".format(path))
        validate_operation(e)


def validate_operation(e):
    """Check that e is a well formed operation, an Operation or a plain dict.

    Raises a ChangesetFormatError if not well formed.
    """
    if not isinstance(e, dict):
        raise ChangesetFormatError("Operation '{}' is not a mapping.".format(e))

    op = e.get("op")
    has_from = "from" in e
    has_to = "to" in e
    if op == OpType.CREATE:
        valid = has_to and not has_from
    elif op == OpType.UPDATE:
        valid = has_to and has_from
    elif op == OpType.DELETE:
        valid = has_from and not has_to
    else:
        raise ChangesetFormatError("Unknown operation '{}'.".format(op))

    if not valid:
        raise ChangesetFormatError(
            "Operation '{}' has wrong sides, from: {}, to: {}.".format(op, has_from, has_to))

    extra = set(e) - {"op", "from", "to"}
    if extra:
        raise ChangesetFormatError(
            "Operation '{}' has unexpected keys {}.".format(op, sorted(extra)))
