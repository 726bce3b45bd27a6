# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Terminal rendering of changesets.

Each operation is shown as a header line naming the action and the
path, followed by the old value marked with '-' and/or the new
value marked with '+'. Values are rendered as indented JSON.
"""

from collections import namedtuple
import json
import sys

import colorama

from .changeset_format import ChangesetFormatError, OpType


Markers = namedtuple("Markers", ["REMOVE", "ADD", "INFO", "RESET"])

_markers = {
    True: Markers(
        REMOVE=colorama.Fore.RED + "-  ",
        ADD=colorama.Fore.GREEN + "+  ",
        INFO=colorama.Fore.BLUE + colorama.Style.BRIGHT + "## ",
        RESET=colorama.Style.RESET_ALL,
    ),
    False: Markers(REMOVE="-  ", ADD="+  ", INFO="## ", RESET=""),
}


class PrettyPrintConfig(object):
    """Where and how changes are printed.

    out defaults to the sys.stdout current at construction time.
    """

    def __init__(self, out=None, use_color=True):
        self.out = sys.stdout if out is None else out
        self.use_color = bool(use_color)
        self.REMOVE, self.ADD, self.INFO, self.RESET = _markers[self.use_color]


def json_type(value):
    "Name of the JSON type of value."
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def format_value(value):
    return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)


def print_value(value, marker, config):
    for line in format_value(value).splitlines():
        config.out.write("%s%s%s\n" % (marker, line, config.RESET))


def pretty_print_operation(path, e, config):
    op = e.op
    if op == OpType.CREATE:
        action = "created"
    elif op == OpType.DELETE:
        action = "deleted"
    elif op == OpType.UPDATE:
        old, new = json_type(e.from_), json_type(e.to)
        action = "updated"
        if old != new:
            action += " (%s -> %s)" % (old, new)
    else:
        raise ChangesetFormatError("Unknown operation {}".format(op))

    config.out.write("%s%s %s%s\n" % (config.INFO, action, path or "(root)", config.RESET))
    if "from" in e:
        print_value(e.from_, config.REMOVE, config)
    if "to" in e:
        print_value(e.to, config.ADD, config)
    config.out.write("\n")


def changeset_summary(changes):
    return "%d created, %d updated, %d deleted" % (
        len(changes.creates()), len(changes.updates()), len(changes.deletes()))


def pretty_print_changeset(changes, config, sort_paths=True):
    items = changes.sorted_items() if sort_paths else changes.items()
    for path, e in items:
        pretty_print_operation(path, e, config)


def pretty_print_document_changeset(afn, bfn, changes, config, sort_paths=True):
    """Print the changes turning document afn into document bfn.

    A header names both files and a trailing line counts the
    operations by kind. Nothing is printed when there are no changes.
    """
    if not changes:
        return
    config.out.write("--- %s\n+++ %s\n\n" % (afn, bfn))
    pretty_print_changeset(changes, config, sort_paths)
    config.out.write("%s%s%s\n" % (config.INFO, changeset_summary(changes), config.RESET))
