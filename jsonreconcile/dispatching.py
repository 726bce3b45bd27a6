# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from .log import PatternError, debug
from .pointer import split_pointer, unescape_segment

__all__ = ["Dispatcher", "DispatchMatch", "WILDCARD", "filter_changeset"]


# Pattern segment matching any single concrete segment
WILDCARD = "*"


DispatchMatch = namedtuple("DispatchMatch", ["worker", "pattern", "wildcards"])


class PatternNode(object):
    __slots__ = ("children", "wildcard", "worker", "pattern")

    def __init__(self):
        self.children = {}
        self.wildcard = None
        self.worker = None
        self.pattern = None

    def child(self, segment):
        "Get or create the node for segment."
        if segment == WILDCARD:
            if self.wildcard is None:
                self.wildcard = PatternNode()
            return self.wildcard
        node = self.children.get(segment)
        if node is None:
            node = self.children[segment] = PatternNode()
        return node

    def find(self, segments, i, wildcards):
        """Depth first search for a node with a worker matching segments[i:].

        Exact segments are tried before the wildcard at every depth.
        Returns the matching node, wildcards is filled with the segments
        consumed by wildcards on the way.
        """
        if i == len(segments):
            return self if self.worker is not None else None

        segment = segments[i]
        exact = self.children.get(segment)
        if exact is not None:
            found = exact.find(segments, i + 1, wildcards)
            if found is not None:
                return found

        if self.wildcard is not None:
            wildcards.append(segment)
            found = self.wildcard.find(segments, i + 1, wildcards)
            if found is not None:
                return found
            wildcards.pop()

        return None


class Dispatcher(object):
    """Trie of workers keyed by path patterns.

    Patterns are JSON pointers where any segment may be '*',
    e.g. '/items/*/name'. Resolving a concrete path picks the
    most specific pattern, an exact segment beats a wildcard
    at each depth.
    """

    def __init__(self):
        self._root = PatternNode()
        self._patterns = {}
        self._frozen = False

    @property
    def frozen(self):
        return self._frozen

    def freeze(self):
        "Disallow further registrations, the dispatcher is read only from now on."
        self._frozen = True
        return self

    def register(self, pattern, worker):
        "Register worker for pattern, replacing any worker registered for the same pattern."
        if self._frozen:
            raise RuntimeError("Cannot register %r on a frozen dispatcher." % (pattern,))
        if worker is None:
            raise ValueError("Cannot register None as worker for %r." % (pattern,))
        try:
            segments = split_pointer(pattern)
        except ValueError:
            raise PatternError("Pattern must be empty or start with '/': %r" % (pattern,))

        node = self._root
        for segment in segments:
            node = node.child(segment)

        if node.worker is not None:
            debug("Replacing worker %r for pattern %r with %r", node.worker, pattern, worker)
        node.worker = worker
        node.pattern = pattern
        self._patterns[pattern] = worker

    def match(self, path):
        """Find the best match for a concrete path.

        Returns a DispatchMatch or None if no pattern matches.
        """
        wildcards = []
        node = self._root.find(split_pointer(path), 0, wildcards)
        if node is None:
            return None
        return DispatchMatch(node.worker, node.pattern,
                             [unescape_segment(s) for s in wildcards])

    def resolve(self, path):
        "Return the worker for path, or None."
        m = self.match(path)
        return m.worker if m is not None else None

    def patterns(self):
        return sorted(self._patterns)

    def __len__(self):
        return len(self._patterns)

    def __contains__(self, pattern):
        return pattern in self._patterns

    def covers(self, path):
        "True if a pattern matches path or any of its ancestors."
        segments = split_pointer(path)
        for n in range(len(segments) + 1):
            if self._root.find(segments[:n], 0, []) is not None:
                return True
        return False


def filter_changeset(changeset, patterns):
    """Return a copy of changeset without the changes at or below
    paths matching any of patterns.
    """
    if not patterns:
        return changeset
    excluded = Dispatcher()
    for pattern in patterns:
        excluded.register(pattern, True)
    return type(changeset)(
        (path, e) for path, e in changeset.items() if not excluded.covers(path))
