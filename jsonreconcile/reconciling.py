# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from .changeset_format import OpType, ChangesetFormatError
from .differ import diff
from .dispatching import Dispatcher
from .log import debug, warning

__all__ = ["Reconciler", "ObservingReconciler", "DispatchReport"]


DispatchReport = namedtuple("DispatchReport", ["results", "failed", "unmatched"])


class Reconciler(object):
    """Compute the changes turning the source document into the target.

    Neither document is modified.
    """

    def __init__(self, source, target):
        self.source = source
        self.target = target

    def reconcile(self):
        return diff(self.source, self.target)


class ObservingReconciler(Reconciler):
    """Reconciler that also delivers each change to a registered worker.

    Workers are registered with add_worker under path patterns,
    see Dispatcher. A failing worker never stops delivery of
    the remaining changes.
    """

    def __init__(self, source, target, dispatcher=None, sort_paths=True):
        super(ObservingReconciler, self).__init__(source, target)
        if dispatcher is None:
            dispatcher = Dispatcher()
        self.dispatcher = dispatcher
        self.sort_paths = sort_paths
        self.last_report = None

    def add_worker(self, pattern, worker):
        self.dispatcher.register(pattern, worker)

    def reconcile(self):
        changes = super(ObservingReconciler, self).reconcile()
        self.last_report = self.dispatch(changes)
        return changes

    def dispatch(self, changes):
        """Call the worker resolved for every path in changes.

        Returns a DispatchReport with worker results by path,
        exceptions by path for failed workers, and the paths
        no pattern matched.
        """
        results = {}
        failed = {}
        unmatched = []

        items = changes.sorted_items() if self.sort_paths else changes.items()
        for path, e in items:
            worker = self.dispatcher.resolve(path)
            if worker is None:
                debug("No worker found for %s: %r", path, e)
                unmatched.append(path)
                continue

            reaction, hook_name, args = _reaction(e)
            try:
                results[path] = getattr(worker, reaction)(*(args + (path,)))
            except Exception as err:
                warning("Worker %r failed to %s %s: %s", worker, e.op, path, err)
                failed[path] = err
                _report_error(worker, hook_name, (err,) + args + (path,))

        return DispatchReport(results, failed, unmatched)


def _reaction(e):
    "Names of the worker method and error hook for operation e, and the values to pass."
    if e.op == OpType.CREATE:
        return "create", "on_create_error", (e.to,)
    elif e.op == OpType.UPDATE:
        return "update", "on_update_error", (e.from_, e.to)
    elif e.op == OpType.DELETE:
        return "delete", "on_delete_error", (e.from_,)
    raise ChangesetFormatError("Invalid op {}.".format(e.op))


def _report_error(worker, hook_name, args):
    hook = getattr(worker, hook_name, None)
    if hook is None:
        return
    try:
        hook(*args)
    except Exception as err:
        warning("Error hook %s of %r failed for %s: %s", hook_name, worker, args[-1], err)
