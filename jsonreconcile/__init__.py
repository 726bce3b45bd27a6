# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .changeset_format import Changeset, Operation, OpType
from .differ import diff
from .dispatching import Dispatcher
from .pointer import escape_key, append_segment
from .reconciling import Reconciler, ObservingReconciler
from .worker import Worker, CallbackWorker


__all__ = [
    "__version__",
    "diff",
    "Reconciler", "ObservingReconciler",
    "Dispatcher", "Worker", "CallbackWorker",
    "Changeset", "Operation", "OpType",
    "escape_key", "append_segment",
    ]
