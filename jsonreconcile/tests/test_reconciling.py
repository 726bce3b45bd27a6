# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import logging

from jsonreconcile import (
    Reconciler, ObservingReconciler, Dispatcher, Worker, CallbackWorker,
)
from jsonreconcile.changeset_format import Changeset, op_create, op_update, op_delete

from .utils import RecordingWorker


class FailingWorker(Worker):

    def __init__(self):
        self.errors = []

    def create(self, value, path):
        raise RuntimeError("create failed")

    def update(self, old, new, path):
        raise RuntimeError("update failed")

    def delete(self, value, path):
        raise RuntimeError("delete failed")

    def on_create_error(self, error, value, path):
        self.errors.append(("create", path, str(error), value))

    def on_update_error(self, error, old, new, path):
        self.errors.append(("update", path, str(error), old, new))

    def on_delete_error(self, error, value, path):
        self.errors.append(("delete", path, str(error), value))


def test_reconciler_example():
    a = {"a": "a", "arr": [{"x": "x"}]}
    b = {"a": "a2", "arr": [{"x": "y"}], "b": "new"}
    changes = Reconciler(a, b).reconcile()
    assert isinstance(changes, Changeset)
    assert changes == {
        "/a": op_update("a", "a2"),
        "/arr/0/x": op_update("x", "y"),
        "/b": op_create("new"),
    }


def test_reconciler_is_pure(document_pairs):
    a, b = document_pairs
    a0, b0 = copy.deepcopy(a), copy.deepcopy(b)
    r = Reconciler(a, b)
    first = r.reconcile()
    second = r.reconcile()
    assert first == second
    assert first is not second
    assert (a, b) == (a0, b0)


def test_observing_dispatches_each_kind():
    a = {"a": 1, "b": 2}
    b = {"a": 10, "c": 3}
    w = RecordingWorker()
    r = ObservingReconciler(a, b)
    r.add_worker("/*", w)
    changes = r.reconcile()

    assert changes == {
        "/a": op_update(1, 10),
        "/b": op_delete(2),
        "/c": op_create(3),
    }
    # Sorted path order by default
    assert w.calls == [
        ("update", "/a", 1, 10),
        ("delete", "/b", 2),
        ("create", "/c", 3),
    ]
    report = r.last_report
    assert report.results == {"/a": "recorder", "/b": "recorder", "/c": "recorder"}
    assert report.failed == {}
    assert report.unmatched == []


def test_observing_original_patterns(simple_pair):
    a, b = simple_pair
    obj_worker = RecordingWorker("arrObj1")
    a_worker = RecordingWorker("a")
    r = ObservingReconciler(a, b)
    r.add_worker("/arr/*/arr3/arrObj1", obj_worker)
    r.add_worker("/a", a_worker)
    r.reconcile()

    assert obj_worker.calls == [("update", "/arr/0/arr3/arrObj1", 1, 2)]
    assert a_worker.calls == [("update", "/a", "a", "b")]
    assert r.last_report.unmatched == ["/arr/1/arr3/added", "/new"]


def test_observing_deletes(missing_values_pair):
    a, b = missing_values_pair
    w = RecordingWorker()
    r = ObservingReconciler(a, b)
    r.add_worker("/arr/*/arr3/arrObj1", w)
    r.reconcile()
    assert w.calls == [
        ("delete", "/arr/0/arr3/arrObj1", 1),
        ("delete", "/arr/1/arr3/arrObj1", 2),
    ]


def test_worker_failure_is_contained(caplog):
    a = {"a": 1, "b": 2, "c": {"d": 1}}
    b = {"a": 10, "b": 20, "c": {"d": 1, "e": 5}}
    failing = FailingWorker()
    ok = RecordingWorker()
    r = ObservingReconciler(a, b)
    r.add_worker("/a", failing)
    r.add_worker("/c/e", failing)
    r.add_worker("/b", ok)

    with caplog.at_level(logging.WARNING, logger="jsonreconcile"):
        changes = r.reconcile()

    assert len(changes) == 3
    # Failure at /a did not stop /b from being delivered
    assert ok.calls == [("update", "/b", 2, 20)]
    assert failing.errors == [
        ("update", "/a", "update failed", 1, 10),
        ("create", "/c/e", "create failed", 5),
    ]
    report = r.last_report
    assert sorted(report.failed) == ["/a", "/c/e"]
    assert isinstance(report.failed["/a"], RuntimeError)
    assert report.results == {"/b": "recorder"}
    assert "failed to update /a" in caplog.text


def test_delete_error_hook():
    failing = FailingWorker()
    r = ObservingReconciler({"x": "gone"}, {})
    r.add_worker("/x", failing)
    r.reconcile()
    assert failing.errors == [("delete", "/x", "delete failed", "gone")]


def test_unimplemented_worker_reports_failure():
    r = ObservingReconciler({"x": 1}, {"x": 2})
    r.add_worker("/x", Worker())
    r.reconcile()
    assert isinstance(r.last_report.failed["/x"], NotImplementedError)


def test_duck_typed_worker_without_hooks():
    class Broken(object):
        def update(self, old, new, path):
            raise ValueError("nope")

    r = ObservingReconciler({"x": 1}, {"x": 2})
    r.add_worker("/x", Broken())
    r.reconcile()
    assert isinstance(r.last_report.failed["/x"], ValueError)


def test_unmatched_is_logged(caplog):
    r = ObservingReconciler({"x": 1}, {"x": 2})
    with caplog.at_level(logging.DEBUG, logger="jsonreconcile"):
        changes = r.reconcile()
    assert changes == {"/x": op_update(1, 2)}
    assert r.last_report.unmatched == ["/x"]
    assert "No worker found for /x" in caplog.text


def test_callback_worker():
    seen = []
    errors = []
    w = CallbackWorker(
        create=lambda value, path: seen.append(("create", path, value)) or "created",
        update=lambda old, new, path: 1 / 0,
        on_error=lambda error, path: errors.append((path, type(error))),
    )
    r = ObservingReconciler({"a": 1, "b": 1}, {"a": 2, "c": 3})
    r.add_worker("/*", w)
    r.reconcile()

    assert seen == [("create", "/c", 3)]
    assert errors == [("/a", ZeroDivisionError)]
    # No delete reaction given, the change is ignored
    assert r.last_report.results == {"/b": None, "/c": "created"}
    assert repr(w) == "CallbackWorker(create, update)"


def test_shared_frozen_dispatcher():
    w = RecordingWorker()
    dispatcher = Dispatcher()
    dispatcher.register("/v", w)
    dispatcher.freeze()

    ObservingReconciler({"v": 1}, {"v": 2}, dispatcher=dispatcher).reconcile()
    ObservingReconciler({"v": 2}, {}, dispatcher=dispatcher).reconcile()
    assert w.calls == [("update", "/v", 1, 2), ("delete", "/v", 2)]


def test_unsorted_dispatch_delivers_everything():
    w = RecordingWorker()
    r = ObservingReconciler({"b": 1, "a": 1}, {"b": 2, "a": 2}, sort_paths=False)
    r.add_worker("/*", w)
    r.reconcile()
    assert sorted(c[1] for c in w.calls) == ["/a", "/b"]


def test_dispatch_existing_changeset():
    w = RecordingWorker()
    r = ObservingReconciler(None, None)
    r.add_worker("/p", w)
    report = r.dispatch(Changeset({"/p": op_create(1), "/q": op_delete(2)}))
    assert w.calls == [("create", "/p", 1)]
    assert report.unmatched == ["/q"]


def test_failing_error_hook_does_not_stop_dispatch(caplog):
    seen = []

    class BrokenHook(Worker):
        def update(self, old, new, path):
            seen.append(path)
            raise RuntimeError("update failed")

        def on_update_error(self, error, old, new, path):
            raise ValueError("hook broken")

    r = ObservingReconciler({"a": 1, "b": 1}, {"a": 2, "b": 2})
    r.add_worker("/*", BrokenHook())
    with caplog.at_level(logging.WARNING, logger="jsonreconcile"):
        r.reconcile()

    assert seen == ["/a", "/b"]
    assert sorted(r.last_report.failed) == ["/a", "/b"]
    assert all(isinstance(err, RuntimeError) for err in r.last_report.failed.values())
    assert "on_update_error" in caplog.text


def test_duck_typed_worker_missing_reaction():
    created = []

    class CreateOnly(object):
        def create(self, value, path):
            created.append(path)
            return "made"

    r = ObservingReconciler({"a": 1, "c": 1}, {"a": 2, "b": 1, "c": 1})
    r.add_worker("/*", CreateOnly())
    r.reconcile()

    assert created == ["/b"]
    report = r.last_report
    assert report.results == {"/b": "made"}
    assert isinstance(report.failed["/a"], AttributeError)
