# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

__all__ = ["Worker", "CallbackWorker"]


class Worker(object):
    """Reactions to changes observed at paths matching a registered pattern.

    Subclasses implement create, update and delete. Each returns a result
    or raises. When a reaction raises, the matching error hook is called
    with the exception; the hooks are for observability only and do
    nothing by default.
    """

    def create(self, value, path):
        raise NotImplementedError

    def update(self, old, new, path):
        raise NotImplementedError

    def delete(self, value, path):
        raise NotImplementedError

    def on_create_error(self, error, value, path):
        pass

    def on_update_error(self, error, old, new, path):
        pass

    def on_delete_error(self, error, value, path):
        pass


class CallbackWorker(Worker):
    """Worker built from plain callables.

    create(value, path), update(old, new, path), delete(value, path)
    and on_error(error, path). Reactions not given ignore the change.
    """

    def __init__(self, create=None, update=None, delete=None, on_error=None):
        self._create = create
        self._update = update
        self._delete = delete
        self._on_error = on_error

    def __repr__(self):
        names = [n for n in ("create", "update", "delete")
                 if getattr(self, "_" + n) is not None]
        return "CallbackWorker(%s)" % ", ".join(names)

    def create(self, value, path):
        if self._create is not None:
            return self._create(value, path)

    def update(self, old, new, path):
        if self._update is not None:
            return self._update(old, new, path)

    def delete(self, value, path):
        if self._delete is not None:
            return self._delete(value, path)

    def on_create_error(self, error, value, path):
        if self._on_error is not None:
            self._on_error(error, path)

    def on_update_error(self, error, old, new, path):
        if self._on_error is not None:
            self._on_error(error, path)

    def on_delete_error(self, error, value, path):
        if self._on_error is not None:
            self._on_error(error, path)
