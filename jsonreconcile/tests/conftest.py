# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from jsonreconcile.utils import read_document


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


def _load_pair(filespath, name):
    a = read_document(pjoin(filespath, name + "-base.json"))
    b = read_document(pjoin(filespath, name + "-remote.json"))
    return a, b


@fixture
def simple_pair(filespath):
    return _load_pair(filespath, "simple-json")


@fixture
def missing_values_pair(filespath):
    return _load_pair(filespath, "missing-new-values")


@fixture
def escaped_keys_pair(filespath):
    return _load_pair(filespath, "escaped-keys")


@fixture(params=["simple-json", "missing-new-values", "escaped-keys"])
def document_pairs(request, filespath):
    return _load_pair(filespath, request.param)


@fixture
def json_schema_changeset(request):
    schema_path = os.path.join(schema_dir, 'changeset_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def changeset_validator(request, json_schema_changeset):
    return Validator(json_schema_changeset)
