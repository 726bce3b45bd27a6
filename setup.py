#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONRECONCILE_PATH = HERE / "jsonreconcile"


def get_version(fpath):
    with open(fpath) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    return match.group(1)


VERSION = get_version(JSONRECONCILE_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="jsonreconcile",
      version=VERSION,
      description="Path-addressed diffing of JSON documents with pattern-dispatched change handlers",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD",
      packages=find_packages(include=["jsonreconcile", "jsonreconcile.*"]),
      package_data={
          "jsonreconcile": ["*.schema.json"],
          "jsonreconcile.tests": ["files/*.json"],
      },
      python_requires=">=3.8",
      install_requires=[
          "colorama",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
              "jsonschema",
          ],
      },
      entry_points={
          "console_scripts": [
              "jsonreconcile = jsonreconcile.reconcileapp:main",
          ],
      },
      classifiers=[
          "License :: OSI Approved :: BSD License",
          "Programming Language :: Python :: 3",
      ],
    )
