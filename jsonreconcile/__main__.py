# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from .reconcileapp import main


if __name__ == "__main__":
    # This is triggered by "python -m jsonreconcile <args>"
    sys.exit(main())
