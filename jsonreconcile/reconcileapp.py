# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""The jsonreconcile command: print or save the changes between two JSON documents."""

import io
import json
import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_reconcile_args, add_prettyprint_args,
    prettyprint_config_from_args,
)
from .dispatching import filter_changeset
from .prettyprint import pretty_print_document_changeset
from .reconciling import Reconciler
from .utils import EXPLICIT_MISSING_FILE, read_document, setup_std_streams


def main_reconcile(args):
    for fn in (args.base, args.remote):
        if fn != EXPLICIT_MISSING_FILE and not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1
    if args.base == args.remote == EXPLICIT_MISSING_FILE:
        print("At most one of the documents can be {}".format(EXPLICIT_MISSING_FILE))
        return 1

    source = read_document(args.base)
    target = read_document(args.remote)
    changes = filter_changeset(Reconciler(source, target).reconcile(), args.ignore)

    if args.out:
        with io.open(args.out, 'w', encoding='utf-8') as f:
            json.dump(changes, f, indent=2, sort_keys=args.sort_paths)
            f.write('\n')
    else:
        config = prettyprint_config_from_args(args)
        pretty_print_document_changeset(
            args.base, args.remote, changes, config, sort_paths=args.sort_paths)
    return 0


def _build_arg_parser(prog='jsonreconcile'):
    parser = ConfigBackedParser(
        prog=prog,
        description="Compute the changes turning one JSON document into another.")
    add_generic_args(parser)
    add_reconcile_args(parser)
    add_prettyprint_args(parser)
    parser.add_argument(
        'base',
        help="the document changes are computed from, or %s if it does not exist."
             % EXPLICIT_MISSING_FILE)
    parser.add_argument(
        'remote',
        help="the document changes lead to, or %s if it does not exist."
             % EXPLICIT_MISSING_FILE)
    parser.add_argument(
        '--out',
        metavar='FILE',
        help="write the changeset to FILE as JSON instead of printing it.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    return main_reconcile(_build_arg_parser().parse_args(args))


if __name__ == "__main__":
    sys.exit(main())
