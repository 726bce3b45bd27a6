# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import build_config, entrypoint_configurables, get_defaults_for_argparse
from .log import init_logging, set_jsonreconcile_log_level


LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser whose defaults come from the configuration.

    The entrypoint is the first word of prog. Parsers for
    entrypoints without configuration keep their own defaults.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**get_defaults_for_argparse(entrypoint))
        return super(ConfigBackedParser, self).parse_known_args(args, namespace)


class LogLevelAction(argparse.Action):
    """Apply a log level as soon as it is parsed.

    Actions only run for options given on the command line, so the
    default level is applied when the parser is built.
    """

    def __init__(self, option_strings, dest, default='INFO', **kwargs):
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)
        level = logging.getLevelName(default)
        init_logging(level=level)
        set_jsonreconcile_log_level(level)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_jsonreconcile_log_level(logging.getLevelName(values), True)


class ConfigHelpAction(argparse.Action):
    "Print the effective settings of the entrypoint as JSON and exit."

    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        section = entrypoint_configurables[parser.prog].__name__
        settings = {section: build_config(parser.prog, True)}
        sys.stderr.write(json.dumps(settings, indent=2, sort_keys=True) + "\n")
        parser.exit(1)


def path_pattern(value):
    "argparse type for path patterns, JSON pointers that may hold '*' segments."
    if value and not value.startswith('/'):
        raise argparse.ArgumentTypeError(
            "path pattern %r must be empty or start with '/'" % value)
    return value


def add_generic_args(parser):
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__)
    parser.add_argument(
        '--config',
        action=ConfigHelpAction,
        help="print the effective configuration and exit.")
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        action=LogLevelAction,
        help="set the log level by name.")


def add_reconcile_args(parser):
    """Arguments selecting which changes are reported and in what order."""
    group = parser.add_argument_group('changes')
    order = group.add_mutually_exclusive_group()
    order.add_argument(
        '--sort-paths',
        dest='sort_paths',
        action='store_true',
        default=True,
        help="report changes in sorted path order (default).")
    order.add_argument(
        '--no-sort-paths',
        dest='sort_paths',
        action='store_false',
        help="report changes in the order they were found.")
    group.add_argument(
        '--ignore',
        metavar='PATTERN',
        type=path_pattern,
        action='append',
        default=[],
        help="leave out changes at or below paths matching PATTERN, "
             "e.g. '/items/*/timestamp'. Can be given multiple times.")


def add_prettyprint_args(parser):
    group = parser.add_argument_group('printing')
    color = group.add_mutually_exclusive_group()
    color.add_argument(
        '--color',
        dest='color',
        action='store_true',
        default=True,
        help="color the printed changes with ANSI escapes (default).")
    color.add_argument(
        '--no-color',
        dest='color',
        action='store_false',
        help="print the changes without ANSI escapes.")


def prettyprint_config_from_args(arguments, out=None):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(out=out, use_color=getattr(arguments, 'color', True))
