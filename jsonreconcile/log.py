# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class ChangesetFormatError(ValueError):
    "A changeset or operation that does not follow the changeset format."


class PatternError(ValueError):
    "A path pattern that is not a JSON pointer."


LOG_FORMAT = '[%(levelname)1.1s %(name)s:%(lineno)d] %(message)s'


def init_logging(level=logging.INFO):
    """Configure the root handler for the command line.

    Library users configure logging themselves, only entry points
    call this. Warnings raised through the warnings module are
    routed to the log as well.
    """
    logging.basicConfig(format=LOG_FORMAT, level=level)
    logging.captureWarnings(True)


def set_jsonreconcile_log_level(level, set_main=True):
    "Set the level of the jsonreconcile logger, and of the root logger unless set_main is false."
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('jsonreconcile')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
