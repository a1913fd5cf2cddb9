#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Application logger. Records up to INFO go to stdout, WARNING and above go to stderr, so that
the rendered manifest printed to stdout is not mixed with warnings.
"""

from __future__ import annotations

import logging as logthings
import sys

LOGGER_NAME = "ecs-manifest-x"


class LevelFormatter(logthings.Formatter):
    """Adds the source location to DEBUG records"""

    date_format = "%Y-%m-%d %H:%M:%S"

    def __init__(self):
        super().__init__("%(asctime)s [%(levelname)8s] %(message)s", self.date_format)
        self.debug_formatter = logthings.Formatter(
            "%(asctime)s [%(levelname)8s] (%(filename)s.%(lineno)d , %(funcName)s,) %(message)s",
            self.date_format,
        )

    def format(self, record) -> str:
        if record.levelno == logthings.DEBUG:
            return self.debug_formatter.format(record)
        return super().format(record)


def define_handler(stream, min_level: int, max_level: int = None):
    """
    :param stream: the stream to write to
    :param int min_level: lowest level written
    :param int max_level: highest level written, no limit if None
    :rtype: logging.StreamHandler
    """
    handler = logthings.StreamHandler(stream)
    handler.setFormatter(LevelFormatter())
    handler.setLevel(min_level)
    if max_level is not None:
        handler.addFilter(lambda record: record.levelno <= max_level)
    return handler


def setup_logging(level: int = logthings.INFO):
    app_logger = logthings.getLogger(LOGGER_NAME)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.addHandler(define_handler(sys.stdout, logthings.DEBUG, logthings.INFO))
    app_logger.addHandler(define_handler(sys.stderr, logthings.WARNING))
    app_logger.setLevel(level)
    return app_logger


LOG = setup_logging()
