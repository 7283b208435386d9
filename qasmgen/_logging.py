# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Utilities for logging."""

import copy
import logging
from logging.config import dictConfig

from . import user_config


class SimpleInfoFormatter(logging.Formatter):
    """Custom Formatter that uses a simple format for INFO."""
    _style_info = logging.PercentStyle('%(message)s')

    def formatMessage(self, record):
        if record.levelno == logging.INFO:
            return self._style_info.format(record)
        return logging.Formatter.formatMessage(self, record)


QASMGEN_LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'f': {
            '()': SimpleInfoFormatter,
            'format': '%(asctime)s:%(name)s:%(levelname)s: %(message)s'
        },
    },
    'handlers': {
        'h': {
            'class': 'logging.StreamHandler',
            'formatter': 'f'
        }
    },
    'loggers': {
        'qasmgen': {
            'handlers': ['h'],
            'level': logging.INFO,
        },
    }
}


def set_qasmgen_logger(level=None):
    """Update 'qasmgen' logger configuration using a default one.

    Update the configuration of the 'qasmgen' logger using the default
    configuration provided by `QASMGEN_LOGGING_CONFIG`:

    * console logging using a custom format for levels != INFO.
    * console logging with simple format for level INFO.
    * set logger level to `level`, to the `log_level` user setting if
      `level` is None, or to INFO if neither is given.

    Args:
        level (str or int or None): logging level of the 'qasmgen' logger.

    Warning:
        This function modifies the configuration of the standard logging system
        for the 'qasmgen.*' loggers, and might interfere with custom logger
        configurations.
    """
    if level is None:
        level = user_config.get_config().get('log_level', logging.INFO)
    config = copy.deepcopy(QASMGEN_LOGGING_CONFIG)
    config['loggers']['qasmgen']['level'] = level
    dictConfig(config)


def unset_qasmgen_logger():
    """Remove the handlers for the 'qasmgen' logger."""
    qasmgen_logger = logging.getLogger('qasmgen')
    for handler in list(qasmgen_logger.handlers):
        qasmgen_logger.removeHandler(handler)
