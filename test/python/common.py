# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Shared functionality and helpers for the unit tests."""

import inspect
import logging
import os
import unittest
from unittest import mock

import testtools


class QasmGenTestCase(testtools.TestCase):
    """Helper class that contains common functionality."""

    # testtools maintains their own version of assert functions which mostly
    # behave as value adds to the std unittest assertion methods. Use the
    # stdlib versions so that assertRaises works as a context manager.
    assertRaises = unittest.TestCase.assertRaises
    assertEqual = unittest.TestCase.assertEqual

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        # Set logging to file and stdout if the LOG_LEVEL envar is set.
        cls.log = logging.getLogger(cls.__name__)
        if os.getenv('LOG_LEVEL'):
            filename = '%s.log' % os.path.splitext(inspect.getfile(cls))[0]
            setup_test_logging(cls.log, os.getenv('LOG_LEVEL'), filename)

    def setUp(self):
        super().setUp()
        # Keep the user's settings file out of the tests.
        patcher = mock.patch.dict(
            os.environ,
            {'QASMGEN_SETTINGS': os.path.join(os.path.dirname(__file__),
                                              'no_settings.conf')})
        patcher.start()
        self.addCleanup(patcher.stop)


def setup_test_logging(logger, log_level, filename):
    """Set logging to file and stdout for a logger.

    Args:
        logger (Logger): logger object to be updated.
        log_level (str): logging level.
        filename (str): name of the output file.
    """
    # Set up formatter.
    log_fmt = ('{}.%(funcName)s:%(levelname)s:%(asctime)s:'
               ' %(message)s'.format(logger.name))
    formatter = logging.Formatter(log_fmt)

    # Set up the file handler.
    file_handler = logging.FileHandler(filename)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if os.getenv('STREAM_LOG'):
        # Set up the stream handler.
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    # Set the logging level from the environment variable, defaulting
    # to INFO if it is not a valid level.
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)
