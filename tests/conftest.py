# coding=utf8
#
# conftest.py
# Part of mocking-examples, example tests for stubbing, mocking and spying
#
# License: MIT
#

"""This module exports the fixtures shared by all example modules."""

import os

from pytest import fixture
import mockito

from mocking_examples import _logging
from mocking_examples.settings import Settings


@fixture(scope='session', autouse=True)
def std_log_handler(request):
    """Install the package log handler for the whole session."""
    _logging.install_std_handler(Settings.from_environ(os.environ))

    def fin():
        _logging.uninstall_std_handler()
    request.addfinalizer(fin)


@fixture
def unstub():
    """Undo all stubbing and forget all recorded calls after the test."""
    yield
    mockito.unstub()
