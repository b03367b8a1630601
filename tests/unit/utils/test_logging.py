"""Unit tests for logging initialization in logging.py

Test coverage includes:

1. JsonFormatter
   - Standard fields, extras, exception info.
   - Credential extras are masked.
2. initialize_logging()
   - Root level from LOG_LEVEL, HTTP client loggers quieted.
"""

import sys
import json
import logging

import pytest

from shortenerclient.utils.logging import JsonFormatter, initialize_logging, MASK


def make_record(msg='hello', exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord('shortenerclient.test', logging.INFO, __file__, 1, msg, None, exc_info)
    record.__dict__.update(extra)
    return record


# -------------------------------
# 1. JsonFormatter
# -------------------------------


def test_formatter_standard_fields():
    """Ensure timestamp, level, logger and message are emitted"""
    log = json.loads(JsonFormatter().format(make_record()))

    assert log['level'] == 'INFO'
    assert log['logger'] == 'shortenerclient.test'
    assert log['message'] == 'hello'
    assert log['timestamp'].endswith('Z')
    assert 'lineno' not in log


def test_formatter_includes_extras():
    """Ensure extras appear as top-level keys"""
    log = json.loads(JsonFormatter().format(make_record(path='/api/admin/my', status=500)))
    assert log['path'] == '/api/admin/my'
    assert log['status'] == 500


@pytest.mark.parametrize('key', ['token', 'password', 'Authorization'])
def test_formatter_masks_credentials(key):
    """Ensure credential extras never reach the output"""
    output = JsonFormatter().format(make_record(**{key: 'super-secret'}))
    assert 'super-secret' not in output
    assert json.loads(output)[key] == MASK


def test_formatter_serializes_unknown_types():
    """Ensure non-JSON extras are stringified"""
    log = json.loads(JsonFormatter().format(make_record(store=object())))
    assert log['store'].startswith('<object object')


def test_formatter_includes_exception():
    """Ensure exception info is rendered"""
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = make_record(exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))
    assert 'RuntimeError: boom' in log['exception']


# -------------------------------
# 2. initialize_logging()
# -------------------------------


@pytest.fixture
def restore_logging():
    """Restore root logger state changed by dictConfig."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_initialize_logging(monkeypatch, restore_logging):
    """Ensure LOG_LEVEL drives the root level and the JSON handler is installed"""
    monkeypatch.setenv('LOG_LEVEL', 'debug')

    initialize_logging()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers)
    assert logging.getLogger('httpx').level == logging.WARNING
    assert logging.getLogger('httpcore').level == logging.WARNING


def test_initialize_logging_default_level(restore_logging):
    """Ensure the root level defaults to INFO"""
    initialize_logging()
    assert logging.getLogger().level == logging.INFO
