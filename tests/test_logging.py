"""Tests for structured logging configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from proptype import Record
from proptype._logging import configure_logging, get_logger

pytestmark = pytest.mark.usefixtures('restore_logging')


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON output carries the event, its fields and the level."""
        configure_logging(level='DEBUG', json_output=True)

        get_logger('proptype.test').info('schema.loaded', properties=3)

        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        entry = json.loads(lines[-1])
        assert entry['event'] == 'schema.loaded'
        assert entry['properties'] == 3
        assert entry['level'] == 'info'
        assert entry['logger'] == 'proptype.test'

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Console output contains the event."""
        configure_logging(level='INFO', json_output=False)

        get_logger('proptype.test').warning('registry.replaced')

        assert 'registry.replaced' in capsys.readouterr().err

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Events below the configured level are dropped."""
        configure_logging(level='WARNING', json_output=True)

        get_logger('proptype.test').debug('hidden')

        assert 'hidden' not in capsys.readouterr().err

    def test_sets_root_level(self) -> None:
        configure_logging(level='ERROR')
        assert logging.getLogger().level == logging.ERROR

    def test_unknown_level_defaults_to_info(self) -> None:
        configure_logging(level='CHATTY')
        assert logging.getLogger().level == logging.INFO

    def test_stdlib_records_share_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Plain stdlib loggers go through the same renderer."""
        configure_logging(level='INFO', json_output=True)

        logging.getLogger('host.app').info('plain message')

        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        entry = json.loads(lines[-1])
        assert entry['event'] == 'plain message'
        assert entry['logger'] == 'host.app'


class TestGetLogger:
    """Tests for get_logger()."""

    def test_returns_bindable_logger(self) -> None:
        logger = get_logger('proptype.test')
        assert hasattr(logger, 'bind')
        assert hasattr(logger, 'debug')

    def test_silent_until_configured(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without configuration, debug events follow stdlib defaults and print nothing."""
        get_logger('proptype.test').debug('quiet')
        captured = capsys.readouterr()
        assert 'quiet' not in captured.out
        assert 'quiet' not in captured.err


class TestEntryShape:
    """Tests for the fields a rendered entry carries."""

    def test_only_engine_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Entries hold the event, its fields, level, logger and timestamp, and nothing bound elsewhere."""
        configure_logging(level='INFO', json_output=True)

        structlog.contextvars.bind_contextvars(request_id='abc')
        try:
            get_logger('proptype.test').info('schema.loaded', properties=1)
        finally:
            structlog.contextvars.clear_contextvars()

        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        entry = json.loads(lines[-1])
        assert set(entry) == {'event', 'properties', 'level', 'logger', 'timestamp'}

    def test_invalid_record_event(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A failed parse renders as one JSON entry naming the schema and its errors."""
        configure_logging(level='DEBUG', json_output=True)

        class Point(Record):
            pass

        Point.prop('x', int).finalize()
        assert Point.parse({'x': 'one'}).is_failure()

        entries = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.strip()]
        invalid = [entry for entry in entries if entry['event'] == 'record.invalid']
        assert invalid
        assert invalid[-1]['schema'].endswith('Point')
        assert invalid[-1]['errors'] == {'x': ['must be an Integer, but was: str']}
        assert invalid[-1]['logger'] == 'proptype.record'
