import logging

import pytest

from src.platform.logging.loguru_io_config import InterceptHandler, custom_logger


@pytest.fixture
def captured():
    messages: list[str] = []
    handler_id = custom_logger.add(messages.append, format='{level}|{message}', level='DEBUG')
    yield messages
    custom_logger.remove(handler_id)


def _record(name: str, level: int, msg: str) -> logging.LogRecord:
    return logging.makeLogRecord(
        {'name': name, 'levelno': level, 'levelname': logging.getLevelName(level), 'msg': msg}
    )


@pytest.mark.unit
class TestInterceptHandler:
    def test_stdlib_record_keeps_its_level(self, captured):
        InterceptHandler().emit(_record('botocore.retryhandler', logging.WARNING, 'retrying upload'))

        assert [m.strip() for m in captured] == ['WARNING|retrying upload']

    def test_access_line_is_logged_as_is(self, captured):
        line = '127.0.0.1 - "GET /api/events HTTP/1.1" - 500 - 8ms'

        InterceptHandler().emit(_record('_granian.access', logging.INFO, line))

        assert [m.strip() for m in captured] == [f'INFO|{line}']

    def test_sqlalchemy_statement_echo_is_dropped(self, captured):
        InterceptHandler().emit(_record('sqlalchemy.engine.Engine', logging.INFO, 'SELECT 1'))

        assert captured == []

    def test_sqlalchemy_warning_passes(self, captured):
        InterceptHandler().emit(_record('sqlalchemy.pool', logging.WARNING, 'pool overflow'))

        assert len(captured) == 1
