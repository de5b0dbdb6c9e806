"""Unit tests for the Logger.io decorator and its helpers"""

from datetime import datetime

import pytest

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import log_file_path
from src.platform.logging.loguru_io_utils import (
    MASK,
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)


@pytest.fixture
def error_messages():
    """Collect ERROR-and-above messages emitted through Logger.base"""
    messages: list[str] = []
    handler_id = Logger.base.add(
        lambda message: messages.append(str(message)), level='ERROR', format='{message}'
    )
    yield messages
    Logger.base.remove(handler_id)


def test_returns_wrapped_result():
    @Logger.io
    def add(a: int, b: int) -> int:
        return a + b

    assert add(2, 3) == 5
    assert add.__name__ == 'add'


def test_domain_error_logged_once_and_reraised(error_messages):
    @Logger.io
    def inner() -> None:
        raise DomainError('Not enough adults')

    @Logger.io
    def outer() -> None:
        inner()

    with pytest.raises(DomainError, match='Not enough adults'):
        outer()

    assert len(error_messages) == 1
    assert 'DomainError: Not enough adults' in error_messages[0]


def test_unexpected_error_logged_with_traceback(error_messages):
    @Logger.io
    def explode() -> None:
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError):
        explode()

    assert 'RuntimeError: boom' in error_messages[0]


def test_reraise_false_swallows_and_returns_none(error_messages):
    @Logger.io(reraise=False)
    def explode() -> int:
        raise DomainError('ignored')

    assert explode() is None
    assert len(error_messages) == 1


def test_mask_sensitive_masks_keyword_values():
    assert mask_sensitive("pay(card_number='4111111111111111', amount=95)") == (
        f"pay(card_number='{MASK}', amount=95)"
    )


def test_mask_sensitive_keeps_plain_data():
    data = {'account_id': 1}

    assert mask_sensitive(data) is data


def test_should_mask_keyword():
    assert should_mask_keyword('password', 'secret') == MASK
    assert should_mask_keyword('account_id', 1) == 1


def test_truncate_content():
    assert truncate_content('short') == 'short'

    truncated = truncate_content('a' * 600)

    assert truncated.startswith('a' * 500)
    assert truncated.endswith('(truncated 100 chars)')


def test_log_file_path_uses_test_log_dir(monkeypatch, tmp_path):
    monkeypatch.setenv('TEST_LOG_DIR', str(tmp_path))

    path = log_file_path(datetime(2024, 5, 1, 13))

    assert path == f'{tmp_path}/test_2024-05-01_13.log'
