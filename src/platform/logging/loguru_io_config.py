from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


SENSITIVE_KEYWORDS = {
    'password',
    'card_number',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)

custom_logger: 'LoguruLogger' = loguru_logger.bind(
    **{
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }
)


class InterceptHandler(logging.Handler):
    """Forward standard-library log records (third-party libraries) into loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def log_file_path(now: datetime | None = None) -> str:
    """Hourly log file; tests write to TEST_LOG_DIR with a `test_` prefix"""
    stamp = (now or datetime.now()).strftime('%Y-%m-%d_%H')
    if test_log_dir := os.environ.get('TEST_LOG_DIR'):
        return f'{test_log_dir}/test_{stamp}.log'
    return f'{LOG_DIR}/{stamp}.log'


def configure_sinks(*, debug: bool) -> None:
    """
    Replace every loguru sink with the purchase service sinks.

    stdout always; a rotating file only in debug mode.
    """
    loguru_logger.remove()
    level = 'DEBUG' if debug else 'INFO'
    loguru_logger.add(sys.stdout, format=io_log_format, level=level)
    if debug:
        loguru_logger.add(
            log_file_path(),
            format=io_log_format,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            level=level,
        )


configure_sinks(debug=settings.DEBUG)
logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
