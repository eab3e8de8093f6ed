"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.
create_app()이 여러 번 호출되어도 record factory는 한 번만 감쌉니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

import ecs_logging

from apps.webhook_gateway.setup.config import Settings, get_settings

# 모듈 로드 시점의 factory (항상 이것을 감쌈)
_BASE_RECORD_FACTORY: Callable[..., logging.LogRecord] = logging.getLogRecordFactory()

NOISY_LOGGERS = ("aio_pika", "aiormq")


def _service_metadata(settings: Settings) -> dict[str, str]:
    return {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }


def _make_record_factory(settings: Settings) -> Callable[..., logging.LogRecord]:
    """LogRecord에 service 메타데이터를 붙이는 factory."""
    service = _service_metadata(settings)

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = _BASE_RECORD_FACTORY(*args, **kwargs)
        record.service = dict(service)
        return record

    record_factory.__wrapped__ = _BASE_RECORD_FACTORY  # type: ignore[attr-defined]
    return record_factory


def setup_logging(settings: Settings | None = None) -> None:
    """로깅 설정.

    Args:
        settings: 서비스 설정 (미지정 시 get_settings())
    """
    settings = settings or get_settings()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.setLogRecordFactory(_make_record_factory(settings))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
