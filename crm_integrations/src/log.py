"""
Настройка structlog
"""

import logging

import structlog


def configure_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """
    Глобальная настройка structlog

    Args:
        log_level: Уровень логирования (DEBUG, INFO, WARNING, ...)
        log_format: "json" для production, любое другое значение - консольный вывод
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer() if log_format == "json"
            else structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
