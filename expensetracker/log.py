"""
Structured logging for the ledger.

Events are rendered as JSON lines through the stdlib logging backend, so the
level configured on the app (``LOG_LEVEL``) filters them like any other log.
"""

import logging

import structlog


def configure_logging(level="INFO"):
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger("expensetracker").setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name):
    return structlog.get_logger(name)
