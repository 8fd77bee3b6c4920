"""
Structured logging setup for Lambda & local development.

PURPOSE:
- Configure consistent JSON-formatted logs for both AWS Lambda and local runs.
- Logs are structured so classifier fallbacks and request latency can be queried.

CONTEXT:
- Called once by the Lambda entrypoint; library modules use structlog.get_logger(__name__).
"""

from __future__ import annotations
import logging
import os
import sys
import structlog


def configure_logging():
    """
    Configure structured JSON logging for the current environment.

    returns:
    - structlog.BoundLogger – logger bound with service and env metadata.

    behaviour:
    - Reads log level from LOG_LEVEL (default = INFO).
    - Directs logs to stdout so AWS Lambda captures them.
    - Renders JSON, e.g.
      {"event": "classifier.fallback", "level": "info", "timestamp": "...",
       "service": "signalfolio", "env": "dev", "condition": "neutral"}
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger().bind(service="signalfolio", env=os.getenv("ENV", "dev"))
