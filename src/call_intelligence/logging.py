import logging
import os
import sys

from pythonjsonlogger import jsonlogger

JSON_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

_stream_handler: logging.Handler | None = None


def setup_logging() -> logging.Logger:
    """
    Configures structured JSON logging on stdout and returns the root logger.

    Records carry timestamp, level, logger name, message and the Datadog
    trace_id/span_id injected by ddtrace, plus any ``extra`` fields. The root
    logger and the Uvicorn loggers share one stream handler, so server access
    logs and service logs come out in the same format. The level is read from
    ``LOG_LEVEL`` (default INFO).

    Safe to call from every module; the handler is created once.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _stream_handler

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    root_logger = logging.getLogger()

    if _stream_handler is None:
        _stream_handler = logging.StreamHandler(sys.stdout)
        _stream_handler.setFormatter(jsonlogger.JsonFormatter(JSON_LOG_FORMAT))

        root_logger.handlers = [_stream_handler]

        for logger_name in SERVER_LOGGERS:
            server_logger = logging.getLogger(logger_name)
            server_logger.handlers = [_stream_handler]
            server_logger.setLevel(level)
            server_logger.propagate = False

    root_logger.setLevel(level)
    return root_logger
