"""
Log output helpers for the chronicler package logger.

Library modules only call logging.getLogger(__name__) and the package
logger carries a NullHandler, so nothing is printed by default. An
embedding application can route history activity somewhere with
attach_log_handler(); the root logger and its handlers are never touched.
"""

import logging
import logging.handlers
import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "chronicler"

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logs"""

    def format(self, record):
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info)
            }

        # set by handle_errors()
        if hasattr(record, 'extra_data'):
            log_data['extra'] = record.extra_data

        # default=repr: captured property values need not be JSON types
        return json.dumps(log_data, ensure_ascii=False, default=repr)


def attach_log_handler(
    handler: Optional[logging.Handler] = None,
    level=logging.DEBUG,
    structured: bool = True,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Handler:
    """
    Route chronicler log records to a handler.

    Args:
        handler: Handler to attach (default: stderr StreamHandler, or a
            rotating file handler when log_file is given)
        level: Minimum level for the package logger and the handler
        structured: Format records as JSON lines instead of plain text
        log_file: Write to this file, rotating at 5MB with 3 backups

    Returns:
        The attached handler, to pass to detach_log_handler() later
    """
    if handler is None:
        if log_file is not None:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=5 * 1024 * 1024,  # 5MB
                backupCount=3,
                encoding='utf-8'
            )
        else:
            handler = logging.StreamHandler()

    handler.setLevel(level)
    if structured:
        handler.setFormatter(StructuredFormatter())
    elif handler.formatter is None:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    return handler


def detach_log_handler(handler: logging.Handler):
    """Remove and close a handler added by attach_log_handler()."""
    logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)
    handler.close()
