"""
Logging Configuration using dictConfig
Declarative, centralized logging setup
"""

import json
import logging
import logging.config
import logging.handlers
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'taskName'
])


class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'name': record.name,
            'level': record.levelname,
            'message': record.getMessage(),
            'function': record.funcName,
            'line': record.lineno,
            'module': record.module
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def get_logging_config(
    log_dir: Path,
    level: str = 'INFO',
    json_format: bool = False,
    quiet: bool = False,
    operation: str = 'file_explorer'
) -> Dict[str, Any]:
    """
    Generate logging configuration dictionary

    Args:
        log_dir: Directory for log files
        level: Default logging level
        json_format: Use JSON formatting for logs
        quiet: Suppress console output
        operation: Operation name for log files (e.g., 'browse')

    Returns:
        Logging configuration dictionary for dictConfig
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    default_formatter = 'json' if json_format else 'default'
    file_formatter = 'json' if json_format else 'detailed'

    config = {
        'version': 1,
        'disable_existing_loggers': False,

        'formatters': {
            'default': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'detailed': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'json': {
                '()': 'file_explorer.utils.logging_config.JsonFormatter'
            }
        },

        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stderr',
                'formatter': default_formatter,
                'level': 'WARNING'
            },

            f'{operation}_file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': str(log_dir / f'{operation}.log'),
                'maxBytes': 5 * 1024 * 1024,  # 5MB
                'backupCount': 3,
                'formatter': file_formatter,
                'level': 'INFO'
            },

            'debug_file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': str(log_dir / f'{operation}_debug.log'),
                'maxBytes': 5 * 1024 * 1024,  # 5MB
                'backupCount': 2,
                'formatter': file_formatter,
                'level': 'DEBUG'
            },

            'error_file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': str(log_dir / 'errors.log'),
                'maxBytes': 5 * 1024 * 1024,  # 5MB
                'backupCount': 3,
                'formatter': file_formatter,
                'level': 'ERROR'
            }
        },

        'loggers': {
            'file_explorer': {
                'handlers': ['debug_file', f'{operation}_file', 'error_file'],
                'level': level,
                'propagate': False
            }
        },

        'root': {
            'handlers': ['error_file'],
            'level': 'WARNING'
        }
    }

    # The interactive UI owns stdout; console logging is opt-in
    if not quiet:
        config['root']['handlers'].insert(0, 'console')
        config['loggers']['file_explorer']['handlers'].insert(0, 'console')

    return config


def setup_logging(
    operation: str = 'file_explorer',
    log_dir: Optional[Path] = None,
    level: str = 'INFO',
    json_format: bool = False,
    quiet: bool = True
):
    """
    Initialize logging for the application

    Args:
        operation: Operation name for log files
        log_dir: Directory for log files (defaults to ~/.file_explorer/logs)
        level: Logging level
        json_format: Use JSON formatting
        quiet: Suppress console output
    """
    if log_dir is None:
        log_dir = Path.home() / '.file_explorer' / 'logs'

    config = get_logging_config(
        log_dir=log_dir,
        level=level,
        json_format=json_format,
        quiet=quiet,
        operation=operation
    )

    logging.config.dictConfig(config)

    logger = logging.getLogger('file_explorer')
    logger.info(f"Logging initialized for operation: {operation}")


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance

    Args:
        name: Logger name (defaults to file_explorer)

    Returns:
        Logger instance
    """
    if name is None:
        name = 'file_explorer'
    return logging.getLogger(name)
