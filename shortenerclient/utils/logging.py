"""Application-wide logging initialization

Call `initialize_logging()` once at process start, before any other logging
is done.

Logging format:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "WARNING",
    "logger": "shortenerclient.gateway.api_gateway",
    "message": "Authorization failure, invalidating session.",
    "path": "/api/admin/my"
}

Credentials never reach the output: `token`, `password` and `authorization`
extras are masked.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shortenerclient.constants import ENV


MASK = '***'


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(logging.LogRecord('', 0, '', 0, '', None, None).__dict__) | {'message', 'asctime'}
    SENSITIVE_KEYS = frozenset({'token', 'password', 'authorization'})

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec='milliseconds') \
                            .replace('+00:00', 'Z')
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in self.STANDARD_ATTRS:
                continue
            log[key] = MASK if key.lower() in self.SENSITIVE_KEYS else value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging() -> None:
    log_level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stderr',
                }
            },
            'loggers': {
                'httpx': {'level': 'WARNING'},
                'httpcore': {'level': 'WARNING'},
            },
            'root': {
                'level': log_level,
                'handlers': ['stderr'],
            },
        }
    )
