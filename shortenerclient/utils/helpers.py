"""Helper utilities shared by the client components.

Functions:
    now_ms() -> float
        Current wall-clock time in milliseconds
    parse_timestamp(value) -> datetime | None
        Parse an RFC 3339 timestamp produced by the backend
    format_timestamp(value) -> str | None
        Serialize a datetime for persistence
    normalize_url(url) -> str
        Trim a user-entered URL and default its scheme to https
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present

Example:
    >>> from shortenerclient.utils.helpers import normalize_url, parse_timestamp
    >>> normalize_url('  example.com/page ')
    'https://example.com/page'
    >>> parse_timestamp('2025-11-01T00:00:00.123456789Z')
    datetime.datetime(2025, 11, 1, 0, 0, 0, 123456, tzinfo=datetime.timezone.utc)
"""

import os
import re
import time
import functools
from datetime import datetime, UTC
from collections.abc import Callable

from shortenerclient.exceptions import MissingEnvironmentVariableError


# Backend timestamps may carry up to 9 fractional digits, datetime accepts 6
_FRACTION_RE = re.compile(r'(\.\d{6})\d+')


def now_ms() -> float:
    """Return the current time in milliseconds since the epoch."""
    return time.time() * 1000


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse a backend timestamp into an aware datetime

    Accepts the `Z` suffix and truncates sub-microsecond fractions.
    Naive values are assumed to be UTC.

    Args:
        value (str | datetime | None): timestamp as produced by the backend

    Returns:
        datetime | None: aware datetime, or None when value is empty

    Raises:
        ValueError: if value is not a valid ISO 8601 timestamp
    """
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = _FRACTION_RE.sub(r'\1', value.strip())
        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'
        parsed = datetime.fromisoformat(text)

    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)


def format_timestamp(value: datetime | None) -> str | None:
    """Serialize an aware datetime as ISO 8601 (UTC, `Z` suffix)."""
    if value is None:
        return None
    return value.astimezone(UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def normalize_url(url: str) -> str:
    """Trim user input and prefix `https://` when no http(s) scheme is given

    Example:
        >>> normalize_url('http://example.com')
        'http://example.com'
        >>> normalize_url('example.com')
        'https://example.com'
    """
    url = url.strip()
    if not url.startswith(('http://', 'https://')):
        url = f'https://{url}'
    return url


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator
