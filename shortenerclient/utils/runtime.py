"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if the client runs against local infrastructure, False otherwise.

Example:
    >>> from shortenerclient.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> os.environ['APP_ENV'] = 'prod'
    >>> running_locally()
    False
"""

import os

from shortenerclient.constants import ENV


def running_locally() -> bool:
    """Check if the client runs locally (no AppConfig, in-memory store)

    Returns:
        bool: True if APP_ENV is 'local' (the default) or SHORTENER_LOCAL is 'true'.
    """
    env = os.getenv(ENV.App.APP_ENV, 'local').lower()
    return env == 'local' or os.getenv(ENV.App.LOCAL, '').lower() == 'true'
