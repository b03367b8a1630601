"""Exceptions raised by the client-state stores.

Classes:
    DAOError:
        Base class for store failures.

    DataStoreError:
        The backing store cannot be reached or answered with a transport-level failure.

Example:
    >>> from shortenerclient.dao.exceptions import DataStoreError
    >>> raise DataStoreError("Can't connect to Redis at localhost:6379/0.")
    Traceback (most recent call last):
        ...
    shortenerclient.dao.exceptions.DataStoreError: Can't connect to Redis at localhost:6379/0.
"""


class DAOError(Exception):
    """Base class for store failures."""

    pass


class DataStoreError(DAOError):
    """Raised when the backing store is unreachable (refused connection, timeout)."""

    pass
