"""Abstract base class for key-value store data access objects (DAOs).

This class establishes the contract every persistent store used by the client
must follow, regardless of the underlying storage mechanism (e.g., in-memory
map, Redis).

Responsibilities:
    - Provide string-keyed get/set/delete over string values.
    - Standardize error handling across store implementations.
    - Let the session manager and the link history cache be tested without
      any real storage.

Example:
    Typical usage with a store-specific implementation:

        >>> from shortenerclient.dao import KeyValueMemoryDAO
        >>> store = KeyValueMemoryDAO()
        >>> store.set('admin_token', 'abc')
        <KeyValueMemoryDAO>
        >>> store.get('admin_token')
        'abc'
        >>> store.delete('admin_token')
        <KeyValueMemoryDAO>
        >>> store.get('admin_token') is None
        True
"""

from abc import ABC, abstractmethod


class KeyValueBaseDAO(ABC):
    """Interface for string-keyed persistent stores.

    Methods:
        get(key: str, **kwargs) -> str | None:
            Retrieve the value stored under key, None if absent.
            Raises DataStoreError on connection or read failure.

        set(key: str, value: str, **kwargs) -> KeyValueBaseDAO:
            Store value under key, overwriting any previous value.
            Raises DataStoreError on connection or write failure.

        delete(key: str, **kwargs) -> KeyValueBaseDAO:
            Remove key. Deleting a missing key is not an error.
            Raises DataStoreError on connection or write failure.

    Subclassing:
        Store-specific implementations (e.g., KeyValueRedisDAO) must extend
        this class and implement all abstract methods.
    """

    @abstractmethod
    def get(self, key: str, **kwargs) -> str | None:
        """Retrieve the value stored under key.

        Args:
            key (str):
                Logical key name (implementations may namespace it).

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str | None: The stored value, or None if the key does not exist.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str, **kwargs) -> 'KeyValueBaseDAO':
        """Store value under key.

        Args:
            key (str):
                Logical key name.

            value (str):
                Value to persist.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            KeyValueBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete(self, key: str, **kwargs) -> 'KeyValueBaseDAO':
        """Remove key from the store (no-op if absent).

        Returns:
            KeyValueBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
