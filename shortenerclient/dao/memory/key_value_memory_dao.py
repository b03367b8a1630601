from beartype import beartype

from shortenerclient.dao.base import KeyValueBaseDAO


class KeyValueMemoryDAO(KeyValueBaseDAO):
    """Dictionary-backed store living for the lifetime of the process.

    Used for local runs and tests. Keys are kept as given (no namespacing).
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    @beartype
    def get(self, key: str, **kwargs) -> str | None:
        return self._data.get(key)

    @beartype
    def set(self, key: str, value: str, **kwargs) -> 'KeyValueMemoryDAO':
        self._data[key] = value
        return self

    @beartype
    def delete(self, key: str, **kwargs) -> 'KeyValueMemoryDAO':
        self._data.pop(key, None)
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f'<KeyValueMemoryDAO keys={sorted(self._data)}>'
