from shortenerclient.dao.base import KeyValueBaseDAO
from shortenerclient.dao.memory import KeyValueMemoryDAO
from shortenerclient.dao.redis import KeyValueRedisDAO


__all__ = [
    'KeyValueBaseDAO',
    'KeyValueMemoryDAO',
    'KeyValueRedisDAO',
]
