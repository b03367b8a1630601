"""Data Access Object (DAO) implementation of the client key-value store in Redis

This module provides a Redis-based implementation of KeyValueBaseDAO so that a
client's session and link history survive process restarts and can be shared
by several processes acting for the same profile.

Responsibilities:
    - Store, retrieve and delete string values under namespaced keys;
    - Raise DataStoreError on connectivity issues.

Classes:
    KeyValueRedisDAO:
        DAO for the client's persisted state in a Redis datastore.

Example:
    >>> from shortenerclient.dao.redis import KeyValueRedisDAO

    >>> dao = KeyValueRedisDAO(prefix="shortener:dev")
    >>> dao.set('admin_token', 'abc')
    <KeyValueRedisDAO>
    >>> dao.get('admin_token')
    'abc'

NOTE:
    Writes are plain SET commands. Two processes doing read-modify-write on the
    same key (e.g. the link history) race and the last writer wins.
"""

from beartype import beartype

from shortenerclient.dao.base import KeyValueBaseDAO
from shortenerclient.dao.redis.mixins import RedisClientMixin
from shortenerclient.dao.redis.helpers import handle_redis_connection_error


class KeyValueRedisDAO(RedisClientMixin, KeyValueBaseDAO):
    """Redis-based Data Access Object (DAO) for the client key-value store

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        get(key: str, **kwargs) -> str | None:
            GET the namespaced key. Raises DataStoreError on connectivity issues.

        set(key: str, value: str, **kwargs) -> KeyValueRedisDAO:
            SET the namespaced key. Raises DataStoreError on connectivity issues.

        delete(key: str, **kwargs) -> KeyValueRedisDAO:
            DEL the namespaced key. Raises DataStoreError on connectivity issues.
    """

    @handle_redis_connection_error
    @beartype
    def get(self, key: str, **kwargs) -> str | None:
        value = self.redis.get(self.keys.client_state_key(key))
        if isinstance(value, bytes):
            value = value.decode('utf-8')
        return value

    @handle_redis_connection_error
    @beartype
    def set(self, key: str, value: str, **kwargs) -> 'KeyValueRedisDAO':
        self.redis.set(self.keys.client_state_key(key), value)
        return self

    @handle_redis_connection_error
    @beartype
    def delete(self, key: str, **kwargs) -> 'KeyValueRedisDAO':
        self.redis.delete(self.keys.client_state_key(key))
        return self

    def __repr__(self) -> str:
        return f'<KeyValueRedisDAO prefix={self.keys.prefix!r}>'
