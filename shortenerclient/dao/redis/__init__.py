from shortenerclient.dao.redis.redis_key_schema import RedisKeySchema
from shortenerclient.dao.redis.mixins import RedisClientMixin
from shortenerclient.dao.redis.key_value_redis_dao import KeyValueRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'KeyValueRedisDAO',
]
