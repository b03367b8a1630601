import functools
from collections.abc import Callable


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Map client-state entry names (admin_token, user_links, ...) to Redis keys.

    Keys look like `<prefix>:client:<name>`. The prefix is normally
    `app_prefix()`, i.e. "shortener:prod", so several client profiles and
    environments can share one Redis database without clobbering each other.
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def client_state_key(self, name: str) -> str:
        if not name:
            raise ValueError('Key name must be a non-empty string.')
        return f'client:{name}'
