from shortenerclient.client import ShortenerClient, build_store


__all__ = [
    'ShortenerClient',
    'build_store',
]
