from shortenerclient.history.link_history_cache import LinkHistoryCache


__all__ = ['LinkHistoryCache']
