from shortenerclient.gateway.api_gateway import APIGateway, log_navigation
from shortenerclient.gateway.shortener_api import ShortenerAPI


__all__ = [
    'APIGateway',
    'ShortenerAPI',
    'log_navigation',
]
