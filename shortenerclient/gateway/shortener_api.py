"""Typed wrappers over the backend HTTP contract

Each method maps to one endpoint and returns the decoded JSON body. URL and
body shaping only; authentication and failure handling belong to APIGateway.

| Method | Path                  | Auth   |
|--------|-----------------------|--------|
| POST   | /api/shorten          | none   |
| POST   | /api/admin/login      | none   |
| GET    | /api/admin/my         | bearer |
| GET    | /api/admin/users      | bearer |
| GET    | /api/admin/links/{id} | bearer |
| DELETE | /api/admin/links/{id} | bearer |
| POST   | /api/admin/links      | bearer |
| GET    | /api/admin/logins     | bearer |
"""

from shortenerclient.constants import Endpoint
from shortenerclient.gateway.api_gateway import APIGateway
from shortenerclient.types import JSONPayload, LinkID


def _link_payload(url: str, custom_slug: str = '') -> JSONPayload:
    payload = {'url': url}
    if custom_slug:
        payload['custom_slug'] = custom_slug
    return payload


class ShortenerAPI:
    def __init__(self, gateway: APIGateway):
        self.gateway = gateway

    # Public endpoints

    def shorten_link(self, url: str, custom_slug: str = '', **kwargs) -> JSONPayload:
        """Create a visitor link

        Returns:
            {id, slug, short_url, original_url, expires_at?, permanent}
        """
        return self.gateway.post(Endpoint.SHORTEN, _link_payload(url, custom_slug), **kwargs)

    def admin_login(self, username: str, password: str, **kwargs) -> JSONPayload:
        """Exchange admin credentials for `{token, expires_at}` (expires_at in unix seconds)"""
        return self.gateway.post(Endpoint.ADMIN_LOGIN, {'username': username, 'password': password}, **kwargs)

    # Admin endpoints

    def get_my_links(self, **kwargs) -> JSONPayload:
        """Links owned by the admin as `{links, total}`, each link with its click_count"""
        return self.gateway.get(Endpoint.ADMIN_MY_LINKS, **kwargs)

    def get_user_links(self, **kwargs) -> JSONPayload:
        """Visitor-created links as `{links, total}`"""
        return self.gateway.get(Endpoint.ADMIN_USER_LINKS, **kwargs)

    def get_link_details(self, link_id: LinkID, **kwargs) -> JSONPayload:
        """Link detail as `{link, stats}`; stats holds total_clicks, unique_ips, top_countries, recent_clicks"""
        return self.gateway.get(f'{Endpoint.ADMIN_LINKS}/{link_id}', **kwargs)

    def delete_link(self, link_id: LinkID, **kwargs) -> JSONPayload | None:
        return self.gateway.delete(f'{Endpoint.ADMIN_LINKS}/{link_id}', **kwargs)

    def create_admin_link(self, url: str, custom_slug: str = '', **kwargs) -> JSONPayload:
        """Create a permanent link owned by the admin"""
        return self.gateway.post(Endpoint.ADMIN_LINKS, _link_payload(url, custom_slug), **kwargs)

    def get_login_attempts(self, **kwargs) -> JSONPayload:
        """Login attempts as `{attempts, total, failed_last_24h}`"""
        return self.gateway.get(Endpoint.ADMIN_LOGINS, **kwargs)
