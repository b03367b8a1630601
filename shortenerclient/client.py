"""Client facade composing session, gateway and local link history

    caller ─> ShortenerClient ─> SessionManager (gates admin operations)
                              ─> APIGateway ─> backend
                              ─> LinkHistoryCache (no network)

Error taxonomy seen by callers:
    - ValidationError: empty input, raised before any request is sent;
    - APIError: backend error, message from the body or a fallback;
    - AuthorizationError: 401, the session is already cleared and the
      login entry point was navigated to;
    - SessionLoadingError: admin operation before initialize();
    - httpx.TransportError: network failures, unmodified.

Example:
    >>> client = ShortenerClient.from_config(navigate=print)
    >>> client.initialize()
    <SessionState.UNAUTHENTICATED: 'unauthenticated'>
    >>> record = client.shorten('example.com/some/long/page')
    >>> record.short_url
    'http://localhost:8080/aB3dE9x'
    >>> [link.slug for link in client.history()]
    ['aB3dE9x']
"""

import logging

import httpx

from shortenerclient.constants import (
    CLIENT_CONFIG_SECTION,
    SHORTEN_FAILED_MESSAGE,
    LOGIN_FAILED_MESSAGE,
    CREATE_LINK_FAILED_MESSAGE,
)
from shortenerclient.dao.base import KeyValueBaseDAO
from shortenerclient.dao.memory import KeyValueMemoryDAO
from shortenerclient.dao.redis import KeyValueRedisDAO
from shortenerclient.exceptions import ValidationError, APIError, BadConfigurationError
from shortenerclient.gateway import APIGateway, ShortenerAPI
from shortenerclient.history import LinkHistoryCache
from shortenerclient.models import LinkRecordModel
from shortenerclient.session import SessionManager, SessionState
from shortenerclient.types import AppConfig, JSONPayload, LinkID, Navigator
from shortenerclient.utils.config import load_config, app_prefix, api_base_url
from shortenerclient.utils.helpers import normalize_url


logger = logging.getLogger(__name__)


def build_store(config: AppConfig) -> KeyValueBaseDAO:
    """Create the persistent store described by a `{backend: settings}` config

    Raises:
        BadConfigurationError: if the backend is unknown.
        DataStoreError: if the Redis backend is unreachable.
    """
    if 'redis' in config:
        redis_config = {f'redis_{k}': v for k, v in (config['redis'] or {}).items()}
        return KeyValueRedisDAO(**redis_config, prefix=app_prefix())
    if 'memory' in config:
        return KeyValueMemoryDAO()
    raise BadConfigurationError(f'Unsupported store backend(s): {sorted(config)}')


class ShortenerClient:
    """Entry point for visitors (shorten, history) and admins (session, link management).

    Attributes:
        session (SessionManager): admin session.
        history_cache (LinkHistoryCache): visitor link history.
        gateway (APIGateway): authenticated request gateway.
        api (ShortenerAPI): backend endpoint wrappers.
    """

    def __init__(self, store: KeyValueBaseDAO, base_url: str, navigate: Navigator | None = None, http_client: httpx.Client | None = None):
        self.session = SessionManager(store)
        self.history_cache = LinkHistoryCache(store)
        self.gateway = APIGateway(self.session, base_url=base_url, navigate=navigate, client=http_client)
        self.api = ShortenerAPI(self.gateway)

    @classmethod
    def from_config(cls, navigate: Navigator | None = None, http_client: httpx.Client | None = None) -> 'ShortenerClient':
        """Build a client from AppConfig (or the local defaults) and the environment"""
        store = build_store(load_config(CLIENT_CONFIG_SECTION))
        base_url = api_base_url()
        logger.debug('Client configured.', extra={'baseUrl': base_url, 'store': repr(store)})
        return cls(store, base_url=base_url, navigate=navigate, http_client=http_client)

    # Session

    def initialize(self) -> SessionState:
        return self.session.initialize()

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    def login(self, username: str, password: str) -> SessionState:
        """Authenticate as admin and start a session

        Raises:
            ValidationError: if username or password is empty.
            AuthorizationError: if the credentials are rejected.
            APIError: on any other backend error.
        """
        username = username.strip()
        if not username or not password.strip():
            raise ValidationError('Please enter username and password')

        data = self.api.admin_login(username, password, fallback_message=LOGIN_FAILED_MESSAGE)
        try:
            token, expires_at = data['token'], int(data['expires_at'])
        except (KeyError, TypeError, ValueError) as e:
            raise APIError(LOGIN_FAILED_MESSAGE) from e

        self.session.login(token, expires_at)
        return self.session.state

    def logout(self) -> None:
        self.session.logout()

    # Visitor links

    def shorten(self, url: str, custom_slug: str = '') -> LinkRecordModel:
        """Shorten url and remember the result in the local history

        A missing http(s) scheme defaults to https.

        Raises:
            ValidationError: if url is empty.
            APIError: on backend errors (e.g. slug already taken).
        """
        if not url or not url.strip():
            raise ValidationError('Please enter a URL')

        data = self.api.shorten_link(normalize_url(url), custom_slug.strip(), fallback_message=SHORTEN_FAILED_MESSAGE)
        try:
            record = LinkRecordModel.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise APIError(SHORTEN_FAILED_MESSAGE) from e

        return self.history_cache.save(record)

    def history(self) -> list[LinkRecordModel]:
        return self.history_cache.list()

    def forget(self, link_id: LinkID) -> None:
        self.history_cache.remove(link_id)

    # Admin links

    def my_links(self) -> JSONPayload:
        self.session.require_ready()
        return self.api.get_my_links()

    def user_links(self) -> JSONPayload:
        self.session.require_ready()
        return self.api.get_user_links()

    def link_details(self, link_id: LinkID) -> JSONPayload:
        self.session.require_ready()
        return self.api.get_link_details(link_id)

    def delete_link(self, link_id: LinkID) -> JSONPayload | None:
        self.session.require_ready()
        return self.api.delete_link(link_id)

    def create_admin_link(self, url: str, custom_slug: str = '') -> JSONPayload:
        self.session.require_ready()
        if not url or not url.strip():
            raise ValidationError('Please enter a URL')
        return self.api.create_admin_link(normalize_url(url), custom_slug.strip(), fallback_message=CREATE_LINK_FAILED_MESSAGE)

    def login_attempts(self) -> JSONPayload:
        self.session.require_ready()
        return self.api.get_login_attempts()

    def close(self) -> None:
        self.gateway.close()

    def __enter__(self) -> 'ShortenerClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
