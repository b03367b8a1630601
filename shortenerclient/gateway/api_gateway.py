"""Authenticated request gateway

Every outbound call to the backend goes through `APIGateway.request()`, which
applies the same two rules to all of them:

- Request decoration: when the session holds a token, send it as
  `Authorization: Bearer <token>`; otherwise send the request unauthenticated.
- Response interception: a 401 invalidates the session (`logout()`),
  navigates to the login entry point, then raises AuthorizationError. Callers
  treat that error as terminal.

Other error statuses raise APIError with the backend's `error` message when
the body carries one. Transport failures (timeouts, DNS, connection resets)
propagate as the original `httpx.TransportError`. Nothing is retried: each
call reaches the backend at most once.

Example:
    >>> gateway = APIGateway(session, base_url='https://sho.rt', navigate=router.go)
    >>> gateway.request('GET', '/api/admin/my')
    {'links': [{'id': 1, 'slug': 'docs', ...}], 'total': 1}
"""

import json
import logging
from typing import Any

import httpx

from shortenerclient.constants import Routes
from shortenerclient.dao.exceptions import DataStoreError
from shortenerclient.exceptions import APIError, AuthorizationError
from shortenerclient.session import SessionManager
from shortenerclient.types import Navigator


logger = logging.getLogger(__name__)


def log_navigation(path: str) -> None:
    """Default navigator: there is no browser to redirect, so record the intent."""
    logger.warning('Navigation requested.', extra={'path': path})


def extract_error_message(response: httpx.Response) -> str | None:
    """Return the backend's `error` field from a JSON error body, if any"""
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if isinstance(body, dict):
        message = body.get('error')
        if isinstance(message, str) and message:
            return message
    return None


class APIGateway:
    """Wrap an httpx client with session-aware decoration and interception.

    Attributes:
        session (SessionManager):
            Source of the bearer token and target of invalidation on 401.
        base_url (str):
            Backend origin every path is joined to.
        navigate (Navigator):
            Callable performing the hard navigation after a 401.
        login_path (str):
            Entry point navigated to after a 401. Defaults to '/admin'.
        client (httpx.Client):
            Underlying HTTP client. Its timeouts apply; none are added here.
    """

    def __init__(
        self,
        session: SessionManager,
        base_url: str,
        navigate: Navigator | None = None,
        client: httpx.Client | None = None,
        login_path: str = Routes.LOGIN,
    ):
        self.session = session
        self.base_url = base_url.rstrip('/')
        self.navigate = navigate or log_navigation
        self.login_path = login_path
        self.client = client or httpx.Client(headers={'Content-Type': 'application/json'})

    def url(self, path: str) -> str:
        return f'{self.base_url}/{path.lstrip("/")}'

    def headers(self) -> dict[str, str]:
        token = self.session.current_token()
        return {'Authorization': f'Bearer {token}'} if token else {}

    def request(self, method: str, path: str, payload: Any = None, fallback_message: str | None = None) -> Any:
        """Send one request and return the decoded JSON body

        Args:
            method (str): HTTP method.
            path (str): endpoint path relative to the origin.
            payload (Any): JSON-serializable body, omitted when None.
            fallback_message (str | None): error message used when the backend gives none.

        Returns:
            Any: decoded JSON body, or None for an empty body.

        Raises:
            AuthorizationError: on 401, after the session was cleared and navigation happened.
            APIError: on any other 4xx/5xx status.
            httpx.TransportError: on network-level failures (unmodified).
        """
        kwargs = {'headers': self.headers()}
        if payload is not None:
            kwargs['json'] = payload

        response = self.client.request(method, self.url(path), **kwargs)

        if response.status_code == httpx.codes.UNAUTHORIZED:
            self._handle_authorization_failure(path)
            message = extract_error_message(response) or fallback_message or 'Unauthorized'
            raise AuthorizationError(message, status_code=response.status_code)

        if response.is_error:
            message = extract_error_message(response) or fallback_message or f'HTTP {response.status_code}'
            logger.info('Backend returned an error.', extra={'path': path, 'status': response.status_code})
            raise APIError(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise APIError(fallback_message or 'Malformed response from server', status_code=response.status_code) from e

    def get(self, path: str, **kwargs) -> Any:
        return self.request('GET', path, **kwargs)

    def post(self, path: str, payload: Any = None, **kwargs) -> Any:
        return self.request('POST', path, payload=payload, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self.request('DELETE', path, **kwargs)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> 'APIGateway':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _handle_authorization_failure(self, path: str) -> None:
        logger.warning('Authorization failure, invalidating session.', extra={'path': path})
        try:
            self.session.logout()
        except DataStoreError:
            logger.exception('Could not clear the persisted session.', extra={'path': path})
        self.navigate(self.login_path)
