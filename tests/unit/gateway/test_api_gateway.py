"""Unit tests for APIGateway

Test coverage includes:

1. Request decoration
   - Bearer header attached only while the session is authenticated.
   - JSON body sent only when a payload is given.
2. Successful responses
   - Decoded JSON body; empty bodies return None.
3. 401 interception
   - Session cleared, navigation to the login path, AuthorizationError raised.
4. Other errors
   - APIError carries the backend `error` message, else the fallback message.
5. Transport failures
   - Propagated unmodified; no retries.
"""

import json

import httpx
import pytest

from shortenerclient.constants import StorageKey
from shortenerclient.exceptions import APIError, AuthorizationError
from shortenerclient.gateway import APIGateway, log_navigation
from shortenerclient.gateway.api_gateway import extract_error_message
from shortenerclient.session import SessionManager


BASE_URL = 'http://api.test'
FUTURE_TS = 4_102_444_800  # 2100-01-01


# -------------------------------
# 1. Request decoration
# -------------------------------


def test_unauthenticated_request_has_no_bearer(gateway, transport):
    """Ensure no Authorization header is sent without a session."""
    gateway.get('/api/admin/my')

    request = transport.requests[0]
    assert 'Authorization' not in request.headers
    assert str(request.url) == f'{BASE_URL}/api/admin/my'


def test_authenticated_request_has_bearer(gateway, session, transport):
    """Ensure the current token is sent as a bearer token."""
    session.login('tok-123', FUTURE_TS)

    gateway.get('/api/admin/my')

    assert transport.requests[0].headers['Authorization'] == 'Bearer tok-123'


def test_logout_stops_decoration(gateway, session, transport):
    """Ensure requests after logout go out unauthenticated."""
    session.login('tok-123', FUTURE_TS)
    session.logout()

    gateway.get('/api/admin/my')

    assert 'Authorization' not in transport.requests[0].headers


def test_payload_sent_as_json(gateway, transport):
    """Ensure payloads are JSON-encoded with the content type header."""
    gateway.post('/api/shorten', {'url': 'https://example.com'})

    request = transport.requests[0]
    assert request.method == 'POST'
    assert request.headers['Content-Type'] == 'application/json'
    assert json.loads(request.content) == {'url': 'https://example.com'}


def test_no_payload_sends_empty_body(gateway, transport):
    """Ensure GET and DELETE requests carry no body."""
    gateway.delete('/api/admin/links/4')

    request = transport.requests[0]
    assert request.method == 'DELETE'
    assert request.content == b''


def test_url_joining(session):
    """Ensure slashes between origin and path are normalised."""
    gateway = APIGateway(session, base_url='http://api.test/', client=httpx.Client())
    assert gateway.url('/api/shorten') == 'http://api.test/api/shorten'
    assert gateway.url('api/shorten') == 'http://api.test/api/shorten'
    gateway.close()


# -------------------------------
# 2. Successful responses
# -------------------------------


def test_returns_decoded_body(gateway, responder):
    """Ensure the JSON body is returned as-is."""
    responder.response = httpx.Response(200, json={'links': [{'id': 1}], 'total': 1})
    assert gateway.get('/api/admin/users') == {'links': [{'id': 1}], 'total': 1}


@pytest.mark.parametrize('status', [200, 204])
def test_empty_body_returns_none(gateway, responder, status):
    """Ensure empty successful responses decode to None."""
    responder.response = httpx.Response(status)
    assert gateway.delete('/api/admin/links/1') is None


def test_malformed_body_raises_api_error(gateway, responder):
    """Ensure a non-JSON success body raises APIError with the fallback message."""
    responder.response = httpx.Response(200, text='<html>oops</html>')
    with pytest.raises(APIError) as exc_info:
        gateway.get('/api/admin/my', fallback_message='Something broke')
    assert exc_info.value.message == 'Something broke'


def test_undecodable_body_raises_api_error(gateway, responder):
    """Ensure a success body that is not valid UTF-8 raises APIError."""
    responder.response = httpx.Response(200, content=b'\x80\x81\x82', headers={'Content-Type': 'application/json'})
    with pytest.raises(APIError) as exc_info:
        gateway.get('/api/admin/my', fallback_message='Something broke')
    assert exc_info.value.message == 'Something broke'


# -------------------------------
# 3. 401 interception
# -------------------------------


def test_unauthorized_invalidates_session(gateway, session, store, responder, navigations):
    """Ensure a 401 clears the session, navigates to /admin and raises."""
    session.login('stale', FUTURE_TS)
    responder.response = httpx.Response(401, json={'error': 'invalid token'})

    with pytest.raises(AuthorizationError) as exc_info:
        gateway.get('/api/admin/my')

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == 'invalid token'
    assert navigations == ['/admin']
    assert not session.is_authenticated
    assert session.current_token() is None
    assert store.get(StorageKey.ADMIN_TOKEN) is None
    assert store.get(StorageKey.TOKEN_EXPIRES_AT) is None


def test_unauthorized_is_api_error(gateway, responder):
    """Ensure callers catching APIError also catch authorization failures."""
    responder.response = httpx.Response(401)
    with pytest.raises(APIError) as exc_info:
        gateway.get('/api/admin/my')
    assert exc_info.value.message == 'Unauthorized'


def test_unauthorized_while_unauthenticated(gateway, session, responder, navigations):
    """Ensure a 401 on a public call (e.g. bad login) still navigates."""
    responder.response = httpx.Response(401, json={'error': 'invalid credentials'})

    with pytest.raises(AuthorizationError):
        gateway.post('/api/admin/login', {'username': 'a', 'password': 'b'})

    assert navigations == ['/admin']
    assert not session.is_authenticated


def test_unauthorized_sent_once(gateway, transport, responder):
    """Ensure a rejected request is not retried."""
    responder.response = httpx.Response(401)
    with pytest.raises(AuthorizationError):
        gateway.get('/api/admin/my')
    assert len(transport.requests) == 1


def test_unauthorized_when_store_unreachable(delete_failing_store, transport, responder, navigations):
    """Ensure a 401 still ends the session and navigates when the store cannot delete."""
    session = SessionManager(delete_failing_store)
    session.login('abc', FUTURE_TS)
    responder.response = httpx.Response(401, json={'error': 'invalid token'})
    client = httpx.Client(transport=transport)

    with APIGateway(session, base_url=BASE_URL, navigate=navigations.append, client=client) as gateway:
        with pytest.raises(AuthorizationError, match='invalid token'):
            gateway.get('/api/admin/my')

    assert session.current_token() is None
    assert not session.is_authenticated
    assert navigations == ['/admin']


def test_default_navigator_logs(session, caplog):
    """Ensure the default navigator records the requested path."""
    gateway = APIGateway(session, base_url=BASE_URL)
    assert gateway.navigate is log_navigation

    with caplog.at_level('WARNING'):
        log_navigation('/admin')

    assert caplog.records[0].path == '/admin'
    gateway.close()


# -------------------------------
# 4. Other errors
# -------------------------------


@pytest.mark.parametrize('status', [400, 403, 404, 409, 500, 503])
def test_error_status_uses_backend_message(gateway, session, responder, navigations, status):
    """Ensure non-401 errors raise APIError and leave the session alone."""
    session.login('tok', FUTURE_TS)
    responder.response = httpx.Response(status, json={'error': 'slug already taken'})

    with pytest.raises(APIError) as exc_info:
        gateway.post('/api/shorten', {'url': 'https://example.com'})

    assert not isinstance(exc_info.value, AuthorizationError)
    assert exc_info.value.status_code == status
    assert exc_info.value.message == 'slug already taken'
    assert session.is_authenticated
    assert navigations == []


def test_error_status_uses_fallback_message(gateway, responder):
    """Ensure the fallback message is used when the body has no error field."""
    responder.response = httpx.Response(500, text='Internal Server Error')
    with pytest.raises(APIError) as exc_info:
        gateway.post('/api/shorten', {'url': 'x'}, fallback_message='Failed to shorten link. Please try again.')
    assert exc_info.value.message == 'Failed to shorten link. Please try again.'


def test_error_status_without_fallback(gateway, responder):
    """Ensure a generic message is used when neither body nor caller supplies one."""
    responder.response = httpx.Response(502)
    with pytest.raises(APIError) as exc_info:
        gateway.get('/api/admin/logins')
    assert exc_info.value.message == 'HTTP 502'


@pytest.mark.parametrize(
    'kwargs, expected',
    [
        ({'json': {'error': 'nope'}}, 'nope'),
        ({'json': {'error': ''}}, None),
        ({'json': {'error': 42}}, None),
        ({'json': ['error']}, None),
        ({'text': 'not json'}, None),
        ({}, None),
    ],
)
def test_extract_error_message(kwargs, expected):
    """Ensure only a non-empty string `error` field is extracted."""
    assert extract_error_message(httpx.Response(400, **kwargs)) == expected


# -------------------------------
# 5. Transport failures
# -------------------------------


@pytest.mark.parametrize('error', [httpx.ConnectError('refused'), httpx.ReadTimeout('slow')])
def test_transport_error_propagates(gateway, session, transport, responder, navigations, error):
    """Ensure network failures surface unmodified and are attempted once."""
    session.login('tok', FUTURE_TS)
    responder.response = error

    with pytest.raises(type(error)) as exc_info:
        gateway.get('/api/admin/my')

    assert exc_info.value is error
    assert len(transport.requests) == 1
    assert session.is_authenticated
    assert navigations == []
