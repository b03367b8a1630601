import httpx
import pytest

from shortenerclient.gateway import APIGateway


BASE_URL = 'http://api.test'


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, responder):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)


@pytest.fixture
def responder():
    """Default backend behaviour: 200 with an empty JSON object. Tests override `responder.response`."""

    class Responder:
        response = httpx.Response(200, json={})

        def __call__(self, request):
            if isinstance(self.response, Exception):
                raise self.response
            return self.response

    return Responder()


@pytest.fixture
def transport(responder):
    return RecordingTransport(responder)


@pytest.fixture
def navigations():
    """Collect every path passed to the navigator."""
    return []


@pytest.fixture
def gateway(session, transport, navigations):
    """Provide a gateway over the mock transport, with the shared unauthenticated session."""
    client = httpx.Client(transport=transport, headers={'Content-Type': 'application/json'})
    with APIGateway(session, base_url=BASE_URL, navigate=navigations.append, client=client) as _gateway:
        yield _gateway
