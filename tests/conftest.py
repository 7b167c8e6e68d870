"""
Pytest configuration
Provides a client wired to an in-memory transport that records every request
"""
import httpx
import pytest

from twitch_endpoints import TwitchEndpointClient

CLIENT_ID = "test_client_id_mock"
TOKEN = "test_token_mock"


@pytest.fixture
def sent_requests():
    """Requests that reached the transport, in order"""
    return []


@pytest.fixture
def make_client(sent_requests):
    """Build a client whose transport answers with *handler*

    Without a handler any outbound request fails the test.
    """

    def _make(handler=None):
        def _handle(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if handler is None:
                raise AssertionError(f"Unexpected request: {request.method} {request.url}")
            return handler(request)

        return TwitchEndpointClient(CLIENT_ID, transport=httpx.MockTransport(_handle))

    return _make


@pytest.fixture
def offline_client(make_client):
    """Client that must not touch the network"""
    return make_client()


def respond(status_code=200, json=None, content=None):
    """Handler returning a fixed response"""

    def _handler(request: httpx.Request) -> httpx.Response:
        if json is not None:
            return httpx.Response(status_code, json=json)
        return httpx.Response(status_code, content=content or b"")

    return _handler


def raise_error(exc_type=httpx.ConnectError):
    """Handler raising a transport error"""

    def _handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("mock transport failure", request=request)

    return _handler
