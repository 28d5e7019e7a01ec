import typing

import httpx
import pytest

import curlite._client


class MockServer:
    """In-memory stand-in for the network, served through `httpx.MockTransport`."""

    def __init__(self) -> None:
        self.requests: typing.List[httpx.Request] = []
        self.response = httpx.Response(
            200, text="Hello, world!", headers={"content-type": "text/plain"}
        )
        self.error: typing.Optional[Exception] = None

    def respond(self, status_code: int = 200, **kwargs: typing.Any) -> None:
        self.response = httpx.Response(status_code, **kwargs)

    def fail(self, exc: Exception) -> None:
        self.error = exc

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def server(monkeypatch):
    """Route every client built by curlite through a `MockServer`."""
    mock = MockServer()
    build_client = curlite._client.build_client

    monkeypatch.setattr(
        curlite._client,
        "build_client",
        lambda: build_client(transport=httpx.MockTransport(mock)),
    )
    return mock
