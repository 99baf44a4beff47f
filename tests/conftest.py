from urllib.error import HTTPError, URLError

import pytest


class FakeResponse:
    def __init__(self, body: bytes, read_error: Exception | None = None) -> None:
        self.body = body
        self.read_error = read_error
        self.status = 200

    def read(self) -> bytes:
        if self.read_error is not None:
            raise self.read_error
        return self.body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info) -> None:
        return None


class FakeServer:
    """Stands in for urlopen: serves registered bodies and records requested URLs."""

    def __init__(self) -> None:
        self.routes: dict[str, bytes | Exception | FakeResponse] = {}
        self.requested: list[str] = []
        self.timeouts: list[float] = []

    def serve(self, url: str, body: bytes | str) -> None:
        self.routes[url] = body.encode("utf-8") if isinstance(body, str) else body

    def fail(self, url: str, exc: Exception) -> None:
        self.routes[url] = exc

    def fail_mid_body(self, url: str, exc: Exception) -> None:
        self.routes[url] = FakeResponse(b"", read_error=exc)

    def urlopen(self, request, timeout=None) -> FakeResponse:
        url = request.full_url
        self.requested.append(url)
        self.timeouts.append(timeout)
        route = self.routes.get(url)
        if route is None:
            raise HTTPError(url, 404, "Not Found", {}, None)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, FakeResponse):
            return route
        return FakeResponse(route)


@pytest.fixture
def server(monkeypatch) -> FakeServer:
    fake = FakeServer()
    monkeypatch.setattr("etf_matcher.providers.http.urlopen", fake.urlopen)
    return fake


@pytest.fixture
def connection_refused() -> URLError:
    return URLError(ConnectionRefusedError(111, "Connection refused"))
