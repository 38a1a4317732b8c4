"""Shared test fixtures."""

import httpx
import pytest

from flickr_urls.models import PhotoLocation


@pytest.fixture
def location() -> PhotoLocation:
    """A photo with both the rendition and the original secrets."""
    return PhotoLocation(
        farm=1,
        server=2,
        id="123",
        secret="abc",
        original_secret="xyz",
        original_format="png",
    )


class FakeRequester:
    """Returns canned responses and records every call."""

    def __init__(self, response: dict | Exception) -> None:
        self.response = response
        self.calls: list[tuple[str, dict[str, str]]] = []

    def request(self, method: str, params: dict[str, str]) -> dict:
        self.calls.append((method, params))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def json_transport(payload: dict, status_code: int = 200, seen: list | None = None):
    """httpx.MockTransport answering every request with the same JSON body."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)
