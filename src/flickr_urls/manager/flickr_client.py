"""Flickr REST API client."""

import logging

import httpx

from flickr_urls.config import FLICKR_API_BASE, FLICKR_API_KEY, FLICKR_TIMEOUT
from flickr_urls.models import PhotoLocation

logger = logging.getLogger(__name__)


class FlickrApiError(RuntimeError):
    """Flickr answered with ``stat: fail``."""

    def __init__(self, method: str, code: int | None, message: str) -> None:
        super().__init__(f"Flickr API error in {method}: {message} (code {code})")
        self.method = method
        self.code = code
        self.message = message


class FlickrClient:
    """Client for Flickr REST API."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: int = FLICKR_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or FLICKR_API_KEY
        if not self.api_key:
            raise ValueError("Flickr API key is required. Set FLICKR_API_KEY in .env file.")
        self.timeout = timeout
        self.transport = transport

    def request(self, method: str, params: dict[str, str]) -> dict:
        """Make a Flickr API call and return the parsed JSON."""
        query = dict(params)
        query.update(
            {
                "method": method,
                "api_key": self.api_key,
                "format": "json",
                "nojsoncallback": "1",
            }
        )
        logger.debug("Calling %s with %s", method, params)
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            resp = client.get(FLICKR_API_BASE, params=query)
            resp.raise_for_status()
        data = resp.json()
        if data.get("stat") != "ok":
            raise FlickrApiError(method, data.get("code"), data.get("message", str(data)))
        return data

    def get_photo_location(self, photo_id: str) -> PhotoLocation:
        """Fetch the farm, server and secrets of a photo."""
        data = self.request("flickr.photos.getInfo", {"photo_id": str(photo_id)})
        return PhotoLocation.from_api(data["photo"])
