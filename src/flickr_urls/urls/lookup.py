"""The flickr.urls.* method group."""

from typing import Protocol

from flickr_urls.models import FlickrGallery, FlickrGroup, FlickrUser, PhotoLocation
from flickr_urls.urls.image import get_image_url
from flickr_urls.urls.short import get_short_url


class Requester(Protocol):
    """Anything that can make a Flickr API call and return the parsed JSON."""

    def request(self, method: str, params: dict[str, str]) -> dict: ...


class UrlsApi:
    """URL helpers and lookups. None of the remote calls need authentication.

    Lookups return None when the response does not carry the expected field.
    Errors raised by the requester are not caught.
    """

    def __init__(self, client: Requester) -> None:
        self.client = client

    def get_image_url(self, location: PhotoLocation, size: str = "", strict: bool = False) -> str:
        return get_image_url(location, size, strict=strict)

    def get_short_url(self, photo_id: int | str) -> str:
        return get_short_url(photo_id)

    def get_group_url(self, group_id: str) -> str | None:
        """Return the URL of a group's page."""
        response = self.client.request("flickr.urls.getGroup", {"group_id": group_id})
        return response.get("group", {}).get("url")

    def get_user_photos_url(self, user_id: str | None = None) -> str | None:
        """Return the URL of a user's photos. Defaults to the calling user."""
        response = self.client.request("flickr.urls.getUserPhotos", _user_params(user_id))
        return response.get("user", {}).get("url")

    def get_user_profile_url(self, user_id: str | None = None) -> str | None:
        """Return the URL of a user's profile. Defaults to the calling user."""
        response = self.client.request("flickr.urls.getUserProfile", _user_params(user_id))
        return response.get("user", {}).get("url")

    def lookup_gallery(self, url: str) -> FlickrGallery | None:
        response = self.client.request("flickr.urls.lookupGallery", {"url": url})
        gallery = response.get("gallery")
        return FlickrGallery.from_api(gallery) if gallery else None

    def lookup_group(self, url: str) -> FlickrGroup | None:
        """Find a group from the URL of its page or photo pool."""
        response = self.client.request("flickr.urls.lookupGroup", {"url": url})
        group = response.get("group")
        return FlickrGroup.from_api(group) if group else None

    def lookup_user(self, url: str) -> FlickrUser | None:
        """Find a user from the URL of their photos or profile."""
        response = self.client.request("flickr.urls.lookupUser", {"url": url})
        user = response.get("user")
        return FlickrUser.from_api(user) if user else None


def _user_params(user_id: str | None) -> dict[str, str]:
    return {"user_id": user_id} if user_id else {}
