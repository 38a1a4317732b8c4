"""Photo, short-link and lookup URLs."""

from flickr_urls.urls.image import SIZE_SUFFIXES, MissingFieldError, get_image_url, get_image_urls
from flickr_urls.urls.lookup import UrlsApi
from flickr_urls.urls.short import base58_decode, base58_encode, get_short_url

__all__ = [
    "SIZE_SUFFIXES",
    "MissingFieldError",
    "UrlsApi",
    "base58_decode",
    "base58_encode",
    "get_image_url",
    "get_image_urls",
    "get_short_url",
]
