"""Data models for Flickr photos, users, groups and galleries."""

from dataclasses import dataclass
from enum import StrEnum


class SizeLabel(StrEnum):
    """Size labels understood by the image URL resolver."""

    SQUARE = "square"
    SQUARE_75 = "square_75"
    SQUARE_150 = "square_150"
    THUMBNAIL = "thumbnail"
    SMALL = "small"
    SMALL_240 = "small_240"
    SMALL_320 = "small_320"
    MEDIUM = "medium"
    MEDIUM_500 = "medium_500"
    MEDIUM_640 = "medium_640"
    MEDIUM_800 = "medium_800"
    LARGE = "large"
    LARGE_1024 = "large_1024"
    LARGE_1600 = "large_1600"
    LARGE_2048 = "large_2048"
    ORIGINAL = "original"


@dataclass(frozen=True)
class PhotoLocation:
    """Fields that locate a photo's files on the static media host.

    ``secret`` is needed for every size except the original, which needs
    ``original_secret`` and ``original_format`` instead.
    """

    farm: int | str
    server: int | str
    id: int | str
    secret: str = ""
    original_secret: str = ""
    original_format: str = ""

    @classmethod
    def from_api(cls, photo: dict) -> "PhotoLocation":
        """Build from a photo record as returned by flickr.photos.getInfo."""
        return cls(
            farm=int(photo["farm"]),
            server=photo["server"],
            id=photo["id"],
            secret=photo.get("secret", ""),
            original_secret=photo.get("originalsecret", ""),
            original_format=photo.get("originalformat", ""),
        )


@dataclass(frozen=True)
class FlickrUser:
    """A user found by URL lookup."""

    id: str
    username: str

    @classmethod
    def from_api(cls, user: dict) -> "FlickrUser":
        return cls(id=user["id"], username=_content(user.get("username")))


@dataclass(frozen=True)
class FlickrGroup:
    """A group found by URL lookup."""

    id: str
    name: str

    @classmethod
    def from_api(cls, group: dict) -> "FlickrGroup":
        return cls(id=group["id"], name=_content(group.get("groupname")))


@dataclass(frozen=True)
class FlickrGallery:
    """Metadata for a Flickr gallery."""

    id: str
    url: str
    owner: str
    title: str
    description: str
    count_photos: int

    @classmethod
    def from_api(cls, gallery: dict) -> "FlickrGallery":
        return cls(
            id=gallery["id"],
            url=gallery.get("url", ""),
            owner=gallery.get("owner", ""),
            title=_content(gallery.get("title")),
            description=_content(gallery.get("description")),
            count_photos=int(gallery.get("count_photos", 0)),
        )


def _content(value: dict | str | None) -> str:
    """Unwrap Flickr's ``{"_content": ...}`` text fields."""
    if value is None:
        return ""
    if isinstance(value, dict):
        return value.get("_content", "")
    return value
