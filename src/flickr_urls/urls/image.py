"""Static image URLs for photo renditions.

See https://www.flickr.com/services/api/misc.urls.html
"""

from types import MappingProxyType

from flickr_urls.config import STATIC_HOST_TEMPLATE
from flickr_urls.models import PhotoLocation, SizeLabel

SIZE_SUFFIXES: MappingProxyType[str, str] = MappingProxyType(
    {
        SizeLabel.SQUARE: "_s",
        SizeLabel.SQUARE_75: "_s",
        SizeLabel.SQUARE_150: "_q",
        SizeLabel.THUMBNAIL: "_t",
        SizeLabel.SMALL: "_m",
        SizeLabel.SMALL_240: "_m",
        SizeLabel.SMALL_320: "_n",
        SizeLabel.MEDIUM: "",
        SizeLabel.MEDIUM_500: "",
        SizeLabel.MEDIUM_640: "_z",
        SizeLabel.MEDIUM_800: "_c",
        SizeLabel.LARGE: "_b",
        SizeLabel.LARGE_1024: "_b",
        SizeLabel.LARGE_1600: "_h",
        SizeLabel.LARGE_2048: "_k",
        SizeLabel.ORIGINAL: "_o",
    }
)


class MissingFieldError(ValueError):
    """A location field required for the requested size is empty."""

    def __init__(self, field: str, size: str) -> None:
        super().__init__(f"PhotoLocation.{field} is required for size {size!r}")
        self.field = field
        self.size = size


def size_suffix(size: str) -> str:
    """Return the URL infix for a lower-cased size label.

    A known label maps through the table. A bare code such as ``"z"`` whose
    underscored form is one of the table's suffixes wins over the key lookup.
    Anything else is medium.
    """
    suffix = ""
    if size in SIZE_SUFFIXES:
        suffix = SIZE_SUFFIXES[size]
    if "_" + size in SIZE_SUFFIXES.values():
        suffix = "_" + size
    return suffix


def get_image_url(location: PhotoLocation, size: str = "", strict: bool = False) -> str:
    """Build the static URL of a photo at the given size.

    Args:
        location: Farm, server, id and secrets of the photo.
        size: A SizeLabel value, a bare size code, or any other string
            (treated as medium). Case-insensitive.
        strict: Raise MissingFieldError instead of emitting a URL with
            empty segments.

    Returns:
        The https://farmN.staticflickr.com/... URL. Non-original sizes are
        always served as JPEG.
    """
    size = size.lower()
    if strict:
        _check_fields(location, size)

    url = STATIC_HOST_TEMPLATE.format(
        farm=location.farm, server=location.server, id=location.id
    )
    if size == SizeLabel.ORIGINAL:
        return f"{url}_{location.original_secret}_o.{location.original_format}"
    return f"{url}_{location.secret}{size_suffix(size)}.jpg"


def get_image_urls(
    location: PhotoLocation, sizes: list[str] | None = None
) -> dict[str, str]:
    """Return ``{size: url}`` for every known size, or only the given ones."""
    labels = list(SIZE_SUFFIXES) if sizes is None else sizes
    return {str(label): get_image_url(location, label) for label in labels}


def _check_fields(location: PhotoLocation, size: str) -> None:
    required = ["farm", "server", "id"]
    if size == SizeLabel.ORIGINAL:
        required += ["original_secret", "original_format"]
    else:
        required.append("secret")
    for field in required:
        if getattr(location, field) in (None, ""):
            raise MissingFieldError(field, size)
