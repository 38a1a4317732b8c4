"""flic.kr short links and Flickr's base-58 photo id encoding."""

from urllib.parse import urlparse

from flickr_urls.config import SHORT_URL_BASE

# Flickr's ordering: digits, lower case, upper case; no 0, O, I or l.
BASE58_ALPHABET = "123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"
_BASE = len(BASE58_ALPHABET)
_INDEX = {char: i for i, char in enumerate(BASE58_ALPHABET)}


def base58_encode(num: int | str) -> str:
    """Encode a non-negative photo id. Zero encodes to the empty string."""
    if isinstance(num, float):
        raise ValueError(f"Photo id must be an integer: {num!r}")
    try:
        num = int(num)
    except (TypeError, ValueError):
        raise ValueError(f"Photo id must be numeric: {num!r}") from None
    if num < 0:
        raise ValueError(f"Photo id must be non-negative: {num}")

    encoded = ""
    while num:
        num, mod = divmod(num, _BASE)
        encoded = BASE58_ALPHABET[mod] + encoded
    return encoded


def base58_decode(text: str) -> int:
    num = 0
    for char in text:
        if char not in _INDEX:
            raise ValueError(f"Invalid base-58 character {char!r} in {text!r}")
        num = num * _BASE + _INDEX[char]
    return num


def get_short_url(photo_id: int | str) -> str:
    """Return the flic.kr short link for a photo."""
    return SHORT_URL_BASE + base58_encode(photo_id)


def photo_id_from_short_url(url: str) -> int:
    """Recover the photo id from a https://flic.kr/p/... link."""
    parsed = urlparse(url)
    base = urlparse(SHORT_URL_BASE)
    code = parsed.path.removeprefix(base.path).rstrip("/")
    if (
        parsed.netloc != base.netloc
        or not parsed.path.startswith(base.path)
        or not code
        or "/" in code
    ):
        raise ValueError(f"Not a flic.kr photo link: {url!r}")
    return base58_decode(code)
