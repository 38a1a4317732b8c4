"""Download photo renditions from the static media host."""

import logging
from pathlib import Path

import httpx
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from flickr_urls.config import DATA_DIR
from flickr_urls.models import PhotoLocation, SizeLabel
from flickr_urls.urls.image import MissingFieldError, get_image_url

logger = logging.getLogger(__name__)


def download_photos(
    locations: list[PhotoLocation],
    size: str = SizeLabel.LARGE,
    dest_dir: Path = DATA_DIR,
    transport: httpx.BaseTransport | None = None,
) -> list[Path]:
    """Download a batch of photos at one size.

    Args:
        locations: Photos to fetch.
        size: Size label passed to the URL resolver (default "large" = 1024px).
        dest_dir: Directory the files are written to. Files are named
            ``{id}_{size}`` so several sizes can share one directory.
        transport: Optional httpx transport for the image requests.

    Returns:
        Paths of the files written by this call.
    """
    dest_dir.mkdir(parents=True, exist_ok=True)

    # farm=0 means the photo is unavailable
    photos = [loc for loc in locations if str(loc.farm) != "0"]
    if not photos:
        return []

    written: list[Path] = []

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        TextColumn("{task.completed}/{task.total}"),
    ) as progress:
        task = progress.add_task(f"Downloading {size}", total=len(photos))

        with httpx.Client(timeout=120, transport=transport) as http_client:
            for photo in photos:
                path = download_photo(http_client, photo, size, dest_dir)
                if path is not None:
                    written.append(path)
                progress.advance(task)

    return written


def download_photo(
    client: httpx.Client,
    location: PhotoLocation,
    size: str,
    dest_dir: Path,
) -> Path | None:
    """Download a single photo.

    Returns None if the file exists, the location lacks a field the size
    needs, or the fetch failed.
    """
    try:
        url = get_image_url(location, size, strict=True)
    except MissingFieldError as e:
        logger.warning("Skipping photo %s: %s", location.id, e)
        return None
    local_path = dest_dir / _filename(location, size)

    if local_path.exists():
        return None

    try:
        content = _fetch(client, url)
    except httpx.HTTPError as e:
        logger.warning("Failed to download %s: %s", url, e)
        return None

    local_path.write_bytes(content)
    logger.debug("Saved %s (%d bytes)", local_path, len(content))
    return local_path


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, max=10),
    retry=retry_if_exception_type(httpx.TimeoutException),
    reraise=True,
)
def _fetch(client: httpx.Client, url: str) -> bytes:
    resp = client.get(url)
    resp.raise_for_status()
    return resp.content


def _filename(location: PhotoLocation, size: str) -> str:
    """``{id}_{size}.{ext}``. Originals keep their own format; every other size is a JPEG."""
    size = size.lower()
    if size == SizeLabel.ORIGINAL:
        return f"{location.id}_{size}.{location.original_format}"
    return f"{location.id}_{size}.jpg"
