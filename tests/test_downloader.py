"""Tests for the rendition downloader."""

import httpx
import pytest
from tenacity import wait_none

from flickr_urls.manager import downloader
from flickr_urls.manager.downloader import download_photo, download_photos
from flickr_urls.models import PhotoLocation


def _image_transport(seen: list[str], status_code: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(status_code, content=b"\xff\xd8image")

    return httpx.MockTransport(handler)


def _timeout_transport(seen: list[str], failures: int) -> httpx.MockTransport:
    """Times out on the first ``failures`` requests, then answers 200."""

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        if len(seen) <= failures:
            raise httpx.ReadTimeout("timed out", request=request)
        return httpx.Response(200, content=b"\xff\xd8image")

    return httpx.MockTransport(handler)


@pytest.fixture
def no_retry_wait(monkeypatch):
    monkeypatch.setattr(downloader._fetch.retry, "wait", wait_none())


def test_download_photo_writes_jpeg(tmp_path, location):
    seen: list[str] = []
    with httpx.Client(transport=_image_transport(seen)) as client:
        path = download_photo(client, location, "large", tmp_path)
    assert path == tmp_path / "123_large.jpg"
    assert path.read_bytes() == b"\xff\xd8image"
    assert seen == ["https://farm1.staticflickr.com/2/123_abc_b.jpg"]


def test_download_photo_original_keeps_format(tmp_path, location):
    seen: list[str] = []
    with httpx.Client(transport=_image_transport(seen)) as client:
        path = download_photo(client, location, "Original", tmp_path)
    assert path == tmp_path / "123_original.png"
    assert seen == ["https://farm1.staticflickr.com/2/123_xyz_o.png"]


def test_download_photo_skips_existing(tmp_path, location):
    (tmp_path / "123_large.jpg").write_bytes(b"old")
    seen: list[str] = []
    with httpx.Client(transport=_image_transport(seen)) as client:
        assert download_photo(client, location, "large", tmp_path) is None
    assert seen == []


def test_download_photo_sizes_share_directory(tmp_path, location):
    seen: list[str] = []
    with httpx.Client(transport=_image_transport(seen)) as client:
        small = download_photo(client, location, "small", tmp_path)
        large = download_photo(client, location, "large", tmp_path)
    assert small == tmp_path / "123_small.jpg"
    assert large == tmp_path / "123_large.jpg"
    assert len(seen) == 2


def test_download_photo_http_error_returns_none(tmp_path, location):
    seen: list[str] = []
    with httpx.Client(transport=_image_transport(seen, status_code=404)) as client:
        assert download_photo(client, location, "large", tmp_path) is None
    assert list(tmp_path.iterdir()) == []


def test_download_photo_missing_secret_is_skipped(tmp_path):
    loc = PhotoLocation(farm=1, server=2, id="123")
    seen: list[str] = []
    with httpx.Client(transport=_image_transport(seen)) as client:
        assert download_photo(client, loc, "large", tmp_path) is None
    assert seen == []


def test_download_photo_retries_timeouts(tmp_path, location, no_retry_wait):
    seen: list[str] = []
    with httpx.Client(transport=_timeout_transport(seen, failures=2)) as client:
        path = download_photo(client, location, "large", tmp_path)
    assert len(seen) == 3
    assert path == tmp_path / "123_large.jpg"
    assert path.exists()


def test_download_photo_gives_up_after_three_timeouts(tmp_path, location, no_retry_wait):
    seen: list[str] = []
    with httpx.Client(transport=_timeout_transport(seen, failures=10)) as client:
        assert download_photo(client, location, "large", tmp_path) is None
    assert len(seen) == 3
    assert list(tmp_path.iterdir()) == []


def test_download_photos_skips_incomplete_location(tmp_path):
    first = PhotoLocation(farm=1, server=2, id="1", original_secret="o1", original_format="jpg")
    no_original = PhotoLocation(farm=1, server=2, id="2", secret="s2")
    last = PhotoLocation(farm=1, server=2, id="3", original_secret="o3", original_format="png")

    written = download_photos(
        [first, no_original, last],
        size="original",
        dest_dir=tmp_path,
        transport=_image_transport([]),
    )
    assert written == [tmp_path / "1_original.jpg", tmp_path / "3_original.png"]


def test_download_photos_skips_unavailable(tmp_path, location, monkeypatch):
    fetched: list[str] = []

    def fake_download(client, loc, size, dest_dir):
        fetched.append(str(loc.id))
        return dest_dir / f"{loc.id}_{size}.jpg"

    monkeypatch.setattr(downloader, "download_photo", fake_download)
    unavailable = PhotoLocation(farm=0, server=0, id="999", secret="s")

    written = download_photos([location, unavailable], size="small", dest_dir=tmp_path)
    assert fetched == ["123"]
    assert written == [tmp_path / "123_small.jpg"]


def test_download_photos_nothing_to_do(tmp_path):
    unavailable = PhotoLocation(farm=0, server=0, id="999", secret="s")
    assert download_photos([unavailable], dest_dir=tmp_path) == []
