"""Flickr URL CLI: build photo and short URLs, run URL lookups, download renditions."""

import argparse
import logging
import sys
from pathlib import Path

import httpx


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        found = args.handler(args)
    except (ValueError, RuntimeError, httpx.HTTPError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    if found is False:
        print("Not found.")
        sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Flickr URL tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # image-url
    iu_parser = subparsers.add_parser("image-url", help="Static image URL for one size")
    _add_location_args(iu_parser)
    iu_parser.add_argument("--size", default="medium", help="Size label (default: medium)")
    iu_parser.add_argument(
        "--strict", action="store_true", help="Fail if a required field is missing"
    )
    iu_parser.set_defaults(handler=_cmd_image_url)

    # image-urls
    ius_parser = subparsers.add_parser("image-urls", help="Static image URLs for every size")
    _add_location_args(ius_parser)
    ius_parser.set_defaults(handler=_cmd_image_urls)

    # short-url
    su_parser = subparsers.add_parser("short-url", help="flic.kr short link for a photo")
    su_parser.add_argument("photo_id", help="Numeric photo ID")
    su_parser.set_defaults(handler=_cmd_short_url)

    # decode-short-url
    dsu_parser = subparsers.add_parser("decode-short-url", help="Photo ID from a flic.kr link")
    dsu_parser.add_argument("url", help="https://flic.kr/p/... link")
    dsu_parser.set_defaults(handler=_cmd_decode_short_url)

    # group-url, user-photos-url, user-profile-url
    gu_parser = subparsers.add_parser("group-url", help="URL of a group's page")
    gu_parser.add_argument("group_id", help="Group NSID")
    gu_parser.set_defaults(handler=_cmd_group_url)

    for name, help_text, handler in (
        ("user-photos-url", "URL of a user's photos", _cmd_user_photos_url),
        ("user-profile-url", "URL of a user's profile", _cmd_user_profile_url),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("--user-id", help="User NSID (default: the calling user)")
        p.set_defaults(handler=handler)

    # lookup-*
    for name, help_text, handler in (
        ("lookup-gallery", "Gallery info from a gallery URL", _cmd_lookup_gallery),
        ("lookup-group", "Group NSID from a group URL", _cmd_lookup_group),
        ("lookup-user", "User NSID from a photos or profile URL", _cmd_lookup_user),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("url", help="Flickr URL")
        p.set_defaults(handler=handler)

    # download
    dl_parser = subparsers.add_parser("download", help="Download photos by ID")
    dl_parser.add_argument("photo_ids", nargs="+", help="Photo IDs")
    dl_parser.add_argument("--size", default="large", help="Size label (default: large)")
    dl_parser.add_argument("--dest", type=Path, help="Output directory (default: data/flickr)")
    dl_parser.set_defaults(handler=_cmd_download)

    return parser


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--photo-id", help="Fetch the location fields from the API")
    parser.add_argument("--farm", default="", help="Farm ID")
    parser.add_argument("--server", default="", help="Server ID")
    parser.add_argument("--id", default="", help="Photo ID")
    parser.add_argument("--secret", default="", help="Secret")
    parser.add_argument("--original-secret", default="", help="Original secret")
    parser.add_argument("--original-format", default="", help="Original format, e.g. jpg")


def _resolve_location(args: argparse.Namespace):
    """Build a PhotoLocation from CLI args, or fetch it when --photo-id is given."""
    from flickr_urls.models import PhotoLocation

    if args.photo_id:
        from flickr_urls.manager.flickr_client import FlickrClient

        return FlickrClient().get_photo_location(args.photo_id)
    return PhotoLocation(
        farm=args.farm,
        server=args.server,
        id=args.id,
        secret=args.secret,
        original_secret=args.original_secret,
        original_format=args.original_format,
    )


def _urls_api():
    from flickr_urls.manager.flickr_client import FlickrClient
    from flickr_urls.urls.lookup import UrlsApi

    return UrlsApi(FlickrClient())


def _print_found(value) -> bool:
    if value is None:
        return False
    print(value)
    return True


def _cmd_image_url(args: argparse.Namespace) -> None:
    from flickr_urls.urls.image import get_image_url

    print(get_image_url(_resolve_location(args), args.size, strict=args.strict))


def _cmd_image_urls(args: argparse.Namespace) -> None:
    from flickr_urls.urls.image import get_image_urls

    for size, url in get_image_urls(_resolve_location(args)).items():
        print(f"  {size:<12} {url}")


def _cmd_short_url(args: argparse.Namespace) -> None:
    from flickr_urls.urls.short import get_short_url

    print(get_short_url(args.photo_id))


def _cmd_decode_short_url(args: argparse.Namespace) -> None:
    from flickr_urls.urls.short import photo_id_from_short_url

    print(photo_id_from_short_url(args.url))


def _cmd_group_url(args: argparse.Namespace) -> bool:
    return _print_found(_urls_api().get_group_url(args.group_id))


def _cmd_user_photos_url(args: argparse.Namespace) -> bool:
    return _print_found(_urls_api().get_user_photos_url(args.user_id))


def _cmd_user_profile_url(args: argparse.Namespace) -> bool:
    return _print_found(_urls_api().get_user_profile_url(args.user_id))


def _cmd_lookup_gallery(args: argparse.Namespace) -> bool:
    gallery = _urls_api().lookup_gallery(args.url)
    if gallery is None:
        return False
    print(f"  {gallery.id}  {gallery.count_photos:>5} photos  {gallery.title}")
    print(f"  owner: {gallery.owner}  {gallery.url}")
    return True


def _cmd_lookup_group(args: argparse.Namespace) -> bool:
    group = _urls_api().lookup_group(args.url)
    if group is None:
        return False
    print(f"  {group.id}  {group.name}")
    return True


def _cmd_lookup_user(args: argparse.Namespace) -> bool:
    user = _urls_api().lookup_user(args.url)
    if user is None:
        return False
    print(f"  {user.id}  {user.username}")
    return True


def _cmd_download(args: argparse.Namespace) -> None:
    from flickr_urls.config import DATA_DIR
    from flickr_urls.manager.downloader import download_photos
    from flickr_urls.manager.flickr_client import FlickrClient

    client = FlickrClient()
    locations = [client.get_photo_location(photo_id) for photo_id in args.photo_ids]
    written = download_photos(locations, size=args.size, dest_dir=args.dest or DATA_DIR)
    print(f"Downloaded {len(written)} new images.")
