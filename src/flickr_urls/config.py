"""Project-wide configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(os.environ.get("FLICKR_URLS_PROJECT_ROOT", Path.cwd()))

load_dotenv(PROJECT_ROOT / ".env")

DATA_DIR = PROJECT_ROOT / "data" / "flickr"

# Flickr API
FLICKR_API_KEY = os.environ.get("FLICKR_API_KEY", "")
FLICKR_API_BASE = "https://api.flickr.com/services/rest/"
FLICKR_TIMEOUT = int(os.environ.get("FLICKR_TIMEOUT", "30"))

# Static media and short links
STATIC_HOST_TEMPLATE = "https://farm{farm}.staticflickr.com/{server}/{id}"
SHORT_URL_BASE = "https://flic.kr/p/"
