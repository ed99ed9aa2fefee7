"""Friend Quotes – configuration."""

import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = BASE_DIR.parent

load_dotenv(PROJECT_ROOT / ".env")

# ---------------------------------------------------------------------------
# Flask
# ---------------------------------------------------------------------------
HOST = os.getenv("FRIEND_QUOTES_HOST", "0.0.0.0")
PORT = int(os.getenv("FRIEND_QUOTES_PORT", "6055"))
DEBUG = os.getenv("FRIEND_QUOTES_DEBUG", "false").lower() in ("true", "1", "yes")
LOG_LEVEL = os.getenv("FRIEND_QUOTES_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Content (quotes file and templates ship inside the package)
# ---------------------------------------------------------------------------
CONTENT_DIR = BASE_DIR
TEMPLATES_DIRNAME = "templates"
FRIENDS_FILE = "friends/friends.txt"

# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------
FRIENDS_PER_PAGE = 3
PAGE_WINDOW = 3

# ---------------------------------------------------------------------------
# Page copy
# ---------------------------------------------------------------------------
TITLE_FORMAT = "Happy Friendship Day Quotes - Page {page}"
DESCRIPTION_FORMAT = "A collection of Friendship Quotes - Page {page}"

# ---------------------------------------------------------------------------
# Response headers added to every response
# ---------------------------------------------------------------------------
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}
