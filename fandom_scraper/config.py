# -*- coding: utf-8 -*-

import os

# -----------------------------
# HTTP (ENV overridable)
# -----------------------------

USER_AGENT = os.getenv(
    "USER_AGENT",
    "fandom-scraper (+https://pypi.org/project/fandom-scraper/)",
)

HTTP_CONNECT_TIMEOUT = float(os.getenv("HTTP_CONNECT_TIMEOUT", "5"))
HTTP_READ_TIMEOUT = float(os.getenv("HTTP_READ_TIMEOUT", "20"))

# 1 = single attempt, no retry
HTTP_MAX_RETRIES = max(1, int(os.getenv("HTTP_MAX_RETRIES", "1")))

# Status codes worth another attempt when retries are enabled
RETRY_STATUS_CODES = (429, 502, 503)
MAX_BACKOFF_S = 8.0

# -----------------------------
# Sites
# -----------------------------

DEFAULT_LANGUAGE = os.getenv("FANDOM_SCRAPER_LANGUAGE", "en")
