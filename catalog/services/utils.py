"""Shared utility functions for services."""
import math
from urllib.parse import urlparse


def is_valid_url(value) -> bool:
    """Return True if *value* is an absolute http(s) URL with a host."""
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def first_valid_image(images, default: str) -> str:
    """Return the first valid image URL in *images*, else *default*."""
    for img in images or []:
        if is_valid_url(img):
            return img.strip()
    return default


def parse_image_urls(text: str | None) -> list[str]:
    """Split a comma-separated list of URLs, dropping blank and invalid entries."""
    if not text:
        return []
    return [url.strip() for url in text.split(",") if is_valid_url(url)]


def parse_number(value, default: float | None = None) -> float | None:
    """Parse a user-typed number, returning *default* for blank or non-numeric input.

    Handles ints, floats and strings like '12.5' or ' 40 '. NaN and
    infinities count as non-numeric.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        cleaned = str(value).strip()
        if not cleaned:
            return default
        try:
            number = float(cleaned)
        except ValueError:
            return default
    if not math.isfinite(number):
        return default
    return number


def truncate(text: str | None, length: int) -> str:
    """Shorten *text* to at most *length* characters, ending with an ellipsis."""
    if not text:
        return ""
    text = text.strip()
    if len(text) <= length:
        return text
    return text[: length - 1].rstrip() + "…"
