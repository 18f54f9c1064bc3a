"""Input validation utilities."""

from typing import Tuple
from urllib.parse import urlsplit


def validate_url(url: str) -> Tuple[bool, str]:
    """
    Validate absolute URL shape.

    Requirements:
    - A scheme (https, http, ftp, ...)
    - A network location
    - No whitespace

    Args:
        url: URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url:
        return False, "URL is required"

    if any(c.isspace() for c in url):
        return False, "URL must not contain whitespace"

    try:
        parts = urlsplit(url)
    except ValueError:
        return False, "Invalid URL format"

    if not parts.scheme or not parts.scheme[0].isalpha():
        return False, "URL must include a scheme such as https://"

    if not parts.netloc:
        return False, "URL must include a host"

    return True, ""


def empty_to_none(value):
    """Collapse empty strings to None."""
    if value == "":
        return None
    return value
