"""
errors.py

Exceptions raised while turning an itinerary into a Navigator deep link.
"""

from __future__ import annotations


class NavigatorURLError(Exception):
    """Base exception for deep-link generation."""

    pass


class EncodingError(NavigatorURLError):
    """Raised when a caller-supplied value cannot be percent-encoded."""

    def __init__(self, offending_text):
        self.offending_text = offending_text
        super().__init__(f"Cannot encode {offending_text!r} as a query argument")


class URLParseError(NavigatorURLError):
    """Raised when the assembled string is not a structurally valid URL."""

    def __init__(self, url: str, reason: str | None = None):
        self.url = url
        self.reason = reason
        msg = f"Generated URL could not be parsed: {url}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
