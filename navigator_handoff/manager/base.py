"""
manager/base.py

Core data models and query encoding shared by the Navigator URL builder.
This module defines:
- LocationType / Location (coordinate or free-text address)
- StopType / NavigatorStop (start point or waypoint)
- Callback (return scheme + optional prompt)
- encode_query_argument (percent-encoding that never leaks a bare '&')

Every `encode_*` helper either returns a finished fragment or raises
EncodingError; nothing partial is ever returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

from navigator_handoff.errors import EncodingError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# QUERY ENCODING
# ---------------------------------------------------------------------------

# URL-query allowed characters (RFC 3986 pchar + "/" + "?") minus "&".
# quote() always leaves ASCII letters, digits and "_.-~" alone.
QUERY_ARGUMENT_SAFE = "!$'()*+,/:;=?@"


def encode_query_argument(raw: str) -> str:
    """
    Percent-encode `raw` for use as a single query argument value.

    Args:
        raw (str): Caller text (address, name, callback scheme, prompt).

    Returns:
        str: UTF-8 percent-encoded text with every '&' escaped as %26.

    Raises:
        EncodingError: If `raw` is not text or cannot be represented as UTF-8
            (e.g. it contains lone surrogates).
    """
    if not isinstance(raw, str):
        raise EncodingError(raw)

    try:
        return quote(raw, safe=QUERY_ARGUMENT_SAFE, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as e:
        logger.debug("[ENCODE] UTF-8 encoding failed for %r: %s", raw, e)
        raise EncodingError(raw) from e


# ---------------------------------------------------------------------------
# ENUMS
# ---------------------------------------------------------------------------


class LocationType(Enum):
    WGS84 = "wgs84"
    ADDRESS = "address"


class StopType(Enum):
    """Role of a stop; the value doubles as its query parameter name."""

    START = "start"
    STOP = "stop"


# ---------------------------------------------------------------------------
# DATA MODELS
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Location:
    """
    A place handed to Navigator, either a coordinate pair or an address.

    Attributes:
        kind (LocationType): Which payload is populated.
        latitude (float | None): WGS84 latitude (WGS84 variant only).
        longitude (float | None): WGS84 longitude (WGS84 variant only).
        text (str | None): Free-text address (ADDRESS variant only).
    """

    kind: LocationType
    latitude: float | None = None
    longitude: float | None = None
    text: str | None = None

    def __post_init__(self):
        if self.kind is LocationType.WGS84:
            if self.latitude is None or self.longitude is None or self.text is not None:
                raise ValueError("WGS84 location needs latitude and longitude only")
        elif self.kind is LocationType.ADDRESS:
            if self.text is None or self.latitude is not None or self.longitude is not None:
                raise ValueError("ADDRESS location needs text only")
        else:
            raise ValueError(f"Unknown location kind {self.kind!r}")

    @classmethod
    def wgs84(cls, latitude: float, longitude: float) -> Location:
        return cls(LocationType.WGS84, latitude=float(latitude), longitude=float(longitude))

    @classmethod
    def address(cls, text: str) -> Location:
        return cls(LocationType.ADDRESS, text=text)

    def query_argument(self) -> str:
        """
        Render the location as a query argument.

        Coordinates use Python's shortest round-trip float text ("34.0,-118.0")
        and never fail; addresses go through encode_query_argument().
        """
        if self.kind is LocationType.WGS84:
            return f"{self.latitude!r},{self.longitude!r}"
        return encode_query_argument(self.text)


@dataclass(frozen=True, slots=True)
class NavigatorStop:
    """
    A single point on the itinerary.

    Attributes:
        location (Location): Where the stop is.
        name (str | None): Optional display name shown by Navigator.
        stop_type (StopType): START for the origin, STOP for waypoints.
    """

    location: Location
    name: str | None = None
    stop_type: StopType = StopType.STOP

    def encode_stop(self) -> str:
        """Return "&<role>=<loc>[&<role>name=<name>]" or raise EncodingError."""
        role = self.stop_type.value

        # Name is checked first: it is the value reported when both fail.
        name_argument = ""
        if self.name is not None:
            name_argument = f"&{role}name={encode_query_argument(self.name)}"

        location_argument = self.location.query_argument()
        return f"&{role}={location_argument}{name_argument}"


@dataclass(frozen=True, slots=True)
class Callback:
    """Scheme Navigator opens when the trip ends, plus an optional prompt."""

    scheme: str
    prompt: str | None = None

    def encoded_argument_string(self) -> str:
        encoded_scheme = f"&callback={encode_query_argument(self.scheme)}"

        encoded_prompt = ""
        if self.prompt is not None:
            encoded_prompt = f"&callbackprompt={encode_query_argument(self.prompt)}"

        return f"{encoded_scheme}{encoded_prompt}"
