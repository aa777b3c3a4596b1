"""
manager/navigator_manager.py

Builds ArcGIS Navigator deep links (arcgis-navigator://?...) from an
itinerary of a start point and ordered stops.

Usage:
    >>> nav = NavigatorURLScheme(optimize=True)
    >>> nav.set_start(Location.wgs84(34.0, -118.0), name="Home")
    >>> nav.add_stop(Location.address("1 Main St"))
    >>> nav.generate_url()
    'arcgis-navigator://?optimize=true&navigate=false&start=34.0,-118.0&startname=Home&stop=1%20Main%20St'
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Tuple
from urllib.parse import urlsplit

from navigator_handoff import launcher
from navigator_handoff.errors import EncodingError, URLParseError
from navigator_handoff.manager.base import Callback, Location, NavigatorStop, StopType

logger = logging.getLogger(__name__)

SCHEME = "arcgis-navigator:"
SCHEME_NAME = SCHEME.rstrip(":")


def _flag(value: bool) -> str:
    return "true" if value else "false"


# ---------------------------------------------------------------------------
# CLASS: NavigatorURLScheme
# ---------------------------------------------------------------------------


class NavigatorURLScheme:
    """
    Itinerary builder for the Navigator URL scheme.

    Responsibilities:
        - Hold the (single) start stop and the ordered waypoint stops
        - Hold an optional return callback
        - Compose and validate the final deep-link URL

    Not safe for concurrent mutation; use one instance per itinerary.
    """

    scheme = SCHEME

    def __init__(self, optimize: bool = False, navigate: bool = False):
        """
        Args:
            optimize (bool): Let Navigator reorder the stops.
            navigate (bool): Start turn-by-turn guidance immediately.
        """
        self._optimize = bool(optimize)
        self._navigate = bool(navigate)
        self._start: NavigatorStop | None = None
        self._stops: list[NavigatorStop] = []
        self._callback: Callback | None = None

    # -----------------------------------------------------------------------
    # Options / State
    # -----------------------------------------------------------------------

    @property
    def optimize(self) -> bool:
        return self._optimize

    @property
    def navigate(self) -> bool:
        return self._navigate

    @property
    def start(self) -> NavigatorStop | None:
        return self._start

    @property
    def stops(self) -> Tuple[NavigatorStop, ...]:
        return tuple(self._stops)

    @property
    def callback(self) -> Callback | None:
        return self._callback

    # -----------------------------------------------------------------------
    # Mutators
    # -----------------------------------------------------------------------

    def set_start(self, location: Location, name: Optional[str] = None) -> None:
        """Set the starting point, replacing any previous one."""
        if self._start is not None:
            logger.debug("[NAVIGATOR] Replacing start %s", self._start.location)
        self._start = NavigatorStop(location=location, name=name, stop_type=StopType.START)

    def add_stop(self, location: Location, name: Optional[str] = None) -> None:
        """Append a waypoint; insertion order is visit order."""
        self._stops.append(NavigatorStop(location=location, name=name, stop_type=StopType.STOP))

    def add_stops(self, stops: Iterable[Tuple[Location, Optional[str]]]) -> None:
        for location, name in stops:
            self.add_stop(location, name)
        logger.debug("[NAVIGATOR] %d stops queued", len(self._stops))

    def set_callback(self, scheme: str, prompt: Optional[str] = None) -> None:
        """Set the scheme Navigator calls back when the trip finishes."""
        self._callback = Callback(scheme=scheme, prompt=prompt)

    # -----------------------------------------------------------------------
    # App availability
    # -----------------------------------------------------------------------

    @classmethod
    def can_open(cls, probe: Callable[[str], bool] | None = None) -> bool:
        """
        Ask the host whether Navigator is installed.

        Args:
            probe: Callable answering "can this scheme be launched?".
                Defaults to navigator_handoff.launcher.can_launch.
        """
        if probe is None:
            probe = launcher.can_launch
        return bool(probe(cls.scheme))

    # -----------------------------------------------------------------------
    # URL Generation
    # -----------------------------------------------------------------------

    def generate_url(self) -> str:
        """
        Compose the deep link.

        Order is fixed: options, start, stops (insertion order), callback.

        Returns:
            str: The complete URL.

        Raises:
            EncodingError: A name, address, callback scheme or prompt could
                not be encoded. No partial URL is produced.
            URLParseError: The assembled string failed URL parsing.
        """
        url = f"{self.scheme}//?optimize={_flag(self._optimize)}&navigate={_flag(self._navigate)}"

        try:
            if self._start is not None:
                url += self._start.encode_stop()

            url += "".join(stop.encode_stop() for stop in self._stops)

            if self._callback is not None:
                url += self._callback.encoded_argument_string()
        except EncodingError as e:
            logger.warning("[NAVIGATOR] Could not encode %r", e.offending_text)
            raise

        try:
            parsed = urlsplit(url)
        except ValueError as e:
            raise URLParseError(url, str(e)) from e

        if parsed.scheme != SCHEME_NAME:
            raise URLParseError(url, f"unexpected scheme {parsed.scheme!r}")

        logger.debug("[NAVIGATOR] Generated URL: %s", url)
        return url
