# routing.py
"""
Orchestration layer that turns plain text input into a Navigator deep link.

Responsibilities:
    - Parse "lat,lon" / address strings into Location values.
    - Split "location|name" stop arguments.
    - Feed the itinerary to NavigatorURLScheme and return the URL.
"""
import logging
from typing import List, Optional, Tuple

from navigator_handoff.config import RouteConfig
from navigator_handoff.manager.base import Location
from navigator_handoff.manager.navigator_manager import NavigatorURLScheme

logger = logging.getLogger(__name__)

NAME_SEPARATOR = "|"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_location(text: str) -> Location:
    """
    Interpret `text` as a coordinate pair when it looks like one.

    "34.05,-118.25" -> Location.wgs84(34.05, -118.25)
    "1 Main St"     -> Location.address("1 Main St")

    No range checks are applied to coordinates.
    """
    cleaned = text.strip()
    parts = cleaned.split(",")
    if len(parts) == 2:
        try:
            lat, lon = float(parts[0]), float(parts[1])
        except ValueError:
            pass
        else:
            return Location.wgs84(lat, lon)
    return Location.address(cleaned)


def parse_stop_argument(text: str) -> Tuple[Location, Optional[str]]:
    """Split "location|name" into (Location, name or None)."""
    location_text, _, name = text.partition(NAME_SEPARATOR)
    name = name.strip() or None
    return parse_location(location_text), name


# ---------------------------------------------------------------------------
# Main Entry Point
# ---------------------------------------------------------------------------


def build_itinerary_url(
    start: Optional[Tuple[Location, Optional[str]]],
    stops: List[Tuple[Location, Optional[str]]],
    config: Optional[RouteConfig] = None,
) -> str:
    """Generate a Navigator URL for the given start and ordered stops."""
    config = config or RouteConfig.from_settings()

    nav = NavigatorURLScheme(optimize=config.optimize, navigate=config.navigate)

    if start is not None:
        location, name = start
        nav.set_start(location, name=name)

    nav.add_stops(stops)

    if config.callback_scheme:
        nav.set_callback(config.callback_scheme, prompt=config.callback_prompt)

    url = nav.generate_url()
    logger.info("[ROUTING] Generated Navigator URL with %d stops", len(stops))
    return url
