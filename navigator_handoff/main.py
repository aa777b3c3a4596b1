"""
Main CLI entry point for Navigator Handoff.
"""

import argparse
import logging
import sys

from navigator_handoff import launcher
from navigator_handoff.config import RouteConfig, settings
from navigator_handoff.errors import NavigatorURLError
from navigator_handoff.manager.navigator_manager import NavigatorURLScheme
from navigator_handoff.routing import build_itinerary_url, parse_stop_argument

# -------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------
logging.basicConfig(
    level=settings.logging_level,
    format="%(asctime)s %(levelname)s:%(name)s:%(message)s",
)
logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# INSTALL CHECK
# -------------------------------------------------------------------
def handle_check_installed() -> int:
    installed = NavigatorURLScheme.can_open(launcher.can_launch)
    if installed:
        print(f"{NavigatorURLScheme.scheme} handler is installed.")
        return 0
    print(f"{NavigatorURLScheme.scheme} handler is NOT installed.")
    return 1


# -------------------------------------------------------------------
# CLI ENTRY POINT
# -------------------------------------------------------------------
def dispatch_cli(args) -> int:
    if args.check_installed:
        return handle_check_installed()

    config = RouteConfig(
        optimize=args.optimize,
        navigate=args.navigate,
        callback_scheme=args.callback,
        callback_prompt=args.callback_prompt,
    )

    start = parse_stop_argument(args.start) if args.start else None
    stops = [parse_stop_argument(s) for s in args.stop or []]

    try:
        url = build_itinerary_url(start, stops, config=config)
    except NavigatorURLError as e:
        logger.error("[CLI] Could not build Navigator URL: %s", e)
        return 1

    print(url)

    if args.open and not launcher.open_url(url):
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Hand an itinerary off to ArcGIS Navigator via its URL scheme"
    )

    parser.add_argument(
        "--start",
        help='Starting point: "lat,lon" or an address, optionally "LOCATION|NAME"',
    )
    parser.add_argument(
        "--stop",
        action="append",
        help="Waypoint (repeatable, visited in order). Same format as --start.",
    )
    parser.add_argument(
        "--optimize",
        action=argparse.BooleanOptionalAction,
        default=settings.default_optimize,
        help="Let Navigator reorder the stops (default from NAVIGATOR_OPTIMIZE).",
    )
    parser.add_argument(
        "--navigate",
        action=argparse.BooleanOptionalAction,
        default=settings.default_navigate,
        help="Start guidance immediately (default from NAVIGATOR_NAVIGATE).",
    )
    parser.add_argument(
        "--callback",
        default=settings.callback_scheme or None,
        help="Scheme Navigator opens when the trip completes.",
    )
    parser.add_argument(
        "--callback-prompt",
        default=settings.callback_prompt or None,
        help="Prompt shown before the callback is invoked.",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        help="Dispatch the generated URL to the operating system.",
    )
    parser.add_argument(
        "--check-installed",
        action="store_true",
        help="Only report whether a Navigator handler is registered.",
    )
    return parser


# -------------------------------------------------------------------
# __main__
# -------------------------------------------------------------------
def __main__():
    args = build_parser().parse_args()
    sys.exit(dispatch_cli(args))


if __name__ == "__main__":
    __main__()
