"""
launcher.py

Host-side glue: probe whether a URL scheme has a registered handler and
hand a generated deep link to the operating system.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
import webbrowser

logger = logging.getLogger(__name__)


def can_launch(scheme: str) -> bool:
    """
    Return True if the desktop has a handler registered for `scheme`.

    Only freedesktop systems (xdg-mime) are probed; everything else
    reports False.
    """
    name = scheme.split(":", 1)[0].strip()
    if not name:
        return False

    if not sys.platform.startswith("linux"):
        logger.info("[LAUNCHER] No scheme probe for platform %s", sys.platform)
        return False

    xdg_mime = shutil.which("xdg-mime")
    if not xdg_mime:
        logger.info("[LAUNCHER] xdg-mime not found; cannot probe '%s'", name)
        return False

    try:
        result = subprocess.run(
            [xdg_mime, "query", "default", f"x-scheme-handler/{name}"],
            capture_output=True,
            text=True,
            timeout=5,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("[LAUNCHER] Probe for '%s' failed: %s", name, e)
        return False

    handler = result.stdout.strip()
    if result.returncode != 0 or not handler:
        logger.info("[LAUNCHER] No handler registered for '%s'", name)
        return False

    logger.info("[LAUNCHER] '%s' handled by %s", name, handler)
    return True


def open_url(url: str) -> bool:
    """
    Dispatch `url` to the OS; returns whether a handler accepted it.

    On Linux, xdg-open is used so the URL reaches the same scheme handler
    can_launch() queries. Elsewhere webbrowser.open is used, which may hand
    a custom scheme to a browser instead of the registered app.
    """
    xdg_open = shutil.which("xdg-open") if sys.platform.startswith("linux") else None

    if xdg_open:
        try:
            result = subprocess.run([xdg_open, url], capture_output=True, timeout=10, check=False)
            opened = result.returncode == 0
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("[LAUNCHER] xdg-open failed for %s: %s", url, e)
            opened = False
    else:
        opened = webbrowser.open(url)

    if opened:
        logger.info("[LAUNCHER] Dispatched %s", url)
    else:
        logger.error("[LAUNCHER] No handler accepted %s", url)
    return opened
