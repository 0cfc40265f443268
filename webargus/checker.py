"""Online check: a URL passes when it answers with status 200."""

from __future__ import annotations

import urllib.error
import urllib.request

DEFAULT_TIMEOUT = 30.0


def is_online(url: str, timeout: float = DEFAULT_TIMEOUT) -> bool:
    """Fetch the URL and tell whether the final response status is 200."""
    print(f"[HTTP Checker] Requesting '{url}'...")
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            return response.status == 200
    except (OSError, ValueError):
        return False