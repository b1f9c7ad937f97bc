"""Debug utility for pathwright.

Provides a single debug() function that can be toggled via the
PATHWRIGHT_DEBUG environment variable. Low-level filesystem modules use it
instead of a logger so that tracing every syscall stays opt-in.

Usage:
    from pathwright.utils.debug import debug

    debug(f"mkdir {path}")

Environment:
    PATHWRIGHT_DEBUG: Set to '1', 'true', 'yes' (case-insensitive) to enable
                      debug output. Any other value or unset disables it.
"""

import os
import sys
from typing import Any

# Determine if debug mode is enabled at module import time
_DEBUG_ENABLED = os.environ.get("PATHWRIGHT_DEBUG", "").lower() in (
    "1",
    "true",
    "yes",
)


def debug(msg: Any) -> None:
    """Print debug message if PATHWRIGHT_DEBUG is enabled.

    Args:
        msg: Message to print. Will be converted to string.

    Note:
        The environment variable is read at import time. Changing it later
        has no effect unless the module is reloaded.
    """
    if _DEBUG_ENABLED:
        print(f"[DEBUG] {msg}", file=sys.stderr)
