"""Human-readable byte rates."""

from __future__ import annotations

import math

NO_TRAFFIC = "--"
SCALED_UNITS = ["KB/s", "MB/s", "GB/s"]


def humanize(bps: float) -> str:
    """Format bytes/sec, escalating through KB/MB/GB and saturating at GB/s.

    >>> humanize(2048)
    '2.0 KB/s'
    """
    if math.isnan(bps) or bps < 1.0:
        return NO_TRAFFIC
    if bps < 1024.0:
        return f"{bps:.0f} B/s"

    value = bps / 1024.0
    i = 0
    while value >= 1024.0 and i < len(SCALED_UNITS) - 1:
        value /= 1024.0
        i += 1

    if value >= 100.0:
        return f"{value:.0f} {SCALED_UNITS[i]}"
    return f"{value:.1f} {SCALED_UNITS[i]}"
