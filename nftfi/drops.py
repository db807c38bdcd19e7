"""
NFTfi SDK - Drops
"""

from typing import Any, Mapping, Optional


class DropsOg:
    """OG drop; holds the allocations it was built with."""

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        self.allocations = (options or {}).get("allocations")
