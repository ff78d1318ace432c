"""Available caching strategies."""

from __future__ import annotations

from enum import Enum


class CacheStrategyType(str, Enum):
    """Caching execution strategy selector."""

    # Emit the cached value first when there is one, then every live value
    IF_HAVE = "if_have"

    # Emit only the cached value; live values just refresh the cache
    ONLY = "only"
