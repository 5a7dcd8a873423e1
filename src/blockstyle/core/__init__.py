"""Core package initializer for blockstyle.

Holds the shared contracts (tokens, blocks, options, reports), the Result
type and the process settings:
    from blockstyle.core.settings import load_settings, Settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
