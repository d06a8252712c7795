"""Configuration module using Pydantic Settings.

Usage:
    from contentarea.config import AreaSettings

    settings = AreaSettings(fallback_on_stale_hint=True)
"""

from contentarea.config.settings import AreaSettings

__all__ = [
    "AreaSettings",
]
