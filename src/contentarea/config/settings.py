"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
ownership resolver, access delegator and lookup cache.

Usage:
    from contentarea.config import AreaSettings

    # Load from environment variables (CONTENTAREA_*)
    settings = AreaSettings()

    # Or override with explicit values
    settings = AreaSettings(cache_negative_results=False)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install contentarea"
    ) from e

from contentarea.core.types import Stage


class AreaSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for area ownership resolution and access delegation.

    Attributes:
        cache_negative_results: Cache "no owner found" results so ownerless
            areas are not re-scanned on every call. A cached miss stays until
            the entry is dropped, so call ``Areas.forget`` (or
            ``OwnershipResolver.forget``) after pointing a record at an area
            that was already resolved. False caches positive results only.
        fallback_on_stale_hint: When the hinted owner type has no record
            pointing at the area, continue with the full candidate scan
            instead of giving up.
        view_uses_edit_base_check: Short-circuit ``can_view`` on the *edit*
            base check. False uses the view base check instead.
        thread_safe_cache: Guard the process-wide lookup cache with a lock.
        read_stage: Stage the hinted-type lookup reads from. The candidate
            scan always reads the draft stage.

    Environment Variables:
        CONTENTAREA_CACHE_NEGATIVE_RESULTS
        CONTENTAREA_FALLBACK_ON_STALE_HINT
        CONTENTAREA_VIEW_USES_EDIT_BASE_CHECK
        CONTENTAREA_THREAD_SAFE_CACHE
        CONTENTAREA_READ_STAGE (Stage or Live)
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTENTAREA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cache_negative_results: bool = True
    fallback_on_stale_hint: bool = False
    view_uses_edit_base_check: bool = True
    thread_safe_cache: bool = True
    read_stage: Stage = Stage.DRAFT
