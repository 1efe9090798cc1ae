"""
FastAPI dependency providers.

The service config is read from the environment once and reused across
requests. Tests override ``get_config`` through ``app.dependency_overrides``.
"""

from core.config import ServiceConfig

_config: ServiceConfig | None = None


def get_config() -> ServiceConfig:
    """
    Return a cached ``ServiceConfig`` singleton.

    Built from ``THEORY_*`` environment variables on first call.
    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = ServiceConfig.from_env()
    return _config
