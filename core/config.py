"""
Configuration for the theory service.

ServiceConfig is an immutable settings object read once from the
environment (and a local ``.env`` file, via python-dotenv). The pure engine
in core/music_theory never reads it; only the API and scripts do.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from core.music_theory.scales import DEFAULT_SCALE

VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# React dev servers (both host spellings are distinct origins for browsers)
DEFAULT_CORS_ORIGINS: tuple[str, ...] = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class ServiceConfig:
    """
    Settings for the theory API.

    Attributes:
        cors_origins: Origins allowed to call the API from a browser.
        log_level: Root logging level name, e.g. "INFO".
        default_root: Root note used when a request omits one.
        default_scale: Scale name used when a request omits one.

    Example:
        >>> config = ServiceConfig(log_level="DEBUG")
        >>> config.log_level_value
        10
    """

    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    log_level: str = "INFO"
    default_root: str = "C"
    default_scale: str = DEFAULT_SCALE

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Unknown log_level {self.log_level!r}, "
                f"valid options: {sorted(VALID_LOG_LEVELS)}"
            )
        if not self.default_root:
            raise ValueError("default_root must not be empty")
        if not self.default_scale:
            raise ValueError("default_scale must not be empty")

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``logging.basicConfig``."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "ServiceConfig":
        """
        Build a config from ``THEORY_*`` environment variables.

        Variables:
            THEORY_CORS_ORIGINS: Comma-separated origins.
            THEORY_LOG_LEVEL: Logging level name (case-insensitive).
            THEORY_DEFAULT_ROOT: Default root note.
            THEORY_DEFAULT_SCALE: Default scale name.

        Unset variables keep the dataclass defaults.
        """
        if load_env_file:
            load_dotenv()

        kwargs: dict[str, object] = {}
        origins = os.environ.get("THEORY_CORS_ORIGINS")
        if origins is not None:
            kwargs["cors_origins"] = tuple(o.strip() for o in origins.split(",") if o.strip())
        level = os.environ.get("THEORY_LOG_LEVEL")
        if level:
            kwargs["log_level"] = level.strip().upper()
        root = os.environ.get("THEORY_DEFAULT_ROOT")
        if root:
            kwargs["default_root"] = root.strip()
        scale = os.environ.get("THEORY_DEFAULT_SCALE")
        if scale:
            kwargs["default_scale"] = scale.strip()
        return cls(**kwargs)  # type: ignore[arg-type]


DEFAULT_CONFIG = ServiceConfig()
"""Defaults: local React dev origins, INFO logging, C ionian (major)."""
