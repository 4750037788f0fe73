"""Configuration management.

Settings come from defaults and ``CHOICEMENU_*`` environment variables;
command line options are applied on top by the CLI.
"""

import os
from pathlib import Path
from typing import Optional

from choicemenu.utils.constants import (
    DEFAULT_POLL_TIMEOUT_MS,
    MAX_POLL_TIMEOUT_MS,
    MIN_POLL_TIMEOUT_MS,
)

ENV_PREFIX = "CHOICEMENU_"


def get_choicemenu_dir() -> Path:
    """Get the choicemenu data directory (XDG-compliant)."""
    if env_dir := os.environ.get("CHOICEMENU_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "choicemenu"


def clamp_poll_timeout(value: int) -> int:
    """Clamp a poll timeout in milliseconds to the supported range."""
    return max(MIN_POLL_TIMEOUT_MS, min(MAX_POLL_TIMEOUT_MS, value))


class Config:
    """Application configuration."""

    # Attributes that CHOICEMENU_<NAME> env vars may override
    ENV_SETTINGS = ("debug", "poll_timeout_ms")

    def __init__(self, data_dir: Optional[Path] = None):
        """Load config from defaults and environment."""
        self.data_dir = data_dir or get_choicemenu_dir()
        self._load()

    def _load(self):
        """Set defaults, then apply env overrides."""
        self.debug = False
        self.poll_timeout_ms = DEFAULT_POLL_TIMEOUT_MS

        self._apply_env_overrides()
        self.poll_timeout_ms = clamp_poll_timeout(self.poll_timeout_ms)

    def _apply_env_overrides(self):
        """Apply shell CHOICEMENU_* vars to matching attributes."""
        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            attr_name = key[len(ENV_PREFIX) :].lower()
            if attr_name not in self.ENV_SETTINGS:
                continue
            # Convert value based on current attribute type
            current = getattr(self, attr_name)
            if isinstance(current, bool):
                setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
            elif isinstance(current, int):
                try:
                    setattr(self, attr_name, int(value))
                except ValueError:
                    pass

    @property
    def poll_timeout(self) -> float:
        """Poll timeout in seconds."""
        return self.poll_timeout_ms / 1000

    @property
    def log_path(self) -> Path:
        """Path to the debug log file."""
        return self.data_dir / "debug.log"
