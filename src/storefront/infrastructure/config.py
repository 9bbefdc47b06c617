"""Runtime settings, read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

# Repo root when installed in editable mode.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 5000

    @staticmethod
    def from_env() -> Settings:
        env = os.environ
        return Settings(
            data_dir=Path(env.get("STOREFRONT_DATA_DIR") or _DEFAULT_DATA_DIR),
            log_level=env.get("STOREFRONT_LOG_LEVEL", "INFO").upper(),
            host=env.get("STOREFRONT_HOST", "127.0.0.1"),
            port=int(env.get("STOREFRONT_PORT", "5000")),
        )


def configure_logging(level: str | int = "INFO") -> None:
    """Send ``storefront.*`` records to stderr at the given level."""
    root = logging.getLogger("storefront")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
