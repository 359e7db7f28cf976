"""Centralized configuration defaults.

Defines immutable defaults for the text encoding, the decode error policy,
the Ascii85 delimiters, and the codec used when none is named, so that every
entry point (library and CLI) behaves identically.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Byte/text bridge
    TEXT_ENCODING: str = "utf-8"
    DECODE_ERRORS: str = "strict"

    # Dispatch
    DEFAULT_CODEC: str = "base62"

    # Ascii85 framing
    ASCII85_PREFIX: str = "<~"
    ASCII85_SUFFIX: str = "~>"

    # Logging
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# Convenience re-exports and constants
DEFAULT_CODEC: str = Config.DEFAULT_CODEC
SUPPORTED_ERROR_POLICIES: list[str] = ["strict", "replace"]
SUPPORTED_MODES: list[str] = ["encode", "decode"]


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
