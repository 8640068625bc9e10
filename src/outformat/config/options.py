# topmark:header:start
#
#   project      : OutFormat
#   file         : options.py
#   file_relpath : src/outformat/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-local configuration options.

Config options are plain string key/value pairs set from the command line
(``--config KEY VALUE``, ``--debug VALUE``) before the CLI proper runs. Lookups
fall back to the environment so that every option can also be provided as an
environment variable of the same name.

Notes:
    * The store is process-global and guarded by an `RLock`.
    * Keys are case-sensitive, like environment variables.
    * Driver resolution never reads this store; only the CLI layer does.
"""

from __future__ import annotations

import os
from threading import RLock
from typing import Final

from outformat.config.logging import OutformatLogger, get_logger

logger: OutformatLogger = get_logger(__name__)

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "on", "yes", "true"})


class ConfigOptions:
    """Thread-safe store of config options set during this process."""

    _lock = RLock()
    _options: dict[str, str] = {}

    @classmethod
    def set(cls, key: str, value: str | None) -> None:
        """Set (or clear, when ``value`` is None) a config option.

        Args:
            key (str): Option name, e.g. ``OUTFORMAT_DEBUG``.
            value (str | None): Option value; ``None`` removes the option.

        Raises:
            ValueError: If ``key`` is empty.
        """
        if not key:
            raise ValueError("Config option key is required.")
        with cls._lock:
            if value is None:
                cls._options.pop(key, None)
                logger.trace("Config option %s cleared", key)
            else:
                cls._options[key] = value
                logger.trace("Config option %s=%s", key, value)

    @classmethod
    def get(cls, key: str, default: str | None = None) -> str | None:
        """Return the option value, the environment value, or ``default``."""
        with cls._lock:
            if key in cls._options:
                return cls._options[key]
        return os.environ.get(key, default)

    @classmethod
    def clear(cls) -> None:
        """Drop all explicitly set options (environment values are untouched)."""
        with cls._lock:
            cls._options.clear()


def set_config_option(key: str, value: str | None) -> None:
    """Set a config option. See `ConfigOptions.set`."""
    ConfigOptions.set(key, value)


def get_config_option(key: str, default: str | None = None) -> str | None:
    """Get a config option. See `ConfigOptions.get`."""
    return ConfigOptions.get(key, default)


def is_truthy(value: str | None) -> bool:
    """Return True for ``ON``, ``YES``, ``TRUE`` or ``1`` (case-insensitive)."""
    return value is not None and value.strip().lower() in _TRUTHY
