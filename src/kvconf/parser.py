"""Line parser: reads a ``key = value`` file into a RawConfig mapping.

Format:

    # comment (first non-whitespace character is '#')
    key = value

Each line is split at its first ``=``. Lines without ``=`` are skipped, as are
blank lines and comments. Whitespace around keys and values is trimmed; a
later occurrence of a key overwrites an earlier one.
"""

from __future__ import annotations

import logging
import os

from kvconf.core.config import LoaderSettings
from kvconf.core.exceptions import ConfigIOError, InvalidPathError
from kvconf.core.types import ConfigPath, RawConfig

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
SEPARATOR = "="


def parse_line(line: str) -> tuple[str, str] | None:
    """Return the (key, value) pair for one line, or None if it holds no entry."""
    line = line.strip()
    if not line or line.startswith(COMMENT_PREFIX):
        return None
    key, sep, value = line.partition(SEPARATOR)
    if not sep:
        return None
    key = key.strip()
    if not key:
        return None
    return key, value.strip()


def parse_file(path: ConfigPath, settings: LoaderSettings | None = None) -> RawConfig:
    """Parse the config file at ``path``.

    Raises:
        InvalidPathError: If ``path`` is empty or blank. The filesystem is not touched.
        ConfigIOError: If the file cannot be opened, read, or decoded.
    """
    if not os.fspath(path).strip():
        raise InvalidPathError(path)
    if settings is None:
        settings = LoaderSettings()

    config: RawConfig = {}
    try:
        with open(path, encoding=settings.encoding, newline="\n") as fh:
            for lineno, line in enumerate(fh, start=1):
                entry = parse_line(line)
                if entry is None:
                    stripped = line.strip()
                    if stripped and not stripped.startswith(COMMENT_PREFIX):
                        logger.debug("%s:%d: skipping malformed line", path, lineno)
                    continue
                key, value = entry
                if key in config:
                    logger.debug("%s:%d: key %r overrides earlier value", path, lineno, key)
                config[key] = value
    except OSError as exc:
        raise ConfigIOError(os.fspath(path), str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ConfigIOError(os.fspath(path), f"cannot decode as {settings.encoding}: {exc}") from exc

    logger.debug("Parsed %d keys from %s", len(config), path)
    return config
