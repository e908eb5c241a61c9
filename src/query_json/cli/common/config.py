#!/usr/bin/env python3
"""
Centralized configuration for the query_json CLI.

query_json reads no config files and no environment variables. The only
configuration is:

- build metadata (version, commit, build date), stamped into
  query_json/_build_info.py by build.sh and resolved once at import
- the output defaults shared by the CLI and the renderer
"""

import logging
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version as get_version
from typing import Optional

from query_json import _build_info

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "query-json"
PROGRAM_NAME = "query_json"

DEFAULT_VERSION = "dev"
DEFAULT_COMMIT = "unknown"
DEFAULT_DATE = "unknown"


@dataclass(frozen=True)
class BuildInfo:
    """Build metadata shown by --version."""

    version: str = DEFAULT_VERSION
    commit: str = DEFAULT_COMMIT
    date: str = DEFAULT_DATE

    def banner(self) -> str:
        """Return the three-line version banner (no trailing newline)."""
        return (
            f"{PROGRAM_NAME} version {self.version}\n"
            f"  commit: {self.commit}\n"
            f"  built: {self.date}"
        )


def _installed_version() -> Optional[str]:
    try:
        return get_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        logger.debug(f"Distribution {DISTRIBUTION_NAME} not installed")
        return None


def resolve_build_info(stamp=_build_info) -> BuildInfo:
    """
    Resolve build metadata.

    Priority for the version: 1. stamped value, 2. installed distribution
    metadata, 3. "dev". Commit and date come only from the stamp.

    Args:
        stamp: Module (or any object) with VERSION, COMMIT and BUILD_DATE

    Returns:
        BuildInfo with defaults filled in for anything unset
    """
    version = getattr(stamp, "VERSION", None) or _installed_version() or DEFAULT_VERSION
    commit = getattr(stamp, "COMMIT", None) or DEFAULT_COMMIT
    date = getattr(stamp, "BUILD_DATE", None) or DEFAULT_DATE
    return BuildInfo(version=version, commit=commit, date=date)


@dataclass(frozen=True)
class Config:
    """
    Output defaults for the CLI.

    pretty and raw are the flag defaults; indent, sort_keys and
    raw_float_format control the encoder and the raw number form.
    """

    pretty: bool = True
    raw: bool = False
    indent: int = 2
    sort_keys: bool = True
    raw_float_format: str = ".10g"
    build: BuildInfo = field(default_factory=resolve_build_info)


# Create a global configuration instance
config = Config()
