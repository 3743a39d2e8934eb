"""Configuration management for runin.

Where: src/runin/config/config.py
What: Discover and parse the group table from JSON or TOML config files.
Why: The resolver only needs a name -> patterns mapping; everything about
    locating and validating the file stays here.
"""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from runin.config.paths import config_search_paths
from runin.platform.logging import logger


class ConfigFormatError(ValueError):
    """Raised when a config file parses but does not have the expected shape."""


def strip_line_comments(text: str) -> str:
    """Blank out full-line ``//`` comments so annotated JSON still parses.

    Only whole lines are stripped, so URLs inside string values survive.
    Line numbers are kept intact for parser error messages.
    """
    lines: list[str] = []
    for line in text.splitlines():
        if line.strip().startswith("//"):
            lines.append("")
            continue
        lines.append(line)
    return "\n".join(lines) + "\n"


def _coerce_groups(raw: Any) -> dict[str, list[str]]:
    """Validate the ``groups`` value and copy it into plain containers."""

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigFormatError("'groups' must be a mapping of name to pattern list")

    groups: dict[str, list[str]] = {}
    for name, entries in raw.items():
        if not isinstance(entries, list) or not all(isinstance(e, str) for e in entries):
            raise ConfigFormatError(f"group '{name}' must be a list of strings")
        groups[str(name)] = list(entries)
    return groups


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    # Named pattern groups, referenced on the command line as ``group:<name>``
    groups: dict[str, list[str]] = field(default_factory=dict)

    # File the configuration was read from, if any
    source: Path | None = None

    @classmethod
    def from_mapping(cls, data: Any, source: Path | None = None) -> "Config":
        """Build a config from decoded file contents.

        Raises:
            ConfigFormatError: If the document or its groups have the wrong shape.
        """
        if not isinstance(data, dict):
            raise ConfigFormatError("top-level value must be an object")
        return cls(groups=_coerce_groups(data.get("groups")), source=source)

    @classmethod
    def parse_file(cls, path: Path) -> "Config":
        """Read and parse one config file.

        ``.toml`` files go through ``tomllib``; anything else is treated as
        JSON with optional full-line comments.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the contents cannot be decoded or validated.
        """
        if path.suffix.lower() == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            text = path.read_text(encoding="utf-8")
            data = json.loads(strip_line_comments(text))
        return cls.from_mapping(data, source=path)

    @classmethod
    def load(cls, explicit_path: Path | str | None = None) -> "Config":
        """Load the first readable, well-formed config file.

        Args:
            explicit_path: Config file passed on the command line.

        Returns:
            Config: Parsed configuration, or an empty one when no candidate
            could be read or parsed.
        """
        for candidate in config_search_paths(explicit_path):
            try:
                config = cls.parse_file(candidate)
            except FileNotFoundError:
                continue
            except (OSError, ValueError) as e:
                # tomllib.TOMLDecodeError and json.JSONDecodeError are ValueErrors
                logger.debug("Skipping config %s: %s", candidate, e)
                continue

            logger.debug(
                "Configuration loaded from %s (%d groups)", candidate, len(config.groups)
            )
            return config

        return cls()


__all__ = ["Config", "ConfigFormatError", "strip_line_comments"]
