"""
Parser configuration loading.

Loads parse_config.yaml (section aliases, scan limits, entry caps) with
OmegaConf and freezes it into a ParseConfig. An override file can be
selected with the RESUMATE_PARSE_CONFIG_PATH environment variable; its keys
are merged over the packaged defaults.

The loaded config is immutable (tuples and read-only mappings inside a
frozen dataclass), so the cached instance can be shared by concurrent parse
calls.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).parent / "parse_config.yaml"

SECTION_NAMES = (
    "summary",
    "skills",
    "experience",
    "education",
    "projects",
    "certifications",
    "awards",
    "languages",
)


class ParseConfigError(ValueError):
    """
    Exception raised when a parser config file is missing or malformed.

    Attributes:
        message: Error description
        config_path: Path of the offending file
    """

    def __init__(self, message: str, config_path: Optional[Path] = None):
        self.message = message
        self.config_path = config_path

        parts = [message]
        if config_path:
            parts.append(f"Config file: {config_path}")

        super().__init__("\n".join(parts))


@dataclass(frozen=True)
class ParseConfig:
    """
    Immutable parser settings.

    Attributes:
        section_aliases: Canonical section name -> heading aliases (lowercase)
        header_scan_lines: Lines scanned for personal info
        max_name_length: Longest line accepted as a name
        max_heading_length: Longest line treated as a heading
        max_entries: Canonical section name -> entry cap (None = unlimited)
    """

    section_aliases: Mapping[str, Tuple[str, ...]]
    header_scan_lines: int = 10
    max_name_length: int = 50
    max_heading_length: int = 40
    max_entries: Mapping[str, Optional[int]] = field(default_factory=dict)

    def aliases_for(self, section: str) -> Tuple[str, ...]:
        """Return heading aliases for a canonical section (empty if unknown)."""
        return self.section_aliases.get(section, ())

    @property
    def all_aliases(self) -> frozenset:
        """Every known heading alias across all sections."""
        return frozenset(alias for aliases in self.section_aliases.values() for alias in aliases)

    def cap(self, section: str) -> Optional[int]:
        """Return the entry cap for a section, or None when uncapped."""
        return self.max_entries.get(section)


def _as_positive_int(value, key: str, config_path: Path) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ParseConfigError(f"'{key}' must be a positive integer, got {value!r}", config_path)
    return value


def _build_config(raw: dict, config_path: Path) -> ParseConfig:
    """Validate a plain config dict and freeze it into a ParseConfig."""
    aliases_raw = raw.get("section_aliases") or {}
    if not isinstance(aliases_raw, dict):
        raise ParseConfigError("'section_aliases' must be a mapping", config_path)

    section_aliases = {}
    for section, aliases in aliases_raw.items():
        if section not in SECTION_NAMES:
            raise ParseConfigError(
                f"Unknown section '{section}'. Known sections: {list(SECTION_NAMES)}",
                config_path,
            )
        if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
            raise ParseConfigError(f"Aliases for '{section}' must be a list of strings", config_path)
        section_aliases[section] = tuple(alias.strip().lower() for alias in aliases if alias.strip())

    max_entries = {}
    for section, cap in (raw.get("max_entries") or {}).items():
        max_entries[section] = None if cap is None else _as_positive_int(
            cap, f"max_entries.{section}", config_path
        )

    return ParseConfig(
        section_aliases=MappingProxyType(section_aliases),
        header_scan_lines=_as_positive_int(
            raw.get("header_scan_lines", 10), "header_scan_lines", config_path
        ),
        max_name_length=_as_positive_int(
            raw.get("max_name_length", 50), "max_name_length", config_path
        ),
        max_heading_length=_as_positive_int(
            raw.get("max_heading_length", 40), "max_heading_length", config_path
        ),
        max_entries=MappingProxyType(max_entries),
    )


def load_parse_config(config_path: Path = None) -> ParseConfig:
    """
    Load parser config, merging an optional override over the packaged defaults.

    Args:
        config_path: Optional override YAML. Section alias lists in the
            override replace the default list for that section.

    Returns:
        Frozen ParseConfig

    Raises:
        ParseConfigError: If a file is missing, unreadable or malformed
    """
    try:
        config = OmegaConf.load(DEFAULT_CONFIG_PATH)
        if config_path is not None:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ParseConfigError("Parse config not found", config_path)
            config = OmegaConf.merge(config, OmegaConf.load(config_path))
        raw = OmegaConf.to_container(config, resolve=True)
    except (OmegaConfBaseException, OSError, yaml.YAMLError) as e:
        raise ParseConfigError(f"Could not read parse config: {e}", config_path) from e

    return _build_config(raw, config_path or DEFAULT_CONFIG_PATH)


@lru_cache(maxsize=1)
def get_parse_config() -> ParseConfig:
    """
    Get the process-wide parser config.

    Honors RESUMATE_PARSE_CONFIG_PATH; loaded once and cached.
    """
    override = os.getenv("RESUMATE_PARSE_CONFIG_PATH")
    return load_parse_config(Path(override) if override else None)
