"""Configuration loading and management for size-impact.

Configuration sources are merged in priority order:
    1. Defaults (defined in SizeImpactConfig)
    2. Global config (~/.size-impact.toml)
    3. Project config (./size-impact.toml)
    4. Explicit config file
    5. Environment variables (SIZE_IMPACT_* prefix)
    6. CLI overrides (passed as kwargs)

Groups are declared as TOML tables::

    transformations = ["raw", "gzip"]

    [groups.dist]
    manifest = "manifest.json"

    [groups.dist.tracking]
    "**/*" = true
    "**/*.map" = false

Example:
    >>> config = load_config(units="binary")
    >>> config.units
    'binary'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
Units = Literal["decimal", "binary"]

# Transformations the snapshot producer knows how to compute
KNOWN_TRANSFORMATIONS = ("raw", "gzip")


def _default_tracking_config() -> Dict[str, bool]:
    return {"**/*": True, "**/*.map": False}


@dataclass(frozen=True)
class GroupConfig:
    """How one output directory is captured.

    Attributes:
        tracking_config: Ordered glob -> bool policy (last match wins).
        manifest: Path of a JSON manifest, relative to the group directory,
                  mapping rename-stable identities to hashed output files.
    """

    tracking_config: Dict[str, bool] = field(default_factory=_default_tracking_config)
    manifest: Optional[str] = None

    def __post_init__(self) -> None:
        for pattern, value in self.tracking_config.items():
            if not isinstance(value, bool):
                raise ValueError(f"tracking value for {pattern!r} must be true or false")


def _default_groups() -> Dict[str, GroupConfig]:
    return {"dist": GroupConfig()}


@dataclass(frozen=True)
class SizeImpactConfig:
    """Configuration for snapshot capture and report rendering.

    Attributes:
        groups: Group name (a directory relative to the project) -> GroupConfig
        transformations: Size columns to capture and render, in order
        snapshot_file: Default snapshot file written by ``size-impact snapshot``
        units: Byte formatting, "decimal" (kB) or "binary" (KiB)
        verbosity: Logging verbosity level
    """

    groups: Dict[str, GroupConfig] = field(default_factory=_default_groups)
    transformations: List[str] = field(default_factory=lambda: ["raw", "gzip"])
    snapshot_file: str = "size-snapshot.json"
    units: Units = "decimal"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.transformations:
            raise ValueError("transformations must not be empty")
        for name in self.transformations:
            if name not in KNOWN_TRANSFORMATIONS:
                raise ValueError(
                    f"unknown transformation {name!r}, choose from: "
                    f"{', '.join(KNOWN_TRANSFORMATIONS)}"
                )
        if len(set(self.transformations)) != len(self.transformations):
            raise ValueError("transformations must not repeat")

        if self.units not in ("decimal", "binary"):
            raise ValueError("units must be 'decimal' or 'binary'")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be 'quiet', 'normal' or 'verbose'")
        if not self.snapshot_file:
            raise ValueError("snapshot_file must not be empty")

    def tracking_config_by_group(self) -> Dict[str, Dict[str, bool]]:
        """Return ``group -> tracking policy`` in declaration order."""
        return {name: dict(group.tracking_config) for name, group in self.groups.items()}


def load_config(config_file: Optional[Path] = None, **overrides) -> SizeImpactConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated SizeImpactConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".size-impact.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "size-impact.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    groups = merged.pop("groups", None)
    if groups is not None:
        merged["groups"] = _parse_groups(groups)

    try:
        return SizeImpactConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _parse_groups(raw: Any) -> Dict[str, GroupConfig]:
    """Turn ``[groups.<name>]`` tables into GroupConfig instances."""
    if not isinstance(raw, Mapping):
        raise InvalidConfigError("groups", raw, "expected a table of groups")

    groups: Dict[str, GroupConfig] = {}
    for name, table in raw.items():
        if isinstance(table, GroupConfig):
            groups[name] = table
            continue
        if not isinstance(table, Mapping):
            raise InvalidConfigError(f"groups.{name}", table, "expected a table")

        tracking = table.get("tracking", table.get("trackingConfig"))
        manifest = table.get("manifest")
        unknown = set(table) - {"tracking", "trackingConfig", "manifest"}
        if unknown:
            raise InvalidConfigError(
                f"groups.{name}", ", ".join(sorted(unknown)), "unknown group settings"
            )
        if manifest is not None and not isinstance(manifest, str):
            raise InvalidConfigError(f"groups.{name}.manifest", manifest, "expected a path")

        try:
            if tracking is None:
                groups[name] = GroupConfig(manifest=manifest)
            elif isinstance(tracking, Mapping):
                groups[name] = GroupConfig(tracking_config=dict(tracking), manifest=manifest)
            else:
                raise InvalidConfigError(
                    f"groups.{name}.tracking", tracking, "expected a table of glob = bool"
                )
        except ValueError as e:
            raise InvalidConfigError(f"groups.{name}.tracking", tracking, str(e))

    return groups


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SIZE_IMPACT_* environment variables.

    Supported environment variables:
        SIZE_IMPACT_SNAPSHOT_FILE: str
        SIZE_IMPACT_UNITS: decimal/binary
        SIZE_IMPACT_VERBOSITY: quiet/normal/verbose
        SIZE_IMPACT_TRANSFORMATIONS: comma-separated list (e.g. "raw,gzip")

    Returns:
        Dict of field_name -> parsed_value for any SIZE_IMPACT_* vars found.
    """
    type_hints = get_type_hints(SizeImpactConfig)

    result: dict[str, Any] = {}

    for field_name in SizeImpactConfig.__dataclass_fields__:
        env_key = f"SIZE_IMPACT_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        parsed = _parse_env_value(env_value, type_hint)
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot come from the environment (groups).
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is list:
        return [item.strip() for item in value.split(",") if item.strip()]

    if origin is dict:
        return None

    # String (including Literal types like Units)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
