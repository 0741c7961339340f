"""YAML configuration parser for ccresolve.

This module provides parsing and validation for ccresolve.yaml configuration
files and turns them into a BuildContext.

Example configuration::

    version: 1
    build: x86_64-unknown-linux-gnu
    hosts: [x86_64-unknown-linux-gnu]
    targets: [arm-linux-androideabi]
    musl_root: /opt/musl
    target:
      arm-linux-androideabi:
        ndk: /opt/ndk-arm
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional

import yaml

from ccresolve.core.context import BuildContext, TargetOverride
from ccresolve.core.exceptions import ConfigError
from ccresolve.core.platform import detect_build_triple

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "ccresolve.yaml"

TARGET_KEYS = ("cc", "cxx", "ar", "ndk", "musl_root")

# Tool names are kept as written; directories become Path objects.
TOOL_KEYS = ("cc", "cxx", "ar")


@dataclass
class ResolveConfig:
    """Complete ccresolve configuration."""

    version: int
    build: Optional[str] = None
    hosts: List[str] = field(default_factory=list)
    targets: List[str] = field(default_factory=list)
    musl_root: Optional[Path] = None
    target: Dict[str, TargetOverride] = field(default_factory=dict)


def parse_config(config_path: Path) -> ResolveConfig:
    """
    Parse ccresolve.yaml configuration file.

    Args:
        config_path: Path to ccresolve.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    logger.debug(f"Loaded configuration from {config_path}")
    return parse_data(data)


def parse_data(data: dict) -> ResolveConfig:
    """Parse and validate configuration data."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    if "version" not in data:
        raise ConfigError("Missing required field: version")

    if data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    build = data.get("build")
    if build is not None and not isinstance(build, str):
        raise ConfigError("build must be a target triple string")

    musl_root = data.get("musl_root")

    return ResolveConfig(
        version=data["version"],
        build=build,
        hosts=_parse_triples(data.get("hosts", []), "hosts"),
        targets=_parse_triples(data.get("targets", []), "targets"),
        musl_root=_parse_path(musl_root, "musl_root"),
        target=_parse_target_section(data.get("target", {})),
    )


def _parse_triples(data, field_name: str) -> List[str]:
    """Parse a list of target triples."""
    if data is None:
        return []
    if isinstance(data, str):
        data = [data]
    if not isinstance(data, list):
        raise ConfigError(f"{field_name} must be a list of target triples")

    for triple in data:
        if not isinstance(triple, str) or not triple:
            raise ConfigError(f"Invalid triple in {field_name}: {triple!r}")

    return list(data)


def _parse_tool(value, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{field_name} must be a path string")
    return value


def _parse_path(value, field_name: str) -> Optional[Path]:
    raw = _parse_tool(value, field_name)
    return None if raw is None else Path(raw)


def _parse_target_section(data) -> Dict[str, TargetOverride]:
    """Parse per-target overrides."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("target must be a mapping of triple to settings")

    overrides = {}
    for triple, settings in data.items():
        settings = settings or {}
        if not isinstance(settings, dict):
            raise ConfigError(f"target.{triple} must be a mapping")

        unknown = sorted(set(settings) - set(TARGET_KEYS))
        if unknown:
            raise ConfigError(
                f"Unknown keys in target.{triple}: {', '.join(unknown)} "
                f"(expected any of {list(TARGET_KEYS)})"
            )

        overrides[triple] = TargetOverride(
            **{
                key: (_parse_tool if key in TOOL_KEYS else _parse_path)(
                    settings.get(key), f"target.{triple}.{key}"
                )
                for key in TARGET_KEYS
            }
        )

    return overrides


def build_context(
    config: ResolveConfig,
    environ: Optional[Mapping[str, str]] = None,
    build: Optional[str] = None,
) -> BuildContext:
    """
    Turn a parsed configuration into a BuildContext.

    Args:
        config: Parsed configuration
        environ: Environment for variable lookups; None means ``os.environ``
        build: Build triple overriding the configured or detected one

    Returns:
        BuildContext ready for resolution
    """
    build = build or config.build or detect_build_triple()
    return BuildContext(
        build=build,
        targets=tuple(config.targets),
        hosts=tuple(config.hosts),
        overrides=dict(config.target),
        musl_root=config.musl_root,
        environ=environ,
    )


def load_context(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    build: Optional[str] = None,
    required: bool = False,
) -> BuildContext:
    """
    Load a configuration file and build a BuildContext from it.

    Args:
        config_path: Configuration file; defaults to ./ccresolve.yaml
        environ: Environment for variable lookups
        build: Build triple overriding the configured one
        required: If True, a missing file is an error

    Returns:
        BuildContext; an empty configuration if the optional file is missing

    Raises:
        ConfigError: If the configuration is invalid or required but missing
    """
    config_path = config_path or Path.cwd() / DEFAULT_CONFIG_NAME

    if not config_path.exists() and not required:
        logger.debug(f"Config file not found (optional): {config_path}")
        config = ResolveConfig(version=1)
    else:
        config = parse_config(config_path)

    return build_context(config, environ=environ, build=build)
