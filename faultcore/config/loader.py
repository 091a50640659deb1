# faultcore/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
- Deep immutability (nested containers are frozen)
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional, Dict, Any
from types import MappingProxyType
import logging

import yaml

from .modules import RegistryConfig, PolicyConfig
from .validator import validate_config, ConfigIssue

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = Path.home() / ".faultcore" / "config.yml"


def _freeze(value: Any) -> Any:
    """Recursively freeze dicts/lists (dict -> MappingProxyType, list -> tuple)"""
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


class FaultCoreConfig:
    """
    Unified FaultCore configuration.

    All fields have code defaults - YAML is optional.
    """

    def __init__(
        self,
        registry: Optional[RegistryConfig] = None,
        policy: Optional[PolicyConfig] = None,
    ):
        """Initialize with code defaults"""
        self.registry = registry or RegistryConfig.default()
        self.policy = policy or PolicyConfig.default()

    @classmethod
    def default(cls) -> "FaultCoreConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FaultCoreConfig":
        """
        Merge a parsed YAML document into code defaults.

        Unknown keys are ignored.
        """
        config = cls.default()
        if not data:
            return config

        if "registry" in data and data["registry"]:
            config.registry = _merge_config(config.registry, data["registry"])

        if "policy" in data and data["policy"]:
            config.policy = _merge_config(config.policy, data["policy"])

        return config

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "FaultCoreConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries
                ~/.faultcore/config.yml

        Returns:
            FaultCoreConfig instance (always has code defaults as fallback)
        """
        return cls.from_dict(_load_yaml(config_path))

    def validate(self) -> list[ConfigIssue]:
        """
        Validate configuration for illegal/misleading combinations.

        Returns:
            List of issues (warn/error level)
        """
        return validate_config(self.registry, self.policy)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "registry": self.registry.to_dict(),
            "policy": self.policy.to_dict(),
        }

    def __repr__(self) -> str:
        return f"FaultCoreConfig(registry={self.registry!r}, policy={self.policy!r})"


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config {path}: {e}")
        return None

    if data is not None and not isinstance(data, dict):
        logger.warning(f"Ignoring config {path}: top level must be a mapping")
        return None
    return data


def _merge_config(default_instance, yaml_data: Dict[str, Any]):
    """Merge YAML data into a default config instance (unknown keys dropped)"""
    fields = type(default_instance).__dataclass_fields__
    known = {k: _freeze(v) for k, v in yaml_data.items() if k in fields}
    dropped = sorted(set(yaml_data) - set(known))
    if dropped:
        logger.debug(f"Ignoring unknown {type(default_instance).__name__} keys: {dropped}")
    return replace(default_instance, **known)


def _reset_invalid_policy(policy: PolicyConfig, issues: list[ConfigIssue]) -> PolicyConfig:
    """Replace policy fields that failed validation with their code defaults"""
    defaults = PolicyConfig.default()
    bad = {
        issue.path.split(".", 1)[1]
        for issue in issues
        if issue.level == "error" and issue.path.startswith("policy.")
    }
    if not bad:
        return policy
    return replace(policy, **{name: getattr(defaults, name) for name in bad})


def load_config(config_path: Optional[Path] = None) -> FaultCoreConfig:
    """
    Load FaultCore configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        FaultCoreConfig instance (always has code defaults)

    Note:
        - If YAML is not found or invalid, returns code defaults
        - System works without YAML (code is truth)
        - Validation issues are logged at WARNING; policy fields with
          error-level issues fall back to their code defaults
    """
    config = FaultCoreConfig.from_yaml(config_path)
    issues = config.validate()
    for issue in issues:
        logger.warning(f"Config issue: {issue}")
    config.policy = _reset_invalid_policy(config.policy, issues)
    return config


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "FaultCoreConfig",
    "load_config",
]
