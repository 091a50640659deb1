# faultcore/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import List, Literal, Mapping, Set
from dataclasses import dataclass

from .modules import RegistryConfig, PolicyConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging and callers.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "registry.kinds[0].category"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"{self.level.upper()} [{self.path}] {self.message}{hint_str}"


def _validate_kinds(registry: RegistryConfig) -> List[ConfigIssue]:
    # Imported lazily: faults.builtin imports config.modules
    from ..core.errors import ConfigError
    from ..core.faults.builtin import BUILTIN_KINDS, resolve_exception
    from ..core.faults.category import FaultCategory

    issues: List[ConfigIssue] = []

    if isinstance(registry.kinds, (str, Mapping)) or not hasattr(registry.kinds, "__iter__"):
        issues.append(ConfigIssue(
            level="error",
            path="registry.kinds",
            message="kinds must be a list of kind definitions",
            hint="Use a YAML list: kinds: [{name: ..., category: ...}]",
        ))
        return issues

    seen: Set[str] = {k.name for k in BUILTIN_KINDS} if registry.builtin_kinds else set()

    for i, entry in enumerate(registry.kinds):
        path = f"registry.kinds[{i}]"

        if not isinstance(entry, Mapping):
            issues.append(ConfigIssue(
                level="error",
                path=path,
                message=f"kind definition must be a mapping, got {type(entry).__name__}",
            ))
            continue

        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            issues.append(ConfigIssue(
                level="error",
                path=f"{path}.name",
                message="name is required and must be a non-empty string",
            ))
        elif name in seen:
            issues.append(ConfigIssue(
                level="error",
                path=f"{path}.name",
                message=f"duplicate fault kind name '{name}'",
                hint="Kind names are unique; built-in names are reserved while builtin_kinds=true",
            ))
        else:
            seen.add(name)

        try:
            FaultCategory.parse(entry.get("category", ""))
        except ValueError as e:
            issues.append(ConfigIssue(
                level="error",
                path=f"{path}.category",
                message=str(e),
                hint="Use fatal, checked or unchecked",
            ))

        for j, exc_path in enumerate(entry.get("exceptions", ()) or ()):
            try:
                resolve_exception(str(exc_path))
            except ConfigError as e:
                issues.append(ConfigIssue(
                    level="error",
                    path=f"{path}.exceptions[{j}]",
                    message=e.message,
                    hint="Use a dotted import path such as 'builtins.KeyError'",
                ))

    if not registry.builtin_kinds and not issues and not registry.kinds:
        issues.append(ConfigIssue(
            level="warn",
            path="registry.builtin_kinds",
            message="builtin_kinds=false and no kinds configured: the registry will be empty",
            hint="Declare kinds under registry.kinds or set builtin_kinds=true",
        ))

    return issues


def _validate_policy(policy: PolicyConfig) -> List[ConfigIssue]:
    issues: List[ConfigIssue] = []

    if policy.diagnostic_stream not in ("stderr", "none"):
        issues.append(ConfigIssue(
            level="error",
            path="policy.diagnostic_stream",
            message=f"diagnostic_stream='{policy.diagnostic_stream}' is not supported",
            hint="Use stderr or none",
        ))

    if not isinstance(policy.exit_on_abort, bool):
        issues.append(ConfigIssue(
            level="error",
            path="policy.exit_on_abort",
            message=f"exit_on_abort must be a boolean, got {policy.exit_on_abort!r}",
            hint="Write true/false without quotes",
        ))

    if not isinstance(policy.exit_code, int) or isinstance(policy.exit_code, bool):
        issues.append(ConfigIssue(
            level="error",
            path="policy.exit_code",
            message=f"exit_code must be an integer, got {policy.exit_code!r}",
        ))
    elif policy.exit_on_abort is True and policy.exit_code == 0:
        issues.append(ConfigIssue(
            level="warn",
            path="policy.exit_code",
            message="exit_code=0 reports success for an aborted process",
            hint="Use a non-zero exit code",
        ))
    elif policy.exit_on_abort is False and policy.exit_code != 1:
        issues.append(ConfigIssue(
            level="warn",
            path="policy.exit_code",
            message="exit_code has no effect when exit_on_abort=false",
        ))

    return issues


def validate_config(registry: RegistryConfig, policy: PolicyConfig) -> List[ConfigIssue]:
    """
    Validate configuration for illegal/misleading combinations.

    Returns:
        List of issues (warn/error level)
    """
    return _validate_kinds(registry) + _validate_policy(policy)


__all__ = [
    "ConfigIssue",
    "validate_config",
]
