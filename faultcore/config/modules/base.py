"""
Base Module Configuration

Base class for all module configurations.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class ModuleConfig:
    """
    Base configuration for all modules.

    Each module has its own semantic configuration fields and a
    code default; YAML only overrides them.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        result = {}
        for key, value in self.__dict__.items():
            if not key.startswith("_"):
                if isinstance(value, ModuleConfig):
                    result[key] = value.to_dict()
                elif isinstance(value, tuple):
                    result[key] = [dict(v) if hasattr(v, "items") else v for v in value]
                elif isinstance(value, (dict, list, str, int, float, bool, type(None))):
                    result[key] = value
                else:
                    result[key] = str(value)
        return result
