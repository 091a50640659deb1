# tests/conftest.py
import pytest

from faultcore.config import loader
from faultcore.core.faults import registry as registry_module
from faultcore.core.faults import FaultRegistry, build_registry


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep ~/.faultcore/config.yml and the process-wide registry out of tests"""
    monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", tmp_path / "missing.yml")
    registry_module.reset_default_registry()
    yield
    registry_module.reset_default_registry()


@pytest.fixture
def registry() -> FaultRegistry:
    """Sealed registry with the three built-in kinds"""
    return build_registry()
