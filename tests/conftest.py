import pytest

from funpy.config import ContainerConfig
from funpy.container import Container


@pytest.fixture
def container():
    return Container()


@pytest.fixture
def overridable():
    return Container(ContainerConfig(override=True))


@pytest.fixture(autouse=True)
def _fresh_runtime(monkeypatch):
    # Every test starts without a process-wide default container
    import funpy.runtime
    monkeypatch.setattr(funpy.runtime, "_runtime", None)
    monkeypatch.delenv("FUNPY_ALLOW_OVERRIDE", raising=False)
