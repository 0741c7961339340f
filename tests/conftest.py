"""
Pytest configuration and shared fixtures for ccresolve tests.
"""

import pytest

from ccresolve.core.context import BuildContext
from ccresolve.core.platform import clear_platform_cache
from tests.mocks import FakeRunner

LINUX_BUILD = "x86_64-unknown-linux-gnu"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast unit tests")


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def build_triple() -> str:
    """Triple of the simulated build machine."""
    return LINUX_BUILD


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Runner where nothing can be launched."""
    return FakeRunner()


@pytest.fixture
def make_context(build_triple):
    """Factory for BuildContext instances with an empty environment."""

    def _make(**kwargs) -> BuildContext:
        kwargs.setdefault("build", build_triple)
        kwargs.setdefault("environ", {})
        for key in ("targets", "hosts"):
            if key in kwargs:
                kwargs[key] = tuple(kwargs[key])
        return BuildContext(**kwargs)

    return _make


@pytest.fixture(autouse=True)
def _reset_platform_cache():
    """Detection is cached per process; start every test fresh."""
    clear_platform_cache()
    yield
    clear_platform_cache()
