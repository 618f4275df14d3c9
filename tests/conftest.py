"""
Global test configuration and fixtures
"""

import time
from pathlib import Path

import pytest

from codegraph_mockgen.infra.config.settings import MockgenSettings, get_settings
from codegraph_mockgen.mocker import Mocker
from codegraph_mockgen.parsing.parser_registry import get_registry

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SLOW_TEST_THRESHOLD = 5.0
WARNING_TEST_THRESHOLD = 2.0


@pytest.fixture(autouse=True)
def track_test_duration(request):
    """Warn about slow tests"""
    start_time = time.time()

    yield

    duration = time.time() - start_time
    if duration > SLOW_TEST_THRESHOLD:
        print(f"\n⚠️  SLOW TEST ({duration:.2f}s): {request.node.nodeid}")
    elif duration > WARNING_TEST_THRESHOLD:
        print(f"\n⏱️  Slow ({duration:.2f}s): {request.node.nodeid}")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Environment overrides made by a test must not leak into cached settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry():
    return get_registry()


@pytest.fixture
def mocker(registry) -> Mocker:
    return Mocker(registry=registry)


@pytest.fixture
def settings(tmp_path) -> MockgenSettings:
    """Settings rooted in a temp dir, external formatter off."""
    return MockgenSettings(
        search_root=str(tmp_path),
        gofmt_enabled=False,
        search_parent_for_mock_dir=False,
        max_workers=4,
    )


@pytest.fixture
def load_fixture():
    """Loader for (input, expected output) fixture pairs"""

    def _load(name: str) -> tuple[str, str]:
        source = (FIXTURES_DIR / f"{name}.input").read_text(encoding="utf-8")
        expected = (FIXTURES_DIR / f"{name}.output").read_text(encoding="utf-8")
        return source, expected

    return _load


# Pytest hooks
def pytest_configure(config):
    """Register markers"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (medium speed)")


def pytest_collection_modifyitems(config, items):
    """Path-based markers"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)
