import pytest

from thermowatch import SequenceSource, Thresholds


@pytest.fixture
def thresholds() -> Thresholds:
    """Provides warning at 20 and emergency at 75."""
    return Thresholds(warning_level=20, emergency_level=75)


@pytest.fixture
def seed_values() -> list[float]:
    """Provides the recorded run used for the demo device."""
    return [16, 17, 16.5, 18, 19, 22, 24, 26.75, 28.7, 27.6, 26, 24, 22,
            45, 68, 86.45]


@pytest.fixture
def device_thresholds() -> Thresholds:
    """Provides the demo device levels: warning 27, emergency 75."""
    return Thresholds(warning_level=27, emergency_level=75)


@pytest.fixture
def empty_source() -> SequenceSource:
    """Provides a source with no samples."""
    return SequenceSource(name="empty")


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "slow: marks tests as slow running")
