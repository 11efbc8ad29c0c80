import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def silence_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()


@pytest.fixture
def fixed_clock(monkeypatch):
    """Replace the wall clock with a scripted sequence of nanosecond readings."""
    from fixedtime import clock

    def install(*readings: int) -> None:
        values = iter(readings)
        monkeypatch.setattr(clock, "current_time_ns", lambda: next(values))

    return install
