"""Shared pytest fixtures for moverchart tests."""

import pytest
from loguru import logger

from moverchart.example import EXAMPLE_REQUEST
from moverchart.models import ChartRequest, Record


@pytest.fixture(autouse=True)
def disable_loguru():
    """Disable loguru output during tests for cleaner output."""
    logger.disable("moverchart")
    yield
    logger.enable("moverchart")


def make_record(index: int = 0, **overrides) -> Record:
    fields = {
        "ticker": f"T{index}",
        "name": f"Company {index}",
        "logo_ref": None,
        "driver": "Short driver",
        "change_pct": "+1.00%",
    }
    fields.update(overrides)
    return Record(**fields)


def make_request(count: int, **record_overrides) -> ChartRequest:
    return ChartRequest(
        title_main="Sep 15",
        title_sub="Big Movers & Drivers",
        records=tuple(make_record(i, **record_overrides) for i in range(count)),
    )


@pytest.fixture
def example_raw() -> dict:
    """A deep copy of the example input document."""
    return {
        **EXAMPLE_REQUEST,
        "data": [dict(item) for item in EXAMPLE_REQUEST["data"]],
    }


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def request_factory():
    return make_request
