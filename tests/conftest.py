"""
Pytest configuration and fixtures for propcheck tests

This module provides shared fixtures for unit tests.
"""
from dataclasses import dataclass
from datetime import date

import pytest


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 5 seconds to run"
    )


# =======================
# SAMPLE INSTANCES
# =======================

@dataclass
class Range:
    min: int | None
    max: int | None


@dataclass
class Room:
    capacity: int


@dataclass
class Booking:
    start_date: date | None
    end_date: date | None
    guests: int | None
    room: Room | None = None


@pytest.fixture
def sample_range() -> Range:
    """Range instance with min below max"""
    return Range(min=1, max=10)


@pytest.fixture
def sample_booking() -> Booking:
    """A valid booking"""
    return Booking(
        start_date=date(2025, 1, 1),
        end_date=date(2025, 1, 5),
        guests=2,
        room=Room(capacity=4),
    )


@pytest.fixture
def sample_booking_dict() -> dict:
    """A valid booking as a plain mapping"""
    return {
        "start_date": date(2025, 1, 1),
        "end_date": date(2025, 1, 5),
        "guests": 2,
        "room": {"capacity": 4},
    }
