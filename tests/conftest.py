"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from pathlib import Path

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from backend.model import Day, Event, Planner, User  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for all widget tests."""
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def alice():
    return User("alice")


@pytest.fixture
def bob():
    return User("bob")


@pytest.fixture
def standup(alice, bob):
    """Single-day event hosted by alice."""
    return Event("Standup", Day.MONDAY, 930, Day.MONDAY, 1100, alice, (bob,))


@pytest.fixture
def offsite(alice, bob):
    """Tuesday 14:00 to Thursday 10:00, hosted by bob."""
    return Event("Offsite", Day.TUESDAY, 1400, Day.THURSDAY, 1000, bob, (alice,),
                 location="Lakeside")


@pytest.fixture
def planner(alice, bob, standup, offsite):
    carol = User("carol")
    return Planner(
        users=[alice, bob, carol],
        events=[
            standup,
            offsite,
            Event("Review", Day.FRIDAY, 1300, Day.FRIDAY, 1500, carol, ()),
        ],
    )
