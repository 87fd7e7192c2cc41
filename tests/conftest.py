import pytest

from masonic_calendar import create_app
from masonic_calendar.calendar_generator import generate
from masonic_calendar.config import CalendarConfig


@pytest.fixture
def app():
    """Create and configure a Flask app for testing."""
    app = create_app(CalendarConfig())
    return app


@pytest.fixture(scope="session")
def events_2026():
    """Generated events for 2026, shared across tests."""
    return generate(2026)


@pytest.fixture
def by_date(events_2026):
    """2026 events keyed by date."""
    return {e.date: e for e in events_2026}
