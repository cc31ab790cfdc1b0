import pytest


@pytest.fixture
def booking_body():
    return {
        "name": "Ahmed Khan",
        "phone": "+92 300 1234567",
        "sportId": "cricket",
        "courtId": "court-a",
        "date": "2024-01-10",
        "startTime": "09:00",
        "hours": 2,
    }
