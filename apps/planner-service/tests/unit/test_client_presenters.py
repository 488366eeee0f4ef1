from datetime import date, datetime, UTC

from planner.client.api import Activity, DayActivities, TripDetails
from planner.client.presenters import activity_sections, trip_summary


def _trip(destination):
    return TripDetails(
        id="t-1",
        destination=destination,
        starts_at=datetime(2024, 8, 5, 10),
        ends_at=datetime(2024, 8, 12, 10),
        is_confirmed=True,
    )


def test_trip_summary_truncates_long_destination():
    assert trip_summary(_trip("Florianópolis, SC")) == "Florianópolis,... from 05 to 12 of Aug."


def test_trip_summary_short_destination():
    assert trip_summary(_trip("Lisbon")) == "Lisbon from 05 to 12 of Aug."


def test_activity_sections():
    days = [
        DayActivities(date=date(2024, 8, 5), activities=[
            Activity(id="a1", title="Breakfast", occurs_at=datetime(2024, 8, 5, 8, 0)),
            Activity(id="a2", title="Hike", occurs_at=datetime(2024, 8, 5, 14, 30)),
        ]),
        DayActivities(date=date(2024, 8, 6)),
    ]
    sections = activity_sections(days, now=datetime(2024, 8, 5, 12, tzinfo=UTC))
    assert [(s.day_number, s.day_name) for s in sections] == [(5, "Monday"), (6, "Tuesday")]
    assert [(a.hour, a.is_before) for a in sections[0].activities] == [("08:00h", True), ("14:30h", False)]
    assert sections[1].activities == []
