import logging

import pytest

from backend import timezone_utils
from backend.layout import compute_geometry, segment
from backend.model import Day, Planner, User
from backend.schedule_ics import END_OF_DAY, load_schedule, parse_schedule

# 2024-06-03 is a Monday
CALENDAR = """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//weekplanner tests//EN
BEGIN:VEVENT
UID:standup@example.com
SUMMARY:Standup
DTSTART:20240603T093000Z
DTEND:20240603T110000Z
ORGANIZER;CN=alice:mailto:alice@example.com
ATTENDEE;CN=bob:mailto:bob@example.com
ATTENDEE:mailto:carol@example.com
LOCATION:Room 1
END:VEVENT
BEGIN:VEVENT
UID:offsite@example.com
SUMMARY:Offsite
DTSTART:20240604T140000Z
DTEND:20240606T100000Z
ORGANIZER;CN=bob:mailto:bob@example.com
END:VEVENT
BEGIN:VEVENT
UID:holiday@example.com
SUMMARY:Holiday
DTSTART;VALUE=DATE:20240607
DTEND;VALUE=DATE:20240609
END:VEVENT
BEGIN:VEVENT
UID:call@example.com
SUMMARY:Call
DTSTART:20240605T080000Z
DURATION:PT45M
ORGANIZER:mailto:dave@example.com
LOCATION:https://meet.example.com/abc
END:VEVENT
END:VCALENDAR
"""


@pytest.fixture(autouse=True)
def utc():
    timezone_utils.set_timezone("UTC")
    yield
    timezone_utils.set_timezone("UTC")


def by_name(planner):
    return {e.name: e
            for user in planner.get_list_of_users()
            for e in planner.get_schedule_for(str(user))}


def test_timed_event():
    planner = parse_schedule(CALENDAR, default_host="nobody")
    standup = by_name(planner)["Standup"]
    assert (standup.start_day, standup.start_time) == (Day.MONDAY, 930)
    assert (standup.end_day, standup.end_time) == (Day.MONDAY, 1100)
    assert standup.host == User("alice")
    assert standup.attendees == (User("bob"), User("carol@example.com"))
    assert standup.location == "Room 1"
    assert not standup.online


def test_multi_day_event():
    offsite = by_name(parse_schedule(CALENDAR, default_host="nobody"))["Offsite"]
    assert (offsite.start_day, offsite.start_time) == (Day.TUESDAY, 1400)
    assert (offsite.end_day, offsite.end_time) == (Day.THURSDAY, 1000)


def test_all_day_event_uses_default_host():
    holiday = by_name(parse_schedule(CALENDAR, default_host="nobody"))["Holiday"]
    assert holiday.host == User("nobody")
    assert (holiday.start_day, holiday.start_time) == (Day.FRIDAY, 0)
    assert (holiday.end_day, holiday.end_time) == (Day.SATURDAY, END_OF_DAY)


def test_duration_and_online_location():
    call = by_name(parse_schedule(CALENDAR, default_host="nobody"))["Call"]
    assert call.host == User("dave@example.com")
    assert (call.start_day, call.start_time, call.end_time) == (Day.WEDNESDAY, 800, 845)
    assert call.online


def test_converts_to_local_timezone():
    timezone_utils.set_timezone("America/New_York")
    standup = by_name(parse_schedule(CALENDAR, default_host="nobody"))["Standup"]
    # 09:30 UTC is 05:30 EDT
    assert (standup.start_day, standup.start_time) == (Day.MONDAY, 530)


def test_users_registered():
    planner = parse_schedule(CALENDAR, default_host="nobody")
    names = {str(u) for u in planner.get_list_of_users()}
    assert {"alice", "bob", "carol@example.com", "nobody"} <= names


def test_event_without_start_is_skipped():
    text = CALENDAR.replace("DTSTART:20240605T080000Z\n", "")
    planner = parse_schedule(text, default_host="nobody")
    assert "Call" not in by_name(planner)
    assert len(planner) == 3


def test_load_appends_to_existing_planner(tmp_path):
    path = tmp_path / "week.ics"
    path.write_text(CALENDAR, encoding="utf-8")
    planner = Planner(users=[User("zoe")])
    result = load_schedule(path, planner, default_host="nobody")
    assert result is planner
    assert len(planner) == 4
    assert str(planner.get_list_of_users()[0]) == "zoe"


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_schedule(tmp_path / "missing.ics")


def single_event(dtstart, dtend, summary="X"):
    return f"""BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//weekplanner tests//EN
BEGIN:VEVENT
UID:{summary}@example.com
SUMMARY:{summary}
DTSTART:{dtstart}
DTEND:{dtend}
ORGANIZER;CN=alice:mailto:alice@example.com
END:VEVENT
END:VCALENDAR
"""


def test_midnight_end_stays_on_start_day():
    # 2024-06-08 is a Saturday
    planner = parse_schedule(single_event("20240608T200000Z", "20240609T000000Z"))
    (event,) = planner.get_schedule_for("alice")
    assert (event.start_day, event.start_time) == (Day.SATURDAY, 2000)
    assert (event.end_day, event.end_time) == (Day.SATURDAY, END_OF_DAY)
    segments = segment(event, compute_geometry(700, 690))
    assert [s.day for s in segments] == [Day.SATURDAY]


def test_midnight_end_of_multi_day_event():
    planner = parse_schedule(single_event("20240603T220000Z", "20240605T000000Z"))
    (event,) = planner.get_schedule_for("alice")
    assert (event.start_day, event.end_day, event.end_time) == (Day.MONDAY, Day.TUESDAY, END_OF_DAY)


@pytest.mark.parametrize("dtstart,dtend", [
    ("20240603T090000Z", "20240610T100000Z"),   # a week and an hour
    ("20240603T140000Z", "20240610T100000Z"),   # folds to end before start
    ("20240608T220000Z", "20240609T020000Z"),   # Saturday into Sunday
    ("20240605T100000Z", "20240605T090000Z"),   # ends before it starts
])
def test_events_not_fitting_one_week_are_skipped(dtstart, dtend, caplog):
    with caplog.at_level(logging.WARNING, logger="backend.schedule_ics"):
        planner = parse_schedule(single_event(dtstart, dtend))
    assert len(planner) == 0
    assert "Skipping event 'X'" in caplog.text


def test_imported_events_always_segment_cleanly():
    planner = parse_schedule(CALENDAR, default_host="nobody")
    geometry = compute_geometry(700, 690)
    for user in planner.get_list_of_users():
        for event in planner.get_schedule_for(str(user)):
            assert all(s.height >= 0 for s in segment(event, geometry))
