from schedule_engine.models import Schedule, ScheduleEntry, Weekday


def test_weekday_from_string():
    assert Weekday.from_string("lunedì") is Weekday.MONDAY
    assert Weekday.from_string(" Venerdì ") is Weekday.FRIDAY
    assert Weekday.from_string("sabato") is None
    assert Weekday.from_string("") is None


def test_schedule_absence_at_every_level():
    schedule = Schedule()
    schedule.set_entry("3FEN", "lunedì", "8h00", ScheduleEntry("Fisica"))

    assert schedule.get("3FEN", "lunedì", "8h00") == ScheduleEntry("Fisica", None)
    assert schedule.get("3FEN", "lunedì", "9h00") is None
    assert schedule.get("3FEN", "martedì", "8h00") is None
    assert schedule.get("4AIN", "lunedì", "8h00") is None
    assert schedule.day("4AIN", "lunedì") is None
    assert schedule.class_days("4AIN") is None


def test_schedule_dict_round_trip():
    schedule = Schedule()
    schedule.set_entry("3FEN", "lunedì", "8h00-10h00", ScheduleEntry("Fisica", "Lab.1"))
    schedule.ensure_class("1AB")
    data = schedule.to_dict()

    assert data == {
        "3FEN": {"lunedì": {"8h00-10h00": {"subject": "Fisica", "room": "Lab.1"}}},
        "1AB": {},
    }
    assert Schedule.from_dict(data) == schedule
