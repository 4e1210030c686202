from schedule_engine.merger import merge_day, merge_double_periods
from schedule_engine.models import Schedule, ScheduleEntry

MATH = ScheduleEntry("Math", "101")
SCIENCE = ScheduleEntry("Science", None)


def test_merge_day_collapses_consecutive_hours():
    merged = merge_day({"8h00": MATH, "9h00": MATH, "10h00": SCIENCE})

    assert merged == {"8h00-10h00": MATH, "10h00": SCIENCE}


def test_merge_day_is_idempotent():
    day = {"8h00": MATH, "9h00": MATH, "10h00": SCIENCE, "12h00": MATH}
    once = merge_day(day)

    assert merge_day(once) == once


def test_merge_day_requires_same_room():
    other_room = ScheduleEntry("Math", "102")
    merged = merge_day({"8h00": MATH, "9h00": other_room})

    assert merged == {"8h00": MATH, "9h00": other_room}


def test_merge_day_does_not_bridge_gaps():
    merged = merge_day({"8h00": MATH, "10h00": MATH})

    assert merged == {"8h00": MATH, "10h00": MATH}


def test_merge_day_run_to_last_hour_repeats_it():
    assert merge_day({"14h00": MATH, "15h00": MATH}) == {"14h00-15h00": MATH}
    assert merge_day({"13h00": MATH, "14h00": MATH, "15h00": MATH}) == {"13h00-15h00": MATH}


def test_merge_day_null_rooms_match():
    merged = merge_day({"11h00": SCIENCE, "12h00": ScheduleEntry("Science", None)})

    assert merged == {"11h00-13h00": SCIENCE}


def test_merge_day_empty():
    assert merge_day({}) == {}


def test_merge_double_periods_replaces_every_day():
    schedule = Schedule()
    schedule.set_entry("3FEN", "lunedì", "8h00", MATH)
    schedule.set_entry("3FEN", "lunedì", "9h00", MATH)
    schedule.set_entry("4AIN", "venerdì", "15h00", SCIENCE)
    schedule.ensure_class("1BEL")

    merge_double_periods(schedule)

    assert schedule.day("3FEN", "lunedì") == {"8h00-10h00": MATH}
    assert schedule.day("4AIN", "venerdì") == {"15h00": SCIENCE}
    assert schedule.class_days("1BEL") == {}
