"""Validation, lookup and reporting helpers for extracted schedules."""

from typing import List, Optional, Sequence

from .config import CLASS_NAME_RE, HOUR_LABEL_RE, HOUR_ORDER, WEEKDAYS
from .models import Schedule, ScheduleEntry, Weekday


class LinkDiscoveryError(Exception):
    """The schedule document could not be located on the index page."""
    pass


class NoDocumentLinksError(LinkDiscoveryError):
    """The index page contains no schedule document link at all."""
    pass


class NotEnoughDocumentLinksError(LinkDiscoveryError):
    """The index page lists fewer schedule documents than expected."""
    pass


class FragmentFormatError(ValueError):
    """Fragment input does not have the expected text/x/y shape."""
    pass


class ScheduleLookupError(Exception):
    """A class/day/hour query is malformed."""
    pass


def validate_class_name(class_name: str) -> str:
    """
    Validate a class name such as "3FEN".

    Args:
        class_name: Name to validate

    Returns:
        The stripped class name

    Raises:
        ScheduleLookupError: If the name is not one digit 1-5 followed by
            2-4 uppercase letters
    """
    name = (class_name or '').strip()
    match = CLASS_NAME_RE.fullmatch(name)
    if not match:
        raise ScheduleLookupError(f"Invalid class name: {class_name!r}")
    return name


def _hour_value(label: str) -> int:
    return int(label[:-len('h00')])


def _range_covers(key: str, hour: str, hour_order: Sequence[str] = HOUR_ORDER) -> bool:
    """
    Check if a merged "<start>-<end>" key covers the given hour label.

    Ranges are end-exclusive. A run that reaches the last hour of
    ``hour_order`` is keyed with that same hour as its end, so it reads as
    stopping one hour early: the last hour of such a run is not found
    through the range.
    """
    start, sep, end = key.partition('-')
    if not sep or start not in hour_order or end not in hour_order or hour not in hour_order:
        return False
    s, e, h = hour_order.index(start), hour_order.index(end), hour_order.index(hour)
    if s == e:
        return h == s
    return s <= h < e


def lookup_period(
    schedule: Schedule,
    class_name: str,
    day: str,
    hour: str,
    weekdays: Sequence[str] = WEEKDAYS,
    hour_order: Sequence[str] = HOUR_ORDER
) -> Optional[ScheduleEntry]:
    """
    Find the lesson a class has on a given day and hour.

    The hour is matched against single-hour keys first and then against
    merged ranges.

    Args:
        schedule: Extracted schedule
        class_name: Class name, e.g. "3FEN"
        day: Weekday label, e.g. "lunedì" (case-insensitive)
        hour: Hour label, e.g. "9h00"
        weekdays: Accepted weekday labels
        hour_order: Chronological ordering the schedule was merged with

    Returns:
        The ScheduleEntry, or None when nothing is scheduled

    Raises:
        ScheduleLookupError: If class, day or hour is malformed
    """
    class_name = validate_class_name(class_name)

    weekday = Weekday.from_string(day)
    day = weekday.value if weekday else (day or '').strip()
    if day not in weekdays:
        raise ScheduleLookupError(f"Invalid day: {day!r}")

    hour = (hour or '').strip()
    if not HOUR_LABEL_RE.match(hour):
        raise ScheduleLookupError(f"Invalid hour: {hour!r}")

    periods = schedule.day(class_name, day)
    if not periods:
        return None

    if hour in periods:
        return periods[hour]

    for key, entry in periods.items():
        if _range_covers(key, hour, hour_order):
            return entry

    return None


def validate_schedule(schedule: Schedule) -> List[str]:
    """
    Validate an extracted schedule and return warnings.

    Args:
        schedule: Schedule to validate

    Returns:
        List of validation warning messages
    """
    warnings = []

    if not len(schedule):
        warnings.append("No classes were extracted")
        return warnings

    empty_classes = [name for name, days in schedule.classes.items() if not days]
    if empty_classes:
        warnings.append(f"{len(empty_classes)} classes have no lessons: {', '.join(sorted(empty_classes))}")

    missing_room = sum(
        1
        for _, _, periods in schedule.iter_days()
        for entry in periods.values()
        if entry.room is None
    )
    if missing_room > 0:
        warnings.append(f"{missing_room} lessons have no room")

    return warnings


def format_schedule_report(schedule: Schedule, weekdays: Sequence[str] = WEEKDAYS) -> str:
    """
    Generate a per-class summary of the schedule.

    Args:
        schedule: Schedule to summarize
        weekdays: Order in which days are listed

    Returns:
        Formatted report string
    """
    if not len(schedule):
        return "No classes to report"

    lines = [f"Classes: {len(schedule)}"]
    for class_name in sorted(schedule.classes):
        days = schedule.classes[class_name]
        lessons = sum(len(periods) for periods in days.values())
        lines.append(f"  {class_name}: {lessons} lessons over {len(days)} days")
        for day in weekdays:
            periods = days.get(day)
            if periods:
                lines.append(f"    {day}: {', '.join(sorted(periods, key=_period_sort_key))}")

    return "\n".join(lines)


def _period_sort_key(key: str) -> int:
    start = key.split('-', 1)[0]
    return _hour_value(start) if HOUR_LABEL_RE.match(start) else 99
