"""Collapsing of consecutive identical lessons into time ranges."""

from typing import Optional, Sequence

from .config import HOUR_ORDER
from .models import ClassDaySchedule, Schedule


def _end_label(order: Sequence[str], stop: int) -> str:
    """Label closing a run that stopped before ``order[stop]``."""
    if stop < len(order):
        return order[stop]
    # No hour beyond the known range; repeat the last one
    return order[stop - 1]


def merge_day(periods: ClassDaySchedule, hour_order: Sequence[str] = HOUR_ORDER) -> ClassDaySchedule:
    """
    Merge one day's hour slots into ranges.

    Consecutive hours holding the same subject in the same room collapse into
    one entry keyed "<start>-<end>", where <end> is the first hour after the
    run. Single hours keep their own key. Keys outside ``hour_order`` (such as
    ranges produced by an earlier merge) are carried over unchanged, which
    makes the operation idempotent.

    Args:
        periods: Mapping of hour label to entry for one (class, day)
        hour_order: Chronological ordering of hour labels

    Returns:
        New mapping of period key to entry
    """
    merged: ClassDaySchedule = {
        key: entry for key, entry in periods.items() if key not in hour_order
    }

    i = 0
    while i < len(hour_order):
        hour = hour_order[i]
        entry = periods.get(hour)
        if entry is None:
            i += 1
            continue

        j = i + 1
        while j < len(hour_order):
            following = periods.get(hour_order[j])
            if following is None or following != entry:
                break
            j += 1

        if j - i > 1:
            merged[f"{hour}-{_end_label(hour_order, j)}"] = entry
        else:
            merged[hour] = entry
        i = j

    return merged


def merge_double_periods(
    schedule: Schedule,
    hour_order: Optional[Sequence[str]] = None
) -> Schedule:
    """
    Replace every (class, day) record of a schedule with its merged form.

    Must only run once all pages have been parsed, since a run of identical
    lessons may be split across pages.

    Args:
        schedule: Fully assembled schedule, modified in place
        hour_order: Chronological ordering of hour labels

    Returns:
        The same schedule, for chaining
    """
    order = hour_order or HOUR_ORDER
    for class_name, day, periods in list(schedule.iter_days()):
        schedule.replace_day(class_name, day, merge_day(periods, order))
    return schedule
