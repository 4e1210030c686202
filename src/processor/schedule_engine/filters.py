"""Predicates deciding whether a fragment is a subject occupying a timetable cell.

Each exclusion rule is its own predicate so it can be checked in isolation.
"""

import re
from functools import lru_cache, partial
from typing import Callable, Sequence, Tuple

from .config import HOUR_LABEL_RE, WEEKDAYS
from .models import Fragment

COPYRIGHT_GLYPH = '©'

INSTITUTE_MARKER_RE = re.compile(r'\b(?:ITIS|IPSIA|Lab\.)')

# Teacher names are printed as "Rossi M."
TEACHER_NAME_RE = re.compile(r'^[A-Z][a-zÀ-ÖØ-öø-ÿ]+\s+[A-Z]\.')


def is_empty(text: str) -> bool:
    return not text or not text.strip()


def is_weekday_label(text: str, weekdays: Sequence[str] = WEEKDAYS) -> bool:
    return text.strip() in weekdays


def is_hour_label(text: str) -> bool:
    return bool(HOUR_LABEL_RE.match(text.strip()))


def is_decoration(text: str) -> bool:
    """Copyright footer and similar decorative marks."""
    return COPYRIGHT_GLYPH in text


def is_institute_marker(text: str) -> bool:
    """Room / institute labels such as "ITIS", "IPSIA" or "Lab.3"."""
    return bool(INSTITUTE_MARKER_RE.search(text))


def is_teacher_name(text: str) -> bool:
    return bool(TEACHER_NAME_RE.match(text.strip()))


@lru_cache(maxsize=None)
def exclusion_rules(weekdays: Tuple[str, ...] = WEEKDAYS) -> Tuple[Tuple[str, Callable[[str], bool]], ...]:
    """Return the named exclusion rules in checking order, built once per weekday set."""
    return (
        ('empty', is_empty),
        ('weekday', partial(is_weekday_label, weekdays=weekdays)),
        ('hour', is_hour_label),
        ('decoration', is_decoration),
        ('institute', is_institute_marker),
        ('teacher', is_teacher_name),
    )


def rejection_reason(text: str, weekdays: Sequence[str] = WEEKDAYS) -> str:
    """
    Name the first exclusion rule a text trips, or "" if it trips none.

    Args:
        text: Fragment text
        weekdays: Weekday labels treated as column headers

    Returns:
        Rule name, or an empty string for a subject candidate
    """
    for name, rule in exclusion_rules(tuple(weekdays)):
        if rule(text):
            return name
    return ''


def is_subject_candidate(fragment: Fragment, weekdays: Sequence[str] = WEEKDAYS) -> bool:
    """Check if a fragment can be a subject occupying a timetable cell."""
    return rejection_reason(fragment.text, weekdays) == ''
