"""Geometric helpers: row clustering, column/row anchors and nearest-anchor lookup."""

from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from .config import HOUR_LABEL_RE, HOUR_TOLERANCE, ROW_TOLERANCE, WEEKDAYS
from .models import DayAnchor, Fragment, HourAnchor, Row


def group_by_rows(
    fragments: Iterable[Fragment],
    tolerance: float = ROW_TOLERANCE
) -> List[Row]:
    """
    Group fragments into approximate rows by vertical position.

    Fragments are visited top of page first (descending y). Each one joins
    the first existing row whose first member lies within ``tolerance``,
    otherwise it opens a new row. Membership is first-fit, not closest-fit.

    Args:
        fragments: All fragments of one page, in any order
        tolerance: Maximum vertical distance to a row's first member

    Returns:
        List of rows, top to bottom
    """
    rows: List[Row] = []

    for fragment in sorted(fragments, key=lambda f: f.y, reverse=True):
        for row in rows:
            if abs(row[0].y - fragment.y) <= tolerance:
                row.append(fragment)
                break
        else:
            rows.append([fragment])

    return rows


def row_text(row: Row) -> str:
    """Concatenate the texts of a row with single spaces."""
    return ' '.join(fragment.text for fragment in row)


def detect_day_columns(
    fragments: Iterable[Fragment],
    weekdays: Sequence[str] = WEEKDAYS
) -> List[DayAnchor]:
    """
    Locate weekday column headers.

    Args:
        fragments: All fragments of one page
        weekdays: Exact weekday labels to look for

    Returns:
        One anchor per weekday present on the page, at the mean x of its
        labels, sorted left to right
    """
    buckets: Dict[str, List[float]] = {}
    for fragment in fragments:
        text = fragment.text.strip()
        if text in weekdays:
            buckets.setdefault(text, []).append(fragment.x)

    anchors = [
        DayAnchor(day=day, x=float(np.mean(buckets[day])))
        for day in weekdays
        if buckets.get(day)
    ]
    return sorted(anchors, key=lambda a: a.x)


def detect_hour_rows(
    fragments: Iterable[Fragment],
    tolerance: float = HOUR_TOLERANCE
) -> List[HourAnchor]:
    """
    Locate hour-row labels ("8h00", "9h00", ...).

    Labels are scanned in the given order; a label within ``tolerance`` of an
    already found anchor is ignored, so the first y seen for a row wins.

    Returns:
        Hour anchors sorted top to bottom (descending y)
    """
    anchors: List[HourAnchor] = []

    for fragment in fragments:
        text = fragment.text.strip()
        if not HOUR_LABEL_RE.match(text):
            continue
        if any(abs(anchor.y - fragment.y) <= tolerance for anchor in anchors):
            continue
        anchors.append(HourAnchor(label=text, y=fragment.y))

    return sorted(anchors, key=lambda a: a.y, reverse=True)


def nearest_day(x: float, day_columns: Sequence[DayAnchor]) -> Optional[str]:
    """Return the weekday whose column is horizontally closest to x."""
    if not day_columns:
        return None
    # min() keeps the first of equally distant anchors
    return min(day_columns, key=lambda a: abs(a.x - x)).day


def nearest_hour(y: float, hour_rows: Sequence[HourAnchor]) -> Optional[str]:
    """Return the hour label whose row is vertically closest to y."""
    if not hour_rows:
        return None
    return min(hour_rows, key=lambda a: abs(a.y - y)).label
