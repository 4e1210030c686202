"""Association of subject fragments with the nearest room label."""

import re
from typing import List, Optional, Sequence

import numpy as np

from .config import LOCATION_MAX_DX, LOCATION_MAX_DY, LOCATION_RE, LOCATION_ROW_WINDOW
from .models import Fragment, Row


def is_location_marker(fragment: Fragment, pattern: re.Pattern = LOCATION_RE) -> bool:
    return bool(pattern.search(fragment.text))


def _distance(a: Fragment, b: Fragment) -> float:
    return float(np.hypot(a.x - b.x, a.y - b.y))


def nearest_location(
    subject: Fragment,
    rows: Sequence[Row],
    row_index: int,
    row_window: int = LOCATION_ROW_WINDOW,
    max_dx: float = LOCATION_MAX_DX,
    max_dy: float = LOCATION_MAX_DY,
    pattern: re.Pattern = LOCATION_RE
) -> Optional[str]:
    """
    Find the room label belonging to a subject fragment.

    Room markers from the rows around ``row_index`` are considered first,
    keeping only those inside the (max_dx, max_dy) box around the subject.
    When none qualifies, the nearest marker anywhere on the page is used.

    Args:
        subject: The subject fragment
        rows: All rows of the page, as produced by group_by_rows()
        row_index: Index of the subject's row in ``rows``
        row_window: Number of rows searched above and below
        max_dx: Horizontal bound of the search box
        max_dy: Vertical bound of the search box
        pattern: Regex identifying room markers

    Returns:
        Text of the chosen room marker, or None if the page has none
    """
    first = max(0, row_index - row_window)
    last = min(len(rows) - 1, row_index + row_window)

    nearby: List[Fragment] = [
        fragment
        for row in rows[first:last + 1]
        for fragment in row
        if is_location_marker(fragment, pattern)
    ]

    best: Optional[Fragment] = None
    best_dist = np.inf
    for marker in nearby:
        if abs(marker.x - subject.x) > max_dx or abs(marker.y - subject.y) > max_dy:
            continue
        dist = _distance(marker, subject)
        if dist < best_dist:
            best, best_dist = marker, dist

    if best is None:
        # Page-wide fallback, unbounded
        for row in rows:
            for marker in row:
                if not is_location_marker(marker, pattern):
                    continue
                dist = _distance(marker, subject)
                if dist < best_dist:
                    best, best_dist = marker, dist

    return best.text if best is not None else None
