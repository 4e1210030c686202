"""Parser reconstructing a weekly class schedule from positioned page text."""

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, ExtractionConfig
from .filters import is_subject_candidate
from .layout import (
    detect_day_columns,
    detect_hour_rows,
    group_by_rows,
    nearest_day,
    nearest_hour,
    row_text,
)
from .location import nearest_location
from .merger import merge_double_periods
from .models import Fragment, Row, Schedule, ScheduleEntry


@dataclass(frozen=True)
class Placement:
    """A subject resolved to one (class, day, hour) cell."""
    class_name: str
    day: str
    hour: str
    entry: ScheduleEntry


@dataclass
class PageResult:
    """Everything one page contributes to the schedule."""
    page_number: int
    classes: List[str] = field(default_factory=list)
    placements: List[Placement] = field(default_factory=list)
    skipped: int = 0

    def apply_to(self, schedule: Schedule) -> None:
        """Write this page's classes and placements into a schedule."""
        for class_name in self.classes:
            schedule.ensure_class(class_name)
        for p in self.placements:
            schedule.set_entry(p.class_name, p.day, p.hour, p.entry)


def track_class_context(
    rows: Sequence[Row],
    pattern=DEFAULT_CONFIG.class_name_re
) -> Iterator[Tuple[int, Row, Optional[str]]]:
    """
    Walk rows top to bottom, pairing each with the class it belongs to.

    A row whose joined text contains a class name (e.g. "3FEN") switches the
    context to that class, starting with the row itself. Rows before the
    first class header are paired with None.

    Yields:
        (row_index, row, class_name or None)
    """
    context: Optional[str] = None
    for index, row in enumerate(rows):
        match = pattern.search(row_text(row))
        if match:
            context = match.group(1)
        yield index, row, context


class ScheduleParser:
    """Turns pages of positioned fragments into a Schedule."""

    def __init__(self, config: Optional[ExtractionConfig] = None):
        """
        Initialize the parser.

        Args:
            config: Tolerances and label sets; defaults to DEFAULT_CONFIG
        """
        self.config = config or DEFAULT_CONFIG

    def parse_page(self, fragments: Iterable[Fragment], page_number: int = 1) -> PageResult:
        """
        Resolve every subject fragment of one page to a (class, day, hour) cell.

        Anchors and rows are both computed from the raw fragments before any
        assignment. Subjects outside a class context, or with no day or hour
        anchor on the page, are dropped.

        Args:
            fragments: The page's fragments, in any order
            page_number: 1-based page index, for reporting

        Returns:
            PageResult holding the page's classes and placements
        """
        cfg = self.config
        fragments = list(fragments)
        result = PageResult(page_number=page_number)

        rows = group_by_rows(fragments, cfg.row_tolerance)
        day_columns = detect_day_columns(fragments, cfg.weekdays)
        hour_rows = detect_hour_rows(fragments, cfg.hour_tolerance)

        for index, row, class_name in track_class_context(rows, cfg.class_name_re):
            if class_name is None:
                continue
            if class_name not in result.classes:
                result.classes.append(class_name)

            for fragment in row:
                if not is_subject_candidate(fragment, cfg.weekdays):
                    continue

                day = nearest_day(fragment.x, day_columns)
                hour = nearest_hour(fragment.y, hour_rows)
                if day is None or hour is None:
                    result.skipped += 1
                    continue

                room = nearest_location(
                    fragment,
                    rows,
                    index,
                    row_window=cfg.location_row_window,
                    max_dx=cfg.location_max_dx,
                    max_dy=cfg.location_max_dy,
                    pattern=cfg.location_re,
                )
                result.placements.append(Placement(
                    class_name=class_name,
                    day=day,
                    hour=hour,
                    entry=ScheduleEntry(subject=fragment.text.strip(), room=room or None),
                ))

        return result

    def parse_document(
        self,
        pages: Iterable[Iterable[Fragment]],
        merge: bool = True,
        on_page: Optional[Callable[[PageResult], None]] = None
    ) -> Schedule:
        """
        Parse every page and assemble the final schedule.

        Each page is fully resolved before being written into the schedule;
        a later page overwrites cells an earlier page already filled. The
        period merge runs once, after the last page.

        Args:
            pages: One iterable of fragments per page
            merge: Whether to collapse consecutive identical hours
            on_page: Called with each PageResult once it is applied

        Returns:
            The assembled Schedule (empty for zero pages)
        """
        schedule = Schedule()

        for page_number, fragments in enumerate(pages, start=1):
            result = self.parse_page(fragments, page_number)
            result.apply_to(schedule)
            if on_page:
                on_page(result)

        if merge:
            merge_double_periods(schedule, self.config.hour_order)

        return schedule
