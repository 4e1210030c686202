"""Data models for schedule reconstruction."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional


class Weekday(Enum):
    """Enumeration of the school week's column labels."""
    MONDAY = "lunedì"
    TUESDAY = "martedì"
    WEDNESDAY = "mercoledì"
    THURSDAY = "giovedì"
    FRIDAY = "venerdì"

    @classmethod
    def from_string(cls, day_str: str) -> Optional['Weekday']:
        """
        Parse a weekday from its printed label.

        Args:
            day_str: Label as it appears in the document (e.g. "lunedì")

        Returns:
            Weekday enum or None if not matched
        """
        if not day_str or not isinstance(day_str, str):
            return None

        day_str = day_str.strip().lower()
        for day in cls:
            if day.value == day_str:
                return day
        return None


@dataclass(frozen=True)
class Fragment:
    """One positioned text token from a rendered page."""
    text: str
    x: float
    y: float


# A vertically clustered group of fragments approximating one printed row
Row = List[Fragment]


@dataclass(frozen=True)
class DayAnchor:
    """Mean x position of a weekday column header."""
    day: str
    x: float


@dataclass(frozen=True)
class HourAnchor:
    """y position of an hour-row label such as "9h00"."""
    label: str
    y: float


@dataclass(frozen=True)
class ScheduleEntry:
    """Content of one occupied timetable cell."""
    subject: str
    room: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {'subject': self.subject, 'room': self.room}


# period key ("9h00" or "9h00-11h00") -> entry
ClassDaySchedule = Dict[str, ScheduleEntry]


@dataclass
class Schedule:
    """
    Three-level mapping: class name -> weekday -> period key -> entry.

    Every accessor returns None for a missing class, day or period rather
    than raising, so absence always reads as "no lesson scheduled".
    """
    classes: Dict[str, Dict[str, ClassDaySchedule]] = field(default_factory=dict)

    def ensure_class(self, class_name: str) -> Dict[str, ClassDaySchedule]:
        """Create an empty record for a class if it does not exist yet."""
        return self.classes.setdefault(class_name, {})

    def set_entry(self, class_name: str, day: str, period: str, entry: ScheduleEntry) -> None:
        """Store an entry, replacing whatever occupied the same cell."""
        days = self.ensure_class(class_name)
        days.setdefault(day, {})[period] = entry

    def class_days(self, class_name: str) -> Optional[Dict[str, ClassDaySchedule]]:
        return self.classes.get(class_name)

    def day(self, class_name: str, day: str) -> Optional[ClassDaySchedule]:
        days = self.classes.get(class_name)
        if days is None:
            return None
        return days.get(day)

    def get(self, class_name: str, day: str, period: str) -> Optional[ScheduleEntry]:
        periods = self.day(class_name, day)
        if periods is None:
            return None
        return periods.get(period)

    def replace_day(self, class_name: str, day: str, periods: ClassDaySchedule) -> None:
        self.ensure_class(class_name)[day] = periods

    def iter_days(self) -> Iterator[tuple]:
        """Yield (class_name, day, periods) for every populated day."""
        for class_name, days in self.classes.items():
            for day, periods in days.items():
                yield class_name, day, periods

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, Dict[str, Optional[str]]]]]:
        """Convert to a plain nested dict suitable for JSON serialization."""
        return {
            class_name: {
                day: {period: entry.to_dict() for period, entry in periods.items()}
                for day, periods in days.items()
            }
            for class_name, days in self.classes.items()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, Dict[str, Dict[str, Optional[str]]]]]) -> 'Schedule':
        """Rebuild a schedule from the nested dict produced by to_dict()."""
        schedule = cls()
        for class_name, days in data.items():
            schedule.ensure_class(class_name)
            for day, periods in days.items():
                schedule.replace_day(class_name, day, {
                    period: ScheduleEntry(subject=item['subject'], room=item.get('room'))
                    for period, item in periods.items()
                })
        return schedule

    def __len__(self) -> int:
        return len(self.classes)
