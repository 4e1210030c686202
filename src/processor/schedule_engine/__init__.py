"""Schedule Engine Package for reconstructing class timetables from positioned page text."""

__version__ = "0.1.0"

from .main import extract_schedule, process_fragment_file, save_to_json, load_from_json
from .models import Fragment, DayAnchor, HourAnchor, ScheduleEntry, Schedule, Weekday
from .config import ExtractionConfig, DEFAULT_CONFIG
from .parser import ScheduleParser
from .merger import merge_double_periods
from .links import extract_document_links, select_current_document, find_current_document
from .utils import (
    LinkDiscoveryError,
    NoDocumentLinksError,
    NotEnoughDocumentLinksError,
    FragmentFormatError,
    ScheduleLookupError,
    lookup_period,
    validate_schedule,
)

__all__ = [
    'extract_schedule',
    'process_fragment_file',
    'save_to_json',
    'load_from_json',
    'Fragment',
    'DayAnchor',
    'HourAnchor',
    'ScheduleEntry',
    'Schedule',
    'Weekday',
    'ExtractionConfig',
    'DEFAULT_CONFIG',
    'ScheduleParser',
    'merge_double_periods',
    'extract_document_links',
    'select_current_document',
    'find_current_document',
    'LinkDiscoveryError',
    'NoDocumentLinksError',
    'NotEnoughDocumentLinksError',
    'FragmentFormatError',
    'ScheduleLookupError',
    'lookup_period',
    'validate_schedule',
]
