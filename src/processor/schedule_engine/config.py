"""Constants and tunables for schedule extraction."""

import re
from dataclasses import dataclass, field
from typing import Tuple

from .models import Weekday

# Weekday column labels as printed in the source document
WEEKDAYS: Tuple[str, ...] = tuple(day.value for day in Weekday)

# Chronological ordering of hour-row labels
HOUR_ORDER: Tuple[str, ...] = (
    '8h00', '9h00', '10h00', '11h00', '12h00', '13h00', '14h00', '15h00',
)

HOUR_LABEL_RE = re.compile(r'^([0-1]?\d|2[0-3])h00$')
CLASS_NAME_RE = re.compile(r'\b([1-5][A-Z]{2,4})\b')

# Room / institute markers (ITIS, IPSIA, "Lab.")
LOCATION_RE = re.compile(r'(ITIS|IPSIA|Lab\.)')

DOCUMENT_LINK_RE = re.compile(
    r"https://isisfacchinetti\.edu\.it/wp-content/uploads/\d{4}/\d{2}/Orario-CLASSI-[^\"'\s<>]+?\.pdf"
)

ROW_TOLERANCE = 5.0
HOUR_TOLERANCE = 5.0
LOCATION_MAX_DX = 200.0
LOCATION_MAX_DY = 120.0
LOCATION_ROW_WINDOW = 2


@dataclass
class ExtractionConfig:
    """Tunables used by the parser and its layout helpers."""
    weekdays: Tuple[str, ...] = WEEKDAYS
    hour_order: Tuple[str, ...] = HOUR_ORDER
    row_tolerance: float = ROW_TOLERANCE
    hour_tolerance: float = HOUR_TOLERANCE
    location_max_dx: float = LOCATION_MAX_DX
    location_max_dy: float = LOCATION_MAX_DY
    location_row_window: int = LOCATION_ROW_WINDOW
    class_name_re: 're.Pattern' = field(default=CLASS_NAME_RE)
    location_re: 're.Pattern' = field(default=LOCATION_RE)
    document_link_re: 're.Pattern' = field(default=DOCUMENT_LINK_RE)
    document_link_index: int = 1


DEFAULT_CONFIG = ExtractionConfig()
