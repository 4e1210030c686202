"""Core execution logic for schedule extraction."""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .config import ExtractionConfig
from .models import Fragment, Schedule
from .parser import PageResult, ScheduleParser
from .utils import FragmentFormatError

SUPPORTED_EXTENSIONS = {'.json'}


def fragment_from_item(item: Dict[str, Any]) -> Fragment:
    """
    Build a Fragment from one rendered text item.

    Accepts either {"text", "x", "y"} or the renderer's native
    {"str", "transform"} shape, where x and y are transform[4] and
    transform[5].

    Raises:
        FragmentFormatError: If the item has no text or coordinates
    """
    if not isinstance(item, dict):
        raise FragmentFormatError(f"Fragment must be an object, got {type(item).__name__}")

    try:
        if 'transform' in item:
            text = item.get('str', item.get('text'))
            x, y = item['transform'][4], item['transform'][5]
        else:
            text = item['text']
            x, y = item['x'], item['y']
        if text is None:
            raise KeyError('text')
        return Fragment(text=str(text).strip(), x=float(x), y=float(y))
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise FragmentFormatError(f"Malformed fragment {item!r}: {e}") from e


def load_pages(data: Union[Dict[str, Any], List[Any]]) -> List[List[Fragment]]:
    """
    Convert decoded fragment JSON into pages of Fragments.

    Args:
        data: Either a list of pages or {"pages": [...]}, each page being a
            list of fragment objects

    Returns:
        One list of Fragments per page
    """
    if isinstance(data, dict):
        data = data.get('pages')
    if not isinstance(data, list):
        raise FragmentFormatError("Expected a list of pages")

    pages = []
    for page_idx, page in enumerate(data, start=1):
        if not isinstance(page, list):
            raise FragmentFormatError(f"Page {page_idx} is not a list of fragments")
        pages.append([fragment_from_item(item) for item in page])
    return pages


def extract_schedule(
    pages: Iterable[Iterable[Fragment]],
    config: Optional[ExtractionConfig] = None,
    verbose: bool = False
) -> Schedule:
    """
    Reconstruct the schedule from pages of positioned fragments.

    Args:
        pages: One iterable of fragments per page
        config: Extraction tunables (defaults apply when omitted)
        verbose: Print progress for each page

    Returns:
        The merged Schedule; empty when there are no pages
    """
    parser = ScheduleParser(config)
    pages = list(pages)

    def _report_page(result: PageResult) -> None:
        print(f"  → Page {result.page_number}/{len(pages)}: "
              f"{len(result.placements)} lessons, {len(result.classes)} class(es)"
              + (f", {result.skipped} skipped" if result.skipped else ""))

    if verbose:
        print(f"\n[1/2] Parsing {len(pages)} page(s)...")

    schedule = parser.parse_document(pages, on_page=_report_page if verbose else None)

    if verbose:
        print("\n[2/2] Merged consecutive periods")
        print(f"✓ Extracted schedule for {len(schedule)} class(es)")

    return schedule


def process_fragment_file(
    file_path: str,
    config: Optional[ExtractionConfig] = None,
    verbose: bool = True
) -> Schedule:
    """
    Load a rendered fragment file and extract the schedule it describes.

    Args:
        file_path: Path to the JSON fragment dump
        config: Extraction tunables
        verbose: Print progress

    Returns:
        The extracted Schedule

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file format is not supported or malformed
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise ValueError(
            f"Unsupported file format: {file_path.suffix}. "
            f"Supported formats: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
        )

    if verbose:
        print(f"▶ Processing fragments: {file_path.name}")

    with open(file_path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise FragmentFormatError(f"Invalid JSON in {file_path.name}: {e}") from e

    pages = load_pages(data)
    schedule = extract_schedule(pages, config=config, verbose=verbose)

    if verbose:
        _print_schedule_summary(schedule, config.weekdays if config else None)

    return schedule


def save_to_json(schedule: Schedule, output_path: str) -> None:
    """
    Save an extracted schedule to a JSON file.

    Args:
        schedule: Schedule to save
        output_path: Path to output JSON file
    """
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(schedule.to_dict(), f, indent=2, ensure_ascii=False)

    print(f"✓ Saved to: {output_path}")


def load_from_json(input_path: str) -> Schedule:
    """Load a schedule previously written by save_to_json()."""
    with open(input_path, 'r', encoding='utf-8') as f:
        return Schedule.from_dict(json.load(f))


def _print_schedule_summary(schedule: Schedule, weekdays: Optional[Sequence[str]] = None) -> None:
    """Print a summary of the extracted schedule."""
    from .config import WEEKDAYS

    print(f"{'─'*60}")
    print(f"  Total Classes: {len(schedule)}")

    for day in weekdays or WEEKDAYS:
        lessons = sum(
            len(periods)
            for _, d, periods in schedule.iter_days()
            if d == day
        )
        if lessons:
            print(f"    {day}: {lessons} lessons")

    # Show first few classes as examples
    names = sorted(schedule.classes)
    if names:
        print("\n  Sample Classes:")
        for name in names[:3]:
            days = schedule.classes[name]
            print(f"    {name}: {sum(len(p) for p in days.values())} lessons")
        if len(names) > 3:
            print(f"    ... and {len(names) - 3} more classes")
