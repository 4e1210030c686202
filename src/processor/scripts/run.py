"""Command-line entry point for schedule engine."""

import sys
from pathlib import Path

# Add parent directory to Python path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from schedule_engine import (
    process_fragment_file,
    save_to_json,
    validate_schedule,
    lookup_period,
    find_current_document,
    LinkDiscoveryError,
    FragmentFormatError,
    ScheduleLookupError,
)
from schedule_engine.config import DEFAULT_CONFIG
from schedule_engine.utils import format_schedule_report


def _option(name: str, count: int = 1):
    """Return the value(s) following ``name`` in argv, or None."""
    if name not in sys.argv:
        return None
    idx = sys.argv.index(name)
    values = sys.argv[idx + 1:idx + 1 + count]
    if len(values) < count:
        return None
    return values[0] if count == 1 else values


def _print_usage():
    print("="*70)
    print("SCHEDULE ENGINE - Command Line Interface")
    print("="*70)
    print("\nUsage: python scripts/run.py <fragments.json> [options]")
    print("       python scripts/run.py --index <index.html>")
    print("\nArguments:")
    print("  fragments.json   Rendered page fragments (required)")
    print("\nOptions:")
    print("  --output FILE             Specify output JSON file path")
    print("  --lookup CLASS DAY HOUR   Show the lesson of one class at one hour")
    print("  --index FILE              Print the current schedule document link")
    print("                            found in a saved index page")
    print("\nExamples:")
    print("  python scripts/run.py orario.json")
    print("  python scripts/run.py orario.json --output schedule.json")
    print("  python scripts/run.py orario.json --lookup 3FEN lunedì 9h00")
    print("  python scripts/run.py --index orario-delle-lezioni.html")


def main():
    """Main entry point for command-line execution."""

    if len(sys.argv) < 2:
        _print_usage()
        sys.exit(1)

    index_path = _option('--index')
    if index_path:
        try:
            html = Path(index_path).read_text(encoding='utf-8')
            print(find_current_document(
                html,
                DEFAULT_CONFIG.document_link_re,
                DEFAULT_CONFIG.document_link_index,
            ))
        except FileNotFoundError as e:
            print(f"\n✗ File Error: {e}")
            sys.exit(1)
        except LinkDiscoveryError as e:
            print(f"\n✗ Link Discovery Error: {e}")
            sys.exit(1)
        return

    file_path = sys.argv[1]
    output_path = _option('--output') or Path(file_path).stem + "_schedule.json"
    lookup = _option('--lookup', count=3)

    try:
        schedule = process_fragment_file(file_path)

        warnings = validate_schedule(schedule)
        if warnings:
            print("\n" + "="*70)
            print("VALIDATION WARNINGS")
            print("="*70)
            for warning in warnings:
                print(f"⚠ {warning}")

        print("\n" + "="*70)
        print("SCHEDULE REPORT")
        print("="*70)
        print(format_schedule_report(schedule))

        print("\n" + "="*70)
        print("SAVING RESULTS")
        print("="*70)
        save_to_json(schedule, output_path)

        if lookup:
            class_name, day, hour = lookup
            try:
                entry = lookup_period(schedule, class_name, day, hour)
            except ScheduleLookupError as e:
                print(f"\n✗ Lookup Error: {e}")
                sys.exit(1)
            if entry is None:
                print(f"\nNo lesson scheduled for {class_name} on {day} at {hour}")
            else:
                room = entry.room or "no room"
                print(f"\n{class_name} {day} {hour}: {entry.subject} ({room})")

        print("\n✓ Processing completed successfully!")

    except FileNotFoundError as e:
        print(f"\n✗ File Error: {e}")
        sys.exit(1)
    except FragmentFormatError as e:
        print(f"\n✗ Fragment Error: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"\n✗ Validation Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
