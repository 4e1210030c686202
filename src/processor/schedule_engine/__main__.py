"""Main module for running schedule engine."""

import sys

from schedule_engine.main import process_fragment_file

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python -m schedule_engine <fragments.json>")
        print("\nExample: python -m schedule_engine /path/to/orario_fragments.json")
        sys.exit(1)

    file_path = sys.argv[1]
    process_fragment_file(file_path)
