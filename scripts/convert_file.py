"""Convert a biometric log file to AUB format from the command line.

Usage:
    python scripts/convert_file.py attlog.txt -o converted_aub_format.txt
    python scripts/convert_file.py attlog.txt --mode log_type > out.txt
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from config import get_settings_module  # noqa: E402

from src.aub_converter.aub_converter.container import build_container  # noqa: E402
from src.aub_converter.aub_converter.core.exceptions import DomainError  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    settings = importlib.import_module(get_settings_module())

    parser = argparse.ArgumentParser(description="Convert a tab-separated biometric log to AUB format.")
    parser.add_argument("input", type=Path, help="raw biometric log (.txt)")
    parser.add_argument("-o", "--output", type=Path, help="output file (default: stdout)")
    parser.add_argument(
        "--mode",
        default=getattr(settings, "DIRECTION_MODE", "extras"),
        help="direction flag mode: extras or log_type",
    )
    args = parser.parse_args(argv)

    try:
        container = build_container(
            direction_mode=args.mode,
            allowed_extensions=getattr(settings, "ALLOWED_EXTENSIONS", None),
        )
        service = container.conversion_service
        result = service.convert_upload(args.input.name, args.input.read_bytes())
    except FileNotFoundError:
        print(f"File not found: {args.input}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read {args.input}: {e.strerror or e}", file=sys.stderr)
        return 1
    except DomainError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for s in result.skipped:
        print(f"Line {s.line_number}: {s.reason.value} ({s.field_count} fields) -> {s.raw}", file=sys.stderr)

    if args.output:
        if result.is_empty:
            print("No valid lines found; nothing written.", file=sys.stderr)
            return 1
        try:
            args.output.write_bytes(service.build_download(result.text).content)
        except OSError as e:
            print(f"Cannot write {args.output}: {e.strerror or e}", file=sys.stderr)
            return 1
        print(f"OK: {result.records} lines written to {args.output} (skipped {result.skipped_count})", file=sys.stderr)
    else:
        sys.stdout.write(result.text)
        if result.text:
            sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
