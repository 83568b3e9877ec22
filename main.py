"""Stepwise v1.0 — CLI entry point."""

import argparse
import json
import sys

from stepwise import analyze, generate_report
from stepwise.pipeline import generate_share_text


def create_parser():
    parser = argparse.ArgumentParser(
        prog="stepwise",
        description="Burnout risk estimate from daily step records.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="test_data.json",
        help="JSON list of {date, count} records (default: test_data.json)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    output.add_argument("--share", action="store_true", help="Print the share message")
    return parser


def main():
    args = create_parser().parse_args()

    try:
        result = analyze(args.path)
    except FileNotFoundError as e:
        print(f"File Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Data Validation Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print(generate_report(result))

    if args.share:
        print()
        print(generate_share_text(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
