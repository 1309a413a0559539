"""CLI for itinerary prettifying."""

import argparse
import logging
import sys
from pathlib import Path

from itinerary.prettify.service import LinePrettifier
from itinerary.prettify.stats import TokenStats
from itinerary.reference.airports import MalformedLookup, load_lookup

USAGE_EXAMPLE = "itinerary-prettifier ./input.txt ./output.txt ./airport-lookup.csv"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="itinerary-prettifier",
        description="Prettify a plain-text itinerary: resolve airport codes and reformat timestamps",
        epilog=f"Example: {USAGE_EXAMPLE}",
    )
    parser.add_argument("input", help="Itinerary text file to read")
    parser.add_argument("output", help="File to write the prettified itinerary to")
    parser.add_argument("lookup", help="Airport lookup CSV (iata_code, icao_code, name, municipality)")
    parser.add_argument(
        "--stats",
        "-s",
        action="store_true",
        help="Print token statistics after processing",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def _print_stats(stats: TokenStats) -> None:
    summary = stats.to_dict()
    print(f"\nLines: {summary['total_lines']}")
    print(f"Resolved codes: {summary['resolved_codes']}")
    print(f"Formatted timestamps: {summary['formatted_datetimes']}")
    df = stats.unresolved_dataframe()
    if not df.empty:
        print("\nLeft unchanged:")
        print(df.to_string(index=False))
    print()


def main(argv=None) -> None:
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    input_path = Path(args.input)
    lookup_path = Path(args.lookup)

    if not input_path.is_file():
        print("Input not found", file=sys.stderr)
        sys.exit(1)
    if not lookup_path.is_file():
        print("Airport lookup not found", file=sys.stderr)
        sys.exit(1)

    try:
        table = load_lookup(lookup_path)
    except MalformedLookup as e:
        print("Airport lookup malformed", file=sys.stderr)
        if args.verbose:
            print(f"  {e}", file=sys.stderr)
        sys.exit(1)

    text = input_path.read_text(encoding="utf-8", errors="replace")
    stats = TokenStats() if args.stats else None
    result = LinePrettifier(table).process(text, stats)

    with open(args.output, "w", encoding="utf-8", newline="\n") as f:
        f.write(result)

    if stats is not None:
        _print_stats(stats)


if __name__ == "__main__":
    main()
