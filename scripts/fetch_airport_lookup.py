#!/usr/bin/env python3
"""
Download OurAirports airport data and flatten it into the lookup CSV format
read by itinerary-prettifier (name, municipality, icao_code, iata_code).

The lookup format has no quoting, so rows whose name or municipality
contains a comma are dropped.

Usage:
    uv run python scripts/fetch_airport_lookup.py
    uv run python scripts/fetch_airport_lookup.py -o airport-lookup.csv
"""

import argparse
import csv
import io
import sys
from pathlib import Path

import requests
from tqdm import tqdm

AIRPORTS_URL = "https://davidmegginson.github.io/ourairports-data/airports.csv"
OUTPUT_COLUMNS = ("name", "municipality", "icao_code", "iata_code")
CHUNK_SIZE = 64 * 1024


def download(url: str, timeout: int = 30) -> str:
    """Stream a text file with a progress bar."""
    resp = requests.get(url, stream=True, timeout=timeout)
    resp.raise_for_status()
    total = int(resp.headers.get("content-length", 0)) or None
    buf = io.BytesIO()
    with tqdm(total=total, unit="B", unit_scale=True, desc="airports.csv", file=sys.stderr) as bar:
        for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
            buf.write(chunk)
            bar.update(len(chunk))
    return buf.getvalue().decode("utf-8")


def flatten(text: str) -> tuple[list[dict[str, str]], int]:
    """Keep rows usable by the lookup table. Returns (rows, skipped count)."""
    rows: list[dict[str, str]] = []
    skipped = 0
    for row in csv.DictReader(io.StringIO(text)):
        values = {col: (row.get(col) or "").strip() for col in OUTPUT_COLUMNS}
        if not all(values.values()) or any("," in v for v in values.values()):
            skipped += 1
            continue
        rows.append(values)
    return rows, skipped


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch airport lookup data from OurAirports")
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="airport-lookup.csv",
        help="Output CSV file. Default: airport-lookup.csv",
    )
    parser.add_argument("--url", type=str, default=AIRPORTS_URL, help="Source CSV URL")
    args = parser.parse_args()

    print(f"Fetching {args.url}...", file=sys.stderr)
    try:
        text = download(args.url)
    except requests.RequestException as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    rows, skipped = flatten(text)
    out_path = Path(args.output)
    with open(out_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(",".join(OUTPUT_COLUMNS) + "\n")
        for values in rows:
            f.write(",".join(values[col] for col in OUTPUT_COLUMNS) + "\n")
    print(f"Wrote {len(rows)} airports to {out_path} ({skipped} skipped)", file=sys.stderr)


if __name__ == "__main__":
    main()
