"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src is on path when running tests without installed package
root = Path(__file__).resolve().parent.parent
src = root / "src"
if src.exists() and str(src) not in sys.path:
    sys.path.insert(0, str(src))

from itinerary.reference.airports import LookupTable  # noqa: E402

LOOKUP_CSV = """name,iso_country,municipality,icao_code,iata_code,coordinates
John F Kennedy International Airport,US,New York,KJFK,JFK,-73.77 40.63
Los Angeles International Airport,US,Los Angeles,KLAX,LAX,-118.40 33.94
Hong Kong International Airport,HK,Hong Kong,VHHH,HKG,113.91 22.30
"""


@pytest.fixture
def lookup_csv() -> str:
    return LOOKUP_CSV


@pytest.fixture
def table() -> LookupTable:
    return LookupTable.from_text(LOOKUP_CSV)
