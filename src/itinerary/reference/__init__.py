"""Reference data lookups for airports."""

from itinerary.reference.airports import (
    REQUIRED_COLUMNS,
    AirportRecord,
    LookupTable,
    MalformedLookup,
    load_lookup,
)

__all__ = [
    "REQUIRED_COLUMNS",
    "AirportRecord",
    "LookupTable",
    "MalformedLookup",
    "load_lookup",
]
