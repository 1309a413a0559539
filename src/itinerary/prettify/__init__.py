"""Itinerary text prettifying package."""

from itinerary.prettify.normalize import normalize
from itinerary.prettify.service import LinePrettifier, prettify, process_line
from itinerary.prettify.stats import TokenStats

__all__ = [
    "LinePrettifier",
    "TokenStats",
    "normalize",
    "prettify",
    "process_line",
]
