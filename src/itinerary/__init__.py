"""Itinerary prettifier: resolve airport codes and timestamps in plain-text itineraries."""

__version__ = "0.1.0"
