"""Award search response parser -- normalized itineraries and award availability."""

__version__ = "0.1.0"
