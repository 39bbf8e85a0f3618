"""Input readers for room layouts."""

from .events import load_events, parse_events, replay

__all__ = ["load_events", "parse_events", "replay"]
