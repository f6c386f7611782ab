"""Ingestion layer.

This package turns raw feed payloads into validated vehicle records.
"""

from pympk.ingestion.feed import parse_vehicle_feed, parse_vehicle_record

__all__ = ["parse_vehicle_feed", "parse_vehicle_record"]
