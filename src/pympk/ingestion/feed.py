"""Vehicle feed parser.

The feed wraps one ``<p>`` element per vehicle inside ``<VL>``. Each element's
text is a ``", "``-joined field list; only the vehicle id (field 1) and the
longitude/latitude pair (fields 9 and 10) are consumed.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from pympk._constants import (
    FIELD_SEPARATOR,
    LATITUDE_FIELD,
    LONGITUDE_FIELD,
    MIN_FIELD_COUNT,
    VEHICLE_ID_FIELD,
)
from pympk.exceptions import MpkDecodeError, MpkNoRecordsError
from pympk.ingestion.normalize import safe_float
from pympk.models.vehicle import Coordinate, VehicleRecord

_logger = logging.getLogger(__name__)

_LIST_TAG = "VL"
_POINT_TAG = "p"


def parse_vehicle_record(text: str) -> VehicleRecord | None:
    """Parse one ``<p>`` text into a record, ``None`` when it is malformed."""
    fields = text.split(FIELD_SEPARATOR)
    if len(fields) < MIN_FIELD_COUNT:
        _logger.debug("Dropping record with %d fields: %r", len(fields), text[:120])
        return None

    latitude = safe_float(fields[LATITUDE_FIELD])
    longitude = safe_float(fields[LONGITUDE_FIELD])
    if latitude is None or longitude is None:
        _logger.debug("Dropping record with unparseable coordinates: %r", text[:120])
        return None

    return VehicleRecord(
        coordinate=Coordinate(latitude=latitude, longitude=longitude),
        vehicle_id=fields[VEHICLE_ID_FIELD],
    )


def _decode_text(payload: bytes | str) -> str:
    if isinstance(payload, str):
        return payload
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MpkDecodeError(f"Feed response is not UTF-8: {exc}") from exc


def _point_elements(root: ET.Element) -> list[ET.Element]:
    if root.tag != _LIST_TAG:
        return []
    return root.findall(_POINT_TAG)


def parse_vehicle_feed(payload: bytes | str) -> list[VehicleRecord]:
    """Parse a raw feed response into vehicle records in document order.

    Malformed records are skipped. A feed whose vehicle elements are all
    malformed yields an empty list.

    Raises
    ------
    MpkDecodeError
        The payload is not UTF-8 or not well-formed XML.
    MpkNoRecordsError
        The document has no ``VL/p`` elements at all.
    """
    text = _decode_text(payload)
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise MpkDecodeError(f"Feed response is not valid XML: {exc}") from exc

    elements = _point_elements(root)
    if not elements:
        raise MpkNoRecordsError("Unable to find vehicle data in feed response")

    records: list[VehicleRecord] = []
    for element in elements:
        record = parse_vehicle_record((element.text or "").strip())
        if record is not None:
            records.append(record)

    _logger.debug("Parsed %d of %d vehicle elements", len(records), len(elements))
    return records
