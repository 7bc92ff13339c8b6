"""Supported format enum and immutable descriptor table.

WHY: Callers name formats by file extension ("json", "csv"). The converter
needs a closed set of format tags to dispatch on, and the HTTP API needs a
content type for each. Keeping both in one static table avoids the two
drifting apart.

HOW: DataFormat is a str-valued enum (one member per format). FORMAT_TABLE
maps each member to a frozen SupportedFormat descriptor. lookup_format()
resolves user-supplied names case-insensitively.

RULES:
- Exactly four formats: json, csv, xml, txt
- Descriptors are frozen dataclasses — process-wide constants
- Table order is the presentation order (json, csv, xml, txt)
- lookup_format() returns None for unknown names; callers pick the error
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Optional, Union


class DataFormat(str, enum.Enum):
    """Closed set of supported text formats.

    Inherits from str so members compare equal to their extension and
    serialize cleanly to JSON.
    """

    JSON = "json"
    CSV = "csv"
    XML = "xml"
    TXT = "txt"


@dataclass(frozen=True)
class SupportedFormat:
    """Static description of one supported format.

    Attributes:
        name: Human-readable name, e.g. ``"JSON"``.
        extension: File-extension-style identifier, e.g. ``"json"``.
        content_type: MIME type used when serving converted output.
    """

    name: str
    extension: str
    content_type: str


FORMAT_TABLE: Dict[DataFormat, SupportedFormat] = {
    DataFormat.JSON: SupportedFormat(name="JSON", extension="json", content_type="application/json"),
    DataFormat.CSV: SupportedFormat(name="CSV", extension="csv", content_type="text/csv"),
    DataFormat.XML: SupportedFormat(name="XML", extension="xml", content_type="application/xml"),
    DataFormat.TXT: SupportedFormat(name="Text", extension="txt", content_type="text/plain"),
}


def lookup_format(name: Union[str, DataFormat, None]) -> Optional[DataFormat]:
    """Resolve a format name to its DataFormat member.

    RULES:
    - DataFormat members are returned unchanged
    - Strings match the extension, ignoring case and surrounding whitespace
    - A leading dot is accepted (".csv" → csv)
    - Anything else returns None
    """
    if isinstance(name, DataFormat):
        return name
    if not isinstance(name, str):
        return None
    key = name.strip().lower()
    if key.startswith("."):
        key = key[1:]
    try:
        return DataFormat(key)
    except ValueError:
        return None
