"""XML codec: root/item/field documents ⇄ Record Set.

WHY: Older integrations exchange data as XML. A fixed, flat layout —
one ``item`` element per record, one named ``field`` element per value —
carries the record model without needing a schema per dataset.

HOW: Decoding parses with defusedxml (uploaded documents are untrusted, so
entity expansion and external DTDs are refused) and walks ``item`` children
of the root, reading each ``field``'s ``name`` attribute and text. Encoding
builds an ElementTree, indents it with two spaces and prepends the standard
XML declaration.

Layout:
    <?xml version="1.0" encoding="UTF-8"?>
    <root>
      <item>
        <field name="name">Alice</field>
        <field name="age">30</field>
      </item>
    </root>

RULES:
- Any root tag is accepted on decode; ``root`` is always written on encode
- Only ``item`` children of the root and ``field`` children of an item are
  read; other elements are ignored
- A ``field`` without a ``name`` attribute → DecodeError
- A field with no text decodes as ""
- An item with no fields decodes as an empty record
- Duplicate field names in one item: the later field wins
- Unknown declared encodings → DecodeError
- Characters XML 1.0 forbids (control characters, lone surrogates) are
  written as U+FFFD
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as SafeET

from file_converter.codecs.base import BaseCodec
from file_converter.core.errors import DecodeError
from file_converter.core.formats import DataFormat
from file_converter.core.records import Record, RecordSet, build_record, value_to_text

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

ROOT_TAG = "root"
ITEM_TAG = "item"
FIELD_TAG = "field"
NAME_ATTR = "name"

# Characters outside the XML 1.0 Char production (C0 controls other than
# tab, LF and CR; surrogates; U+FFFE and U+FFFF).
_INVALID_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _xml_safe(text: str) -> str:
    """Replace characters XML 1.0 cannot carry with U+FFFD."""
    return _INVALID_XML_CHARS.sub("\ufffd", text)


class XMLCodec(BaseCodec):
    """Codec for flat root/item/field XML documents."""

    format = DataFormat.XML

    @property
    def name(self) -> str:
        return "XML"

    def decode(self, data: bytes) -> RecordSet:
        try:
            root = SafeET.fromstring(data)
        except DefusedXmlException as exc:
            raise DecodeError(self.format.value, "forbidden XML construct: {}".format(exc)) from exc
        except (ET.ParseError, LookupError, ValueError) as exc:
            raise DecodeError(self.format.value, str(exc)) from exc

        return [
            self._decode_item(item, index)
            for index, item in enumerate(root.findall(ITEM_TAG))
        ]

    def _decode_item(self, item: ET.Element, item_index: int) -> Record:
        pairs = []
        for field in item.findall(FIELD_TAG):
            key = field.get(NAME_ATTR)
            if key is None:
                raise DecodeError(
                    self.format.value,
                    "field in item {} has no '{}' attribute".format(item_index, NAME_ATTR),
                )
            pairs.append((key, field.text or ""))
        return build_record(pairs)

    def encode(self, records: RecordSet) -> bytes:
        root = ET.Element(ROOT_TAG)
        for record in records:
            item = ET.SubElement(root, ITEM_TAG)
            for key, value in record.items():
                field = ET.SubElement(item, FIELD_TAG, {NAME_ATTR: _xml_safe(key)})
                field.text = _xml_safe(value_to_text(value))
        ET.indent(root, space="  ")
        body = ET.tostring(root, encoding="unicode")
        return self._to_bytes(XML_DECLARATION + body + "\n")
