"""
Locating and harvesting a raw XMP packet inside an opaque byte stream.

This is split in two independent steps:

1. **Locate** (``XmpPacketLocator``): decode the bytes, drop line breaks and
   cut out the first ``<?xpacket begin ...?> ... <?xpacket end ...?>`` span.
   The match is purely textual. A literal ``<?xpacket end`` inside a property
   value would end the packet early; that is a known limitation.
2. **Harvest** (``TextNodeHarvester``): parse the span as XML and collect every
   leaf element (first child node is text) as ``local name -> text``.
   Structured properties such as ``rdf:Seq``/``rdf:Alt`` containers are
   skipped, their ``rdf:li`` items are leaves like any other.
"""

import xml.etree.ElementTree as ET
from typing import Dict, Optional

from docprops.common.regex_patterns import LINE_BREAK_PATTERN, XMP_PACKET_PATTERN
from docprops.exceptions import DuplicateKey, MalformedXmpPacket


class XmpPacketLocator:
    """Finds the first XMP packet in decoded text."""

    @staticmethod
    def normalize(data: bytes) -> str:
        """Decode as UTF-8 (invalid bytes replaced) and remove every CR and LF."""
        text = data.decode("utf-8", errors="replace")
        return LINE_BREAK_PATTERN.sub("", text)

    @staticmethod
    def locate(text: str) -> Optional[str]:
        """Return the first packet span in ``text``, or None when there is none."""
        match = XMP_PACKET_PATTERN.search(text)
        return match.group(0) if match else None

    def find(self, data: bytes) -> Optional[str]:
        return self.locate(self.normalize(data))


class TextNodeHarvester:
    """Collects scalar leaf properties from a located XMP packet."""

    @staticmethod
    def parse(packet: str) -> ET.Element:
        try:
            return ET.fromstring(packet)
        except ET.ParseError as e:
            raise MalformedXmpPacket(f"XMP packet is not well-formed XML: {e}") from e

    @staticmethod
    def local_name(tag: str) -> str:
        return tag.rsplit("}", 1)[-1]

    @staticmethod
    def is_leaf(element: ET.Element) -> bool:
        # whitespace-only text between elements is formatting, not a value
        return bool(element.text and element.text.strip())

    def harvest(self, root: ET.Element) -> Dict[str, str]:
        """Walk all descendants of ``root`` in document order.

        Raises:
            DuplicateKey: if two leaves share a local name
        """
        properties = {}
        for element in root.iter():
            if element is root or not self.is_leaf(element):
                continue
            key = self.local_name(element.tag)
            if key in properties:
                raise DuplicateKey(key)
            properties[key] = element.text
        return properties

    def harvest_packet(self, packet: str) -> Dict[str, str]:
        return self.harvest(self.parse(packet))
