"""
OOXML custom document properties.

Reads ``/docProps/custom.xml`` from a Word/Excel/PowerPoint package::

    <Properties xmlns="...custom-properties" xmlns:vt="...docPropsVTypes">
      <property fmtid="{D5CDD505-...}" pid="2" name="Author">
        <vt:lpwstr>Alice</vt:lpwstr>
      </property>
    </Properties>

Each ``property`` element becomes ``name -> text of its first child``.
"""

import xml.etree.ElementTree as ET
from typing import BinaryIO, Dict

from docprops.exceptions import MalformedPart
from docprops.extractors.base_extractor import BaseFormatExtractor
from docprops.package import open_package

CUSTOM_PROPERTIES_PART = "/docProps/custom.xml"


class PackagePropertyExtractor(BaseFormatExtractor):
    """Extractor for the custom-properties part of an OOXML package."""

    name = "package_properties"

    def extract(self, stream: BinaryIO) -> Dict[str, str]:
        with open_package(stream) as package:
            part = package.get_part(CUSTOM_PROPERTIES_PART)
            try:
                root = ET.parse(part).getroot()
            except ET.ParseError as e:
                raise MalformedPart(f"{CUSTOM_PROPERTIES_PART} is not well-formed: {e}") from e

        mappings = {}
        for element in root:
            key = element.get("name")
            if key is None:
                continue
            value_element = next(iter(element), None)
            value = "".join(value_element.itertext()) if value_element is not None else ""
            self._add_property(mappings, key, value)
        return self._finalize(mappings)
