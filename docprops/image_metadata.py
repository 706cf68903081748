"""
Image metadata reader.

Pillow identifies the image container and hands over the raw XMP packet it
found (JPEG APP1, PNG iTXt, WebP chunk or TIFF tag 700). The packet is then
exposed as an ``XmpDirectory`` whose properties are listed as ``(path, value)``
pairs in XMPCore path syntax, for example::

    xmp:CreatorTool                     -> "Adobe Photoshop"
    dc:subject[2]                       -> "landscape"
    Iptc4xmpCore:CreatorContactInfo/Iptc4xmpCore:CiEmailWork -> "a@b.org"
"""

import io
import xml.etree.ElementTree as ET
from typing import BinaryIO, Dict, Iterator, List, Optional, Tuple, Union

from PIL import Image, UnidentifiedImageError

from docprops.exceptions import MalformedXmpPacket, UnsupportedFormat

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
XML_NS = "http://www.w3.org/XML/1998/namespace"

RDF_ARRAYS = {f"{{{RDF_NS}}}Seq", f"{{{RDF_NS}}}Bag", f"{{{RDF_NS}}}Alt"}
RDF_DESCRIPTION = f"{{{RDF_NS}}}Description"

TIFF_XMP_TAG = 700


class Directory:
    """A named group of tags decoded from an image."""

    name = "Directory"

    @property
    def properties(self) -> List[Tuple[str, str]]:
        return []


class XmpDirectory(Directory):
    """XMP packet of an image, walked as an RDF property graph."""

    name = "XMP"

    def __init__(self, root: ET.Element, namespaces: Dict[str, str]):
        self.root = root
        self.namespaces = namespaces  # uri -> prefix

    @classmethod
    def from_packet(cls, packet: Union[bytes, str]) -> "XmpDirectory":
        if isinstance(packet, str):
            packet = packet.encode("utf-8")
        packet = packet.strip(b"\x00 \t\r\n")

        namespaces = {}
        root = None
        try:
            for event, item in ET.iterparse(io.BytesIO(packet), events=("start", "start-ns")):
                if event == "start-ns":
                    prefix, uri = item
                    namespaces.setdefault(uri, prefix)
                elif root is None:
                    root = item
        except ET.ParseError as e:
            raise MalformedXmpPacket(f"Image XMP packet is not well-formed: {e}") from e
        return cls(root, namespaces)

    @property
    def properties(self) -> List[Tuple[str, str]]:
        rdf = self.root if self.root.tag == f"{{{RDF_NS}}}RDF" else self.root.find(f".//{{{RDF_NS}}}RDF")
        if rdf is None:
            return []
        pairs = []
        for description in rdf.findall(RDF_DESCRIPTION):
            pairs.extend(self._walk_resource(description, ""))
        return pairs

    def _qualified_name(self, tag: str) -> str:
        if not tag.startswith("{"):
            return tag
        uri, local = tag[1:].split("}", 1)
        prefix = self.namespaces.get(uri)
        return f"{prefix}:{local}" if prefix else local

    @staticmethod
    def _is_rdf_or_xml(name: str) -> bool:
        return name.startswith(f"{{{RDF_NS}}}") or name.startswith(f"{{{XML_NS}}}")

    def _field_attributes(self, element: ET.Element) -> List[Tuple[str, str]]:
        return [(name, value) for name, value in element.attrib.items() if not self._is_rdf_or_xml(name)]

    def _walk_resource(self, node: ET.Element, base: str) -> Iterator[Tuple[str, str]]:
        """Yield the fields of an rdf:Description (or a struct written in its place)."""
        for name, value in self._field_attributes(node):
            yield self._join(base, self._qualified_name(name)), value
        for child in node:
            yield from self._walk_property(child, self._join(base, self._qualified_name(child.tag)))

    def _walk_property(self, element: ET.Element, path: str) -> Iterator[Tuple[str, str]]:
        resource = element.get(f"{{{RDF_NS}}}resource")
        if resource is not None:
            yield path, resource
            return
        if element.get(f"{{{RDF_NS}}}parseType") == "Resource":
            yield from self._walk_resource(element, path)
            return

        children = list(element)
        if not children:
            if self._field_attributes(element):
                yield from self._walk_resource(element, path)
            else:
                yield path, element.text or ""
            return

        first = children[0]
        if first.tag in RDF_ARRAYS:
            for index, item in enumerate(first.findall(f"{{{RDF_NS}}}li"), 1):
                yield from self._walk_property(item, f"{path}[{index}]")
        elif first.tag == RDF_DESCRIPTION:
            yield from self._walk_resource(first, path)
        else:
            yield from self._walk_resource(element, path)

    @staticmethod
    def _join(base: str, name: str) -> str:
        return f"{base}/{name}" if base else name


def _raw_xmp(image: Image.Image) -> Optional[Union[bytes, str]]:
    for key in ("xmp", "XML:com.adobe.xmp"):
        if image.info.get(key):
            return image.info[key]
    tags = getattr(image, "tag_v2", None)
    if tags is not None and tags.get(TIFF_XMP_TAG):
        return tags[TIFF_XMP_TAG]
    return None


def read_metadata(stream: BinaryIO) -> List[Directory]:
    """Decode the metadata directories of an image stream.

    Raises:
        UnsupportedFormat: if Pillow cannot identify the image.
        MalformedXmpPacket: if the embedded XMP is not well-formed.
    """
    try:
        image = Image.open(stream)
    except UnidentifiedImageError as e:
        raise UnsupportedFormat(f"Not a recognised image: {e}") from e

    directories: List[Directory] = []
    with image:
        packet = _raw_xmp(image)
    if packet:
        directories.append(XmpDirectory.from_packet(packet))
    return directories
