"""
Format extractors.

Each extractor implements the BaseFormatExtractor interface for one input
format. The set is closed and run by PropertyExtractor in this order:

- PackagePropertyExtractor: OOXML ``/docProps/custom.xml``
- EmbeddedXmpExtractor: XMP embedded in raster images (via Pillow)
- RawXmpPacketExtractor: raw XMP packet found in a PDF byte stream
"""

from docprops.extractors.base_extractor import BaseFormatExtractor
from docprops.extractors.image_xmp_extractor import EmbeddedXmpExtractor
from docprops.extractors.package_extractor import PackagePropertyExtractor
from docprops.extractors.pdf_xmp_extractor import RawXmpPacketExtractor
from docprops.extractors.xmp_packet import TextNodeHarvester, XmpPacketLocator

__all__ = [
    "BaseFormatExtractor",
    "PackagePropertyExtractor",
    "EmbeddedXmpExtractor",
    "RawXmpPacketExtractor",
    "XmpPacketLocator",
    "TextNodeHarvester",
]
