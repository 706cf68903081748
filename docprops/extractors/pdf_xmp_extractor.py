from typing import BinaryIO, Dict

from docprops.exceptions import StreamUnreadable
from docprops.extractors.base_extractor import BaseFormatExtractor
from docprops.extractors.xmp_packet import TextNodeHarvester, XmpPacketLocator


class RawXmpPacketExtractor(BaseFormatExtractor):
    """
    Extractor for an XMP packet stored verbatim in a PDF (or any binary) stream.

    No PDF object model is built: the whole stream is read into memory and
    scanned as text, so packets inside compressed object streams are not seen.
    A stream without a packet yields an empty map.
    """

    name = "raw_pdf_xmp"

    def __init__(self, debug: bool = False):
        super().__init__(debug)
        self.locator = XmpPacketLocator()
        self.harvester = TextNodeHarvester()

    def extract(self, stream: BinaryIO) -> Dict[str, str]:
        try:
            data = stream.read()
        except OSError as e:
            raise StreamUnreadable(f"Cannot read input stream: {e}") from e

        packet = self.locator.find(data)
        if packet is None:
            self.logger.debug("No XMP packet found")
            return {}

        self.logger.debug(f"Located XMP packet of {len(packet)} characters")
        return self._finalize(self.harvester.harvest_packet(packet))
