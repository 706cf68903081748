from typing import BinaryIO, Dict

from docprops.exceptions import NoXmpData
from docprops.extractors.base_extractor import BaseFormatExtractor
from docprops.image_metadata import XmpDirectory, read_metadata


class EmbeddedXmpExtractor(BaseFormatExtractor):
    """
    Extractor for XMP embedded in raster images (JPEG, PNG, WebP, TIFF).

    Property paths are reduced to a bare name by dropping everything up to and
    including the first ``:``, so ``xmp:CreatorTool`` becomes ``CreatorTool``
    and ``dc:subject[2]`` becomes ``subject[2]``.
    """

    name = "embedded_xmp"

    def extract(self, stream: BinaryIO) -> Dict[str, str]:
        directory = next((d for d in read_metadata(stream) if isinstance(d, XmpDirectory)), None)
        if directory is None:
            raise NoXmpData("Image has no XMP directory")

        mappings = {}
        for path, value in directory.properties:
            key = path.split(":", 1)[1] if ":" in path else path
            self._add_property(mappings, key, value)
        return self._finalize(mappings)
