"""
Property extraction across all supported formats.
"""

import io
from os import PathLike
from typing import BinaryIO, Dict, List, Optional, Union

from docprops.config import EXTRACTOR_NAMES, ExtractionConfig
from docprops.exceptions import StreamUnreadable
from docprops.extractors import (
    BaseFormatExtractor,
    EmbeddedXmpExtractor,
    PackagePropertyExtractor,
    RawXmpPacketExtractor,
)
from docprops.logging import get_logger
from docprops.model.outcome import ExtractionOutcome, ExtractionReport

Source = Union[str, PathLike, BinaryIO]

EXTRACTOR_REGISTRY = {
    "package_properties": PackagePropertyExtractor,
    "embedded_xmp": EmbeddedXmpExtractor,
    "raw_pdf_xmp": RawXmpPacketExtractor,
}


class PropertyExtractor:
    """
    Runs every enabled format extractor against one input and merges the results.

    Merge policy is first-writer-wins: a key reported by an earlier extractor is
    never overwritten by a later one. A failing extractor contributes nothing and
    never aborts the parse; only an unreadable input is fatal.
    """

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        extractors: Optional[List[BaseFormatExtractor]] = None,
    ):
        """
        Initialize the aggregator.

        Args:
            config: Extraction configuration (defaults to all extractors enabled)
            extractors: Explicit extractor list, run in the given order. Mostly
                useful for tests; normally built from the registry.
        """
        self.config = config or ExtractionConfig()
        self.logger = get_logger(self.__class__.__name__)

        if extractors is not None:
            self.extractors = list(extractors)
        else:
            enabled = set(self.config.enabled_extractors)
            self.extractors = [
                EXTRACTOR_REGISTRY[name](debug=self.config.debug)
                for name in EXTRACTOR_NAMES
                if name in enabled
            ]

    def parse(self, source: Source) -> Dict[str, str]:
        """Return the merged property map for a file path or an open binary stream."""
        return self.run(source).properties

    def run(self, source: Source) -> ExtractionReport:
        """
        Run all extractors and return the merged map with per-extractor outcomes.

        A path is opened and closed here; a stream is left open for the caller.

        Raises:
            StreamUnreadable: if the input cannot be opened, read or rewound
        """
        if isinstance(source, (str, PathLike)):
            try:
                stream = open(source, "rb")
            except OSError as e:
                raise StreamUnreadable(f"Cannot open {source}: {e}") from e
            with stream:
                return self._run_stream(stream, str(source))

        name = str(getattr(source, "name", "<stream>"))
        return self._run_stream(self._seekable(source), name)

    @staticmethod
    def _seekable(stream: BinaryIO) -> BinaryIO:
        try:
            if stream.seekable():
                return stream
            return io.BytesIO(stream.read())
        except (OSError, ValueError) as e:
            raise StreamUnreadable(f"Cannot read input stream: {e}") from e

    def _run_stream(self, stream: BinaryIO, source_name: str) -> ExtractionReport:
        report = ExtractionReport(source=source_name)

        for extractor in self.extractors:
            try:
                stream.seek(0)
            except (OSError, ValueError) as e:
                raise StreamUnreadable(f"Cannot rewind input stream: {e}") from e

            try:
                outcome = ExtractionOutcome.success(extractor.name, extractor.extract(stream))
            except StreamUnreadable:
                raise
            except Exception as e:
                outcome = ExtractionOutcome.failure(extractor.name, e)
                self.logger.warning(f"{extractor.name}: {type(e).__name__}: {e}")

            added = report.merge(outcome)
            if outcome.is_success:
                self.logger.debug(
                    f"{extractor.name} reported {len(outcome.properties)} properties, {added} new"
                )

        self.logger.info(
            f"Extracted {len(report.properties)} properties from {source_name} "
            f"({len(report.failures)}/{len(report.outcomes)} extractors failed)"
        )
        return report
