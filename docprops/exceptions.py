"""Error taxonomy for property extraction.

Everything derived from ExtractionError is isolated by the aggregator and only
means "this extractor contributed nothing". StreamUnreadable is fatal.
"""


class DocPropsError(Exception):
    """Base class for all docprops errors."""


class ExtractionError(DocPropsError):
    """A single format extractor could not produce properties."""


class PartNotFound(ExtractionError):
    """The expected part is missing from the package."""

    def __init__(self, part_name: str):
        super().__init__(f"Part not found in package: {part_name}")
        self.part_name = part_name


class MalformedPart(ExtractionError):
    """A package part exists but is not well-formed XML."""


class NoXmpData(ExtractionError):
    """The image carries no XMP directory."""


class MalformedXmpPacket(ExtractionError):
    """The located XMP packet is not well-formed XML."""


class UnsupportedFormat(ExtractionError):
    """The input is not a container this extractor understands."""


class DuplicateKey(ExtractionError):
    """The same key was reported twice by one extractor."""

    def __init__(self, key: str):
        super().__init__(f"Duplicate property key: {key}")
        self.key = key


class StreamUnreadable(DocPropsError):
    """The input itself cannot be opened or read."""


class ConfigError(DocPropsError):
    """The configuration file is missing fields or invalid."""
