"""docprops - flat document property extraction from OOXML packages, images and PDFs."""

__version__ = "0.1.0"

from docprops.config import ExtractionConfig, load_config
from docprops.exceptions import (
    DocPropsError,
    DuplicateKey,
    ExtractionError,
    MalformedXmpPacket,
    NoXmpData,
    PartNotFound,
    StreamUnreadable,
)
from docprops.model.outcome import ExtractionOutcome, ExtractionReport, ExtractionStatus
from docprops.property_extractor import PropertyExtractor

__all__ = [
    "PropertyExtractor",
    "ExtractionConfig",
    "load_config",
    "ExtractionOutcome",
    "ExtractionReport",
    "ExtractionStatus",
    "DocPropsError",
    "ExtractionError",
    "PartNotFound",
    "NoXmpData",
    "MalformedXmpPacket",
    "DuplicateKey",
    "StreamUnreadable",
]
