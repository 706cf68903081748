from abc import ABC, abstractmethod
from os import PathLike
from typing import BinaryIO, Dict, Union

from docprops.exceptions import DuplicateKey, StreamUnreadable
from docprops.logging import get_logger


class BaseFormatExtractor(ABC):
    """
    Abstract base class for all format extractors.

    An extractor reads a binary stream positioned at byte 0 and returns a fresh
    ``{key: value}`` map, or raises an ``ExtractionError``. It never closes the
    stream it was given.
    """

    name = "base"

    def __init__(self, debug: bool = False):
        """
        Initialize the base format extractor.

        Args:
            debug: Enable debug logging of every extracted pair
        """
        self.debug = debug
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def extract(self, stream: BinaryIO) -> Dict[str, str]:
        """
        Extract properties from a stream.

        Args:
            stream: Binary stream positioned at the start of the input

        Returns:
            Dictionary of property name to string value (possibly empty)
        """
        pass

    def extract_file(self, file_path: Union[str, PathLike]) -> Dict[str, str]:
        """
        Open a file, extract its properties and close it again.

        Args:
            file_path: Path of the input file

        Returns:
            Dictionary of property name to string value
        """
        try:
            stream = open(file_path, "rb")
        except OSError as e:
            raise StreamUnreadable(f"Cannot open {file_path}: {e}") from e
        with stream:
            return self.extract(stream)

    def _add_property(self, mappings: Dict[str, str], key: str, value: str) -> None:
        """
        Add a pair to this extractor's own result, refusing to overwrite.

        Raises:
            DuplicateKey: if ``key`` was already reported by this extractor
        """
        if key in mappings:
            raise DuplicateKey(key)
        mappings[key] = value

    def _finalize(self, mappings: Dict[str, str]) -> Dict[str, str]:
        if self.debug:
            self.logger.debug(f"Extracted properties: {mappings}")
        else:
            self.logger.debug(f"Extracted {len(mappings)} properties")
        return mappings
