"""Minimal OOXML (Open Packaging Conventions) reader over zipfile."""

import io
import zipfile
from typing import BinaryIO, List

from docprops.exceptions import PartNotFound, UnsupportedFormat


class OpcPackage:
    """Read-only view of a ZIP-based package addressed by part names like ``/docProps/custom.xml``."""

    def __init__(self, archive: zipfile.ZipFile):
        self._archive = archive

    @staticmethod
    def _member_name(part_name: str) -> str:
        return part_name.lstrip("/")

    def part_names(self) -> List[str]:
        return ["/" + name for name in self._archive.namelist() if not name.endswith("/")]

    def has_part(self, part_name: str) -> bool:
        return self._member_name(part_name) in self._archive.namelist()

    def get_part(self, part_name: str) -> BinaryIO:
        """Return the part content as a byte stream.

        Raises:
            PartNotFound: if the package has no such part.
        """
        if not self.has_part(part_name):
            raise PartNotFound(part_name)
        return io.BytesIO(self._archive.read(self._member_name(part_name)))

    def close(self) -> None:
        self._archive.close()

    def __enter__(self) -> "OpcPackage":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def open_package(stream: BinaryIO) -> OpcPackage:
    """Open a stream as a package. The stream itself is left open."""
    try:
        return OpcPackage(zipfile.ZipFile(stream, "r"))
    except zipfile.BadZipFile as e:
        raise UnsupportedFormat(f"Not an OOXML package: {e}") from e
