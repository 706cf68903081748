"""Pytest configuration and fixtures for docprops tests."""

import io
import zipfile
from typing import Callable, Optional

import pytest
from loguru import logger
from PIL import Image, PngImagePlugin

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '</Types>'
)

CUSTOM_XML_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Properties xmlns="http://schemas.openxmlformats.org/officeDocument/2006/custom-properties" '
    'xmlns:vt="http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes">'
    '{properties}'
    '</Properties>'
)

PDF_XMP_PACKET = (
    b'<?xpacket begin="\xef\xbb\xbf" id="W5M0MpCehiHzreSzNTczkc9d"?>\n'
    b'<x:xmpmeta xmlns:x="adobe:ns:meta/">\n'
    b'<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">\n'
    b'<rdf:Description rdf:about="" xmlns:dc="http://purl.org/dc/elements/1.1/" '
    b'xmlns:pdf="http://ns.adobe.com/pdf/1.3/">\n'
    b'<dc:title>Report</dc:title>\n'
    b'<pdf:Producer>LibreOffice 7.5</pdf:Producer>\n'
    b'<dc:creator><rdf:Seq><rdf:li>Alice</rdf:li></rdf:Seq></dc:creator>\n'
    b'</rdf:Description>\n'
    b'</rdf:RDF>\n'
    b'</x:xmpmeta>\n'
    b'<?xpacket end="w"?>'
)

IMAGE_XMP_PACKET = (
    '<?xpacket begin="\ufeff" id="W5M0MpCehiHzreSzNTczkc9d"?>'
    '<x:xmpmeta xmlns:x="adobe:ns:meta/">'
    '<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">'
    '<rdf:Description rdf:about="" xmlns:xmp="http://ns.adobe.com/xap/1.0/" '
    'xmlns:dc="http://purl.org/dc/elements/1.1/" xmp:Rating="5">'
    '<xmp:CreatorTool>Camera Firmware 1.0</xmp:CreatorTool>'
    '<dc:subject><rdf:Bag><rdf:li>landscape</rdf:li><rdf:li>sunset</rdf:li></rdf:Bag></dc:subject>'
    '</rdf:Description>'
    '</rdf:RDF>'
    '</x:xmpmeta>'
    '<?xpacket end="w"?>'
)


def wrap_pdf(body: bytes) -> bytes:
    """Embed ``body`` in a minimal PDF-looking byte stream with binary noise."""
    return (
        b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n"
        b"1 0 obj\n<< /Type /Metadata /Subtype /XML >>\nstream\r\n"
        + body
        + b"\r\nendstream\nendobj\n"
        b"2 0 obj\n<< /Length 4 /Filter /FlateDecode >>\nstream\n\x78\x9c\xff\xfe\nendstream\nendobj\n"
        b"trailer\n<< /Root 1 0 R >>\n%%EOF\n"
    )


@pytest.fixture
def make_package() -> Callable[[Optional[str]], bytes]:
    """Factory building an OOXML package, with ``docProps/custom.xml`` when given."""

    def _make(custom_properties: Optional[str]) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            archive.writestr("[Content_Types].xml", CONTENT_TYPES)
            archive.writestr("word/document.xml", "<document/>")
            if custom_properties is not None:
                archive.writestr("docProps/custom.xml", CUSTOM_XML_TEMPLATE.format(properties=custom_properties))
        return buffer.getvalue()

    return _make


@pytest.fixture
def author_package(make_package) -> bytes:
    return make_package(
        '<property fmtid="{D5CDD505-2E9C-101B-9397-08002B2CF9AE}" pid="2" name="Author">'
        '<vt:lpwstr>Alice</vt:lpwstr></property>'
    )


@pytest.fixture
def make_pdf() -> Callable[[bytes], bytes]:
    return wrap_pdf


@pytest.fixture
def pdf_bytes() -> bytes:
    return wrap_pdf(PDF_XMP_PACKET)


@pytest.fixture
def make_png() -> Callable[[Optional[str]], bytes]:
    """Factory building a small PNG, with an XMP iTXt chunk when given."""

    def _make(xmp: Optional[str]) -> bytes:
        buffer = io.BytesIO()
        pnginfo = PngImagePlugin.PngInfo()
        if xmp is not None:
            pnginfo.add_itxt("XML:com.adobe.xmp", xmp)
        Image.new("RGB", (4, 4), "white").save(buffer, "PNG", pnginfo=pnginfo)
        return buffer.getvalue()

    return _make


@pytest.fixture
def png_with_xmp(make_png) -> bytes:
    return make_png(IMAGE_XMP_PACKET)


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)
