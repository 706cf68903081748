"""Common regex patterns used across the extractors."""

import re
from typing import Pattern


# XMP packet wrapper, matched on text with line breaks already removed.
# Non-greedy, so the first end marker after the begin marker closes the packet.
XMP_PACKET_PATTERN: Pattern[str] = re.compile(r'<\?xpacket\s+begin.*?<\?xpacket\s+end.*?\?>', re.DOTALL)
LINE_BREAK_PATTERN: Pattern[str] = re.compile(r'[\r\n]')
