# log_digest/log_digest/core/extractor.py
import re
from typing import FrozenSet, Tuple

from .levels import find_level

# One to three ASCII digits valued 0-255
_OCTET = r'(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|0?[0-9]?[0-9])'
# Only a neighbouring digit disqualifies a match, so `client_10.0.0.1`
# is found and `1.2.3.4.5` yields its first four groups
_IPV4_RE = re.compile(rf'(?<![0-9])(?:{_OCTET}\.){{3}}{_OCTET}(?![0-9])')


def extract_ips(line: str) -> FrozenSet[str]:
    """Extract the distinct IPv4 addresses found in a line

    Octets outside 0-255 never match, so ``999.1.1.1`` is ignored while
    ``300.10.0.0.1`` still yields ``10.0.0.1``.
    """
    return frozenset(_IPV4_RE.findall(line))


def message_key(line: str) -> str:
    """Text after the first level keyword, or the whole line, stripped"""
    match = find_level(line)
    if match is None:
        return line.strip()
    return line[match.end():].strip()


def extract(line: str) -> Tuple[FrozenSet[str], str]:
    """Extract IP addresses and the message key from a log line"""
    return extract_ips(line), message_key(line)
