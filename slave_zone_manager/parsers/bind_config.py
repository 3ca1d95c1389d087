import logging
import re
from typing import Iterable, Iterator, Optional, Tuple

from ..core.errors import ZoneParseError

logger = logging.getLogger(__name__)

# One "rndc addzone" stanza per line, as BIND writes them to its .nzf file:
# zone "example.com" {type slave; file "slave/example.com.db"; masters { 10.0.0.1; };};
ZONE_LINE_REGEX = re.compile(
    r'zone "?([^\s"{]+)"?\s*{type\s+slave;\s*file\s+"[^"]+";\s*'
    r"masters\s*{\s*([^;]+)\s*;\s*}\s*;\s*}\s*;"
)
IGNORED_LINE_REGEX = re.compile(r"^\s*(#.*)?$")


def parse_line(
    line: str, line_number: Optional[int] = None
) -> Optional[Tuple[str, str]]:
    """
    Parse a single line of BIND's zone file.

    Args:
        line: The line to parse, without its trailing newline
        line_number: 1-based position of the line, used in errors

    Returns:
        A (zone, master) tuple, or None for blank and comment lines

    Raises:
        ZoneParseError: If the line is not a slave zone stanza
    """
    if IGNORED_LINE_REGEX.match(line):
        return None

    match = ZONE_LINE_REGEX.search(line)
    if match is None:
        raise ZoneParseError(line, line_number)

    return match.group(1), match.group(2).rstrip()


def parse_zone_dump(reader: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Yield (zone, master) pairs from a text stream, stopping at the first invalid line."""
    for line_number, line in enumerate(reader, start=1):
        parsed = parse_line(line.rstrip("\r\n"), line_number)
        if parsed is not None:
            yield parsed
