"""Escaping of item identifiers for the service-message text protocol."""

import re

_RESERVED = re.compile(r"['|\[\]]")
_WIDE = re.compile(r"[\u0100-\U0010ffff]")


def sanitize(raw: str) -> str:
    """Escape a name so it can be embedded in a service message.

    Reserved characters are prefixed with ``|``. Only the first newline and
    the first carriage return are rewritten, matching the single-occurrence
    replace of the service-message convention. Characters outside Latin-1
    are rendered as ``| 0x`` followed by their code point in hex.
    """
    escaped = _RESERVED.sub(r"|\g<0>", raw)
    escaped = escaped.replace("\n", "|n", 1)
    escaped = escaped.replace("\r", "|r", 1)
    return _WIDE.sub(lambda match: f"| 0x{ord(match.group()):04x}", escaped)
