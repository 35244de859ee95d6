"""src/urikit/parser.py

Single-pass URI scanner for Urikit.
"""

import logging
from typing import Optional

from urikit.component import Component
from urikit.exceptions import MalformedURIError
from urikit.uri import URI
from urikit.utils.options import BuildOptions

__all__ = ["parse"]

logger = logging.getLogger(__name__)


def _scan(text: str, start: int, stops: str) -> int:
    """Return the index of the first character in stops at or after start, or len(text)."""
    end = len(text)
    while start < end and text[start] not in stops:
        start += 1
    return start


def parse(text: str, options: Optional[BuildOptions] = None) -> URI:
    """
    Split a URI string into its components.

    The input is scanned once, left to right:
    scheme ":" ["//" [userinfo "@"] host [":" port]] path ["?" query] ["#" fragment]

    No validation is done beyond locating the scheme. A missing delimiter
    ends the component list early; it is not an error. Query and fragment
    are stored without their "?" and "#" markers.

    Args:
        text: URI string.
        options: Build options attached to the returned record.

    Returns:
        A URI with its built string already populated.

    Raises:
        MalformedURIError: If there is no ":" in the input or the scheme is empty.
    """
    if not isinstance(text, str):
        raise TypeError(f"URI must be str, not {type(text).__name__}")

    colon = text.find(":")
    if colon < 0:
        logger.debug("Rejected %r: no scheme delimiter", text)
        raise MalformedURIError(f"Malformed URI: no scheme delimiter in {text!r}")
    if colon == 0:
        logger.debug("Rejected %r: empty scheme", text)
        raise MalformedURIError(f"Malformed URI: empty scheme in {text!r}")

    uri = URI(options)
    uri.set(Component.SCHEME, text[:colon])
    current = colon + 1
    end = len(text)

    if text.startswith("//", current):
        current += 2
        working = _scan(text, current, "@:/")

        if working < end and text[working] == "@":
            uri.set(Component.USERINFO, text[current:working])
            current = working + 1
            working = _scan(text, current, ":/")

        uri.set(Component.HOST, text[current:working])

        if working < end and text[working] == ":":
            current = working + 1
            working = _scan(text, current, "/")
            uri.set(Component.PORT, text[current:working])

        if working == end:
            return _finish(uri)

        current = working

    working = _scan(text, current, "?#")
    uri.set(Component.PATH, text[current:working])

    if working < end and text[working] == "?":
        current = working + 1
        working = _scan(text, current, "#")
        uri.set(Component.QUERY, text[current:working])

    if working < end and text[working] == "#":
        uri.set(Component.FRAGMENT, text[working + 1 :])

    return _finish(uri)


def _finish(uri: URI) -> URI:
    uri.build()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Parsed %r into %s", uri.to_string(), uri.components())
    return uri
