"""src/urikit/utils/output.py

Printing helpers for URI records.
"""

import sys
from typing import Optional, TextIO

from urikit.component import Component
from urikit.uri import URI

__all__ = ["print_uri", "print_debug"]


def print_uri(uri: URI, file: Optional[TextIO] = None) -> None:
    """Write the built string to stdout (or file), without a trailing newline."""
    stream = file if file is not None else sys.stdout
    stream.write(uri.to_string())
    stream.flush()


def print_debug(uri: URI, file: Optional[TextIO] = None) -> None:
    """
    Write every slot of the record, one line each, in Component order.

    Lines read "<index>" for an absent slot and "<index> - <value>" otherwise.
    The BUILT slot is shown as stored, so a stale cache is visible.
    """
    stream = file if file is not None else sys.stdout
    for kind in Component:
        value = uri.get(kind)
        if value is None:
            stream.write(f"{int(kind)}\n")
        else:
            stream.write(f"{int(kind)} - {value}\n")
    stream.flush()
