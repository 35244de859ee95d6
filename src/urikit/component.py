"""src/urikit/component.py

Component kinds of a URI.
"""

from enum import IntEnum

__all__ = ["Component", "URI_COMPONENTS"]


class Component(IntEnum):
    """
    Slots held by a URI record.

    The first seven members are the URI components in assembly order.
    BUILT is the cache slot for the serialized string, not a real component.
    """

    SCHEME = 0
    USERINFO = 1
    HOST = 2
    PORT = 3
    PATH = 4
    QUERY = 5
    FRAGMENT = 6
    BUILT = 7


URI_COMPONENTS = tuple(c for c in Component if c is not Component.BUILT)
