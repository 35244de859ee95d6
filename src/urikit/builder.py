"""src/urikit/builder.py

URI string builder for Urikit.
"""

from typing import List, Optional, Sequence

from urikit.component import Component
from urikit.exceptions import MissingSchemeError
from urikit.utils.options import BuildOptions

__all__ = ["build"]


def build(
    components: Sequence[Optional[str]],
    options: Optional[BuildOptions] = None,
) -> str:
    """
    Serialize URI components into a single string.

    Components are written in fixed order:
    scheme ":" ["//" [userinfo "@"] host [":" port]] path ["?" query] ["#" fragment]

    The authority section is only written when a host is present, so a
    userinfo or port without a host is left out of the result.

    Args:
        components: Values indexed by Component. Absent slots are None.
        options: Build options. Defaults to BuildOptions().

    Returns:
        The built URI string.

    Raises:
        MissingSchemeError: If no scheme is set and options.require_scheme is true.
    """
    if options is None:
        options = BuildOptions()

    scheme = components[Component.SCHEME]
    userinfo = components[Component.USERINFO]
    host = components[Component.HOST]
    port = components[Component.PORT]
    path = components[Component.PATH]
    query = components[Component.QUERY]
    fragment = components[Component.FRAGMENT]

    parts: List[str] = []

    if scheme is not None:
        parts.append(scheme)
        parts.append(":")
    elif options.require_scheme:
        raise MissingSchemeError()

    if host is not None:
        parts.append("//")

        if userinfo is not None:
            parts.append(userinfo)
            parts.append("@")

        parts.append(host)

        if port is not None:
            parts.append(":")
            parts.append(port)

    if path:
        parts.append(path)
    elif (
        options.insert_path_separator
        and host is not None
        and (query is not None or fragment is not None)
    ):
        parts.append("/")

    if query is not None:
        parts.append("?")
        parts.append(query)

    if fragment is not None:
        parts.append("#")
        parts.append(fragment)

    return "".join(parts)
