"""src/urikit/__init__.py

Urikit - Minimal URI parser and serializer for Python.

Urikit splits a URI string into its components (scheme, userinfo, host,
port, path, query, fragment), lets you change them one at a time, and
rebuilds the string on demand. It is built entirely on Python's standard
library.

Key Features:
    - Zero external dependencies
    - Single-pass scanner, no validation beyond the scheme
    - Absent and empty components are kept apart
    - Built string cached until the next change
    - Full type hints (PEP 561)

Example:
    Parsing::

        from urikit import parse

        uri = parse('https://alice@example.com:8080/a/b?x=1#frag')
        uri.host  # 'example.com'
        str(uri)  # 'https://alice@example.com:8080/a/b?x=1#frag'

    Building::

        from urikit import URI, Component

        uri = URI()
        uri.set(Component.SCHEME, 'file')
        uri.set(Component.PATH, '/etc/passwd')
        uri.to_string()  # 'file:/etc/passwd'
"""

from urikit.builder import build
from urikit.component import Component
from urikit.exceptions import (
    BuildError,
    MalformedURIError,
    MissingSchemeError,
    ParseError,
    UrikitError,
)
from urikit.parser import parse
from urikit.uri import URI, CacheState, create_empty
from urikit.utils.options import BuildOptions
from urikit.utils.output import print_debug, print_uri
from urikit.version import __version__

__all__ = [
    "URI",
    "Component",
    "CacheState",
    "BuildOptions",
    "create_empty",
    "parse",
    "build",
    "print_uri",
    "print_debug",
    "UrikitError",
    "ParseError",
    "MalformedURIError",
    "BuildError",
    "MissingSchemeError",
    "__version__",
]
