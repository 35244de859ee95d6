"""src/urikit/exceptions.py

Urikit Exceptions hierarchy.
"""


class UrikitError(Exception):
    """Base exception for all Urikit errors."""


class ParseError(UrikitError):
    """General exception for parsing errors."""


class MalformedURIError(ParseError):
    """
    Input could not be split into components.
    Raised when the scheme delimiter is missing or the scheme is empty.
    """

    def __init__(self, message: str = "Malformed URI: missing scheme"):
        super().__init__(message)


class BuildError(UrikitError):
    """General exception for errors while building a URI string."""


class MissingSchemeError(BuildError):
    """A URI was built without a scheme."""

    def __init__(self, message: str = "Cannot build a URI without a scheme"):
        super().__init__(message)
