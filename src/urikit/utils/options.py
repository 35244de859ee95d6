"""src/urikit/utils/options.py

Build options configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildOptions:
    """
    Build options configuration.

    Instances are immutable, so one object can be shared by many records.

    Attributes:
        insert_path_separator: Insert "/" between the authority and a
            following query or fragment when the path is absent or empty.
            Off by default, so "http://host?q=1" is kept as is.
        require_scheme: Raise MissingSchemeError when building without a
            scheme. When disabled, the "scheme:" prefix is omitted.
    """

    insert_path_separator: bool = False
    require_scheme: bool = True

    @classmethod
    def canonical(cls) -> "BuildOptions":
        """Create options that always separate the authority from a query or fragment."""
        return cls(insert_path_separator=True)
