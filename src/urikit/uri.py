"""src/urikit/uri.py

URI component store for Urikit.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from urikit.builder import build
from urikit.component import URI_COMPONENTS, Component
from urikit.exceptions import MissingSchemeError
from urikit.utils.options import BuildOptions

__all__ = ["URI", "CacheState", "create_empty"]


class CacheState(Enum):
    """State of the built-string cache."""

    EMPTY = "empty"
    STALE = "stale"
    FRESH = "fresh"


def _component_property(kind: Component) -> property:
    def getter(self: "URI") -> Optional[str]:
        return self._data[kind]

    def setter(self: "URI", value: Optional[str]) -> None:
        self.set(kind, value)

    def deleter(self: "URI") -> None:
        self.remove(kind)

    return property(
        getter, setter, deleter, doc=f"The {kind.name.lower()} component."
    )


class URI:
    """
    Decomposed URI with a lazily built string form.

    Holds one optional string per Component. Absent slots are None and are
    distinct from empty strings. Every mutation marks the built string stale;
    it is rebuilt on the next read.

    Example::

        uri = URI()
        uri.set(Component.SCHEME, "https")
        uri.set(Component.HOST, "example.com")
        uri.set(Component.PATH, "/index.html")
        str(uri)  # "https://example.com/index.html"
    """

    __slots__ = ("_data", "_state", "_options")

    scheme = _component_property(Component.SCHEME)
    userinfo = _component_property(Component.USERINFO)
    host = _component_property(Component.HOST)
    port = _component_property(Component.PORT)
    path = _component_property(Component.PATH)
    query = _component_property(Component.QUERY)
    fragment = _component_property(Component.FRAGMENT)

    def __init__(self, options: Optional[BuildOptions] = None):
        self._data: List[Optional[str]] = [None] * len(Component)
        self._state = CacheState.EMPTY
        self._options = options if options is not None else BuildOptions()

    @property
    def options(self) -> BuildOptions:
        """Options used to build the string."""
        return self._options

    @options.setter
    def options(self, value: Optional[BuildOptions]) -> None:
        self._options = value if value is not None else BuildOptions()
        self._invalidate()

    @property
    def state(self) -> CacheState:
        """Current state of the built-string cache."""
        return self._state

    def get(self, kind: Component) -> Optional[str]:
        """Return the stored value of a slot without building."""
        return self._data[Component(kind)]

    def set(self, kind: Component, value: Optional[str]) -> None:
        """
        Replace the value of a component.

        Args:
            kind: Component to set. BUILT cannot be set directly.
            value: New value, or None to clear the slot.

        Raises:
            ValueError: If kind is Component.BUILT.
            TypeError: If value is neither a str nor None.
        """
        kind = Component(kind)
        if kind is Component.BUILT:
            raise ValueError("The built slot is managed by the URI itself")
        if value is not None and not isinstance(value, str):
            raise TypeError(
                f"Component value must be str or None, not {type(value).__name__}"
            )

        self._data[kind] = value
        self._invalidate()

    def remove(self, kind: Component) -> Optional[str]:
        """
        Take the value of a component out of the record.

        The slot is left absent and the value is returned to the caller.
        """
        kind = Component(kind)
        if kind is Component.BUILT:
            raise ValueError("The built slot is managed by the URI itself")

        value = self._data[kind]
        self._data[kind] = None
        self._invalidate()
        return value

    def build(self) -> None:
        """Rebuild the cached string from the current components."""
        self._data[Component.BUILT] = build(self._data, self._options)
        self._state = CacheState.FRESH

    def to_string(self) -> str:
        """Return the built string, rebuilding it first if needed."""
        if self._state is not CacheState.FRESH:
            self.build()
        return self._data[Component.BUILT]  # type: ignore[return-value]

    def clear(self) -> None:
        """Release every slot, including the cache."""
        self._data = [None] * len(Component)
        self._state = CacheState.EMPTY

    def copy(self) -> "URI":
        """Return an independent record with the same slots and options."""
        other = URI(self._options)
        other._data = list(self._data)
        other._state = self._state
        return other

    def components(self) -> Dict[Component, str]:
        """Return the present components (excluding the cache) in assembly order."""
        return {
            kind: self._data[kind]  # type: ignore[misc]
            for kind in URI_COMPONENTS
            if self._data[kind] is not None
        }

    def _invalidate(self) -> None:
        if self._state is CacheState.FRESH:
            self._state = CacheState.STALE

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        try:
            return f'<URI: "{self.to_string()}">'
        except MissingSchemeError:
            parts = ", ".join(
                f"{kind.name.lower()}={value!r}"
                for kind, value in self.components().items()
            )
            return f"<URI: {parts}>"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, URI):
            return NotImplemented
        return self.components() == other.components()

    __hash__ = None  # type: ignore[assignment]


def create_empty(options: Optional[BuildOptions] = None) -> URI:
    """Create a URI record with every slot absent."""
    return URI(options)
