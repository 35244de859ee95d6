"""tests/unit/test_component.py"""

from urikit.component import URI_COMPONENTS, Component


def test_component_order():
    """Verify components are indexed in assembly order with the cache last."""
    assert [c.name for c in Component] == [
        "SCHEME",
        "USERINFO",
        "HOST",
        "PORT",
        "PATH",
        "QUERY",
        "FRAGMENT",
        "BUILT",
    ]
    assert [int(c) for c in Component] == list(range(8))


def test_uri_components_exclude_cache():
    """Verify URI_COMPONENTS holds only the seven real components."""
    assert len(URI_COMPONENTS) == 7
    assert Component.BUILT not in URI_COMPONENTS
