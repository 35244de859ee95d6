import pytest

from urikit import parse

FULL_URI = "https://alice@example.com:8080/a/b?x=1#frag"


@pytest.fixture
def full_uri():
    """Fixture providing a parsed URI with every component set."""
    return parse(FULL_URI)
