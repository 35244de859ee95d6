"""Unit tests for urikit.builder module."""

import pytest

from urikit.builder import build
from urikit.component import Component
from urikit.exceptions import MissingSchemeError
from urikit.utils.options import BuildOptions


def make(**values):
    """Return a component list from keyword values."""
    data = [None] * len(Component)
    for name, value in values.items():
        data[Component[name.upper()]] = value
    return data


class TestBuild:
    """Tests for build()."""

    def test_build_all_components(self):
        """Test separators are inserted in fixed order."""
        data = make(
            scheme="https",
            userinfo="alice",
            host="example.com",
            port="8080",
            path="/a/b",
            query="x=1",
            fragment="frag",
        )
        assert build(data) == "https://alice@example.com:8080/a/b?x=1#frag"

    def test_build_scheme_only(self):
        """Test a lone scheme still gets its ':'."""
        assert build(make(scheme="about")) == "about:"

    def test_build_without_host_skips_authority(self):
        """Test no '//' is written without a host."""
        assert build(make(scheme="file", path="/etc/passwd")) == "file:/etc/passwd"

    def test_build_ignores_userinfo_and_port_without_host(self):
        """Test userinfo and port are only written inside an authority."""
        data = make(scheme="http", userinfo="bob", port="80", path="/x")
        assert build(data) == "http:/x"

    def test_build_empty_host(self):
        """Test an empty host still produces an authority."""
        assert build(make(scheme="file", host="", path="/tmp")) == "file:///tmp"

    def test_build_no_separator_between_host_and_query(self):
        """Test no '/' is inserted before '?' when the path is absent."""
        data = make(scheme="http", host="host", query="q=1")
        assert build(data) == "http://host?q=1"

    def test_build_no_separator_between_host_and_fragment(self):
        """Test no '/' is inserted before '#' when the path is absent."""
        data = make(scheme="http", host="host", fragment="top")
        assert build(data) == "http://host#top"

    @pytest.mark.parametrize("path", [None, ""])
    def test_build_canonical_inserts_separator(self, path):
        """Test insert_path_separator adds '/' before a query."""
        data = make(scheme="http", host="host", path=path, query="q=1")
        assert build(data, BuildOptions.canonical()) == "http://host/?q=1"

    def test_build_canonical_keeps_existing_path(self):
        """Test insert_path_separator leaves a present path alone."""
        data = make(scheme="http", host="host", path="/p", query="q=1")
        assert build(data, BuildOptions.canonical()) == "http://host/p?q=1"

    def test_build_canonical_without_host(self):
        """Test insert_path_separator only applies after an authority."""
        data = make(scheme="urn", query="q")
        assert build(data, BuildOptions.canonical()) == "urn:?q"

    def test_build_missing_scheme_raises(self):
        """Test building without a scheme is rejected by default."""
        with pytest.raises(MissingSchemeError):
            build(make(host="example.com"))

    def test_build_missing_scheme_allowed(self):
        """Test require_scheme=False omits the scheme prefix."""
        data = make(host="example.com", path="/x")
        options = BuildOptions(require_scheme=False)
        assert build(data, options) == "//example.com/x"

    def test_build_is_idempotent(self):
        """Test repeated builds give identical output."""
        data = make(scheme="http", host="h", path="/p")
        assert build(data) == build(data)

    def test_build_accepts_record_without_cache_slot(self):
        """Test a sequence of only the seven components is accepted."""
        data = make(scheme="http", host="h")[: Component.BUILT]
        assert build(data) == "http://h"
