"""Tests for the Uri record."""

from __future__ import annotations

import os

import pytest

from vcsuri.exceptions import InvalidUriError, VcsUriError
from vcsuri.uri import Uri


class TestUriCreation:
    def test_minimal_uri(self):
        u = Uri(scheme="untitled", path="Untitled-1")
        assert u.scheme == "untitled"
        assert u.authority == ""
        assert u.query == ""
        assert u.fragment == ""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            pytest.param("/repo/a.txt", "/repo/a.txt", id="absolute"),
            pytest.param("repo/a.txt", "/repo/a.txt", id="relative"),
            pytest.param("C:\\repo\\a.txt", "/C:/repo/a.txt", id="windows"),
        ],
    )
    def test_file(self, path: str, expected: str):
        u = Uri.file(path)
        assert u.scheme == "file"
        assert u.path == expected

    def test_fs_path_posix(self):
        assert Uri.file("/repo/a.txt").fs_path == "/repo/a.txt"

    def test_fs_path_strips_drive_slash(self):
        assert Uri.file("C:\\repo\\a.txt").fs_path == "C:/repo/a.txt"


class TestUriImmutability:
    def test_cannot_set_field(self):
        u = Uri.file("/a")
        with pytest.raises(AttributeError):
            u.path = "/b"  # type: ignore[misc]

    def test_with_returns_copy(self):
        u = Uri.file("/a")
        v = u.with_(path="/b", query="q")
        assert v == Uri(scheme="file", path="/b", query="q")
        assert u == Uri(scheme="file", path="/a")

    def test_with_unknown_field_raises(self):
        with pytest.raises(TypeError):
            Uri.file("/a").with_(port=80)

    def test_hashable(self):
        assert len({Uri.file("/a"), Uri.file("/a"), Uri.file("/b")}) == 2


class TestUriString:
    def test_render_file(self):
        assert str(Uri.file("/repo/a.txt")) == "file:///repo/a.txt"

    def test_render_without_slash(self):
        assert str(Uri(scheme="untitled", path="Untitled-1")) == "untitled:Untitled-1"

    def test_render_escapes_reserved_characters(self):
        s = str(Uri.file("/repo/a b#c?.txt"))
        assert s == "file:///repo/a%20b%23c%3F.txt"

    def test_render_undecodable_bytes(self):
        s = str(Uri.file(os.fsdecode(b"/repo/\xff.txt")))
        assert s == "file:///repo/%FF.txt"

    @pytest.mark.parametrize(
        "uri",
        [
            pytest.param(Uri.file("/repo/a.txt"), id="file"),
            pytest.param(Uri.file("/repo/with space/ü.txt"), id="unicode-and-space"),
            pytest.param(Uri(scheme="https", authority="example.com", path="/x"), id="authority"),
            pytest.param(
                Uri(scheme="git", path="/r/a.txt", query='{"path":"/r/a.txt","ref":"HEAD"}'),
                id="json-query",
            ),
            pytest.param(Uri(scheme="git", path="/r/%41.txt", query="a=1&b=2#x"), id="percent"),
            pytest.param(Uri(scheme="file", path="/r/a.txt", fragment="L10"), id="fragment"),
            pytest.param(Uri.file(os.fsdecode(b"/repo/\xff.txt")), id="undecodable-bytes"),
        ],
    )
    def test_parse_inverts_str(self, uri: Uri):
        assert Uri.parse(str(uri)) == uri

    def test_parse_missing_scheme(self):
        with pytest.raises(InvalidUriError):
            Uri.parse("/repo/a.txt")

    def test_invalid_uri_error_hierarchy(self):
        assert issubclass(InvalidUriError, VcsUriError)
        assert issubclass(InvalidUriError, ValueError)
