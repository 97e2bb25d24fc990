"""Uri — generic resource identifier shared by real and virtual files."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, unquote, urlsplit

from .exceptions import InvalidUriError

FILE_SCHEME = "file"

# Characters left unescaped when rendering each component.
_PATH_SAFE = "/:@!$&'()*+,;="
_QUERY_SAFE = "/:@!$&'()*+,;=?"


def _encode(value: str, safe: str) -> str:
    # Lone surrogates from os.fsdecode() map back to their raw bytes.
    return quote(value, safe=safe, errors="surrogateescape")


def _decode(value: str) -> str:
    return unquote(value, errors="surrogateescape")


@dataclass(frozen=True, slots=True)
class Uri:
    """Immutable resource identifier.

    Components are stored decoded; percent-encoding is applied only when
    the identifier is rendered with ``str()``.

    Attributes:
        scheme: Scheme tag, e.g. ``"file"`` or ``"git"``.
        authority: Host part, usually empty for local resources.
        path: Path component, always using forward slashes.
        query: Query component without the leading ``?``.
        fragment: Fragment component without the leading ``#``.
    """

    scheme: str
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    @classmethod
    def file(cls, path: str) -> Uri:
        """Create a ``file`` Uri from a filesystem path."""
        path = path.replace("\\", "/")
        if not path.startswith("/"):
            path = "/" + path
        return cls(scheme=FILE_SCHEME, path=path)

    @classmethod
    def parse(cls, value: str) -> Uri:
        """Parse a rendered Uri string.

        Raises:
            InvalidUriError: If *value* has no scheme.
        """
        parts = urlsplit(value)
        if not parts.scheme:
            raise InvalidUriError(f"Missing scheme in uri: {value!r}")
        return cls(
            scheme=parts.scheme,
            authority=_decode(parts.netloc),
            path=_decode(parts.path),
            query=_decode(parts.query),
            fragment=_decode(parts.fragment),
        )

    @property
    def fs_path(self) -> str:
        """Filesystem path for this Uri (``/C:/x`` becomes ``C:/x``)."""
        path = self.path
        if len(path) > 2 and path[0] == "/" and path[2] == ":":
            return path[1:]
        return path

    def with_(self, **changes: Any) -> Uri:
        """Return a copy with the given components replaced."""
        return dataclasses.replace(self, **changes)

    def __str__(self) -> str:
        parts = [self.scheme, ":"]
        if self.authority or self.path.startswith("/"):
            parts.append("//")
            parts.append(_encode(self.authority, ":@"))
        parts.append(_encode(self.path, _PATH_SAFE))
        if self.query:
            parts.append("?")
            parts.append(_encode(self.query, _QUERY_SAFE))
        if self.fragment:
            parts.append("#")
            parts.append(_encode(self.fragment, _QUERY_SAFE))
        return "".join(parts)
