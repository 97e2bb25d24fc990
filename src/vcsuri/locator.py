"""Git URIs — encode version-controlled content as a Uri and back.

A git URI addresses a file's content at some revision. The structured
``GitUriParams`` travel as compact JSON in the query component; the path
component only mirrors the source path (optionally with a cosmetic suffix
for file-type detection) and is never parsed back.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .uri import Uri

# Lone surrogates stand for undecodable filename bytes (see os.fsdecode).
_SURROGATE_RE = re.compile("[\ud800-\udfff]")

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

GIT_SCHEME = "git"

GIT_SUFFIX = ".git"
"""Appended to the path when ``replace_file_extension`` is set."""

DIFF_SUFFIX = ".diff"
"""Appended to the path of submodule comparisons."""

MERGE_BASE_REF = ":1"
MERGE_OURS_REF = ":2"
MERGE_THEIRS_REF = ":3"

# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class GitUriParams(BaseModel):
    """Payload carried in the query of a git URI.

    Serialized with the wire names and unset fields dropped, so the wire form is
    exactly ``{"path":...,"ref":...}`` plus ``"submoduleOf"`` when present.
    Filenames that are not valid UTF-8 carry lone surrogates; those are
    written as ``\\uXXXX`` escapes and come back unchanged on decode.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    path: str
    ref: str
    submodule_of: str | None = Field(default=None, alias="submoduleOf")

    def to_query(self) -> str:
        """Render the compact JSON query string."""
        payload: dict[str, Any] = {"path": self.path, "ref": self.ref}
        if self.submodule_of is not None:
            payload["submoduleOf"] = self.submodule_of
        text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        return _SURROGATE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)

    @classmethod
    def from_query(cls, query: str) -> GitUriParams:
        """Parse a query string produced by :meth:`to_query`."""
        return cls.model_validate(json.loads(query))


@dataclass(frozen=True, slots=True)
class GitUriOptions:
    """Options for :func:`to_git_uri`.

    Attributes:
        replace_file_extension: Append ``.git`` to the path so tools keyed on
            file extensions ignore the virtual file. Takes precedence over
            the ``.diff`` suffix.
        submodule_of: Path of the parent repository when comparing a file
            inside a submodule.
    """

    replace_file_extension: bool = False
    submodule_of: str | None = None


class MergeUris(NamedTuple):
    """The three sides of a conflicted file."""

    base: Uri
    ours: Uri
    theirs: Uri


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


def is_git_uri(uri: Uri) -> bool:
    """Return True if *uri* uses the git scheme."""
    return uri.scheme == GIT_SCHEME


def to_git_uri(uri: Uri, ref: str, options: GitUriOptions | None = None) -> Uri:
    """Build the git URI for *uri*'s content at *ref*.

    Never fails on the path: undecodable filename bytes are escaped in the
    query and percent-encoded as raw bytes when the Uri is rendered.
    """
    if options is None:
        options = GitUriOptions()

    params = GitUriParams(
        path=uri.fs_path,
        ref=ref,
        submodule_of=options.submodule_of or None,
    )

    path = uri.path
    if options.replace_file_extension:
        path = f"{path}{GIT_SUFFIX}"
    elif options.submodule_of:
        path = f"{path}{DIFF_SUFFIX}"

    return uri.with_(scheme=GIT_SCHEME, path=path, query=params.to_query())


def from_git_uri(uri: Uri) -> GitUriParams:
    """Decode the params of a git URI.

    Raises:
        json.JSONDecodeError: If the query is not valid JSON.
        pydantic.ValidationError: If the payload does not match the params
            schema.
    """
    return GitUriParams.from_query(uri.query)


def from_git_uri_and_resolve(uri: Uri) -> GitUriParams:
    """Decode the params of a git URI with the embedded path canonicalized."""
    from vcsuri.resolve import resolve_path

    params = from_git_uri(uri)
    return params.model_copy(update={"path": resolve_path(params.path)})


def to_merge_uris(uri: Uri) -> MergeUris:
    """Create the base, ours and theirs git URIs for a file being merged."""
    return MergeUris(
        base=to_git_uri(uri, MERGE_BASE_REF),
        ours=to_git_uri(uri, MERGE_OURS_REF),
        theirs=to_git_uri(uri, MERGE_THEIRS_REF),
    )
