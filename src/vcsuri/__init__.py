"""vcsuri: addressing version-controlled file content.

Git URIs for file content at a revision, plus symlink resolution so virtual
and real resources for the same file compare equal.
"""

__version__ = "0.1.0"

from vcsuri.exceptions import InvalidUriError, VcsUriError
from vcsuri.locator import (
    DIFF_SUFFIX,
    GIT_SCHEME,
    GIT_SUFFIX,
    MERGE_BASE_REF,
    MERGE_OURS_REF,
    MERGE_THEIRS_REF,
    GitUriOptions,
    GitUriParams,
    MergeUris,
    from_git_uri,
    from_git_uri_and_resolve,
    is_git_uri,
    to_git_uri,
    to_merge_uris,
)
from vcsuri.resolve import (
    resolve_git_uri,
    resolve_path,
    resolve_uri,
    resolve_visible_text_editors,
    resolve_visible_text_editors_async,
    resolve_workspace_folders,
    resolve_workspace_folders_async,
)
from vcsuri.uri import Uri
from vcsuri.workspace import TextDocument, TextEditor, WorkspaceFolder

__all__ = [
    "DIFF_SUFFIX",
    "GIT_SCHEME",
    "GIT_SUFFIX",
    "MERGE_BASE_REF",
    "MERGE_OURS_REF",
    "MERGE_THEIRS_REF",
    "GitUriOptions",
    "GitUriParams",
    "InvalidUriError",
    "MergeUris",
    "TextDocument",
    "TextEditor",
    "Uri",
    "VcsUriError",
    "WorkspaceFolder",
    "__version__",
    "from_git_uri",
    "from_git_uri_and_resolve",
    "is_git_uri",
    "resolve_git_uri",
    "resolve_path",
    "resolve_uri",
    "resolve_visible_text_editors",
    "resolve_visible_text_editors_async",
    "resolve_workspace_folders",
    "resolve_workspace_folders_async",
    "to_git_uri",
    "to_merge_uris",
]
