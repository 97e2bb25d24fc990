"""Symlink resolution for paths, URIs and workspace descriptors.

Resolution is best-effort: any filesystem failure falls back to the input
unchanged, so an unreachable path never breaks the caller.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .locator import GIT_SUFFIX, from_git_uri_and_resolve

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .uri import Uri
    from .workspace import TextEditor, WorkspaceFolder

logger = logging.getLogger(__name__)


# =============================================================================
# Paths and URIs
# =============================================================================


def resolve_path(path: str) -> str:
    """Return the canonical path of *path*, or *path* itself if it can't be resolved."""
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError, ValueError) as e:
        logger.debug("Unable to resolve %s: %s", path, e)
        return path


def resolve_uri(uri: Uri) -> Uri:
    """Return *uri* with its path component resolved."""
    return uri.with_(path=resolve_path(uri.path))


def resolve_git_uri(uri: Uri) -> Uri:
    """Resolve a git URI, keeping a trailing ``.git`` suffix in place.

    The path inside the query is resolved as well so both stay consistent.
    Returns *uri* unchanged if anything fails.
    """
    try:
        ends_in_git = uri.path.endswith(GIT_SUFFIX)
        path = uri.path[: -len(GIT_SUFFIX)] if ends_in_git else uri.path
        resolved = resolve_path(path)
        if ends_in_git:
            resolved += GIT_SUFFIX

        if uri.query:
            query = from_git_uri_and_resolve(uri).to_query()
            return uri.with_(path=resolved, query=query)
        return uri.with_(path=resolved)
    except Exception:
        logger.debug("Unable to resolve git uri %s", uri, exc_info=True)
        return uri


# =============================================================================
# Workspace descriptors
# =============================================================================


def _resolve_folder(folder: WorkspaceFolder) -> WorkspaceFolder:
    return dataclasses.replace(folder, uri=resolve_uri(folder.uri))


def _resolve_editor(editor: TextEditor) -> TextEditor:
    document = dataclasses.replace(editor.document, uri=resolve_uri(editor.document.uri))
    return dataclasses.replace(editor, document=document)


def resolve_workspace_folders(
    folders: Iterable[WorkspaceFolder] | None,
) -> list[WorkspaceFolder]:
    """Resolve the uri of every workspace folder, preserving order.

    ``None`` yields an empty list.
    """
    if not folders:
        return []
    return [_resolve_folder(folder) for folder in folders]


def resolve_visible_text_editors(editors: Iterable[TextEditor]) -> list[TextEditor]:
    """Resolve the document uri of every editor, preserving order."""
    return [_resolve_editor(editor) for editor in editors]


# =============================================================================
# Async variants
# =============================================================================


async def resolve_workspace_folders_async(
    folders: Iterable[WorkspaceFolder] | None,
) -> list[WorkspaceFolder]:
    """Like :func:`resolve_workspace_folders`, resolving folders concurrently in threads."""
    if not folders:
        return []
    return list(
        await asyncio.gather(*(asyncio.to_thread(_resolve_folder, f) for f in folders))
    )


async def resolve_visible_text_editors_async(
    editors: Iterable[TextEditor],
) -> list[TextEditor]:
    """Like :func:`resolve_visible_text_editors`, resolving editors concurrently in threads."""
    return list(
        await asyncio.gather(*(asyncio.to_thread(_resolve_editor, e) for e in editors))
    )
