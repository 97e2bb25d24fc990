"""Descriptor records for workspace folders and open editors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .uri import Uri


@dataclass(frozen=True, slots=True)
class WorkspaceFolder:
    """A root folder opened in the workspace.

    Attributes:
        uri: Location of the folder.
        name: Display name.
        index: Position of the folder among the workspace roots.
    """

    uri: Uri
    name: str
    index: int


@dataclass(frozen=True, slots=True)
class TextDocument:
    """An open document and its editing state."""

    uri: Uri
    language_id: str = "plaintext"
    version: int = 1
    is_dirty: bool = False


@dataclass(frozen=True, slots=True)
class TextEditor:
    """A visible editor bound to a document."""

    document: TextDocument
    view_column: int | None = None
