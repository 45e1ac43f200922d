# coderelay/workspace/export.py
from __future__ import annotations

import io
import zipfile
from typing import Iterable, Tuple

from coderelay.workspace.session import EditorSession
from coderelay.workspace.tree import FileNode, iter_nodes

ARCHIVE_NAME = "project.zip"


class EmptyWorkspaceError(ValueError):
    pass


def download_name(session: EditorSession) -> str:
    editor = session.editor
    return editor.current_file or f"code.{editor.language}"


def export_active(session: EditorSession) -> Tuple[str, bytes]:
    return download_name(session), session.editor.content.encode("utf-8")


def build_zip(tree: Iterable[FileNode]) -> bytes:
    """Zip every file of the tree at its full relative path."""
    nodes = list(iter_nodes(tree))
    if not nodes:
        raise EmptyWorkspaceError("No folder loaded to save.")

    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for node in nodes:
            if node.is_file:
                zf.writestr(node.path, node.content or "")
    return buf.getvalue()
