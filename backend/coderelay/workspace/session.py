# coderelay/workspace/session.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, Iterable, Optional

from coderelay.core.registry import detect_language
from coderelay.workspace.tabs import Tab, Tabs, add_tab, find_tab, put_tab, remove_tab, update_tab_content
from coderelay.workspace.transcript import Transcript
from coderelay.workspace.tree import (
    FileNode,
    Tree,
    UploadedFile,
    add_file,
    build_from_file,
    build_from_folder,
    find_node,
    split_path,
    toggle_expanded,
)

DEFAULT_CONTENT = "// Start coding here..."
DEFAULT_LANGUAGE = "javascript"


class NodeNotFoundError(KeyError):
    def __init__(self, path: str):
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"No file at path: {self.path}"


@dataclass(frozen=True)
class EditorView:
    content: str
    language: str
    current_file: Optional[str] = None


@dataclass(frozen=True)
class EditorSession:
    """
    Whole editor state as one immutable value.

    Every operation returns a new session. What the editor surface shows is
    derived from the active tab (see ``editor``) and is never stored on its
    own, so content and language always switch together.
    """

    tree: Tree = ()
    expanded: FrozenSet[str] = frozenset()
    tabs: Tabs = ()
    active_path: Optional[str] = None
    output: str = ""
    transcript: Transcript = Transcript()
    default_content: str = DEFAULT_CONTENT
    default_language: str = DEFAULT_LANGUAGE

    @property
    def active_tab(self) -> Optional[Tab]:
        if self.active_path is None:
            return None
        return find_tab(self.tabs, self.active_path)

    @property
    def editor(self) -> EditorView:
        tab = self.active_tab
        if tab is None:
            return EditorView(content=self.default_content, language=self.default_language)
        return EditorView(content=tab.content, language=tab.language, current_file=tab.name)

    # -- tree --

    def upload_file(self, name: str, content: str) -> "EditorSession":
        session = replace(self, tree=build_from_file(name, content), expanded=frozenset())
        return session._load_node(session.tree[0])

    def upload_folder(self, files: Iterable[UploadedFile]) -> "EditorSession":
        files = list(files)
        tree = build_from_folder(files)
        session = replace(self, tree=tree, expanded=frozenset())
        first = next((f for f in files if not f.name.startswith(".")), None)
        if first is None:
            return session
        node = find_node(tree, "/".join(split_path(first.relative_path)))
        return session._load_node(node) if node is not None else session

    def toggle_folder(self, path: str) -> "EditorSession":
        return replace(self, expanded=toggle_expanded(self.expanded, path))

    # -- tabs --

    def _open_node(self, node: FileNode) -> "EditorSession":
        return replace(self, tabs=add_tab(self.tabs, Tab.from_node(node)), active_path=node.path)

    def _load_node(self, node: FileNode) -> "EditorSession":
        # a fresh upload supersedes whatever an open tab of the same path holds
        return replace(self, tabs=put_tab(self.tabs, Tab.from_node(node)), active_path=node.path)

    def open_file(self, path: str) -> "EditorSession":
        node = find_node(self.tree, path)
        if node is None or not node.is_file:
            raise NodeNotFoundError(path)
        return self._open_node(node)

    def create_file(self, name: str) -> "EditorSession":
        name = name.strip()
        if not name:
            raise ValueError("File name must not be empty")
        tree = add_file(self.tree, name)
        tab = Tab(path=name, name=name, content="", language=detect_language(name))
        return replace(self, tree=tree, tabs=add_tab(self.tabs, tab), active_path=name)

    def edit(self, path: str, content: str) -> "EditorSession":
        if path != self.active_path or self.active_tab is None:
            return self
        return replace(self, tabs=update_tab_content(self.tabs, path, content))

    def switch_tab(self, path: str) -> "EditorSession":
        if find_tab(self.tabs, path) is None:
            raise NodeNotFoundError(path)
        return replace(self, active_path=path)

    def close_tab(self, path: str) -> "EditorSession":
        tabs = remove_tab(self.tabs, path)
        if path != self.active_path:
            return replace(self, tabs=tabs)
        active = tabs[-1].path if tabs else None
        return replace(self, tabs=tabs, active_path=active)

    # -- output / chat --

    def with_output(self, output: str) -> "EditorSession":
        return replace(self, output=output)

    def with_transcript(self, transcript: Transcript) -> "EditorSession":
        return replace(self, transcript=transcript)
