# coderelay/workspace/tree.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

FILE = "file"
FOLDER = "folder"


class DuplicatePathError(ValueError):
    def __init__(self, path: str):
        super().__init__(f"Path already exists in the tree: {path}")
        self.path = path


@dataclass(frozen=True)
class FileNode:
    """
    One entry of the in-memory project tree.

    ``path`` is the full ``/``-joined relative path and is unique within a
    tree. Files carry ``content``; folders carry ordered ``children``.
    """

    name: str
    path: str
    type: str
    content: Optional[str] = None
    children: Tuple["FileNode", ...] = ()

    @property
    def is_file(self) -> bool:
        return self.type == FILE

    @property
    def is_folder(self) -> bool:
        return self.type == FOLDER


@dataclass(frozen=True)
class UploadedFile:
    relative_path: str
    content: str

    @property
    def name(self) -> str:
        parts = split_path(self.relative_path)
        return parts[-1] if parts else ""


Tree = Tuple[FileNode, ...]


def split_path(path: str) -> List[str]:
    return [part for part in path.replace("\\", "/").split("/") if part]


@dataclass
class _FolderBuilder:
    name: str
    path: str
    children: List[Union[FileNode, "_FolderBuilder"]] = field(default_factory=list)
    names: Dict[str, Union[FileNode, "_FolderBuilder"]] = field(default_factory=dict)

    def add(self, child: Union[FileNode, "_FolderBuilder"]) -> None:
        if child.name in self.names:
            raise DuplicatePathError(child.path)
        self.names[child.name] = child
        self.children.append(child)

    def freeze(self) -> FileNode:
        return FileNode(
            name=self.name,
            path=self.path,
            type=FOLDER,
            children=_freeze_all(self.children),
        )


def _freeze_all(items: Iterable[Union[FileNode, _FolderBuilder]]) -> Tree:
    return tuple(i.freeze() if isinstance(i, _FolderBuilder) else i for i in items)


def build_from_file(name: str, content: str) -> Tree:
    return (FileNode(name=name, path=name, type=FILE, content=content),)


def build_from_folder(files: Iterable[UploadedFile]) -> Tree:
    """
    Nest a flat directory listing into a tree.

    Folders are created the first time their cumulative path is seen and
    siblings keep first-seen order.
    """
    root = _FolderBuilder(name="", path="")
    folders: Dict[str, _FolderBuilder] = {}

    for uploaded in files:
        parts = split_path(uploaded.relative_path)
        if not parts:
            continue

        current = root
        current_path = ""
        for part in parts[:-1]:
            current_path = f"{current_path}/{part}" if current_path else part
            folder = folders.get(current_path)
            if folder is None:
                folder = _FolderBuilder(name=part, path=current_path)
                current.add(folder)
                folders[current_path] = folder
            current = folder

        file_path = f"{current_path}/{parts[-1]}" if current_path else parts[-1]
        current.add(FileNode(name=parts[-1], path=file_path, type=FILE, content=uploaded.content))

    return _freeze_all(root.children)


def add_file(tree: Tree, name: str, content: str = "") -> Tree:
    if any(node.name == name for node in tree):
        raise DuplicatePathError(name)
    return tree + (FileNode(name=name, path=name, type=FILE, content=content),)


def iter_nodes(tree: Iterable[FileNode]) -> Iterator[FileNode]:
    for node in tree:
        yield node
        if node.is_folder:
            yield from iter_nodes(node.children)


def find_node(tree: Iterable[FileNode], path: str) -> Optional[FileNode]:
    for node in iter_nodes(tree):
        if node.path == path:
            return node
    return None


def toggle_expanded(expanded: FrozenSet[str], path: str) -> FrozenSet[str]:
    if path in expanded:
        return expanded - {path}
    return expanded | {path}


def visible_nodes(tree: Iterable[FileNode], expanded: FrozenSet[str], depth: int = 0) -> Iterator[Tuple[int, FileNode]]:
    """Rows a tree view shows: every root node, plus children of expanded folders."""
    for node in tree:
        yield depth, node
        if node.is_folder and node.path in expanded:
            yield from visible_nodes(node.children, expanded, depth + 1)
