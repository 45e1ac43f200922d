# coderelay/workspace/tabs.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from coderelay.core.registry import detect_language
from coderelay.workspace.tree import FileNode


@dataclass(frozen=True)
class Tab:
    path: str
    name: str
    content: str
    language: str

    @staticmethod
    def from_node(node: FileNode) -> "Tab":
        return Tab(
            path=node.path,
            name=node.name,
            content=node.content or "",
            language=detect_language(node.name),
        )


Tabs = Tuple[Tab, ...]


def find_tab(tabs: Tabs, path: str) -> Optional[Tab]:
    for tab in tabs:
        if tab.path == path:
            return tab
    return None


def add_tab(tabs: Tabs, tab: Tab) -> Tabs:
    if find_tab(tabs, tab.path) is not None:
        return tabs
    return tabs + (tab,)


def remove_tab(tabs: Tabs, path: str) -> Tabs:
    return tuple(tab for tab in tabs if tab.path != path)


def update_tab_content(tabs: Tabs, path: str, content: str) -> Tabs:
    return tuple(replace(tab, content=content) if tab.path == path else tab for tab in tabs)


def put_tab(tabs: Tabs, tab: Tab) -> Tabs:
    """Replace the tab with the same path in place, or append it."""
    if find_tab(tabs, tab.path) is None:
        return tabs + (tab,)
    return tuple(tab if t.path == tab.path else t for t in tabs)
