"""A tree of filesystem paths supporting structural queries."""

from __future__ import annotations

import os
import re

_SEP = os.sep
_REPEATED_SEP = re.compile(re.escape(_SEP) + "{2,}")


def _join(prefix: str, name: str) -> str:
    joined = _SEP.join(part for part in (prefix, name) if part)
    if not joined:
        return ""
    return os.path.normpath(_REPEATED_SEP.sub(_SEP, joined))


class _Node:
    __slots__ = ("name", "nodes", "is_real", "is_dir")

    def __init__(self, name: str, is_real: bool, is_dir: bool) -> None:
        self.name = name
        self.nodes: dict[str, _Node] = {}
        self.is_real = is_real
        self.is_dir = is_dir

    def collect_paths(self, paths: list[str], prefix: str) -> None:
        if self.is_real:
            paths.append(_join(prefix, self.name))
        child_prefix = _join(prefix, self.name)
        for child in self.nodes.values():
            child.collect_paths(paths, child_prefix)

    def _mirror_child(self, result: _Node, child: _Node) -> _Node:
        mirrored = _Node(child.name, False, child.is_dir)
        result.nodes[child.name] = mirrored
        return mirrored

    def find_top_level(self, result: _Node) -> None:
        result.is_real = self.is_real
        if self.is_real:
            return
        for child in self.nodes.values():
            child.find_top_level(self._mirror_child(result, child))

    def find_leaves(self, result: _Node) -> None:
        result.is_real = self.is_real and not self.nodes
        for child in self.nodes.values():
            child.find_leaves(self._mirror_child(result, child))

    def find_files(self, result: _Node) -> None:
        result.is_real = self.is_real and not self.is_dir
        for child in self.nodes.values():
            child.find_files(self._mirror_child(result, child))

    def find_directories(self, result: _Node) -> None:
        result.is_real = self.is_real and self.is_dir
        for child in self.nodes.values():
            child.find_directories(self._mirror_child(result, child))


class Tree:
    """A set of paths arranged as a tree of their components."""

    def __init__(self) -> None:
        self._root = _Node(_SEP, False, True)

    def add(self, path: str, is_dir: bool) -> None:
        """Add ``path`` to the tree, marking whether it is a directory."""
        parts = path.split(_SEP)
        current = self._root
        last = len(parts) - 1

        for index, part in enumerate(parts):
            is_real = index == last
            if part == "":
                part = _SEP

            node = current.nodes.get(part)
            if node is None:
                node = _Node(part, is_real, True)
                current.nodes[part] = node
            elif is_real:
                node.is_real = True

            current.is_dir = True
            current = node

        current.is_dir = is_dir

    def paths(self) -> list[str]:
        """The sorted list of paths added to the tree."""
        result: list[str] = []
        self._root.collect_paths(result, "")
        return sorted(result)

    def top_level(self) -> Tree:
        """A tree of the added paths that have no added ancestor."""
        result = Tree()
        self._root.find_top_level(result._root)
        return result

    def leaves(self) -> Tree:
        """A tree of the added paths that have no descendants."""
        result = Tree()
        self._root.find_leaves(result._root)
        return result

    def files(self) -> Tree:
        """A tree of the added paths that are not directories."""
        result = Tree()
        self._root.find_files(result._root)
        return result

    def directories(self) -> Tree:
        """A tree of the added paths that are directories."""
        result = Tree()
        self._root.find_directories(result._root)
        return result