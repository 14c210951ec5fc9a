"""Render binary trees as Graphviz ``dot`` graphs."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Union

from binarysearchtree.bst import BstNode
from binarysearchtree.tree import Node

TreeNode = Union[Node, BstNode]

_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"


def _label(node: TreeNode) -> int:
    return node.key if isinstance(node, BstNode) else node.value


def _edges(node: TreeNode) -> Iterator[str]:
    """Yield one edge line per child, a node's own edges before its subtrees'."""
    children = [child for child in (node.left, node.right) if child is not None]
    for child in children:
        yield f"\t{_label(node)}--{_label(child)};\n"
    for child in children:
        yield from _edges(child)


def to_dot(root: TreeNode) -> str:
    """Return the undirected ``dot`` graph of the tree rooted at ``root``."""
    return _PREAMBLE + "".join(_edges(root)) + _EPILOGUE


def write_dotfile(root: TreeNode, output_path: Union[str, Path]) -> Path:
    """Write the ``dot`` graph of ``root`` to ``output_path`` and return the path."""
    path = Path(output_path)
    path.write_text(to_dot(root), encoding="utf-8")
    return path