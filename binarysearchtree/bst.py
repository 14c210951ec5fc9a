"""Binary search tree nodes with parent links."""

from __future__ import annotations

from typing import Optional


def _is_nil(node: Optional["BstNode"]) -> bool:
    """True when the node is absent or lacks a parent or either child."""
    if node is None:
        return True
    return node.parent is None or node.left is None or node.right is None


def _keys_match(first: Optional["BstNode"], second: Optional["BstNode"]) -> bool:
    """True when both are absent or both are present with equal keys."""
    if first is None or second is None:
        return first is None and second is None
    return first.key == second.key


class BstNode:
    """A node of a binary search tree holding an integer key."""

    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: int) -> None:
        self.key = key
        self.parent: Optional[BstNode] = None
        self.left: Optional[BstNode] = None
        self.right: Optional[BstNode] = None

    def __repr__(self) -> str:
        return f"BstNode({self.key!r})"

    def _new_child(self, value: int) -> "BstNode":
        child = BstNode(value)
        child.parent = self
        return child

    def add_left_child(self, value: int) -> "BstNode":
        """Attach a new left child holding ``value`` and return it."""
        self.left = self._new_child(value)
        return self.left

    def add_right_child(self, value: int) -> "BstNode":
        """Attach a new right child holding ``value`` and return it."""
        self.right = self._new_child(value)
        return self.right

    def copy(self) -> "BstNode":
        """Return a shallow copy sharing this node's parent and children."""
        clone = BstNode(self.key)
        clone.parent = self.parent
        clone.left = self.left
        clone.right = self.right
        return clone

    def search(self, key: int) -> Optional["BstNode"]:
        """Find the node holding ``key`` in the subtree rooted here."""
        node: Optional[BstNode] = self
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def minimum(self) -> "BstNode":
        """The node with the smallest key in this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node

    def maximum(self) -> "BstNode":
        """The node with the largest key in this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node

    def root(self) -> "BstNode":
        """The topmost ancestor of this node, or the node itself."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def successor(self) -> "BstNode":
        """The in-order successor; the node itself when it holds the maximum."""
        if self.right is not None:
            return self.right.minimum()
        child = self
        parent = child.parent
        while parent is not None:
            if parent.left is child:
                return parent
            child, parent = parent, parent.parent
        return self

    def successor_simpler(self) -> Optional["BstNode"]:
        """Successor lookup driven by nil-node checks.

        A node counts as nil when it lacks a parent or either child. Returns
        None when the climb ends at the root. Raises ValueError when the walk
        needs the parent of a node that has none.
        """
        if not _is_nil(self.right):
            return self.right.minimum()

        parent = self.parent
        if parent is None:
            raise ValueError(f"node {self.key} has no parent to climb to")
        parent_right = parent.right

        current, ancestor = self, parent
        while _is_nil(ancestor) and _keys_match(current, parent_right):
            if ancestor.parent is None:
                raise ValueError(f"node {ancestor.key} has no parent to climb to")
            current, ancestor = ancestor, ancestor.parent

        if ancestor.key == current.root().key:
            return None
        return ancestor

    def insert(self, key: int) -> "BstNode":
        """Insert a new node holding ``key`` below this one and return it.

        Keys equal to an existing key go to the right.
        """
        node = BstNode(key)
        parent = self
        while True:
            child = parent.left if key < parent.key else parent.right
            if child is None:
                break
            parent = child
        node.parent = parent
        if key < parent.key:
            parent.left = node
        else:
            parent.right = node
        return node

    def transplant(self, replacement: Optional["BstNode"]) -> None:
        """Put ``replacement`` in this node's place under its parent.

        Nothing happens when this node has no parent.
        """
        parent = self.parent
        if parent is None:
            return
        if parent.left is self:
            parent.left = replacement
        else:
            parent.right = replacement
        if replacement is not None:
            replacement.parent = parent

    def delete(self, key: int) -> bool:
        """Remove the node holding ``key``; return whether it was found."""
        node = self.search(key)
        if node is None:
            return False
        left, right = node.left, node.right
        if left is None:
            node.transplant(right)
        elif right is None:
            node.transplant(left)
        else:
            heir = right.minimum()
            if heir.parent is not node:
                heir.transplant(heir.right)
                heir.right = right
                right.parent = heir
            node.transplant(heir)
            heir.left = left
            left.parent = heir
        return True