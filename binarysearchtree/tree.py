"""Plain binary tree nodes that keep a link to their parent."""

from __future__ import annotations

from typing import Iterator, Optional


def _values_match(first: Optional["Node"], second: Optional["Node"]) -> bool:
    """True when both are absent or both are present with equal values."""
    if first is None or second is None:
        return first is None and second is None
    return first.value == second.value


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int) -> None:
        self.value = value
        self.parent: Optional[Node] = None
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def _children(self) -> Iterator["Node"]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def _new_child(self, value: int) -> "Node":
        child = Node(value)
        child.parent = self
        return child

    def add_left_child(self, value: int) -> "Node":
        """Attach a new left child holding ``value`` and return it."""
        self.left = self._new_child(value)
        return self.left

    def add_right_child(self, value: int) -> "Node":
        """Attach a new right child holding ``value`` and return it."""
        self.right = self._new_child(value)
        return self.right

    def copy(self) -> "Node":
        """Return a shallow copy sharing this node's parent and children."""
        clone = Node(self.value)
        clone.parent = self.parent
        clone.left = self.left
        clone.right = self.right
        return clone

    def get_node_by_value(self, value: int) -> Optional["Node"]:
        """Find a node with ``value``, returned as a shallow copy.

        The search follows the left child when there is one and the right
        child otherwise, so it only visits a single downward path.
        """
        node: Optional[Node] = self
        while node is not None:
            if node.value == value:
                return node.copy()
            node = node.left if node.left is not None else node.right
        return None

    def get_node_by_full_property(self, node: "Node") -> Optional["Node"]:
        """Find a node matching ``node`` by value, parent value and child values.

        The result is a shallow copy. Like :meth:`get_node_by_value`, the
        search follows a single downward path, preferring the left child.
        """
        current: Optional[Node] = self
        while current is not None:
            if (
                current.value == node.value
                and _values_match(node.parent, current.parent)
                and _values_match(node.left, current.left)
                and _values_match(node.right, current.right)
            ):
                return current.copy()
            current = current.left if current.left is not None else current.right
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Detach the subtree rooted at the node holding ``value``.

        Every link on the path walked from this node is severed, whether or
        not the value is found. Returns True when the value was found.
        """
        node = self
        while node.value != value:
            if node.left is not None:
                child = node.left
                node.left = None
            elif node.right is not None:
                child = node.right
                node.right = None
            else:
                return False
            node = child
        node.parent = None
        return True

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here, this node included."""
        return 1 + sum(child.count_nodes() for child in self._children())

    def tree_depth(self) -> int:
        """Length in edges of the longest path down to a leaf."""
        return max((child.tree_depth() + 1 for child in self._children()), default=0)

    def sibling(self) -> Optional["Node"]:
        """The other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left