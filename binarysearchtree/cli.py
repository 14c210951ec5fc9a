"""Command-line demonstration of the tree structures."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

from binarysearchtree.bst import BstNode
from binarysearchtree.dot import write_dotfile
from binarysearchtree.tree import Node

PathLike = Union[str, Path]


def build_sample_bst() -> BstNode:
    """Build the sample search tree used by the demonstration."""
    root = BstNode(15)
    left = root.add_left_child(6)
    right = root.add_right_child(18)

    right.add_left_child(17)
    right.add_right_child(20)

    terminal = left.add_left_child(3)
    seven = left.add_right_child(7)
    terminal.add_left_child(2)
    terminal.add_right_child(4)

    thirteen = seven.add_right_child(13)
    thirteen.add_left_child(9)
    return root


def run_bst_demo(output_dir: PathLike = ".") -> BstNode:
    """Exercise the search tree, print results and write dot files.

    Returns the root of the tree after the final insertion and deletion.
    """
    out = Path(output_dir)
    root = build_sample_bst()
    write_dotfile(root, out / "bst_graph.dot")

    for key in (15, 9, 22):
        found = root.search(key)
        result = f"found -> {found.key}" if found is not None else "not found"
        print(f"tree search result of key {key} is {result}")

    min_node = root.minimum()
    print(f"minimum result {min_node.key}")

    max_node = root.maximum()
    print(f"maximum result {max_node.key}")

    print(f"root node {max_node.root().key}")

    for key in (2, 20, 15, 13, 9, 7, 22):
        node = root.search(key)
        if node is None:
            print(f"node with key of {key} does not exist, failed to get successor")
            continue
        successor = node.successor_simpler()
        shown = successor.key if successor is not None else "not found"
        print(f"successor of node ({key}) is {shown}")

    print("\nInserting new key 8")
    root.insert(8)
    write_dotfile(root, out / "bst_after_insert.dot")

    print("\nDeleting key 6")
    root.delete(6)
    write_dotfile(root, out / "bst_after_delete.dot")
    return root


def run_binary_tree_demo(output_dir: PathLike = ".") -> Node:
    """Exercise the plain binary tree, print results and write dot files.

    Returns the original root.
    """
    out = Path(output_dir)
    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    write_dotfile(root, out / "prime.dot")

    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    write_dotfile(root, out / "prime_t2.dot")

    print(f"Current tree depth: {root.tree_depth()}")
    print(f"Amount of nodes in current tree: {root.count_nodes()}")
    print(f"Amount of nodes in current subtree: {right.count_nodes()}")

    left.sibling()

    by_value = root.get_node_by_value(3)
    print(f"left subtree seek by value {by_value!r}")
    by_property = root.get_node_by_full_property(by_value) if by_value else None
    print(f"left subtree seek by full property {by_property!r}")

    pruned = root.copy()
    flag = pruned.discard_node_by_value(3)
    print(f"status of node deletion: {flag}")
    write_dotfile(pruned, out / "prime_t3.dot")

    print(f"Depth after discard {pruned.tree_depth()}")
    print(f"Count nodes after discard {pruned.count_nodes()}")

    write_dotfile(root, out / "prime_t4.dot")
    return root


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="binarysearchtree",
        description="Demonstrate binary tree operations and write Graphviz files.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=".",
        help="directory that receives the dot files (default: current directory)",
    )
    parser.add_argument(
        "--binary-tree",
        action="store_true",
        help="also run the plain binary tree demonstration",
    )
    args = parser.parse_args(argv)

    out = Path(args.output_dir)
    out.mkdir(parents=True, exist_ok=True)
    if args.binary_tree:
        run_binary_tree_demo(out)
    run_bst_demo(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())