# binarysearchtree

A small library of linked binary trees. Every node keeps a reference to its
parent. Trees can be exported as Graphviz `dot` text.

## Modules

- `binarysearchtree.tree.Node` is a plain binary tree node holding an integer
  `value`.
  - `add_left_child(value)` and `add_right_child(value)` attach a new child
    and return it.
  - `copy()` returns a shallow copy that shares the node's parent and children.
  - `get_node_by_value(value)` and `get_node_by_full_property(node)` return
    a shallow copy of the node they find. The second one matches on the
    value and on the values of the parent and children. Both follow a single
    downward path that prefers the left child.
  - `discard_node_by_value(value)` cuts the links along that same path and
    returns whether the value was found.
  - `count_nodes()` counts the nodes in the subtree. `tree_depth()` gives
    the longest downward path, measured in edges.
  - `sibling()` returns the other child of the node's parent.
- `binarysearchtree.bst.BstNode` is a binary search tree node holding an
  integer `key`.
  - `search(key)` finds a node by key. `minimum()` and `maximum()` return the
    smallest and largest node, and `root()` returns the topmost ancestor.
  - `successor()` returns the in-order successor. When the node holds the
    maximum key, it returns the node itself.
  - `successor_simpler()` is an alternative successor lookup. It returns
    `None` when the climb ends at the root, and raises `ValueError` when it
    has to climb past a node that has no parent.
  - `insert(key)` adds a new node and returns it. A key equal to an existing
    key goes to the right.
  - `transplant(replacement)` puts another subtree in the node's place under
    its parent.
  - `delete(key)` removes a node and returns whether it was found.
- `binarysearchtree.dot` works with both kinds of node.
  - `to_dot(root)` returns the tree as an undirected graph named `tree`.
  - `write_dotfile(root, output_path)` writes that graph to a file and
    returns the path as a `pathlib.Path`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from binarysearchtree.bst import BstNode
from binarysearchtree.dot import to_dot, write_dotfile

root = BstNode(15)
for key in (6, 18, 3, 7, 17, 20):
    root.insert(key)

found = root.search(7)
print(found.key)                  # 7
print(root.minimum().key)         # 3
print(root.maximum().key)         # 20
print(found.successor().key)      # 15

root.delete(6)
print(to_dot(root))
write_dotfile(root, "bst.dot")
```

## Command line

```
binarysearchtree
```

This builds a sample search tree. It prints the results of searches and of
minimum, maximum, root and successor queries. It writes these files:

- `bst_graph.dot`, the sample tree.
- `bst_after_insert.dot`, after inserting 8.
- `bst_after_delete.dot`, after deleting 6.

The command takes these options:

- `-o DIR` or `--output-dir DIR` writes the files to `DIR` instead of the
  current directory. The directory is created if needed.
- `--binary-tree` also runs a demonstration of the plain binary tree. It
  writes `prime.dot`, `prime_t2.dot`, `prime_t3.dot` and `prime_t4.dot`.

## Limitations

The package only writes `dot` text and does not draw images. To get a
picture, use Graphviz, for example `dot -Tpng bst.dot -o bst.png`. Search
trees are not kept balanced.