from binarysearchtree.cli import (
    build_sample_bst,
    main,
    run_binary_tree_demo,
    run_bst_demo,
)
from binarysearchtree.dot import to_dot


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.key] + _inorder(node.right)


def _parents_consistent(node):
    for child in (node.left, node.right):
        if child is not None:
            if child.parent is not node or not _parents_consistent(child):
                return False
    return True


def test_sample_bst_is_ordered():
    root = build_sample_bst()
    assert _inorder(root) == [2, 3, 4, 6, 7, 9, 13, 15, 17, 18, 20]
    assert _parents_consistent(root)


def test_sample_bst_shape():
    root = build_sample_bst()
    assert root.key == 15
    assert root.left.right.right.left.key == 9
    assert root.left.right.left is None


def test_bst_demo_writes_files(tmp_path):
    root = run_bst_demo(tmp_path)
    for name in ("bst_graph.dot", "bst_after_insert.dot", "bst_after_delete.dot"):
        assert (tmp_path / name).exists()
    assert (tmp_path / "bst_after_delete.dot").read_text(encoding="utf-8") == to_dot(root)
    assert (tmp_path / "bst_graph.dot").read_text(encoding="utf-8") == to_dot(
        build_sample_bst()
    )


def test_bst_demo_final_tree(tmp_path):
    root = run_bst_demo(tmp_path)
    keys = _inorder(root)
    assert keys == sorted(keys)
    assert 8 in keys
    assert 6 not in keys
    assert _parents_consistent(root)


def test_bst_demo_insert_file_contains_new_key(tmp_path):
    run_bst_demo(tmp_path)
    inserted = (tmp_path / "bst_after_insert.dot").read_text(encoding="utf-8")
    deleted = (tmp_path / "bst_after_delete.dot").read_text(encoding="utf-8")
    assert "--8;" in inserted
    assert "--6;" in inserted
    assert "--6;" not in deleted
    assert "\t6--" not in deleted


def test_bst_demo_output(tmp_path, capsys):
    run_bst_demo(tmp_path)
    out = capsys.readouterr().out
    assert "tree search result of key 15 is found -> 15" in out
    assert "tree search result of key 22 is not found" in out
    assert "minimum result 2" in out
    assert "maximum result 20" in out
    assert "root node 15" in out
    assert "node with key of 22 does not exist, failed to get successor" in out


def test_bst_demo_successors_match_package(tmp_path, capsys):
    run_bst_demo(tmp_path)
    out = capsys.readouterr().out
    sample = build_sample_bst()
    for key in (2, 20, 15, 13, 9, 7):
        successor = sample.search(key).successor_simpler()
        shown = successor.key if successor is not None else "not found"
        assert f"successor of node ({key}) is {shown}" in out


def test_binary_tree_demo(tmp_path, capsys):
    root = run_binary_tree_demo(tmp_path)
    out = capsys.readouterr().out
    for name in ("prime.dot", "prime_t2.dot", "prime_t3.dot", "prime_t4.dot"):
        assert (tmp_path / name).exists()
    assert f"Current tree depth: {root.tree_depth()}" in out
    assert f"Amount of nodes in current tree: {root.count_nodes()}" in out
    assert "status of node deletion: True" in out
    assert (tmp_path / "prime_t4.dot").read_text(encoding="utf-8") == to_dot(root)


def test_binary_tree_demo_discard_keeps_original(tmp_path):
    root = run_binary_tree_demo(tmp_path)
    pruned = (tmp_path / "prime_t3.dot").read_text(encoding="utf-8")
    assert root.left is not None
    assert root.left.value == 3
    assert "5--3;" not in pruned
    assert "5--7;" in pruned


def test_main_writes_bst_files(tmp_path):
    target = tmp_path / "out"
    assert main(["--output-dir", str(target)]) == 0
    assert (target / "bst_graph.dot").exists()
    assert not (target / "prime.dot").exists()


def test_main_with_binary_tree(tmp_path):
    assert main(["-o", str(tmp_path), "--binary-tree"]) == 0
    assert (tmp_path / "prime.dot").exists()
    assert (tmp_path / "bst_after_delete.dot").exists()