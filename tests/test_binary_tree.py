import io

import pytest

from dslab.binary_tree import BinaryTree, main


def filled(values):
    tree = BinaryTree()
    for value in values:
        tree.insert(value)
    return tree


def test_empty_tree_traversals():
    tree = BinaryTree()
    assert (list(tree.inorder()), list(tree.preorder()), list(tree.postorder())) == ([], [], [])


def test_level_order_filling():
    tree = filled([1, 2, 3, 4])
    assert list(tree.inorder()) == [4, 2, 1, 3]
    assert list(tree.preorder()) == [1, 2, 4, 3]
    assert list(tree.postorder()) == [4, 2, 3, 1]


@pytest.mark.parametrize("values", [[4], [4, 9, 1, 7], list(range(10, 25))])
def test_traversals_hold_every_value(values):
    tree = filled(values)
    for order in (tree.inorder(), tree.preorder(), tree.postorder()):
        assert sorted(order) == sorted(values)


def test_delete_missing_key_leaves_tree():
    tree = filled([1, 2, 3])
    assert tree.delete(99) is False
    assert list(tree.preorder()) == [1, 2, 3]


def test_delete_on_empty_tree_is_false():
    assert BinaryTree().delete(1) is False


def test_delete_only_node_empties_tree():
    tree = filled([42])
    assert tree.delete(42) is True
    assert list(tree.inorder()) == []


def test_delete_deepest_matches_tree_without_it():
    tree = filled([1, 2, 3, 4, 5, 6])
    assert tree.delete(6) is True
    assert list(tree.preorder()) == [1, 2, 4, 5, 3]


def test_delete_root_takes_deepest_value():
    tree = filled([10, 20, 30, 40, 50])
    assert tree.delete(10)
    assert list(tree.preorder()) == [50, 20, 40, 30]


def test_delete_duplicate_replaces_last_in_level_order():
    tree = filled([5, 5, 7])
    assert tree.delete(5)
    assert list(tree.preorder()) == [5, 7]


@pytest.mark.parametrize(
    "script, status, stream, expected",
    [
        ("1 1 1 2 1 3 3 6", 0, "out", "1 2 3"),
        ("1 1 5 9 6", 0, "out", "Element not found"),
        ("1 1 1 3 5 1 6", 0, "out", "Node deleted"),
        ("5 4 6", 0, "out", "Tree empty"),
        ("9 6", 0, "out", "Invalid choice"),
        ("x", 1, "err", "not a number"),
    ],
)
def test_main(monkeypatch, capsys, script, status, stream, expected):
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == status
    assert expected in getattr(capsys.readouterr(), stream)