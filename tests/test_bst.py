import copy

import pytest

from bintree.bst import BinarySearchTree
from bintree.errors import NotFoundError, PreconditionViolatedError


def build(items):
    tree = BinarySearchTree()
    for item in items:
        tree.add(item)
    return tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.height() == 0
    with pytest.raises(PreconditionViolatedError):
        tree.root_data


def test_root_item_constructor():
    tree = BinarySearchTree("abc")
    assert tree.root_data == "abc"
    assert tree.node_count() == 1


def test_add_rejects_duplicates():
    tree = BinarySearchTree()
    assert tree.add("abc") is True
    assert tree.add("abc") is False
    assert tree.node_count() == 1


def test_inorder_is_sorted():
    items = [50, 30, 70, 20, 40, 60, 80]
    tree = build(items)
    assert list(tree.inorder()) == sorted(items)
    assert list(tree) == sorted(items)


def test_preorder_keeps_insertion_shape():
    items = [50, 30, 70, 20, 40]
    tree = build(items)
    assert list(tree.preorder()) == [50, 30, 20, 40, 70]
    assert list(tree.postorder()) == [20, 40, 30, 70, 50]


def test_chain_height_equals_count():
    items = ["abc", "def", "ghi"]
    tree = build(items)
    assert tree.height() == len(items)


def test_balanced_height():
    tree = build(["def", "abc", "ghi"])
    assert tree.height() == 2


def test_contains_and_get_entry():
    tree = build([5, 3, 8])
    assert 3 in tree
    assert tree.contains(8)
    assert not tree.contains(4)
    assert tree.get_entry(5) == 5
    with pytest.raises(NotFoundError):
        tree.get_entry(4)


def test_remove_missing_returns_false():
    tree = build([5, 3, 8])
    assert tree.remove(7) is False
    assert list(tree) == [3, 5, 8]


@pytest.mark.parametrize("target", [20, 30, 50, 70, 40])
def test_remove_keeps_order(target):
    items = [50, 30, 70, 20, 40, 60, 80]
    tree = build(items)
    assert tree.remove(target) is True
    remaining = sorted(set(items) - {target})
    assert list(tree.inorder()) == remaining
    assert target not in tree
    assert len(tree) == len(remaining)


def test_remove_root_with_two_children_uses_largest_on_left():
    left = [30, 20, 40]
    tree = build([50, *left, 70])
    tree.remove(50)
    assert tree.root_data == max(left)


def test_remove_until_empty():
    items = [4, 2, 6, 1, 3, 5, 7]
    tree = build(items)
    for item in items:
        assert tree.remove(item)
    assert tree.is_empty()


def test_clear():
    tree = build([1, 2, 3])
    tree.clear()
    assert tree.is_empty()
    assert not tree.contains(1)


def test_inorder_month_query():
    tree = build(["mar", "jan", "feb"])
    calls = []
    tree.inorder_month_query(lambda item, month: calls.append((item, month)), 4)
    assert calls == [(item, 4) for item in sorted(["mar", "jan", "feb"])]


def test_same_structure_and_contents():
    first = build(["abc", "def", "ghi"])
    second = build(["def", "abc", "ghi"])
    assert not first.same_structure(second)
    assert first.same_contents(second)
    third = build(["abc", "def", "ghi"])
    assert first.same_structure(third)


def test_different_contents():
    first = build(["abc", "ghi"])
    second = build(["abc", "def", "ghi"])
    assert not first.same_structure(second)
    assert not first.same_contents(second)


def test_copy_is_independent():
    tree = build([5, 3, 8])
    clone = tree.copy()
    assert isinstance(clone, BinarySearchTree)
    assert clone.same_structure(tree)
    clone.add(9)
    assert 9 not in tree
    shallow = copy.copy(tree)
    assert shallow.same_structure(tree)