from bintree.node import BinaryNode


def test_new_node_is_leaf_with_item():
    node = BinaryNode("abc")
    assert node.item == "abc"
    assert node.left is None
    assert node.right is None
    assert node.is_leaf() is True


def test_default_node_has_no_item():
    node = BinaryNode()
    assert node.item is None
    assert node.is_leaf() is True


def test_node_with_left_child_is_not_leaf():
    child = BinaryNode(1)
    node = BinaryNode(2, left=child)
    assert node.is_leaf() is False
    assert node.left is child


def test_node_with_right_child_is_not_leaf():
    node = BinaryNode(2, None, BinaryNode(3))
    assert node.is_leaf() is False
    assert node.right.item == 3


def test_children_can_be_detached():
    node = BinaryNode(5, BinaryNode(4), BinaryNode(6))
    node.left = None
    node.right = None
    assert node.is_leaf() is True


def test_item_can_be_replaced():
    node = BinaryNode("old")
    node.item = "new"
    assert node.item == "new"