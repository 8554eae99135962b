"""Binary search tree built on the linked binary tree."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .errors import NotFoundError
from .node import BinaryNode
from .node_tree import BinaryNodeTree

_NO_ITEM = object()


class BinarySearchTree(BinaryNodeTree):
    """A linked binary tree that keeps unique items in search order."""

    def __init__(self, root_item: Any = _NO_ITEM) -> None:
        if root_item is _NO_ITEM:
            super().__init__()
        else:
            super().__init__(root_item)

    def _find(self, entry: Any) -> Optional[BinaryNode]:
        node = self._root
        while node is not None:
            if node.item == entry:
                return node
            node = node.left if entry < node.item else node.right
        return None

    def add(self, new_entry: Any) -> bool:
        """Insert new_entry in order; return False if it is already present."""
        if self.contains(new_entry):
            return False
        new_node = BinaryNode(new_entry)
        if self._root is None:
            self._root = new_node
            return True
        node = self._root
        while True:
            if new_entry < node.item:
                if node.left is None:
                    node.left = new_node
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return True
                node = node.right

    @staticmethod
    def _detach(node: BinaryNode) -> Optional[BinaryNode]:
        """Return the subtree that replaces node once its item is removed."""
        if node.left is not None and node.right is not None:
            parent, largest = node, node.left
            while largest.right is not None:
                parent, largest = largest, largest.right
            node.item = largest.item
            if parent is node:
                node.left = largest.left
            else:
                parent.right = largest.left
            return node
        return node.left if node.left is not None else node.right

    def remove(self, entry: Any) -> bool:
        """Remove entry, keeping search order; return False if it is absent."""
        parent: Optional[BinaryNode] = None
        node = self._root
        while node is not None and node.item != entry:
            parent = node
            node = node.left if entry < node.item else node.right
        if node is None:
            return False
        replacement = self._detach(node)
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        return True

    def get_entry(self, entry: Any) -> Any:
        node = self._find(entry)
        if node is None:
            raise NotFoundError("Entry not found in the tree")
        return node.item

    def contains(self, entry: Any) -> bool:
        return self._find(entry) is not None

    def inorder_month_query(self, visit: Callable[[Any, int], Any], month: int) -> None:
        """Call visit(item, month) for every item in order."""
        for item in self.inorder():
            visit(item, month)

    def same_structure(self, other: "BinarySearchTree") -> bool:
        """Return True if both trees have the same shape and items."""
        pairs = [(self._root, other._root)]
        while pairs:
            first, second = pairs.pop()
            if first is None and second is None:
                continue
            if first is None or second is None or first.item != second.item:
                return False
            pairs.append((first.left, second.left))
            pairs.append((first.right, second.right))
        return True

    def same_contents(self, other: "BinarySearchTree") -> bool:
        """Return True if both trees hold the same items, whatever their shape."""
        return sorted(self.inorder()) == sorted(other.inorder())

    def copy(self) -> "BinarySearchTree":
        """Return an independent tree with the same shape and items."""
        clone = super().copy()
        assert isinstance(clone, BinarySearchTree)
        return clone