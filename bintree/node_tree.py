"""Abstract binary tree and a linked implementation that stays balanced on add."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Iterator, Optional

from .errors import NotFoundError, PreconditionViolatedError
from .node import BinaryNode

_EMPTY = object()


class BinaryTree(ABC):
    """Operations every binary tree provides."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the tree has no nodes."""

    @abstractmethod
    def height(self) -> int:
        """Return the number of levels in the tree."""

    @abstractmethod
    def node_count(self) -> int:
        """Return the number of nodes in the tree."""

    @property
    @abstractmethod
    def root_data(self) -> Any:
        """The item stored at the root."""

    @abstractmethod
    def add(self, new_data: Any) -> bool:
        """Add an item; return True on success."""

    @abstractmethod
    def remove(self, data: Any) -> bool:
        """Remove an item; return True if it was present."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every node."""

    @abstractmethod
    def get_entry(self, entry: Any) -> Any:
        """Return the stored item equal to entry."""

    @abstractmethod
    def contains(self, entry: Any) -> bool:
        """Return True if an item equal to entry is stored."""

    @abstractmethod
    def preorder(self) -> Iterator[Any]:
        """Yield items in preorder."""

    @abstractmethod
    def inorder(self) -> Iterator[Any]:
        """Yield items in inorder."""

    @abstractmethod
    def postorder(self) -> Iterator[Any]:
        """Yield items in postorder."""


def _height(node: Optional[BinaryNode]) -> int:
    if node is None:
        return 0
    levels = 0
    level = [node]
    while level:
        levels += 1
        level = [child for n in level for child in (n.left, n.right) if child is not None]
    return levels


def _count(node: Optional[BinaryNode]) -> int:
    return sum(1 for _ in _preorder_nodes(node))


def _copy_nodes(node: Optional[BinaryNode]) -> Optional[BinaryNode]:
    if node is None:
        return None
    root = BinaryNode(node.item)
    stack = [(node, root)]
    while stack:
        source, target = stack.pop()
        if source.left is not None:
            target.left = BinaryNode(source.left.item)
            stack.append((source.left, target.left))
        if source.right is not None:
            target.right = BinaryNode(source.right.item)
            stack.append((source.right, target.right))
    return root


def _preorder_nodes(node: Optional[BinaryNode]) -> Iterator[BinaryNode]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def _inorder_nodes(node: Optional[BinaryNode]) -> Iterator[BinaryNode]:
    stack: list[BinaryNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def _postorder_nodes(node: Optional[BinaryNode]) -> Iterator[BinaryNode]:
    if node is None:
        return
    stack = [node]
    reversed_order: list[BinaryNode] = []
    while stack:
        current = stack.pop()
        reversed_order.append(current)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    yield from reversed(reversed_order)


class BinaryNodeTree(BinaryTree):
    """A linked binary tree that adds items to its shallower side."""

    def __init__(
        self,
        root_item: Any = _EMPTY,
        left: Optional["BinaryNodeTree"] = None,
        right: Optional["BinaryNodeTree"] = None,
    ) -> None:
        if root_item is _EMPTY:
            if left is not None or right is not None:
                raise ValueError("subtrees need a root item")
            self._root: Optional[BinaryNode] = None
        else:
            self._root = BinaryNode(
                root_item,
                _copy_nodes(left._root) if left is not None else None,
                _copy_nodes(right._root) if right is not None else None,
            )

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        return _height(self._root)

    def node_count(self) -> int:
        return _count(self._root)

    def __len__(self) -> int:
        return self.node_count()

    @property
    def root_data(self) -> Any:
        """The root item; reading it from an empty tree raises."""
        if self._root is None:
            raise PreconditionViolatedError("Tree is empty")
        return self._root.item

    @root_data.setter
    def root_data(self, new_data: Any) -> None:
        if self._root is None:
            self._root = BinaryNode(new_data)
        else:
            self._root.item = new_data

    def add(self, new_data: Any) -> bool:
        new_node = BinaryNode(new_data)
        if self._root is None:
            self._root = new_node
            return True
        node = self._root
        while True:
            if _height(node.left) <= _height(node.right):
                if node.left is None:
                    node.left = new_node
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return True
                node = node.right

    def remove(self, data: Any) -> bool:
        if self._root is None:
            return False
        parent: Optional[BinaryNode] = None
        target: Optional[BinaryNode] = None
        stack: list[tuple[BinaryNode, Optional[BinaryNode]]] = [(self._root, None)]
        while stack:
            node, node_parent = stack.pop()
            if node.item == data:
                target, parent = node, node_parent
                break
            if node.right is not None:
                stack.append((node.right, node))
            if node.left is not None:
                stack.append((node.left, node))
        if target is None:
            return False
        replacement = self._move_values_up(target)
        if parent is None:
            self._root = replacement
        elif parent.left is target:
            parent.left = replacement
        else:
            parent.right = replacement
        return True

    @staticmethod
    def _move_values_up(node: BinaryNode) -> Optional[BinaryNode]:
        """Shift child values up into node until a leaf can be dropped."""
        if node.is_leaf():
            return None
        top = node
        while True:
            child = node.left if node.left is not None else node.right
            node.item = child.item
            if child.is_leaf():
                if node.left is child:
                    node.left = None
                else:
                    node.right = None
                return top
            node = child

    def clear(self) -> None:
        self._root = None

    def _find_node(self, entry: Any) -> Optional[BinaryNode]:
        return next((n for n in _preorder_nodes(self._root) if n.item == entry), None)

    def get_entry(self, entry: Any) -> Any:
        node = self._find_node(entry)
        if node is None:
            raise NotFoundError("Entry not found in the tree")
        return node.item

    def contains(self, entry: Any) -> bool:
        return self._find_node(entry) is not None

    def __contains__(self, entry: Any) -> bool:
        return self.contains(entry)

    def preorder(self) -> Iterator[Any]:
        return (n.item for n in _preorder_nodes(self._root))

    def inorder(self) -> Iterator[Any]:
        return (n.item for n in _inorder_nodes(self._root))

    def postorder(self) -> Iterator[Any]:
        return (n.item for n in _postorder_nodes(self._root))

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def copy(self) -> "BinaryNodeTree":
        """Return an independent tree with the same shape and items."""
        clone = type(self).__new__(type(self))
        clone._root = _copy_nodes(self._root)
        return clone

    def __copy__(self) -> "BinaryNodeTree":
        return self.copy()