"""Node of a linked binary tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class BinaryNode:
    """A data item with optional left and right children."""

    item: Any = None
    left: Optional["BinaryNode"] = None
    right: Optional["BinaryNode"] = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None