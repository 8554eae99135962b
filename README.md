# bintree

Binary tree containers for Python with no dependencies.

- `bintree.node_tree.BinaryNodeTree` is a general binary tree. Each new item goes into the shallower side of the tree, so the tree stays balanced by height as items are added.
- `bintree.bst.BinarySearchTree` keeps its items in search order and does not store duplicates. It can tell whether two trees hold the same items, and whether they also have the same shape.
- `bintree.node.BinaryNode` is the node both trees are built from.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the search tree

```python
from bintree.bst import BinarySearchTree

tree = BinarySearchTree()
for word in ("def", "abc", "ghi"):
    tree.add(word)

"abc" in tree            # True
list(tree)               # ['abc', 'def', 'ghi']  (in-order)
list(tree.preorder())    # ['def', 'abc', 'ghi']
tree.height()            # 2
len(tree)                # 3
tree.root_data           # 'def'

tree.add("abc")          # False: duplicates are not stored
tree.remove("def")       # True
tree.remove("zzz")       # False
tree.get_entry("zzz")    # raises bintree.errors.NotFoundError
```

`inorder_month_query(visit, month)` calls `visit(item, month)` for every item in order.

Comparing two search trees:

```python
a = BinarySearchTree()
b = BinarySearchTree()
for word in ("abc", "def", "ghi"):
    a.add(word)
for word in ("def", "abc", "ghi"):
    b.add(word)

a.same_contents(b)    # True: both hold the same items
a.same_structure(b)   # False: the items were inserted in a different order
```

## Using the general tree

```python
from bintree.node_tree import BinaryNodeTree

left = BinaryNodeTree("b")
right = BinaryNodeTree("c")
tree = BinaryNodeTree("a", left, right)   # the subtrees are copied

tree.add("d")
list(tree.preorder())    # ['a', 'b', 'd', 'c']
tree.contains("d")       # True
tree.remove("a")         # True
```

Both trees offer `add`, `remove`, `contains` (and `in`), `get_entry`, `clear`, `is_empty`, `height`, `node_count` (and `len`), `copy` (and `copy.copy`), and the `preorder`, `inorder` and `postorder` generators; iterating a tree yields its items in order. `root_data` is a property: assigning to it replaces the root item, or creates the root in an empty tree; reading it from an empty tree raises `bintree.errors.PreconditionViolatedError`. Both error classes derive from `bintree.errors.TreeError`.

## Command line

```
bintree
```

This builds two pairs of search trees from the same words and prints whether each pair matches in structure and in contents. It takes no options besides `--help`.

## What it does not do

The trees live in memory only: there is no saving to or loading from files, and the command works only on its built-in sample words.