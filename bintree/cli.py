"""Command that compares sample search trees and reports the result."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .bst import BinarySearchTree


def compare_report(first: BinarySearchTree, second: BinarySearchTree) -> str:
    """Return two lines describing whether the trees match in shape and contents."""
    structure = (
        "The trees structure and contents are the same."
        if first.same_structure(second)
        else "The trees structure and contents are not the same."
    )
    contents = (
        "The trees contents are the same."
        if first.same_contents(second)
        else "The trees contents are not the same."
    )
    return f"{structure}\n{contents}"


def _tree(*items: str) -> BinarySearchTree:
    tree = BinarySearchTree()
    for item in items:
        tree.add(item)
    return tree


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compare two pairs of sample trees and print the reports."""
    parser = argparse.ArgumentParser(
        prog="bintree", description="Compare sample binary search trees."
    )
    parser.parse_args(argv)

    first = _tree("abc", "def", "ghi")
    second = _tree("def", "abc", "ghi")
    print(compare_report(first, second))

    first.clear()
    second.clear()
    for item in ("abc", "ghi"):
        first.add(item)
    for item in ("abc", "def", "ghi"):
        second.add(item)
    print()
    print(compare_report(first, second))
    return 0