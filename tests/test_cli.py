from bintree.bst import BinarySearchTree
from bintree.cli import compare_report, main


def build(items):
    tree = BinarySearchTree()
    for item in items:
        tree.add(item)
    return tree


def test_report_identical_trees():
    report = compare_report(build(["b", "a", "c"]), build(["b", "a", "c"]))
    assert report.splitlines() == [
        "The trees structure and contents are the same.",
        "The trees contents are the same.",
    ]


def test_report_same_contents_different_shape():
    report = compare_report(build(["abc", "def", "ghi"]), build(["def", "abc", "ghi"]))
    assert report.splitlines() == [
        "The trees structure and contents are not the same.",
        "The trees contents are the same.",
    ]


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "The trees structure and contents are not the same.",
        "The trees contents are the same.",
        "",
        "The trees structure and contents are not the same.",
        "The trees contents are not the same.",
    ]