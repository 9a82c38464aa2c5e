import os
import re

import pytest

from sysprac.find import find, main, walk


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "root"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    (root / "sub" / "deep" / "c.txt").write_text("c")
    (root / ".hidden").write_text("h")
    (root / "sub" / ".secret").mkdir()
    (root / "sub" / ".secret" / "d.txt").write_text("d")
    return str(root)


@pytest.fixture
def flat(tmp_path):
    base = tmp_path / "flat"
    base.mkdir()
    for name in ["a(1).txt", "a+b", "aab", "abab", "x1"]:
        (base / name).write_text("")
    return str(base)


def names(paths):
    return {os.path.basename(p) for p in paths}


def test_find_everything_skips_hidden(tree):
    found = list(find(tree))
    assert found[0] == tree
    assert set(found) == {
        tree,
        tree + "/a.txt",
        tree + "/sub",
        tree + "/sub/b.txt",
        tree + "/sub/deep",
        tree + "/sub/deep/c.txt",
    }


def test_parent_precedes_children(tree):
    found = list(find(tree))
    assert found.index(tree + "/sub") < found.index(tree + "/sub/b.txt")
    assert found.index(tree + "/sub/deep") < found.index(tree + "/sub/deep/c.txt")


def test_max_depth_zero_is_root_only(tree):
    assert list(find(tree, 0)) == [tree]


def test_max_depth_one(tree):
    assert set(find(tree, 1)) == {tree, tree + "/a.txt", tree + "/sub"}


def test_trailing_slash_not_doubled(tree):
    assert set(find(tree + "/", 1)) == {tree + "/", tree + "/a.txt", tree + "/sub"}


def test_pattern_filters_but_still_descends(tree):
    assert list(find(tree, None, "c\\.txt")) == [tree + "/sub/deep/c.txt"]


def test_root_included_when_pattern_matches_path(tree):
    found = list(find(tree, 1, "root"))
    assert found == [tree]


def test_negative_depth_rejected(tree):
    with pytest.raises(ValueError):
        find(tree, -1)


def test_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        find(str(tmp_path / "missing"))


def test_file_root_yields_itself(tree):
    path = tree + "/a.txt"
    assert list(find(path)) == [path]


def test_walk_excludes_root(tree):
    assert tree not in set(walk(tree))
    assert set(walk(tree, 1)) == {tree + "/a.txt", tree + "/sub"}


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("a(1)", {"a(1).txt"}),
        ("a+b", {"a+b"}),
        ("\\(ab\\)\\{2\\}", {"abab"}),
        ("[[:digit:]]", {"x1", "a(1).txt"}),
        ("^a", {"a(1).txt", "a+b", "aab", "abab"}),
        ("b$", {"a+b", "aab", "abab"}),
    ],
)
def test_basic_regex_syntax(flat, pattern, expected):
    assert names(walk(flat, None, pattern)) == expected


@pytest.mark.parametrize("pattern", ["[abc", "ab\\"])
def test_invalid_pattern(flat, pattern):
    with pytest.raises(re.error):
        walk(flat, None, pattern)


def test_main_depth_option(tree, capsys):
    assert main(["-d", "1", tree]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert set(lines) == {tree, tree + "/a.txt", tree + "/sub"}


def test_main_pattern_option(tree, capsys):
    assert main(["-n", "b\\.txt", tree]) == 0
    assert capsys.readouterr().out.splitlines() == [tree + "/sub/b.txt"]


def test_main_negative_depth(tree, capsys):
    assert main(["-d", "-3", tree]) == 1
    assert "Max depth must be positive." in capsys.readouterr().err


def test_main_too_many_arguments(tree, capsys):
    assert main([tree, tree, tree]) == 1
    assert capsys.readouterr().err.startswith("Usage:")


def test_main_missing_path(tmp_path, capsys):
    assert main([str(tmp_path / "nope")]) == 1
    assert capsys.readouterr().err.startswith("stat:")