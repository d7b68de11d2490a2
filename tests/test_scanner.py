import os
import pytest
from pathlib import Path
from hashgen.scanner import expand_paths, iter_files


def test_expand_nested_directories_depth_first(tmp_path):
    """
    Tests that subdirectories are expanded before the files next to them,
    at every level of the tree.
    """
    (tmp_path / "sub1" / "sub2").mkdir(parents=True)
    top = tmp_path / "top.txt"
    mid = tmp_path / "sub1" / "mid.txt"
    deep = tmp_path / "sub1" / "sub2" / "deep.txt"
    for p in (top, mid, deep):
        p.write_text("x")

    assert expand_paths([tmp_path]) == [deep, mid, top]


def test_siblings_follow_scandir_order(tmp_path):
    for name in ["c.txt", "a.txt", "b.txt"]:
        (tmp_path / name).write_text(name)
    native = [Path(e.path) for e in os.scandir(tmp_path)]

    assert expand_paths([str(tmp_path)]) == native


def test_mixed_arguments_keep_input_order(tmp_path):
    d = tmp_path / "dir"
    d.mkdir()
    inner = d / "inner.bin"
    inner.write_bytes(b"\x00")
    loose = tmp_path / "loose.bin"
    loose.write_bytes(b"\x01")

    assert expand_paths([loose, d]) == [loose, inner]
    assert expand_paths([d, loose]) == [inner, loose]


def test_missing_paths_are_skipped(tmp_path):
    real = tmp_path / "real.txt"
    real.write_text("x")

    result = expand_paths([tmp_path / "nope", str(real), "/definitely/not/here"])

    assert result == [real]


def test_duplicates_are_expanded_each_time(tmp_path):
    f = tmp_path / "f.txt"
    f.write_text("x")

    assert expand_paths([f, f, tmp_path]) == [f, f, f]


def test_empty_directory(tmp_path):
    (tmp_path / "empty").mkdir()
    assert expand_paths([tmp_path]) == []


def test_iter_files_is_lazy(tmp_path):
    (tmp_path / "a").write_text("a")
    it = iter_files([tmp_path])
    assert next(it) == tmp_path / "a"
    with pytest.raises(StopIteration):
        next(it)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_symlink_cycle_terminates(tmp_path):
    """
    Tests that a directory symlink pointing back at an ancestor does not
    cause infinite recursion.
    """
    sub = tmp_path / "sub"
    sub.mkdir()
    inner = sub / "inner.txt"
    inner.write_text("x")
    outer = tmp_path / "outer.txt"
    outer.write_text("y")
    os.symlink(tmp_path, sub / "loop", target_is_directory=True)

    assert expand_paths([tmp_path]) == [inner, outer]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_broken_symlink_is_skipped(tmp_path):
    os.symlink(tmp_path / "missing", tmp_path / "dangling")
    (tmp_path / "ok.txt").write_text("x")

    assert expand_paths([tmp_path]) == [tmp_path / "ok.txt"]
