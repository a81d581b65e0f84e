import os

import pytest

from kbase.file_iterator import FileInfo, FileIterator
from kbase.path import Path


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"hello")
    (tmp_path / "b.bin").write_bytes(b"xy")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.txt").write_bytes(b"nested")
    deep = sub / "deep"
    deep.mkdir()
    (deep / "d.txt").write_bytes(b"d")
    return tmp_path


def _names(infos, root):
    return {os.path.relpath(info.file_path.value, str(root)) for info in infos}


def test_non_recursive_lists_top_level_only(tree):
    infos = list(FileIterator(Path(tree), False))
    assert _names(infos, tree) == {"a.txt", "b.bin", "sub"}


def test_recursive_lists_everything(tree):
    infos = list(FileIterator(Path(tree), True))
    expected = {
        "a.txt", "b.bin", "sub",
        os.path.join("sub", "c.txt"), os.path.join("sub", "deep"),
        os.path.join("sub", "deep", "d.txt"),
    }
    assert _names(infos, tree) == expected


def test_recursive_order_parents_before_children(tree):
    infos = list(FileIterator(Path(tree), True))
    depths = [len(os.path.relpath(i.file_path.value, str(tree)).split(os.sep)) for i in infos]
    assert depths == sorted(depths)


def test_directory_flag_and_size(tree):
    infos = {os.path.basename(i.file_path.value): i for i in FileIterator(Path(tree), True)}
    assert infos["sub"].is_directory
    assert infos["deep"].is_directory
    assert not infos["a.txt"].is_directory
    assert infos["a.txt"].size == len(b"hello")
    assert infos["c.txt"].size == len(b"nested")


def test_times_match_stat(tree):
    info = next(i for i in FileIterator(Path(tree), False)
                if i.file_path.value.endswith("a.txt"))
    st = os.lstat(info.file_path.value)
    assert abs(info.last_modified_time.timestamp() - st.st_mtime) < 1e-5
    assert abs(info.last_accessed_time.timestamp() - st.st_atime) < 1e-5


def test_missing_directory_is_empty(tmp_path):
    assert list(FileIterator(Path(tmp_path / "missing"), True)) == []


def test_empty_directory(tmp_path):
    assert list(FileIterator(str(tmp_path), False)) == []


def test_exhausted_iterator_keeps_stopping(tree):
    it = FileIterator(Path(tree), False)
    assert len(list(it)) == 3
    with pytest.raises(StopIteration):
        next(it)


def test_entries_are_file_info(tree):
    entry = next(iter(FileIterator(Path(tree), False)))
    assert isinstance(entry, FileInfo)
    assert entry.file_path.value.startswith(str(tree))