import pytest

from kbase.path import Path


def test_components_posix_example():
    assert Path("/home/kc/demo.txt").components() == ["/", "home", "kc", "demo.txt"]


def test_components_drive_example():
    assert Path("C:\\foo\\bar").components() == ["C:", "\\", "foo", "bar"]


def test_components_empty_and_relative():
    assert Path("").components() == []
    assert Path("foo/bar").components() == ["foo", "bar"]
    assert Path("./foo").components() == ["foo"]


def test_append_relative_path_example():
    current = Path("/user/kingsley chen")
    child = Path("/user/kingsley chen/app data/test")
    target = Path("/user/kingsley chen/documents")
    result = current.append_relative_path(child, target)
    assert result == Path("/user/kingsley chen/documents/app data/test")
    assert target == Path("/user/kingsley chen/documents")


def test_append_relative_path_not_parent():
    assert Path("/a/b").append_relative_path(Path("/a/c/d"), Path("/x")) is None
    assert Path("/a/b").append_relative_path(Path("/a/b"), Path("/x")) is None


def test_is_parent():
    assert Path("/a/b").is_parent(Path("/a/b/c"))
    assert not Path("/a/b/c").is_parent(Path("/a/b"))
    assert not Path("").is_parent(Path("/a"))


def test_strip_trailing_separators():
    assert Path("/a//").strip_trailing_separators() == Path("/a")
    assert Path("C:\\").strip_trailing_separators() == Path("C:\\")
    assert Path("/").strip_trailing_separators() == Path("/")


def test_parent_path_single_element_is_empty():
    assert not Path("foo").parent_path()
    assert not Path("").parent_path()
    assert not Path("/").parent_path()


def test_parent_path_values():
    assert Path("/home/kc/demo.txt").parent_path() == Path("/home/kc")
    assert Path("/foo").parent_path() == Path("/")
    assert Path("C:tmp.txt").parent_path() == Path("C:")
    assert Path("C:\\foo").parent_path() == Path("C:\\")


def test_filename():
    assert Path("/home/kc/demo.txt").filename() == Path("demo.txt")
    assert Path("/").filename() == Path("/")
    assert Path("C:tmp.txt").filename() == Path("tmp.txt")
    assert Path("/a/b/").filename() == Path("b")


def test_parent_and_filename_recompose():
    path = Path("/usr/local/lib")
    assert path.parent_path().append_with(path.filename()) == path


def test_is_absolute():
    assert Path("/usr").is_absolute()
    assert not Path("usr/bin").is_absolute()
    assert not Path("").is_absolute()


def test_append():
    path = Path("/usr")
    assert path.append("lib") is path
    assert path == Path("/usr/lib")
    assert Path("/usr/").append(Path("lib")) == Path("/usr/lib")
    assert Path("").append("lib") == Path("lib")
    assert Path("C:").append("foo") == Path("C:foo")


def test_append_to_current_dir_replaces():
    assert Path(".").append("foo/bar") == Path("foo/bar")


def test_append_absolute_raises():
    with pytest.raises(ValueError):
        Path("/usr").append("/lib")


def test_append_with_does_not_mutate():
    base = Path("/usr")
    joined = base.append_with("share")
    assert joined == Path("/usr/share")
    assert base == Path("/usr")


def test_ends_with_separator_and_is_separator():
    assert Path("/a/").ends_with_separator()
    assert not Path("/a").ends_with_separator()
    assert not Path("").ends_with_separator()
    assert Path.is_separator("\\")
    assert not Path.is_separator("a")


def test_make_preferred_separator():
    assert Path("a\\b\\c").make_preferred_separator() == Path("a/b/c")
    assert Path("a/b\\c").make_preferred_separator() == Path("a/b\\c")


def test_extension():
    assert Path("/a/foo.txt").extension() == ".txt"
    assert Path("foo.tar.gz").extension() == ".gz"
    assert Path(".").extension() == ""
    assert Path("..").extension() == ""
    assert Path("/a/foo").extension() == ""


def test_remove_extension():
    assert Path("foo.txt").remove_extension() == Path("foo")
    assert Path("foo").remove_extension() == Path("foo")


def test_add_extension():
    assert Path("foo").add_extension("txt") == Path("foo.txt")
    assert Path("foo").add_extension(".txt") == Path("foo.txt")
    assert Path("foo").add_extension(".") == Path("foo")
    assert Path("foo").add_extension("") == Path("foo")


def test_add_then_remove_extension_round_trip():
    path = Path("/data/report")
    assert Path(path.value).add_extension("csv").remove_extension() == path


def test_replace_extension():
    assert Path("foo.txt").replace_extension("md") == Path("foo.md")
    assert Path("foo.txt").replace_extension(".md") == Path("foo.md")
    assert Path("foo.txt").replace_extension("") == Path("foo")
    assert Path("foo").replace_extension("md") == Path("foo.md")


def test_reference_parent():
    assert Path("a/../b").reference_parent()
    assert Path("a/..  /b").reference_parent()
    assert not Path("a/b").reference_parent()


def test_equality_hash_and_ordering():
    assert Path("a") == Path("a")
    assert Path("a") != Path("A")
    assert hash(Path("a/b")) == hash(Path("a/b"))
    assert Path("a") < Path("b")
    assert sorted([Path("b"), Path("a")]) == [Path("a"), Path("b")]


def test_bool_and_clear():
    path = Path("/tmp")
    assert path
    path.clear()
    assert not path
    assert path.value == ""


def test_utf8_round_trip():
    text = "/tmp/données"
    assert Path.from_utf8(text).as_utf8() == text
    assert Path.from_utf8(text.encode("utf-8")) == Path(text)
    assert str(Path(text)) == text