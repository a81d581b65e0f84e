# kbase

Small building blocks for Python programs on POSIX systems. The package has
no dependencies beyond the standard library.

## Modules

- `kbase.path` – `Path`, a string-backed path value handled purely lexically.
  Both `/` and `\` count as separators, and `/` is preferred. It offers
  `parent_path()`, `filename()`, `components()`, `extension()`,
  `add_extension()`, `replace_extension()`, `remove_extension()`, `append()`,
  `append_with()`, `is_absolute()`, `is_parent()`, `append_relative_path()` and
  `reference_parent()`. `append()` raises `ValueError` when given an absolute
  path.
- `kbase.base_path_provider` – `PathKey` and `base_path_provider(key)`. These
  cover the executable file and its directory, the current directory, the
  temporary directory (`TMPDIR` or `/tmp`) and the home directory (`HOME`).
- `kbase.path_service` – `get_path(key)` returns an absolute path for a key,
  with caching (`disable_cache()`, `enable_cache()`).
  `register_path_provider(provider, start, end)` adds providers for new key
  ranges; it raises `ValueError` on an empty or overlapping range.
- `kbase.file_iterator` – `FileIterator(dir_path, recursive=False)` yields
  `FileInfo` records: path, size, directory flag and time stamps. In recursive
  mode it finishes a directory before it goes into its subdirectories.
- `kbase.file_util` – file helpers:
  - `make_absolute_path`, `path_exists` and `directory_exists`;
  - `is_directory_empty` and `make_directory` (which creates parents too);
  - `get_file_info` and `remove_file`;
  - `duplicate_file`, `duplicate_directory` and `make_file_move`;
  - `read_file_to_string` (returns `bytes`), `write_string_to_file` and
    `append_string_to_file`, each with `OpenMode.BINARY` or `OpenMode.TEXT`.

  Most of these report failure by returning `False`, an empty value or `None`
  rather than by raising.
- `kbase.base64` – `base64_encode` and `base64_decode`, with padding required.
  Decoding returns `b""` for invalid input.
- `kbase.md5` – the incremental `MD5` hasher (`update`, `digest`,
  `hexdigest`), plus `md5_sum`, `md5_string` and `md5_digest_to_string`.
- `kbase.guid` – `generate_guid()` makes random version-4 GUIDs.
  `is_guid_valid(guid, strict_mode=False)` checks one; strict mode requires
  lowercase hex.
- `kbase.chrono_util` – `TimeExplode` and `Resolution`.
  `time_point_to_local_time_explode` and `time_point_to_utc_time_explode` break
  a `datetime` down into calendar fields. `time_point_from_timespec` and
  `time_point_to_timespec` convert to and from `(seconds, nanoseconds)`.
- `kbase.environment` – `get_var`, `has_var`, `set_var`, `remove_var` and
  `current_environment_block` for the process environment.
- `kbase.at_exit_manager` – `AtExitManager` is a context manager that runs
  callbacks on close, last registered first. Callbacks are added with
  `AtExitManager.register_callback`. Only one manager may be active at a time.

## Examples

```python
from kbase.path import Path
from kbase.base64 import base64_encode, base64_decode
from kbase.md5 import md5_string
from kbase.guid import generate_guid, is_guid_valid
from kbase.base_path_provider import PathKey
from kbase.path_service import get_path

p = Path("/home/user/demo.txt")
print(p.parent_path(), p.filename(), p.extension())   # /home/user demo.txt .txt
print(p.components())                                 # ['/', 'home', 'user', 'demo.txt']

print(base64_encode(b"hello"))                        # aGVsbG8=
print(base64_decode("aGVsbG8="))                      # b'hello'
print(md5_string("abc"))                              # 900150983cd24fb0d6963f7d28e17f72

guid = generate_guid()
print(is_guid_valid(guid, strict_mode=True))          # True

print(get_path(PathKey.DIR_TEMP))                     # e.g. /tmp
```

```python
from kbase.at_exit_manager import AtExitManager

with AtExitManager():
    AtExitManager.register_callback(lambda: print("second"))
    AtExitManager.register_callback(lambda: print("first"))
# prints "first" then "second"
```

## What it does not do

The package has no command-line argument parser and no logging facility of
its own; it reports problems through the standard `logging` module. It offers
no tokenizer, no checked-condition helpers, no debugger detection and no
operating-system information queries. It provides no command to run; it is
used as a library only.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```