# vfoxkit

Building blocks for a tool that installs and switches between versions of
SDKs and runtimes: comparing version strings, unpacking downloaded archives,
fetching files over HTTP and keeping `.tool-versions` files.

## Modules

- `vfoxkit.util.version`
  - `compare_version(v1, v2)` compares dotted versions part by part and
    returns `1`, `-1` or `0`. Missing parts count as `0`, and so do parts
    that are not plain integers.
  - `sort_versions(versions)` returns a new list, newest first.
  - `RUNTIME_VERSION` is the version string `"0.6.1"`.
- `vfoxkit.util.sets`
  - `MapSet` is a hash set whose `add` returns `True` only when the value
    was new; `remove` ignores values that are absent. It supports `in`,
    `len()`, iteration and `to_list()`.
  - `SortedSet` keeps insertion order. Besides the same operations it has
    `insert(index, value)`, which returns `False` when the index is outside
    `0..len` or the value is already present.
- `vfoxkit.util.error_store`
  - `ErrorStore` collects exceptions, each under a note: `add`,
    `add_and_show` (also prints the error), `notes()` (in order),
    `note_set()` (distinct notes as a `MapSet`) and `has_error()`.
- `vfoxkit.util.timeutil`
  - `get_timestamp()` is the current Unix time in seconds,
    `get_begin_of_today()` is local midnight today, and
    `is_before_today(timestamp)` tells whether a timestamp falls on an
    earlier local day.
- `vfoxkit.util.runtime`
  - `get_os_type()` gives names such as `linux`, `darwin` or `windows`;
    `get_arch_type()` gives names such as `amd64`, `arm64` or `386`.
- `vfoxkit.util.fileops`
  - `file_exists`, `copy_file` (truncates the target and syncs it to disk),
    `move_files` (moves a file, or every entry of a directory, into a target
    directory), `change_mode_if_not`, `is_executable` (by suffix on Windows,
    by execute bits elsewhere) and `mk_symlink` (tries a directory junction
    first on Windows, then a symbolic link).
- `vfoxkit.util.decompressor`
  - `new_decompressor(path)` picks an extractor from the file name:
    `GzipTarDecompressor` for `.tar.gz` and `.tgz`, `XZTarDecompressor` for
    `.tar.xz`, `Bzip2TarDecompressor` for `.tar.bz2` and `ZipDecompressor`
    for `.zip`. Any other name gives `None`.
  - `decompress(dest)` unpacks into `dest`. Tar archives always lose the
    first path component of every entry. Zip archives lose it only when
    every entry shares the same top-level folder, which
    `find_root_folder_in_zip` reports (`""` when there is none). Symbolic
    links in either format are recreated.
- `vfoxkit.util.downloader`
  - `Downloader(local_path).download(url)` saves the file under the last
    part of the URL path inside `local_path`, shows a progress bar, and
    returns the written path. A 404 response raises `SourceNotFoundError`.
- `vfoxkit.toolset.file_record`
  - `FileRecord` holds a `dict` of `name value` lines. `FileRecord.from_path`
    reads a file (a missing file gives an empty record; lines without
    exactly two space-separated fields are skipped) and `save()` writes it
    back. A record that was empty when loaded and is still empty is not
    written. Write failures raise `FileRecordError`.
- `vfoxkit.toolset.tool_version`
  - `ToolVersion.from_dir(path)` loads the `.tool-versions` file in a
    directory; read failures raise `ToolVersionsReadError`.
  - `MultiToolVersions.from_paths(paths)` loads one per directory.
    `filter_tools(predicate)` returns the first accepted version for each
    name, `add(name, version)` sets it in every file, and `save()` writes
    them all.

## Install

    pip install vfoxkit

## Examples

    from vfoxkit.util.version import compare_version, sort_versions

    compare_version("1.0.0", "0.0.1")        # 1
    sort_versions(["1.2", "1.10", "1.9"])    # ['1.10', '1.9', '1.2']

    from vfoxkit.util.decompressor import new_decompressor

    extractor = new_decompressor("node-v20.0.0-linux-x64.tar.gz")
    extractor.decompress("/opt/sdks/node/20.0.0")

    from vfoxkit.toolset.tool_version import MultiToolVersions

    tools = MultiToolVersions.from_paths(["/home/me/project", "/home/me"])
    tools.add("nodejs", "20.0.0")
    tools.save()

## What it does not do

This is a library only. It has no command-line program, no plugin system
and no logic for choosing, installing or activating SDK versions; those are
left to the code that uses it. Of archive formats it reads only tar (gzip,
xz, bzip2) and zip; `.7z` files are not supported.

## Tests

    pip install "vfoxkit[test]"
    pytest