# fhashkit

Calculate the MD5, SHA1, SHA256 and SHA512 hashes of files, list them
together with each file's size, modification date and (for Windows PE
executables) file version, and search a set of results for a hash value.

## Installation

```
pip install .
```

## Command line

```
fhash [-u] [--verify HASH] FILE [FILE ...]
```

For every file, in order, the command prints its name, size in bytes,
modification date (`YYYY-MM-DD HH:MM`, local time), its version when the
file is a PE image with a version resource, and its four hashes. A file
that cannot be opened (missing, a directory, no permission) is reported
with an error message instead. At the end it prints the time used and,
for runs longer than a tenth of a second, the throughput (`B/s`, `KB/s`
or `MB/s`).

Options:

- `-u`, `--uppercase` — print hashes in upper case (default: lower case).
- `--verify HASH` — hash the files but, instead of listing them, print a
  report of the files one of whose hashes contains `HASH`
  (case-insensitive), or "Nothing found".

Exit status: 0 on success; 1 when no files are given, when any file could
not be read, or when `--verify` finds nothing; 130 when interrupted.

Messages are in English, or in Simplified Chinese when the locale
(`LC_ALL`, `LC_MESSAGES` or `LANG`) is `zh_CN`.

## Library use

Hash files from Python:

```python
from fhashkit.app import hash_file, hash_files

result = hash_file("example.bin")
print(result.state, result.sha256)

for result in hash_files(["a.txt", "b.txt"]):
    print(result.path, result.md5)
```

`hash_file` and `hash_files` take an optional `threading.Event`; once it is
set, hashing stops (`hash_file` returns `None`, `hash_files` ends).

Format results as text, with hash values recorded as links:

```python
from fhashkit.hyperbuffer import HyperTextBuffer
from fhashkit.results import append_result

buffer = HyperTextBuffer()
append_result(result, True, buffer)
print(buffer.text())
print(buffer.links())
```

Look for a hash among results (path filter and hash both matched as
case-insensitive substrings):

```python
from fhashkit.results import find_results

matches = find_results(results, "", "d41d8cd98f00b204e9800998ecf8427e")
```

Read the version stored in a Windows executable:

```python
from fhashkit.peversion import file_version

print(file_version("program.exe"))  # for example "3.0.2.0", or "" if none
```

Other pieces:

- `fhashkit.osfile.OsFile` — a regular file opened through a raw
  descriptor, with size, modification time and seek/read/write; raises
  `OsFileError` when it cannot be opened.
- `fhashkit.hypertext` — find `http://` and `mailto:` tokens in text and
  the link covering a given character position.
- `fhashkit.app.parse_files_cmdline`, `format_speed`, `google_search_url`,
  `virustotal_search_url` — helpers for splitting a quoted file list,
  formatting throughput and building hash search addresses.
- `fhashkit.strings` and `fhashkit.uistrings` — localised interface
  strings; call `register_default_strings()` and then `get_string(key)`.

## What it does not do

fhashkit is a command line tool and a library. It has no graphical window
or drag-and-drop, does not add itself to a file manager's context menu,
and does not describe the running operating system.

## Tests

```
pip install .[test]
pytest
```