# sckit

A small toolkit of everyday building blocks, with no dependencies outside the
standard library:

- `sckit.cjson`: a JSON tree. `parse` reads the first value in a string,
  `parse_file` reads a file, `to_string` prints a tree back as compact JSON, and
  `minify` strips whitespace plus `//` and `/* */` comments outside strings.
  Trees are `JsonNode` objects (`type`, `key`, `string`, `number`, `children`);
  `member` and `detach_member` look keys up without regard to ASCII case, `item`
  and `detach_item` work by position, and `int(node)` gives the number as an
  integer. `new_null`, `new_bool`, `new_number`, `new_string`, `new_array`,
  `new_object` and `new_typed_array` build trees by hand. Parse errors raise
  `JsonError`.
- `sckit.config`: reads `$name = "value"` lines. `parse_config` turns text into a
  dict; `Config(path)` loads a file, `Config.get` looks a key up and
  `Config.reload` reads the file again.
- `sckit.csvfile`: `parse_csv` and `read_csv` split CSV text into a fixed-width
  `CsvTable` (`rows`, `cols`, `get(row, col)`, iteration by row). Quoted fields may
  hold commas, newlines and doubled quotes; malformed input raises `CsvError`.
- `sckit.log`: `Logger` writes every record to `sc.log` and FATAL/WARNING records
  also to `sc.log.wf` in a directory of your choice. Each thread binds a module
  name and request address with `bind` and gets a fresh log id; the last id is
  kept in `__lid__` between runs. `trace` and `debug` write only when the logger
  is created with `verbose=True`.
- `sckit.linkedlist.LinkedList`: a singly linked list with `push`, `append`,
  `insert`, `get`, `pop`, `find`, `find_pop` and `front_of`.
- `sckit.bstree.SearchTree`: an unbalanced binary search tree with unique keys,
  `add`, `get`, `remove`, `clear`, membership tests and in-order iteration.
- `sckit.textutil`: `TextBuffer`, `str_hash`, case-insensitive `str_icmp`, and
  `read_file`, `write_file`, `append_file`.
- `sckit.common`: `ScError` (base of the package's errors), `is_big_endian`,
  `pause`, `now_string`, `isspace`, `eq_float`, `eq_double`.

## Install

```
pip install .
```

## Examples

```python
from sckit import cjson

root = cjson.parse('{"name": "Jack", "format": {"height": 1080, "interlace": false}}')
print(root.member("name").string)                   # Jack
print(int(root.member("format").member("height")))  # 1080
print(cjson.to_string(root))  # {"name":"Jack","format":{"height":1080,"interlace":false}}
```

```python
from sckit.csvfile import parse_csv

table = parse_csv('a,b\n"x, y",z\n')
print(table.get(1, 0))   # x, y
```

```python
from sckit.config import parse_config

values = parse_config('$host = "localhost"\n')
print(values["host"])    # localhost
```

```python
from sckit.log import Logger

with Logger("log") as log:
    log.bind("worker", "127.0.0.1")
    log.warning("disk at %d%%", 91)
```

## What it does not do

sckit is a library only: it installs no command-line program. The logger does
not rotate or trim its files, and the config reader only reads; nothing writes
configuration back.

## Tests

```
pip install .[test]
pytest
```