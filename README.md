# tmsu

The core library of a file tagging tool. Files are tagged with tags and
optional values, and can then be found again with a small query language.
It has no dependencies beyond the standard library.

## Modules

- `tmsu.query.query`: `parse(text)` turns a query such as
  `cheese and (peas or sweetcorn) and year>=2000` into an expression tree;
  `has_all(tag_names)` builds an "and" of tags; `tag_names(expression)` and
  `exact_value_names(expression)` pull out the tag names and the values
  compared with `=`, `==` or `!=`.
- `tmsu.query.scanner`: the `Scanner` tokeniser (`look_ahead()`, `next()`),
  its token classes and `token_type(token)`. Malformed queries raise
  `QueryError`, a subclass of `ValueError`.
- `tmsu.query.parser`: the recursive-descent `Parser` and the expression
  classes `EmptyExpression`, `TagExpression`, `ValueExpression`,
  `NotExpression`, `AndExpression`, `OrExpression` and `ComparisonExpression`.
  Adjacent terms are joined by an implicit "and"; "and" binds tighter than "or".
- `tmsu.tags`: `Tag`, `Value`, `TagFileCount`, the list types `Tags` and
  `Values`, `uniq_ids(ids)`, and `validate_tag_name` / `validate_value_name`,
  which raise `ValueError` for empty names, `.` and `..`, query operators and
  disallowed characters.
- `tmsu.entities`: `File`, `FileTag`, `FileTags`, `FileTagCount`,
  `Implication`, `Implications`, `TagIdValueIdPair`, `Query`, `Setting` and
  `Settings` (with `bool_value`, `value` and the named setting accessors).
- `tmsu.fingerprint`: `create(path, file_algorithm, directory_algorithm, symlink_algorithm)`.
  File algorithms are `SHA256`, `SHA1`, `MD5`, `BLAKE2b` and their `dynamic:`
  forms, which hash only the start, middle and end of files over 5 MiB; the
  empty string means `dynamic:SHA256`. Directory algorithms are `sumSizes` and
  `dynamic:sumSizes` (the default, counting at most 500 files). Symbolic link
  algorithms are `targetName`, `targetNameNoExt` and `follow`. `none` gives an
  empty fingerprint; unknown algorithms raise `ValueError`.
- `tmsu.tree`: `Tree` with `add`, `paths`, `top_level`, `leaves`, `files` and
  `directories`.
- `tmsu.paths`: `is_root`, `rel`, `rel_to`, `unescape_octal` and `dereference`.
- `tmsu.filesystem`: `enumerate_files(*paths)` and `enumerate_paths(*paths)`
  walk paths recursively; `FileSystemFile` records a path and whether it is a
  directory. Missing paths are skipped.
- `tmsu.text`: `tokenize(text)` splits text like a shell, with quotes and
  backslash escapes.
- `tmsu.terminal`: `width()`, `colour()`, `print_columns(items, width, file)`
  and `print_wrapped(text, max_width, file)`.
- `tmsu.ansi`: colour and style wrappers (`bold`, `red`, ...), `strip` and
  `sort_stripped`.
- `tmsu.logs`: `Logger` with `info(verbosity, ...)`, `warn` and `fatal`
  (which exits with status 1), plus module-level functions on a default logger.
- `tmsu.version`: `parse_version(text)` and `Version` with `less_than` and
  `greater_than`.

## Example

```python
from tmsu.query.query import parse, tag_names, exact_value_names

expression = parse("not cheese and (peas or sweetcorn) and year=2017")
print(tag_names(expression))          # ['cheese', 'peas', 'sweetcorn', 'year']
print(exact_value_names(expression))  # ['2017']
```

```python
from tmsu.tags import validate_tag_name

validate_tag_name("and")  # raises ValueError: tag name cannot be a logical operator: ...
```

## What the package does not do

It is a library only. It provides no command-line program, no database in
which tags are stored, no evaluation of queries against stored files, and no
virtual filesystem.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```