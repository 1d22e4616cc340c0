# goboscript

Front-end tools for goboscript, a text language for Scratch projects:

- `goboscript.lexer` – `Lexer` and `tokenize()` turn source text into
  `(start, Token, end)` triples, with byte offsets as spans.
- `goboscript.token` – `TokenKind`, `Token` and the literal converters
  (`parse_int`, `parse_hex`, `parse_bin`, `parse_oct`, `parse_float`,
  `parse_string`, `parse_cmd`, `parse_arg`).
- `goboscript.pre_processor` – `pre_process()` expands `%define` and
  function-like macros, honours `%undef`, and drops line breaks and
  backslashes from the token stream.
- `goboscript.translation_unit` – `TranslationUnit` reads a source file,
  resolves `%include` (including `std/` headers from the standard library)
  and `%if` / `%if not` / `%endif` sections, and maps positions back to the
  file they came from with `translate_position()`.
- `goboscript.standard_library` – `StandardLibrary` locates a version of the
  standard library in a cache directory; `from_latest()` and `fetch()` call
  `git` to clone or update it.
- `goboscript.diagnostic` – `Diagnostic`, `DiagnosticKind`, `Level` and the
  `DiagnosticError` exception.
- `goboscript.sprite_diagnostics` – `SpriteDiagnostics` collects the
  diagnostics of one sprite file and renders them as text with source
  snippets (`render()`, `eprint()`).
- `goboscript.keys` – `all_keys()` and `is_key()` for key names.
- `goboscript.fmt` – `format_source()`, `format_file()` and `format_path()`
  align the line-continuation backslashes of `%` directives to column 88.

## Installation

```
pip install .
```

## Command line

Format every `.gs` file below a project directory, or a single file:

```
goboscript fmt
goboscript fmt --input path/to/project
goboscript fmt --input path/to/sprite.gs
```

Without `--input` the current directory is used. Run `goboscript --help`
for the usage text.

## Library use

```python
from goboscript.lexer import tokenize
from goboscript.pre_processor import pre_process

tokens = pre_process(tokenize("%define N 10\nx = N;\n"))
```

Lexing and pre-processing failures are raised as
`goboscript.diagnostic.DiagnosticError`; its `diagnostic` attribute holds the
first `Diagnostic`, with its `kind`, `span`, `message()`, `help()` and
`level()`.

Formatting source held in memory (the formatter works on bytes):

```python
from goboscript.fmt import format_source

print(format_source(b"%define LONG \\\nvalue\n").decode())
```

## What this package does not do

There is no grammar-level parser and no code generation: the package does not
build `.sb3` project files, and the command line offers only `fmt` — there is
no command to build or create a project.

## Running the tests

```
pip install .[test]
pytest
```