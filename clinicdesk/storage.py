"""Reading and writing entity files, one delimited line per entity."""

from __future__ import annotations

import os
import re
from typing import Any, Iterable, Union

from clinicdesk.parsing import ParserFactory
from clinicdesk.writing import TextWriter

PathLike = Union[str, "os.PathLike[str]"]

_LINE_PREFIX = re.compile(r"^(\w+)-")


class StorageError(RuntimeError):
    """An entity file could not be read, parsed or written."""


def _parse_line(line: str, factory: ParserFactory, path: str) -> Any:
    match = _LINE_PREFIX.match(line)
    if match is None:
        raise StorageError(f"Invalid line in `{path}`")
    parser = factory.get_parser(match.group(1))
    if parser is None:
        raise StorageError(f"Invalid line in `{path}`")
    return parser.parse(line)


def load_entities(path: PathLike, delim: str = "|") -> list[Any]:
    """Parse every line of the file at ``path`` into an entity.

    The parser for a line is chosen by the identifier prefix it starts with.
    """
    path = os.fspath(path)
    factory = ParserFactory(delim)
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot open file `{path}` for reading") from exc
    with handle:
        return [_parse_line(line.rstrip("\n"), factory, path) for line in handle]


def save_entities(entities: Iterable[Any], path: PathLike, delim: str = "|") -> None:
    """Write ``entities`` to ``path``, one line each, replacing it atomically."""
    path = os.fspath(path)
    writer = TextWriter(delim)
    lines = [writer.write(entity) + "\n" for entity in entities]
    temporary = path + ".tmp"
    try:
        with open(temporary, "w", encoding="utf-8") as handle:
            handle.writelines(lines)
    except OSError as exc:
        raise StorageError(f"Cannot open file `{path}` for writing") from exc
    try:
        os.replace(temporary, path)
    except OSError as exc:
        raise StorageError("Cannot rename temp file to target") from exc