from pathlib import Path
from typing import Any

from serdeconv.convert.defaults import get_converter
from serdeconv.core.models.format import Format


def encode(value: Any, format: Format | str) -> bytes:
    return get_converter().encode(value, format)


def decode(data: bytes | str, format: Format | str, type: Any = None) -> Any:
    return get_converter().decode(data, format, type)


def convert(data: bytes | str, source: Format | str, target: Format | str) -> bytes:
    """
    Transcodes a document from `source` to `target`.

    There is no direct path between two formats: the document is decoded
    into a generic value which is then encoded again, so anything the
    target cannot represent raises EncodingError.
    """
    return get_converter().convert(data, source, target)


def load_file(path: str | Path, format: Format | str | None = None, type: Any = None) -> Any:
    """Reads a file, inferring the format from its suffix unless given."""
    return get_converter().load(path, format, type)


def dump_file(value: Any, path: str | Path, format: Format | str | None = None) -> None:
    """Writes a file, inferring the format from its suffix unless given."""
    get_converter().dump(value, path, format)
