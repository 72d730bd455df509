from pathlib import Path
from typing import Any, IO

from serdeconv.convert.defaults import get_converter, get_pretty_converter
from serdeconv.core.models.format import Format


def from_json(data: str | bytes, type: Any = None) -> Any:
    """
    Converts a JSON document (text or UTF-8 bytes) to a value.

    With `type`, the decoded value is validated into that type,
    e.g. a dataclass or a pydantic model.
    """
    return get_converter().decode(data, Format.JSON, type)


def to_json(value: Any) -> str:
    """
    Converts the value to a compact JSON string.

    >>> to_json({"name": "a", "count": 1})
    '{"name":"a","count":1}'
    """
    return get_converter().encode_text(value, Format.JSON)


def from_json_str(json: str, type: Any = None) -> Any:
    """Converts from the JSON string to a value."""
    return get_converter().decode(json, Format.JSON, type)


def from_json_bytes(json: bytes, type: Any = None) -> Any:
    """Converts from the JSON bytes to a value."""
    return get_converter().decode(json, Format.JSON, type)


def from_json_reader(reader: IO, type: Any = None) -> Any:
    """Reads a JSON document from the reader and converts it to a value."""
    return get_converter().read(reader, Format.JSON, type)


def from_json_file(path: str | Path, type: Any = None) -> Any:
    """Converts from the JSON file to a value."""
    return get_converter().load(path, Format.JSON, type)


def to_json_string(value: Any) -> str:
    """Converts the value to a JSON string."""
    return get_converter().encode_text(value, Format.JSON)


def to_json_string_pretty(value: Any) -> str:
    """Converts the value to a pretty printed JSON string."""
    return get_pretty_converter().encode_text(value, Format.JSON)


def to_json_bytes(value: Any) -> bytes:
    return get_converter().encode(value, Format.JSON)


def to_json_writer(value: Any, writer: IO) -> None:
    """Converts the value to a JSON string and writes it to the writer."""
    get_converter().write(value, writer, Format.JSON)


def to_json_writer_pretty(value: Any, writer: IO) -> None:
    """Converts the value to a pretty printed JSON string and writes it to the writer."""
    get_pretty_converter().write(value, writer, Format.JSON)


def to_json_file(value: Any, path: str | Path, pretty: bool = False) -> None:
    """Converts the value to a JSON string and writes it to the specified file."""
    converter = get_pretty_converter() if pretty else get_converter()
    converter.dump(value, path, Format.JSON)
