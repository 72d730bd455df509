from pathlib import Path
from typing import Any, IO

from serdeconv.convert.defaults import get_converter
from serdeconv.core.models.format import Format


def from_msgpack(data: bytes, type: Any = None) -> Any:
    """Converts MessagePack bytes to a value, optionally validated into `type`."""
    return get_converter().decode(data, Format.MSGPACK, type)


def to_msgpack(value: Any) -> bytes:
    """Converts the value to MessagePack bytes."""
    return get_converter().encode(value, Format.MSGPACK)


def from_msgpack_bytes(data: bytes, type: Any = None) -> Any:
    return get_converter().decode(data, Format.MSGPACK, type)


def from_msgpack_reader(reader: IO[bytes], type: Any = None) -> Any:
    """Reads MessagePack bytes from the reader and converts them to a value."""
    return get_converter().read(reader, Format.MSGPACK, type)


def from_msgpack_file(path: str | Path, type: Any = None) -> Any:
    """Converts from the MessagePack file to a value."""
    return get_converter().load(path, Format.MSGPACK, type)


def to_msgpack_bytes(value: Any) -> bytes:
    return get_converter().encode(value, Format.MSGPACK)


def to_msgpack_writer(value: Any, writer: IO[bytes]) -> None:
    """Converts the value to MessagePack bytes and writes them to the writer."""
    get_converter().write(value, writer, Format.MSGPACK)


def to_msgpack_file(value: Any, path: str | Path) -> None:
    """Converts the value to MessagePack bytes and writes them to the specified file."""
    get_converter().dump(value, path, Format.MSGPACK)
