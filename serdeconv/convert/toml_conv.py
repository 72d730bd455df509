from pathlib import Path
from typing import Any, IO

from serdeconv.convert.defaults import get_converter
from serdeconv.core.models.format import Format


def from_toml(data: str | bytes, type: Any = None) -> Any:
    """
    Converts a TOML document (text or UTF-8 bytes) to a value.

    Example::

        @dataclass
        class Foo:
            bar: str
            baz: int

        foo = from_toml('bar = "aaa"\\nbaz = 123\\n', type=Foo)
        assert foo == Foo(bar="aaa", baz=123)
    """
    return get_converter().decode(data, Format.TOML, type)


def to_toml(value: Any) -> str:
    """
    Converts the value to a TOML string.

    The value must be table-like (a mapping, dataclass or model) and every
    key must be a string; otherwise EncodingError is raised.

    Example::

        to_toml(Foo(bar="aaa", baz=123)) == 'bar = "aaa"\\nbaz = 123\\n'
    """
    return get_converter().encode_text(value, Format.TOML)


def from_toml_str(toml: str, type: Any = None) -> Any:
    """Converts from the TOML string to a value."""
    return get_converter().decode(toml, Format.TOML, type)


def from_toml_bytes(toml: bytes, type: Any = None) -> Any:
    """Converts from the TOML bytes (UTF-8) to a value."""
    return get_converter().decode(toml, Format.TOML, type)


def from_toml_reader(reader: IO, type: Any = None) -> Any:
    """Reads a TOML document from the reader and converts it to a value."""
    return get_converter().read(reader, Format.TOML, type)


def from_toml_file(path: str | Path, type: Any = None) -> Any:
    """Converts from the TOML file to a value."""
    return get_converter().load(path, Format.TOML, type)


def to_toml_string(value: Any) -> str:
    """Converts the value to a TOML string."""
    return get_converter().encode_text(value, Format.TOML)


def to_toml_writer(value: Any, writer: IO) -> None:
    """Converts the value to a TOML string and writes it to the writer."""
    get_converter().write(value, writer, Format.TOML)


def to_toml_file(value: Any, path: str | Path) -> None:
    """Converts the value to a TOML string and writes it to the specified file."""
    get_converter().dump(value, path, Format.TOML)
