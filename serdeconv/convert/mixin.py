from pathlib import Path
from typing import Any, IO, Self

from serdeconv.convert.defaults import get_converter, get_pretty_converter
from serdeconv.core.models.format import Format
from serdeconv.core.value import from_value, to_value


class Convertible:
    """
    Mixin giving dataclasses and pydantic models conversion methods.

    Example::

        @dataclass
        class Foo(Convertible):
            bar: str
            baz: int

        foo = Foo.from_toml_str('bar = "aaa"\\nbaz = 123\\n')
        foo.to_json_string()  # '{"bar":"aaa","baz":123}'

    Decoding class methods validate the decoded document into `cls`,
    so a document of the wrong shape raises DecodingError.
    """

    # generic value

    def to_value(self) -> Any:
        return to_value(self)

    @classmethod
    def from_value(cls, data: Any) -> Self:
        return from_value(data, cls)

    # TOML

    def to_toml_string(self) -> str:
        return get_converter().encode_text(self, Format.TOML)

    def to_toml_writer(self, writer: IO) -> None:
        get_converter().write(self, writer, Format.TOML)

    def to_toml_file(self, path: str | Path) -> None:
        get_converter().dump(self, path, Format.TOML)

    @classmethod
    def from_toml_str(cls, toml: str | bytes) -> Self:
        return get_converter().decode(toml, Format.TOML, cls)

    @classmethod
    def from_toml_reader(cls, reader: IO) -> Self:
        return get_converter().read(reader, Format.TOML, cls)

    @classmethod
    def from_toml_file(cls, path: str | Path) -> Self:
        return get_converter().load(path, Format.TOML, cls)

    # JSON

    def to_json_string(self, pretty: bool = False) -> str:
        converter = get_pretty_converter() if pretty else get_converter()
        return converter.encode_text(self, Format.JSON)

    def to_json_writer(self, writer: IO, pretty: bool = False) -> None:
        converter = get_pretty_converter() if pretty else get_converter()
        converter.write(self, writer, Format.JSON)

    def to_json_file(self, path: str | Path, pretty: bool = False) -> None:
        converter = get_pretty_converter() if pretty else get_converter()
        converter.dump(self, path, Format.JSON)

    @classmethod
    def from_json_str(cls, json: str | bytes) -> Self:
        return get_converter().decode(json, Format.JSON, cls)

    @classmethod
    def from_json_reader(cls, reader: IO) -> Self:
        return get_converter().read(reader, Format.JSON, cls)

    @classmethod
    def from_json_file(cls, path: str | Path) -> Self:
        return get_converter().load(path, Format.JSON, cls)

    # MessagePack

    def to_msgpack_bytes(self) -> bytes:
        return get_converter().encode(self, Format.MSGPACK)

    def to_msgpack_writer(self, writer: IO[bytes]) -> None:
        get_converter().write(self, writer, Format.MSGPACK)

    def to_msgpack_file(self, path: str | Path) -> None:
        get_converter().dump(self, path, Format.MSGPACK)

    @classmethod
    def from_msgpack_bytes(cls, data: bytes) -> Self:
        return get_converter().decode(data, Format.MSGPACK, cls)

    @classmethod
    def from_msgpack_reader(cls, reader: IO[bytes]) -> Self:
        return get_converter().read(reader, Format.MSGPACK, cls)

    @classmethod
    def from_msgpack_file(cls, path: str | Path) -> Self:
        return get_converter().load(path, Format.MSGPACK, cls)
