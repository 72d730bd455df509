from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

import msgspec
import msgspec.toml

from serdeconv.core.errors import DecodingError, EncodingError
from serdeconv.core.models.format import Format

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class TomlCodec:
    """
    TOML implementation of the Codec interface, backed by msgspec.toml.

    TOML is stricter than the generic value model, so values are checked
    before they reach the encoder:
        - the document root must be a table
        - every table key must be a string
        - None is dropped from tables (TOML has no null) and rejected
          inside arrays
        - integers must fit in a signed 64-bit word
        - only str, bool, int, float, datetime, date and time scalars
          are representable (bytes in particular are not)
    """
    format = Format.TOML

    def dumps(self, value: Any) -> str:
        return self.encode(value).decode("utf-8")

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, Mapping):
            raise EncodingError(
                Format.TOML,
                f"document root must be a table, got {type(value).__name__}"
            )

        table = self._table(value, ())
        try:
            return msgspec.toml.encode(table)
        except (msgspec.EncodeError, TypeError, ValueError) as ex:
            raise EncodingError(Format.TOML, str(ex)) from ex

    def decode(self, data: bytes) -> Any:
        try:
            return msgspec.toml.decode(data)
        except (msgspec.DecodeError, ValueError) as ex:
            raise DecodingError(Format.TOML, str(ex)) from ex

    def _table(self, table: Mapping, path: tuple[str, ...]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, item in table.items():
            if not isinstance(key, str):
                raise EncodingError(
                    Format.TOML,
                    f"table keys must be strings, found {type(key).__name__} "
                    f"key in {_where(path)}"
                )
            if item is None:
                continue
            out[key] = self._item(item, path + (key,))
        return out

    def _item(self, item: Any, path: tuple[str, ...]) -> Any:
        if item is None:
            raise EncodingError(Format.TOML, f"None is not representable at {_where(path)}")

        if isinstance(item, Mapping):
            return self._table(item, path)

        if isinstance(item, (list, tuple)):
            return [self._item(v, path + (str(i),)) for i, v in enumerate(item)]

        if isinstance(item, bool):
            return item

        if isinstance(item, int):
            if not INT64_MIN <= item <= INT64_MAX:
                raise EncodingError(
                    Format.TOML,
                    f"integer at {_where(path)} does not fit in 64 bits"
                )
            return item

        if isinstance(item, (str, float, datetime, date, time)):
            return item

        raise EncodingError(
            Format.TOML,
            f"unsupported type {type(item).__name__} at {_where(path)}"
        )


def _where(path: tuple[str, ...]) -> str:
    if not path:
        return "the root table"
    return "'" + ".".join(path) + "'"
