from collections.abc import Mapping
from typing import Any

import msgpack
from msgpack.exceptions import UnpackException

from serdeconv.core.errors import DecodingError, EncodingError
from serdeconv.core.models.format import Format


class MsgPackCodec:
    """
    MsgPack-based implementation of the Codec interface.

    - deterministic binary encoding
    - compact
    - str and bytes stay distinct (bin type enabled)
    - non-string map keys survive a round trip

    Array map keys are refused when encoding: they decode as lists,
    which cannot be used as dict keys again.
    """
    format = Format.MSGPACK

    def encode(self, value: Any) -> bytes:
        try:
            self._check(value, ())
            return msgpack.packb(value, use_bin_type=True)
        except RecursionError as ex:
            raise EncodingError(Format.MSGPACK, "value is too deeply nested or cyclic") from ex
        except (TypeError, ValueError, OverflowError) as ex:
            raise EncodingError(Format.MSGPACK, str(ex)) from ex

    def decode(self, data: bytes) -> Any:
        try:
            return msgpack.unpackb(data, raw=False, strict_map_key=False)
        except (UnpackException, ValueError, TypeError) as ex:
            # ExtraData, FormatError and StackError are ValueErrors;
            # truncated input surfaces as a bare ValueError.
            raise DecodingError(Format.MSGPACK, str(ex) or type(ex).__name__) from ex

    def _check(self, item: Any, path: tuple[str, ...]) -> None:
        if isinstance(item, Mapping):
            for key, value in item.items():
                if isinstance(key, tuple) and not isinstance(key, msgpack.ExtType):
                    raise EncodingError(
                        Format.MSGPACK,
                        f"map keys cannot be arrays, found {key!r} in {_where(path)}"
                    )
                self._check(value, path + (str(key),))

        elif isinstance(item, (list, tuple)) and not isinstance(item, msgpack.ExtType):
            for i, value in enumerate(item):
                self._check(value, path + (str(i),))


def _where(path: tuple[str, ...]) -> str:
    if not path:
        return "the root map"
    return "'" + ".".join(path) + "'"
