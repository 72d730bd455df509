import json
from typing import Any, NoReturn

from serdeconv.core.errors import DecodingError, EncodingError
from serdeconv.core.models.format import Format


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not a valid JSON value")


class JsonCodec:
    """
    JSON implementation of the Codec interface, backed by the standard
    library encoder.

    - compact output by default: {"name":"a","count":1}
    - `indent` switches to pretty output
    - strict: NaN / Infinity are rejected in both directions
    - UTF-8 on the wire, non-ASCII characters are kept as-is
    """
    format = Format.JSON

    def __init__(
        self,
        indent: int | None = None,
        ensure_ascii: bool = False,
        sort_keys: bool = False,
    ) -> None:
        self._indent = indent
        self._ensure_ascii = ensure_ascii
        self._sort_keys = sort_keys

    @property
    def pretty(self) -> bool:
        return self._indent is not None

    def dumps(self, value: Any) -> str:
        separators = None if self.pretty else (",", ":")
        try:
            return json.dumps(
                value,
                indent=self._indent,
                separators=separators,
                ensure_ascii=self._ensure_ascii,
                sort_keys=self._sort_keys,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as ex:
            raise EncodingError(Format.JSON, str(ex)) from ex

    def loads(self, text: str) -> Any:
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as ex:
            raise DecodingError(Format.JSON, str(ex)) from ex

    def encode(self, value: Any) -> bytes:
        return self.dumps(value).encode("utf-8")

    def decode(self, data: bytes) -> Any:
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as ex:
            raise DecodingError(Format.JSON, f"input is not valid UTF-8: {ex.reason}") from ex
        return self.loads(text)
