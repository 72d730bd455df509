import io
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Any, IO

from serdeconv.core.errors import DecodingError, EncodingError, IoError
from serdeconv.core.models.format import Direction, Format, FormatError
from serdeconv.core.ports.codec import Codec
from serdeconv.core.value import from_value, to_value


# mkstemp creates files readable by the owner only; new files get the
# permissions a plain open() would have given them.
_UMASK = os.umask(0)
os.umask(_UMASK)


class Converter:
    """
    Dispatches conversions to the codec registered for each Format.

    Every path goes through the generic value representation:
        encode: object -> to_value -> codec.encode -> bytes
        decode: bytes  -> codec.decode -> from_value(type) -> object

    The converter holds no state besides its codec table, so a single
    instance can be shared freely between threads.

    Failures are raised as ConversionError subclasses:
        - EncodingError: the value cannot be represented
        - DecodingError: the input is malformed or has the wrong shape
        - IoError: a file or stream could not be read or written
    No partial result is ever returned, and file writes only happen
    once the whole payload has been encoded.
    """

    def __init__(self, codecs: Iterable[Codec]) -> None:
        self._codecs: dict[Format, Codec] = {codec.format: codec for codec in codecs}
        self._logger = logging.getLogger("core.converter")

    @property
    def formats(self) -> tuple[Format, ...]:
        return tuple(self._codecs)

    def codec(self, format: Format | str) -> Codec:
        fmt = Format.parse(format)
        codec = self._codecs.get(fmt)
        if codec is None:
            raise FormatError(f"No codec registered for format '{fmt.value}'")
        return codec

    def encode(self, value: Any, format: Format | str) -> bytes:
        codec = self.codec(format)
        try:
            generic = to_value(value)
        except RecursionError as ex:
            raise EncodingError(codec.format, "value is too deeply nested or cyclic") from ex

        data = codec.encode(generic)
        self._logger.debug(
            f"Encoded {type(value).__name__} to {codec.format.value} ({len(data)} bytes)"
        )
        return data

    def encode_text(self, value: Any, format: Format | str) -> str:
        codec = self.codec(format)
        if codec.format.binary:
            raise ValueError(f"{codec.format.value} has no text representation")
        return self.encode(value, codec.format).decode("utf-8")

    def decode(
        self,
        data: bytes | bytearray | memoryview | str,
        format: Format | str,
        type: Any = None,
    ) -> Any:
        codec = self.codec(format)
        payload = self._as_bytes(data, codec.format)
        value = codec.decode(payload)
        self._logger.debug(
            f"Decoded {len(payload)} bytes of {codec.format.value} "
            f"into {getattr(type, '__name__', 'value')}"
        )
        return from_value(value, type, codec.format)

    def convert(
        self,
        data: bytes | bytearray | memoryview | str,
        source: Format | str,
        target: Format | str,
    ) -> bytes:
        """Transcode a document: source representation -> value -> target."""
        return self.encode(self.decode(data, source), target)

    def read(self, reader: IO, format: Format | str, type: Any = None) -> Any:
        fmt = Format.parse(format)
        try:
            data = reader.read()
        except OSError as ex:
            raise IoError(fmt, Direction.DECODE, f"cannot read from stream: {ex}") from ex
        return self.decode(data, fmt, type)

    def write(self, value: Any, writer: IO, format: Format | str) -> None:
        fmt = Format.parse(format)
        data = self.encode(value, fmt)

        try:
            if isinstance(writer, io.TextIOBase):
                if fmt.binary:
                    raise IoError(
                        fmt,
                        Direction.ENCODE,
                        "binary output requires a binary writer"
                    )
                writer.write(data.decode("utf-8"))
            else:
                writer.write(data)
        except OSError as ex:
            raise IoError(fmt, Direction.ENCODE, f"cannot write to stream: {ex}") from ex

    def load(
        self,
        path: str | Path,
        format: Format | str | None = None,
        type: Any = None,
    ) -> Any:
        file = Path(path)
        fmt = self._resolve(file, format)

        try:
            with file.open("rb") as f:
                data = f.read()
        except OSError as ex:
            raise IoError(fmt, Direction.DECODE, _describe_os_error(file, ex)) from ex

        self._logger.debug(f"Loaded {len(data)} bytes from {file}")
        return self.decode(data, fmt, type)

    def dump(
        self,
        value: Any,
        path: str | Path,
        format: Format | str | None = None,
    ) -> None:
        file = Path(path)
        fmt = self._resolve(file, format)

        # Encode first: a value that cannot be encoded never touches the file.
        data = self.encode(value, fmt)

        try:
            _replace_file(file, data)
        except OSError as ex:
            raise IoError(fmt, Direction.ENCODE, _describe_os_error(file, ex)) from ex

        self._logger.debug(f"Wrote {len(data)} bytes to {file}")

    @staticmethod
    def _resolve(file: Path, format: Format | str | None) -> Format:
        if format is None:
            return Format.from_path(file)
        return Format.parse(format)

    @staticmethod
    def _as_bytes(data: bytes | bytearray | memoryview | str, fmt: Format) -> bytes:
        if isinstance(data, str):
            if fmt.binary:
                raise DecodingError(fmt, "binary input expected, got str")
            try:
                return data.encode("utf-8")
            except UnicodeEncodeError as ex:
                raise DecodingError(fmt, f"input is not valid unicode: {ex.reason}") from ex

        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)

        raise DecodingError(fmt, f"expected bytes or str input, got {type(data).__name__}")


def _replace_file(file: Path, data: bytes) -> None:
    """
    Write `data` to a sibling temporary file and move it over `file`.

    The rename is atomic, so readers see either the previous content or
    the new one, and a failed write leaves the previous content intact.
    """
    fd, tmp = tempfile.mkstemp(dir=file.parent, prefix=f".{file.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp, _target_mode(file))
        os.replace(tmp, file)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def _target_mode(file: Path) -> int:
    try:
        return file.stat().st_mode & 0o777
    except FileNotFoundError:
        return 0o666 & ~_UMASK


def _describe_os_error(file: Path, ex: OSError) -> str:
    reason = ex.strerror or str(ex)
    return f"'{file}': {reason}"
