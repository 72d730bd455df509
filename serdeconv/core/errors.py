from serdeconv.core.models.format import Direction, Format


class ConversionError(Exception):
    """
    Base class of every failure surfaced by a conversion helper.

    The error records which back end failed and in which direction.
    The underlying library exception is kept as ``__cause__``; the
    offending payload is never retained.
    """

    def __init__(
        self,
        format: Format | None,
        direction: Direction,
        message: str
    ) -> None:
        super().__init__(message)
        self.format = format
        self.direction = direction
        self.message = message

    def __str__(self) -> str:
        target = self.format.value if self.format is not None else "value"
        return f"{target} {self.direction.value} failed: {self.message}"


class EncodingError(ConversionError):
    """The value cannot be represented in the target format."""

    def __init__(self, format: Format | None, message: str) -> None:
        super().__init__(format, Direction.ENCODE, message)


class DecodingError(ConversionError):
    """The input is malformed, incomplete or does not fit the target type."""

    def __init__(self, format: Format | None, message: str) -> None:
        super().__init__(format, Direction.DECODE, message)


class IoError(ConversionError):
    """A file backing the conversion could not be read or written."""
