from typing import Protocol, Any

from serdeconv.core.models.format import Format


class Codec(Protocol):
    """
    Defines the interface every format back end exposes to the
    conversion helpers.

    Implementations must be:
    - deterministic
    - pure (no side effects, no shared mutable state)
    - safe against malformed input

    Failures are reported with EncodingError / DecodingError only;
    library exceptions are chained, never leaked.
    """

    format: Format

    def encode(self, value: Any) -> bytes:
        """Encode a generic value into the format's byte representation."""

    def decode(self, data: bytes) -> Any:
        """Decode a byte representation into a generic value."""
