from enum import Enum
from pathlib import Path


class FormatError(ValueError):
    """A format name or file suffix does not select any supported format."""


class Format(Enum):
    """
    Format selector for the three supported back ends.

    The value is the canonical lowercase name used on the command line
    and in configuration files.
    """
    TOML = "toml"
    JSON = "json"
    MSGPACK = "msgpack"

    @property
    def binary(self) -> bool:
        """True when the representation is bytes rather than text."""
        return self is Format.MSGPACK

    @property
    def suffixes(self) -> tuple[str, ...]:
        return _SUFFIXES[self]

    @classmethod
    def parse(cls, name: "str | Format") -> "Format":
        if isinstance(name, Format):
            return name

        normalized = name.strip().lower()
        for fmt in cls:
            if normalized == fmt.value or f".{normalized}" in fmt.suffixes:
                return fmt

        choices = ", ".join(fmt.value for fmt in cls)
        raise FormatError(f"Unknown format '{name}' (expected one of: {choices})")

    @classmethod
    def from_path(cls, path: str | Path) -> "Format":
        suffix = Path(path).suffix.lower()
        for fmt in cls:
            if suffix in fmt.suffixes:
                return fmt

        raise FormatError(f"Cannot infer format from file name '{path}'")


_SUFFIXES: dict[Format, tuple[str, ...]] = {
    Format.TOML: (".toml",),
    Format.JSON: (".json",),
    Format.MSGPACK: (".msgpack", ".mpk", ".mp"),
}


class Direction(Enum):
    ENCODE = "encode"
    DECODE = "decode"
