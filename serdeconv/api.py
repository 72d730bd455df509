"""
serdeconv -- conversions between serializable values and TOML, JSON
and MessagePack.

Quick start::

    from serdeconv.api import to_json, from_json

    text = to_json({"name": "a", "count": 1})   # '{"name":"a","count":1}'
    from_json(text)                             # {'name': 'a', 'count': 1}

Every helper raises a ConversionError subclass on failure:
EncodingError, DecodingError or IoError.
"""

from serdeconv.convert.generic import convert, decode, dump_file, encode, load_file
from serdeconv.convert.json_conv import (
    from_json,
    from_json_bytes,
    from_json_file,
    from_json_reader,
    from_json_str,
    to_json,
    to_json_bytes,
    to_json_file,
    to_json_string,
    to_json_string_pretty,
    to_json_writer,
    to_json_writer_pretty,
)
from serdeconv.convert.mixin import Convertible
from serdeconv.convert.msgpack_conv import (
    from_msgpack,
    from_msgpack_bytes,
    from_msgpack_file,
    from_msgpack_reader,
    to_msgpack,
    to_msgpack_bytes,
    to_msgpack_file,
    to_msgpack_writer,
)
from serdeconv.convert.toml_conv import (
    from_toml,
    from_toml_bytes,
    from_toml_file,
    from_toml_reader,
    from_toml_str,
    to_toml,
    to_toml_file,
    to_toml_string,
    to_toml_writer,
)
from serdeconv.core.errors import ConversionError, DecodingError, EncodingError, IoError
from serdeconv.core.models.format import Direction, Format, FormatError
from serdeconv.core.value import from_value, to_value

__version__ = "0.1.0"

__all__ = [
    # Format-specific pairs
    "to_json",
    "from_json",
    "to_toml",
    "from_toml",
    "to_msgpack",
    "from_msgpack",
    # JSON helpers
    "from_json_str",
    "from_json_bytes",
    "from_json_reader",
    "from_json_file",
    "to_json_string",
    "to_json_string_pretty",
    "to_json_bytes",
    "to_json_writer",
    "to_json_writer_pretty",
    "to_json_file",
    # TOML helpers
    "from_toml_str",
    "from_toml_bytes",
    "from_toml_reader",
    "from_toml_file",
    "to_toml_string",
    "to_toml_writer",
    "to_toml_file",
    # MessagePack helpers
    "from_msgpack_bytes",
    "from_msgpack_reader",
    "from_msgpack_file",
    "to_msgpack_bytes",
    "to_msgpack_writer",
    "to_msgpack_file",
    # Format dispatch
    "encode",
    "decode",
    "convert",
    "load_file",
    "dump_file",
    # Generic value
    "to_value",
    "from_value",
    "Convertible",
    # Types
    "Format",
    "Direction",
    "FormatError",
    # Errors
    "ConversionError",
    "EncodingError",
    "DecodingError",
    "IoError",
    # Version
    "__version__",
]
