from functools import lru_cache

from serdeconv.core.converter import Converter
from serdeconv.infra.json_codec import JsonCodec
from serdeconv.infra.msgpack_codec import MsgPackCodec
from serdeconv.infra.toml_codec import TomlCodec

PRETTY_INDENT = 2


@lru_cache
def get_converter() -> Converter:
    return Converter([TomlCodec(), JsonCodec(), MsgPackCodec()])


@lru_cache
def get_pretty_converter() -> Converter:
    return Converter([TomlCodec(), JsonCodec(indent=PRETTY_INDENT), MsgPackCodec()])
