import argparse
import json
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from serdeconv.bootstrap.config.settings import SerdeconvConfig
from serdeconv.core.converter import Converter
from serdeconv.core.dispatcher import CommandContext, CommandDispatcher
from serdeconv.core.ports.render import Renderer
from serdeconv.infra.format_renderer import JsonRenderer, YamlRenderer
from serdeconv.infra.json_codec import JsonCodec
from serdeconv.infra.msgpack_codec import MsgPackCodec
from serdeconv.infra.toml_codec import TomlCodec


@lru_cache
def get_dispatcher() -> CommandDispatcher:
    return CommandDispatcher()


def get_config(file: Path | None) -> SerdeconvConfig:
    try:
        return SerdeconvConfig.from_file(file)
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(p) for p in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))


def get_converter(config: SerdeconvConfig, pretty: bool = False) -> Converter:
    json_codec = JsonCodec(
        indent=config.codec.json_indent if pretty else None,
        ensure_ascii=config.codec.json_ensure_ascii,
        sort_keys=config.codec.json_sort_keys,
    )
    return Converter([TomlCodec(), json_codec, MsgPackCodec()])


def get_renderer(name: str) -> Renderer:
    if name == "json":
        return JsonRenderer()
    return YamlRenderer()


def get_context(
    config: SerdeconvConfig,
    namespace: argparse.Namespace
) -> CommandContext:
    render = getattr(namespace, "render", None) or config.output.render
    if hasattr(namespace, "pretty") and namespace.pretty is None:
        namespace.pretty = config.output.pretty

    return CommandContext(
        converter=get_converter(config),
        pretty_converter=get_converter(config, pretty=True),
        renderer=get_renderer(render),
        namespace=namespace,
    )
