import logging
from typing import Any

from serdeconv.bootstrap.deps import get_dispatcher
from serdeconv.core.dispatcher import CommandContext
from serdeconv.core.models.format import Format, FormatError

STDIO = "-"

cli = get_dispatcher()
logger = logging.getLogger("serdeconv.commands")


def resolve_format(path: str, name: str | None) -> Format:
    if name is not None:
        return Format.parse(name)
    if path == STDIO:
        raise FormatError("--from/--to is required when reading stdin or writing stdout")
    return Format.from_path(path)


def load_input(ctx: CommandContext) -> tuple[Format, Any]:
    ns = ctx.namespace
    fmt = resolve_format(ns.input, ns.source)

    if ns.input == STDIO:
        value = ctx.converter.read(ctx.in_stream, fmt)
    else:
        value = ctx.converter.load(ns.input, fmt)

    logger.info(f"Decoded {ns.input} as {fmt.value}")
    return fmt, value


@cli.command("convert")
def convert(ctx: CommandContext) -> str | None:
    ns = ctx.namespace
    target = resolve_format(ns.output, ns.target)
    source, value = load_input(ctx)

    converter = ctx.pretty_converter if ns.pretty else ctx.converter

    if ns.output == STDIO:
        if target.binary:
            converter.write(value, ctx.out_stream.buffer, target)
            return None
        return converter.encode_text(value, target).rstrip("\n")

    converter.dump(value, ns.output, target)
    logger.info(f"Converted {ns.input} ({source.value}) -> {ns.output} ({target.value})")
    return None


@cli.command("show")
def show(ctx: CommandContext) -> str | None:
    _, value = load_input(ctx)
    return ctx.renderer.render(value).rstrip("\n")


@cli.command("check")
def check(ctx: CommandContext) -> str | None:
    fmt, _ = load_input(ctx)
    return f"{ctx.namespace.input}: valid {fmt.value}"
