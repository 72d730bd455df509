import logging
import sys

from serdeconv.bootstrap.config.loader import get_configfile, parse_cli_args
from serdeconv.bootstrap.deps import get_config, get_context, get_dispatcher
from serdeconv.core.errors import ConversionError
from serdeconv.core.helpers.utils import scan, setup_logging
from serdeconv.core.models.format import FormatError


@scan("serdeconv.bootstrap.commands")
def main(argv: list[str] | None = None) -> int:
    args = parse_cli_args(argv)
    setup_logging(args.log_level)
    logger = logging.getLogger("serdeconv.cli")

    config = get_config(get_configfile(args))
    ctx = get_context(config, args)

    try:
        output = get_dispatcher().dispatch(args.command, ctx)
    except ConversionError as ex:
        logger.debug(f"Command '{args.command}' failed", exc_info=ex)
        print(f"error: {ex}", file=sys.stderr)
        return 1
    except FormatError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 2

    if output is not None:
        print(output, file=ctx.out_stream)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
