import argparse
import os
from pathlib import Path

from serdeconv.core.models.format import Format

DEFAULT_CONFIG_NAME = "serdeconv.yaml"


def build_parser() -> argparse.ArgumentParser:
    formats = [fmt.value for fmt in Format]

    parser = argparse.ArgumentParser(
        prog="serdeconv",
        description=(
            "Convert documents between TOML, JSON and MessagePack.\n\n"
            "Every conversion decodes the input into a generic value and\n"
            "encodes that value again, so only data the target format can\n"
            "represent is accepted."
        ),
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to a serdeconv configuration file"
    )

    parser.add_argument(
        "-l", "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=(
            "Logging verbosity.\n"
            "Choose among: DEBUG, INFO, WARNING, ERROR, CRITICAL.\n\n"
            "DEBUG    → traces every encode/decode with payload sizes.\n"
            "INFO     → one line per processed file.\n"
            "WARNING  → only warnings and errors (default).\n"
        ),
    )

    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Convert INPUT into OUTPUT")
    convert.add_argument("input", help="Input file, or '-' for stdin")
    convert.add_argument("output", help="Output file, or '-' for stdout")
    convert.add_argument("--from", dest="source", choices=formats,
                         help="Input format (default: inferred from the suffix)")
    convert.add_argument("--to", dest="target", choices=formats,
                         help="Output format (default: inferred from the suffix)")
    convert.add_argument("--pretty", action="store_true", default=None,
                         help="Pretty print JSON output")

    show = sub.add_parser("show", help="Decode INPUT and render it")
    show.add_argument("input", help="Input file, or '-' for stdin")
    show.add_argument("--from", dest="source", choices=formats,
                      help="Input format (default: inferred from the suffix)")
    show.add_argument("--as", dest="render", choices=["yaml", "json"],
                      help="Rendering used for display")

    check = sub.add_parser("check", help="Verify that INPUT decodes")
    check.add_argument("input", help="Input file, or '-' for stdin")
    check.add_argument("--from", dest="source", choices=formats,
                       help="Input format (default: inferred from the suffix)")

    return parser


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def get_configfile(args: argparse.Namespace) -> Path | None:
    # Priority: CLI > ENV > default file in current working directory
    raw = args.config or os.getenv("SERDECONV_CONFIG")

    if raw is None:
        file = Path.cwd() / DEFAULT_CONFIG_NAME
        return file if file.is_file() else None

    file = Path(raw)
    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            "  - Use --config <file.yaml>\n"
            "  - Or set the SERDECONV_CONFIG environment variable\n"
            f"  - Or place a '{DEFAULT_CONFIG_NAME}' file in the current working directory."
        )

    return file
