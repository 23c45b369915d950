"""sassbind entrypoint module exposing the public API and CLI."""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from sassbind_core import (
    STYLE_NAMES,
    CompilerContext,
    CompilerOptions,
    CtypesNativeApi,
    DisposedError,
    InvalidOptionError,
    InvalidPrecisionError,
    InvalidStyleError,
    NativeApi,
    OptionTranslator,
    OutputStyle,
    RuntimeConfig,
    RuntimeUnavailableError,
    SassBindError,
    VersionInfo,
    translate,
)

__all__ = [
    "STYLE_NAMES",
    "CompilerContext",
    "CompilerOptions",
    "CtypesNativeApi",
    "DisposedError",
    "InvalidOptionError",
    "InvalidPrecisionError",
    "InvalidStyleError",
    "NativeApi",
    "OptionTranslator",
    "OutputStyle",
    "RuntimeConfig",
    "RuntimeUnavailableError",
    "SassBindError",
    "VersionInfo",
    "translate",
    "build_parser",
    "build_configuration",
    "camel_case",
    "format_version",
    "main",
]

log = logging.getLogger("sassbind")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sassbind",
        description="Configure the libsass compiler.",
        epilog="Set the DEBUG environment variable to enable the verbose debug log.",
    )
    parser.add_argument(
        "-s",
        "--stdin",
        action="store_true",
        help="Read input from standard input instead of an input file.",
    )
    parser.add_argument(
        "-t", "--style", help=f"Output style. Can be: {', '.join(STYLE_NAMES)}."
    )
    parser.add_argument(
        "-l",
        "--line-numbers",
        action="store_true",
        help="Emit comments showing original line numbers.",
    )
    parser.add_argument(
        "-I", "--load-path", action="append", help="Set Sass import path."
    )
    parser.add_argument(
        "-P", "--plugin-path", action="append", help="Set path to autoload plugins."
    )
    parser.add_argument(
        "-m",
        "--sourcemap",
        nargs="?",
        const="auto",
        help="Emit source map (auto or inline).",
    )
    parser.add_argument(
        "-M",
        "--omit-map-comment",
        action="store_true",
        help="Omits the source map url comment.",
    )
    parser.add_argument("-p", "--precision", help="Set the precision for numbers.")
    parser.add_argument(
        "-a", "--sass", action="store_true", help="Treat input as indented syntax."
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Display compiled versions."
    )
    return parser


def camel_case(dest: str) -> str:
    head, *rest = dest.split("_")
    return head + "".join(part.capitalize() for part in rest)


def build_configuration(args: argparse.Namespace) -> Dict[str, Any]:
    """Keep only the options given on the command line, keyed in camelCase."""
    bag: Dict[str, Any] = {}
    for key, value in vars(args).items():
        if key == "version" or value is None or value is False:
            continue
        bag[camel_case(key)] = value
    return bag


def format_version(info: VersionInfo) -> str:
    width = max(len(name) for name, _ in info.rows())
    lines = ["Version", ""]
    for name, summary in info.rows():
        lines.append(f"  {name.ljust(width)}   {summary}")
    return "\n".join(lines)


def _configure_logging() -> None:
    if os.environ.get("DEBUG"):
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )


def main(argv: Optional[List[str]] = None):
    _configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    bag = build_configuration(args)
    log.debug("Received options %r", bag)

    if not bag and not args.version:
        parser.print_help()
        return

    try:
        context = CompilerContext.from_config(RuntimeConfig.from_env())
        if args.version:
            print(format_version(context.version()))
            return
        options = translate(context, bag)
        try:
            log.debug(
                "Configured %r: style=%s precision=%d",
                options,
                options.output_style.style_name,
                options.precision,
            )
        finally:
            options.dispose()
    except Exception as e:
        print(f"FATAL ERROR\n{e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
