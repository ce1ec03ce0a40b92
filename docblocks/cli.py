"""CLI entrypoints for docblocks commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .frontmatter import FrontMatterError
from .loader import parse_paths
from .logging import configure_logging, get_logger
from .parser import Parser, ParserOptions


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docblocks",
        description="Extract documentation components from markdown files and source comments.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse files and print their components as JSON.",
    )
    _add_verbose_option(parse_parser, suppress_default=True)
    parse_parser.add_argument(
        "paths",
        nargs="*",
        help="Markdown or source files to parse (defaults to the configured sources).",
    )
    parse_parser.add_argument(
        "--config",
        default=".",
        help="Path to .docblocks.yml or the directory containing it (defaults to current directory).",
    )
    parse_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indentation for JSON output (overrides the config file).",
    )
    parse_parser.add_argument(
        "--no-merge",
        action="store_true",
        help="Keep components that share a name as separate entries.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP parsing service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docblocks commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))
    logger = get_logger("cli")

    if args.command == "parse":
        try:
            config = load_config(Path(args.config))
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")

        options = ParserOptions.from_config(config)
        if args.no_merge:
            options = ParserOptions(
                markdown_extensions=options.markdown_extensions,
                renderable_extensions=options.renderable_extensions,
                merge=False,
            )

        paths = [Path(path) for path in args.paths] or config.source_paths()
        if not paths:
            parser.exit(1, "No input files given and no sources matched in the configuration.\n")

        try:
            components = parse_paths(paths, Parser(options))
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except FrontMatterError as exc:
            parser.exit(1, f"docblocks parse failed: {exc}\n")

        logger.info("Parsed %d component(s) from %d file(s)", len(components), len(paths))
        indent = args.indent if args.indent is not None else config.output.indent
        payload = [component.to_dict() for component in components]
        print(json.dumps(payload, indent=indent, ensure_ascii=False, default=str))
    elif args.command == "serve":
        from .service import run_service

        try:
            run_service(host=args.host, port=args.port)
        except RuntimeError as exc:
            parser.exit(1, f"{exc}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
