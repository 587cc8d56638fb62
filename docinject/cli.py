"""CLI entrypoint for docinject."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Iterator, List, Sequence

from .config import CONFIG_FILENAME, ConfigError, InjectConfig, load_config
from .extraction import BUILTIN_RESOLVERS
from .injector import DocgenInjector
from .logging import configure_logging, get_logger

SOURCE_SUFFIXES = {".js", ".jsx", ".mjs", ".cjs"}

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "bower_components",
    ".next",
    "coverage",
}


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    kwargs["default"] = argparse.SUPPRESS if suppress_default else False
    parser.add_argument("-v", "--verbose", **kwargs)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docinject",
        description="Attach react-docgen metadata (__docgenInfo) to exported React components.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    annotate_parser = subparsers.add_parser(
        "annotate",
        help="Instrument JavaScript modules with component documentation.",
    )
    _add_verbose_option(annotate_parser, suppress_default=True)
    annotate_parser.add_argument(
        "paths",
        nargs="+",
        help="Files or directories to instrument.",
    )
    annotate_parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a {CONFIG_FILENAME} file or its directory (defaults to the current directory).",
    )
    mode = annotate_parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--write",
        action="store_true",
        help="Rewrite instrumented files in place instead of printing them.",
    )
    mode.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 when any file would be instrumented.",
    )
    annotate_parser.add_argument(
        "--resolver",
        default=None,
        help=f"react-docgen resolver ({', '.join(BUILTIN_RESOLVERS)} or a custom name).",
    )
    annotate_parser.add_argument(
        "--include-methods",
        action="store_true",
        default=None,
        help="Keep the methods section of extracted documentation.",
    )
    annotate_parser.add_argument(
        "--collection-name",
        default=None,
        help="Global object that collects documentation keyed by module path.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docinject commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(getattr(args, "check", False)))
    logger = get_logger("cli")

    if args.command != "annotate":  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    try:
        config = load_config(Path(args.config) if args.config else Path.cwd())
    except (ConfigError, OSError) as exc:
        parser.exit(1, f"docinject: {exc}\n")
    _apply_overrides(config, args)

    injector = DocgenInjector(config)
    sources = list(iter_source_files(args.paths))
    printing = not args.write and not args.check
    with_headers = printing and len(sources) > 1
    changed: List[Path] = []
    for path in sources:
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            parser.exit(1, f"docinject: cannot read {path}: {exc}\n")
        output = injector.transform(source, str(path))
        if with_headers:
            sys.stdout.write(f"// ==> {_relativize(path)} <==\n")
        if output == source:
            logger.debug("Unchanged: %s", path)
            if printing:
                _print_source(source, separate=with_headers)
            continue
        changed.append(path)
        if args.check:
            logger.warning("Would instrument %s", _relativize(path))
        elif args.write:
            path.write_text(output, encoding="utf-8")
            logger.info("Instrumented %s", _relativize(path))
        else:
            _print_source(output, separate=with_headers)

    if args.check and changed:
        parser.exit(1)


def _print_source(text: str, *, separate: bool) -> None:
    sys.stdout.write(text)
    if separate and text and not text.endswith("\n"):
        sys.stdout.write("\n")


def _apply_overrides(config: InjectConfig, args: argparse.Namespace) -> None:
    if args.resolver:
        config.resolver = args.resolver
    if args.include_methods is not None:
        config.include_methods = bool(args.include_methods)
    if args.collection_name:
        config.collection_name = args.collection_name


def iter_source_files(paths: Sequence[str]) -> Iterator[Path]:
    """Yield JavaScript sources under ``paths`` in sorted order."""
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            yield path
            continue
        if not path.is_dir():
            get_logger("cli").warning("Skipping missing path %s", raw)
            continue
        for dirpath, dirnames, filenames in os.walk(path):
            dirnames[:] = sorted(name for name in dirnames if name not in _EXCLUDED_DIRS)
            for filename in sorted(filenames):
                candidate = Path(dirpath) / filename
                if candidate.suffix in SOURCE_SUFFIXES:
                    yield candidate


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
