# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""``deepprune`` console script.

Reads a JSON or YAML document, prunes it and writes the result to stdout::

    deepprune prune payload.json
    cat config.yaml | deepprune prune --format yaml --output-format yaml
    deepprune check payload.json   # exit 1 if anything would be pruned
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, time, timedelta
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml

from .. import __version__
from ..exceptions import DeepPruneError
from ..sanitization import DeepSanitizer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PRUNED = 1
EXIT_ERROR = 2

_YAML_SUFFIXES = (".yaml", ".yml")


def _read_text(path: Optional[str]) -> str:
    if path in (None, "-"):
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _resolve_format(path: Optional[str], fmt: str) -> str:
    if fmt != "auto":
        return fmt
    if path and path.lower().endswith(_YAML_SUFFIXES):
        return "yaml"
    return "json"


def load_document(path: Optional[str], fmt: str = "auto") -> Any:
    """Load a JSON or YAML document from *path* (``-`` or ``None`` for stdin)."""

    text = _read_text(path)
    if _resolve_format(path, fmt) == "yaml":
        return yaml.safe_load(text)
    return json.loads(text)


def _json_default(value: Any) -> Any:
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return value.total_seconds()
    return str(value)


def dump_document(value: Any, fmt: str = "json", indent: Optional[int] = 2) -> str:
    """Serialize a pruned document. Temporal values become ISO-8601 in JSON."""

    if fmt == "yaml":
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True, indent=indent or 2)
    return json.dumps(value, indent=indent, ensure_ascii=False, default=_json_default) + "\n"


def _cmd_prune(args: argparse.Namespace) -> int:
    document = load_document(args.file, args.format)
    result = DeepSanitizer().sanitize(document)
    output_format = args.output_format or _resolve_format(args.file, args.format)
    sys.stdout.write(dump_document(result.value, output_format, args.indent))
    logger.info("Pruned %d node(s)", len(result.pruned))
    return EXIT_OK


def _cmd_check(args: argparse.Namespace) -> int:
    document = load_document(args.file, args.format)
    result = DeepSanitizer().sanitize(document)
    for path in result.pruned:
        print(path)
    return EXIT_PRUNED if result.modified else EXIT_OK


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", nargs="?", default="-", help="Input document (default: stdin)")
    parser.add_argument(
        "--format",
        choices=("auto", "json", "yaml"),
        default="auto",
        help="Input format; 'auto' picks YAML for .yaml/.yml files, JSON otherwise",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deepprune",
        description="Remove null, blank and empty values from JSON or YAML documents.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")

    subparsers = parser.add_subparsers(dest="command", required=True)

    prune_parser = subparsers.add_parser("prune", help="Print the pruned document")
    _add_input_arguments(prune_parser)
    prune_parser.add_argument(
        "--output-format",
        choices=("json", "yaml"),
        default=None,
        help="Output format (default: same as input)",
    )
    prune_parser.add_argument("--indent", type=int, default=2, help="Indentation width (default: 2)")
    prune_parser.set_defaults(func=_cmd_prune)

    check_parser = subparsers.add_parser(
        "check",
        help="List the paths that would be pruned; exit 1 if there are any",
    )
    _add_input_arguments(check_parser)
    check_parser.set_defaults(func=_cmd_check)

    return parser


def run_command(args: argparse.Namespace) -> int:
    """Dispatch the parsed *args* to their subcommand handler."""

    return args.func(args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        return run_command(args)
    except (OSError, TypeError, ValueError, yaml.YAMLError, DeepPruneError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"deepprune: error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
