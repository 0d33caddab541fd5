"""Command-line wrapper: ``minipas run <source-file>``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from minipas import __version__
from minipas.diagnostics.source_map import SourceFile
from minipas.parser.parser import DEFAULT_MAX_DEPTH, DEFAULT_MAX_ERRORS, parse

logger = logging.getLogger(__name__)


def ast_to_dict(node: Any) -> Any:
    """Convert an AST node (or tuple of nodes) into JSON-friendly data.

    Each node becomes ``{"type": <class name>, <field>: ...}``; source
    locations are left out.
    """
    if isinstance(node, tuple):
        return [ast_to_dict(n) for n in node]
    if isinstance(node, Enum):
        return node.value
    if is_dataclass(node):
        d: dict[str, Any] = {"type": type(node).__name__}
        for f in fields(node):
            if f.name != "location":
                d[f.name] = ast_to_dict(getattr(node, f.name))
        return d
    return node


def cmd_run(args: argparse.Namespace) -> int:
    try:
        with open(args.file, "r", encoding="utf-8") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"minipas: cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    program, diag = parse(
        source,
        args.file,
        recover=args.recover,
        max_errors=args.max_errors,
        max_depth=args.max_depth,
    )
    if program is None:
        print(diag.format_all(SourceFile(args.file, source)), file=sys.stderr)
        logger.info("%s: %d error(s)", args.file, diag.error_count())
        return 1

    if args.dump_ast:
        print(json.dumps(ast_to_dict(program), indent=2))
    else:
        print(f"ok: program {program.name.name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="minipas", description="minipas front end (lexer + parser)")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="Parse a source file and report diagnostics")
    p_run.add_argument("file", help="Input source file")
    p_run.add_argument("--dump-ast", action="store_true", help="Print the AST as JSON on success")
    p_run.add_argument(
        "--recover",
        action="store_true",
        help="Keep parsing after an error to report more diagnostics",
    )
    p_run.add_argument(
        "--max-errors",
        type=int,
        default=DEFAULT_MAX_ERRORS,
        help=f"Stop after this many errors in --recover mode (default {DEFAULT_MAX_ERRORS})",
    )
    p_run.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum nesting of blocks and parentheses (default {DEFAULT_MAX_DEPTH})",
    )
    p_run.set_defaults(func=cmd_run)

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
