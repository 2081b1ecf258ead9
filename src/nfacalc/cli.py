"""Command-line interface for nfacalc."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from nfacalc.errors import EvalError, LexError, ParseError

EMIT_CHOICES = ("value", "ast", "tokens")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    source: str
    filename: str
    emit: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="nfacalc",
        description="Lex, parse, and evaluate arithmetic expressions",
    )
    src = p.add_mutually_exclusive_group()
    src.add_argument("expression", nargs="?", help="Expression to evaluate, e.g. '(1.5+.5)*2.0'")
    src.add_argument("-f", "--file", metavar="FILE", help="Read the expression from FILE")
    p.add_argument(
        "--emit",
        choices=EMIT_CHOICES,
        default=None,
        help="What to print: the value, the expression tree, or the tokens (default: value)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover nfacalc.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump the expression tree to stderr")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / "nfacalc.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    if args.file:
        input_file = Path(args.file)
        search_dir = input_file.parent
        if not search_dir.parts:
            search_dir = Path(".")
        source = input_file.read_text(encoding="utf-8")
        filename = str(input_file)
    elif args.expression is not None:
        search_dir = Path(".")
        source = args.expression
        filename = "<expr>"
    else:
        raise argparse.ArgumentTypeError("no expression given (pass one, or use --file)")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir)

    emit = "value"
    debug = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_emit = cfg_output.get("emit")
        if cfg_emit is not None:
            if cfg_emit not in EMIT_CHOICES:
                raise argparse.ArgumentTypeError(
                    f"invalid output.emit in config (expected one of {', '.join(EMIT_CHOICES)}): "
                    f"{cfg_emit}"
                )
            emit = cfg_emit
        if isinstance(cfg_output.get("debug"), bool):
            debug = cfg_output["debug"]
    if args.emit is not None:
        emit = args.emit
    if args.debug:
        debug = True

    return CliOptions(source=source, filename=filename, emit=emit, debug=debug)


def run(options: CliOptions) -> str:
    """Lex, parse, and (for emit=value) evaluate; return the text to print."""
    from nfacalc.debug import dump_ast, dump_tokens
    from nfacalc.definitions import build_lexer
    from nfacalc.eval import evaluate
    from nfacalc.parser import Parser

    lexer = build_lexer()
    out = io.StringIO()

    if options.emit == "tokens":
        dump_tokens(lexer.tokenize(options.source), file=out)
        return out.getvalue()

    expr = Parser(lexer.tokenize(options.source), options.source).parse()

    if options.debug:
        dump_ast(expr)

    if options.emit == "ast":
        dump_ast(expr, file=out)
        return out.getvalue()

    return f"{evaluate(expr, options.source)}\n"


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config: {exc}", file=sys.stderr)
        return 2
    except UnicodeDecodeError:
        print(f"error: cannot read {args.file}: not valid UTF-8", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: cannot read {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 2

    try:
        text = run(options)
    except (LexError, ParseError) as exc:
        print(exc.format(options.filename), file=sys.stderr)
        return 1
    except EvalError as exc:
        print(exc.format(options.filename), file=sys.stderr)
        return 2

    sys.stdout.write(text)
    return 0
