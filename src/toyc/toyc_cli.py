"""
TOYC CLI Entrypoint.

Reads TOYC source, parses it, and prints the resulting tree or the first error.

Features:
    - Read source from a file, from stdin (`-`), or from an inline string (`-s`).
    - Print the parsed statements as an indented tree, as JSON, or as
      canonical re-serialized source.
    - Report the first lexical or syntax error as `name:line:col: error: ...`.

Example usage:
    toyc program.toy
    toyc -s "int x; x = 1 + 2;" -f json
    cat program.toy | toyc - -f source

Exit codes:
    0 on success, 1 on a lexical or syntax error, 2 on usage errors.

Functions:
    run_toyc(source, is_string=False, fmt="tree", indent=2, max_len=MAX_LEXEME_LEN) -> str:
        Runs the pipeline (read -> lex -> parse -> render) and returns the rendering.

    main(argv=None) -> int:
        Parses CLI arguments, runs the pipeline, prints output or the error.
"""

import argparse
import json
import logging
import sys

from toyc.toyc_constants import MAX_LEXEME_LEN
from toyc.toyc_errors import ToycError
from toyc.toyc_parser import Parser
from toyc.toyc_unparse import Unparser

logger = logging.getLogger(__name__)

FORMATS = ("tree", "json", "source")


def run_toyc(
    source: str,
    is_string: bool = False,
    fmt: str = "tree",
    indent: int = 2,
    max_len: int = MAX_LEXEME_LEN,
) -> str:
    """
    Run the TOYC front end and render the result.

    Args:
        source (str): The TOYC source code, a file path, or "-" for stdin.
        is_string (bool): If True, treats `source` as raw code instead of a path.
        fmt (str): One of "tree", "json", "source". Defaults to "tree".
        indent (int): JSON indentation width. Defaults to 2.
        max_len (int): Maximum identifier/number length accepted by the lexer.

    Returns:
        str: The rendered program.

    Raises:
        ValueError: If `fmt` is not a known format.
        OSError: If the input file cannot be read.
        ToycError: On the first lexical or syntax error.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format: {fmt!r}")

    # 1. Read + parse
    if is_string:
        logger.debug("parsing inline source (%d chars)", len(source))
        ast = Parser.from_source(source, max_len=max_len).parse()
    elif source == "-":
        logger.debug("parsing stdin")
        ast = Parser.from_source(sys.stdin, max_len=max_len).parse()
    else:
        logger.debug("parsing file %s", source)
        with open(source, "rb") as f:
            ast = Parser.from_source(f, max_len=max_len).parse()
    logger.debug("parsed %d top-level statements", len(ast))

    # 2. Render
    if fmt == "json":
        return json.dumps([node.to_dict() for node in ast], indent=indent)
    if fmt == "source":
        return Unparser().unparse(ast).rstrip("\n")
    return "\n".join(node.pretty() for node in ast)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the TOYC CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-f`, `--format`: Output format ('tree', 'json', 'source'), default 'tree'.
        - `--indent`: JSON indentation width.
        - `--max-token-len`: Maximum identifier/number length.
        - `-v`, `--verbose`: Enable debug logging on stderr.

    Returns:
        int: Process exit code.
    """
    parser = argparse.ArgumentParser(prog="toyc")
    parser.add_argument("source", help="Filename, '-' for stdin, or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="fmt",
        choices=FORMATS,
        default="tree",
        help="Output format (default: tree)",
    )
    parser.add_argument(
        "--indent", type=int, default=2, help="JSON indentation (default: 2)"
    )
    parser.add_argument(
        "--max-token-len",
        type=int,
        default=MAX_LEXEME_LEN,
        metavar="N",
        help=f"Longest identifier or number accepted (default: {MAX_LEXEME_LEN})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log parser progress to stderr"
    )

    args = parser.parse_args(argv)
    if args.max_token_len < 1:
        parser.error("--max-token-len must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    name = "<string>" if args.string else ("<stdin>" if args.source == "-" else args.source)
    try:
        output = run_toyc(
            source=args.source,
            is_string=args.string,
            fmt=args.fmt,
            indent=args.indent,
            max_len=args.max_token_len,
        )
    except ToycError as e:
        where = f"{name}:{e.line}:{e.col}" if e.line else name
        print(f"{where}: error: {e.message}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"{name}: error: {e.strerror or e}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
