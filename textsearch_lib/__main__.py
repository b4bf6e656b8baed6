"""
Command-line entry point.

Usage:
    python -m textsearch_lib search app.log "timeout" --context
    python -m textsearch_lib search notes.md todo --format markdown -o todo.md
    python -m textsearch_lib stats app.log --json
    python -m textsearch_lib            # interactive session
"""

import argparse
import json
import logging
import sys
from typing import Optional

from textsearch_lib.errors import EmptyQueryError
from textsearch_lib.export import (
    EXPORT_FORMATS,
    ExportError,
    cmd_export,
    copy_to_clipboard,
    format_results,
)
from textsearch_lib.search import cmd_search
from textsearch_lib.session import run_session
from textsearch_lib.stats import FileStats, cmd_stats, format_stats

logger = logging.getLogger("textsearch_lib")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textsearch",
        description="Case-insensitive text search within a single file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Search a log file, showing the line before and after each match
    textsearch search app.log "connection refused" --context

    # Export matches as CSV
    textsearch search data.txt foo --format csv -o matches.csv

    # Line/word/character counts only
    textsearch stats README.md

    # Interactive prompt (default when no command is given)
    textsearch
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command")

    search = subparsers.add_parser("search", help="Search a file for a term")
    search.add_argument("path", help="File to search")
    search.add_argument("query", help="Search term (literal, case-insensitive)")
    search.add_argument(
        "-c", "--context",
        action="store_true",
        help="Show the line before and after each match",
    )
    search.add_argument(
        "--unicode-fold",
        action="store_true",
        help="Use full Unicode case folding instead of ASCII-only",
    )
    search.add_argument(
        "-f", "--format",
        choices=EXPORT_FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    search.add_argument("-o", "--output", help="Write results to this file instead of stdout")
    search.add_argument("--copy", action="store_true", help="Also copy the output to the clipboard")
    search.add_argument(
        "--no-stats",
        action="store_true",
        help="Omit the file information block from text output",
    )

    stats = subparsers.add_parser("stats", help="Show line/word/character counts for a file")
    stats.add_argument("path", help="File to inspect")
    stats.add_argument("--json", action="store_true", help="Output as JSON")

    interactive = subparsers.add_parser("interactive", help="Start the interactive prompt")
    interactive.add_argument(
        "--unicode-fold",
        action="store_true",
        help="Use full Unicode case folding instead of ASCII-only",
    )

    return parser


def _run_search(args: argparse.Namespace) -> int:
    try:
        result = cmd_search(
            args.path,
            args.query,
            context=args.context,
            unicode_fold=args.unicode_fold,
        )
    except EmptyQueryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if result["error"]:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1

    content = format_results(result, args.format, show_stats=not args.no_stats)

    if args.output:
        status = cmd_export(result, args.format, args.output, show_stats=not args.no_stats)
        if not status["success"]:
            print(f"Error: {status['error']}", file=sys.stderr)
            return 1
        print(f"Wrote {status['match_count']} matches to {status['output']}")
    else:
        sys.stdout.write(content)

    if args.copy:
        try:
            count = copy_to_clipboard(content)
        except ExportError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        logger.info(f"Copied {count:,} characters to clipboard")

    return 0


def _run_stats(args: argparse.Namespace) -> int:
    result = cmd_stats(args.path)
    if args.json:
        print(json.dumps(result, indent=2))
        return 1 if result["error"] else 0

    if result["error"]:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1

    print(format_stats(result["filepath"], FileStats(
        result["lines"], result["words"], result["characters"]
    )))
    print(f"  Size: {result['size_human']}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "search":
        return _run_search(args)
    elif args.command == "stats":
        return _run_stats(args)

    run_session(unicode_fold=getattr(args, "unicode_fold", False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
