"""
Interactive search session.

Prompts for a file path, a search term and whether to show context lines,
runs one search, and repeats until the user types 'exit'. Errors are
reported and the session carries on with the next prompt.
"""

import logging
import sys
from typing import Callable, Optional, TextIO

from textsearch_lib.errors import SearchError
from textsearch_lib.export import SECTION_RULE, present
from textsearch_lib.search import cmd_search, validate_query

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"exit", "EXIT"}
HELP_COMMANDS = {"help", "HELP"}
YES_ANSWERS = {"y", "Y", "yes", "YES"}

BANNER = f"""{SECTION_RULE}
    UNIVERSAL FILE SEARCH UTILITY
{SECTION_RULE}
Search any text file for specific content
Type 'exit' to quit the application
"""

USAGE = f"""Universal File Search Instructions:
{SECTION_RULE}
1. Enter the complete file path (e.g., 'document.txt' or '/var/log/app.log')
2. Enter your search term when prompted
3. Choose whether to include context lines (y/n)

Supported File Types:
  Text: .txt, .log, .md, .cfg, .ini
  Programming: .cpp, .c, .h, .py, .js, .java, .cs, .php
  Web: .html, .css, .xml, .json, .yaml
  Scripts: .sh, .bat, .sql

Search Features:
  - Case-insensitive matching
  - Partial word matching
  - Line context display option
  - Match counting and statistics

Commands:
  'help' - Show these instructions
  'exit' - Quit the application
"""


def run_session(
    input_fn: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
    unicode_fold: bool = False,
) -> int:
    """
    Run the interactive prompt loop.

    Args:
        input_fn: Prompt function (defaults to builtin input)
        out: Output stream (defaults to stdout)
        unicode_fold: Use full Unicode case folding for every search

    Returns:
        Number of files searched
    """
    if input_fn is None:
        input_fn = input
    if out is None:
        out = sys.stdout

    def say(text: str = "") -> None:
        out.write(text + "\n")

    files_searched = 0

    def finish() -> int:
        say("\nSearch session ended.")
        say(f"Total files searched: {files_searched}")
        return files_searched

    say(BANNER)
    say(USAGE)

    while True:
        try:
            target = input_fn("Enter file path (or 'help'/'exit'): ")
        except (EOFError, KeyboardInterrupt):
            say()
            target = "exit"

        if target in EXIT_COMMANDS:
            return finish()

        if target in HELP_COMMANDS:
            say(USAGE)
            continue

        if not target:
            say("Error: File path cannot be empty.\n")
            continue

        try:
            query = validate_query(input_fn("Enter search term: "))
            answer = input_fn("Include context lines? (y/n): ")
        except SearchError as e:
            say(f"Error: {e}\n")
            continue
        except (EOFError, KeyboardInterrupt):
            return finish()

        result = cmd_search(target, query, context=answer in YES_ANSWERS, unicode_fold=unicode_fold)
        files_searched += 1
        if result["error"]:
            say(f"Error: {result['error']}")
            say("Please check:")
            say("  - File path is correct")
            say("  - File exists in the specified location")
            say("  - You have read permissions\n")
        else:
            logger.debug(f"{result['total_matches']} matches in {target}")
            present(result, out)
            say()

        say("Search another file or type 'exit' to quit.\n")
