"""
File Search - Case-insensitive substring search over the lines of one file.

Provides:
- Query validation (rejects empty / whitespace-only queries before any I/O)
- A single-line matcher with ASCII-only case folding (optionally full
  Unicode casefold)
- A single forward scan that yields one MatchRecord per matching line,
  optionally carrying the line immediately before and after it
- cmd_search: the full load -> stats -> search flow as a JSON-ready dict

Matching is literal: no regex, no globbing, and a line that contains the
query several times still yields exactly one record.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from textsearch_lib.errors import AccessError, EmptyQueryError
from textsearch_lib.loader import check_format, load_lines
from textsearch_lib.stats import compute_stats

logger = logging.getLogger(__name__)

# Maps A-Z to a-z and leaves every other character untouched
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


@dataclass(frozen=True)
class MatchRecord:
    """One matching line, with optional neighbouring lines."""
    ordinal: int  # 1-based position among matches
    line_number: int  # 1-based line number in the file
    content: str
    context_before: Optional[str] = None
    context_after: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        result = {
            "ordinal": self.ordinal,
            "line_number": self.line_number,
            "content": self.content,
        }
        if self.context_before is not None:
            result["context_before"] = self.context_before
        if self.context_after is not None:
            result["context_after"] = self.context_after
        return result


def validate_query(query: str) -> str:
    """
    Validate search query.

    The query is returned unchanged: surrounding whitespace is part of
    the substring being searched for.

    Raises:
        EmptyQueryError: If query is empty or whitespace-only
    """
    if not query:
        raise EmptyQueryError("Search term cannot be empty. Please try again.")
    if not query.strip():
        raise EmptyQueryError("Search term contains only whitespace. Please try again.")
    return query


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only; no locale, no Unicode case mapping."""
    return text.translate(_ASCII_LOWER)


def _fold(text: str, unicode_fold: bool) -> str:
    return text.casefold() if unicode_fold else ascii_lower(text)


def line_matches(query: str, line: str, unicode_fold: bool = False) -> bool:
    """Return True if query occurs in line, ignoring case."""
    return _fold(query, unicode_fold) in _fold(line, unicode_fold)


def search_lines(
    lines: list[str],
    query: str,
    context: bool = False,
    unicode_fold: bool = False,
) -> list[MatchRecord]:
    """
    Scan lines once and return a record for every matching line.

    Args:
        lines: Terminator-stripped file lines (line 1 at index 0)
        query: Search term, compared case-insensitively
        context: Attach the previous/next line to each record when they exist
        unicode_fold: Use str.casefold instead of ASCII-only folding

    Returns:
        Records in ascending line order, ordinals numbered 1..k
    """
    folded_query = _fold(query, unicode_fold)
    last_index = len(lines) - 1
    results = []

    for idx, line in enumerate(lines):
        if folded_query not in _fold(line, unicode_fold):
            continue

        before = after = None
        if context:
            if idx > 0:
                before = lines[idx - 1]
            if idx < last_index:
                after = lines[idx + 1]

        results.append(MatchRecord(
            ordinal=len(results) + 1,
            line_number=idx + 1,
            content=line,
            context_before=before,
            context_after=after,
        ))

    return results


def cmd_search(
    filepath: Union[str, Path],
    query: str,
    context: bool = False,
    unicode_fold: bool = False,
) -> dict:
    """
    Run one complete search invocation against a file.

    The query is validated before the file is touched. If the file cannot
    be read, no statistics and no matches are produced.

    Args:
        filepath: File to search
        query: Search term
        context: Include the line before and after each match
        unicode_fold: Use full Unicode case folding

    Raises:
        EmptyQueryError: If query is empty or whitespace-only

    Returns:
        Dictionary with:
        - filepath: Path as given
        - query: Search term
        - context: Whether context lines were requested
        - stats: {line_count, word_count, char_count} or None
        - total_matches: Number of matching lines
        - matches: List of MatchRecord dicts
        - error: Error message if the file could not be read
    """
    query = validate_query(query)

    result = {
        "filepath": str(filepath),
        "query": query,
        "context": context,
        "stats": None,
        "total_matches": 0,
        "matches": [],
        "error": None,
    }

    try:
        lines = load_lines(filepath)
    except AccessError as e:
        logger.debug(f"Search aborted: {e}")
        result["error"] = str(e)
        return result

    check_format(filepath)

    result["stats"] = compute_stats(lines).to_dict()
    records = search_lines(lines, query, context=context, unicode_fold=unicode_fold)
    result["total_matches"] = len(records)
    result["matches"] = [r.to_dict() for r in records]
    return result
