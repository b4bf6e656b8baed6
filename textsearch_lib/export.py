#!/usr/bin/env python3
"""
Search Export - Present and export search results.

Provides:
- Plain-text presentation of a cmd_search result (the terminal report)
- Export of results to JSON, CSV, or Markdown
- Copy rendered results to the clipboard

All functions take the dictionary returned by search.cmd_search.
"""

import csv
import io
import json
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from textsearch_lib.stats import FileStats, format_stats

logger = logging.getLogger(__name__)

# Constants
CLIPBOARD_MAX_CHARS = 1_000_000  # 1MB safety limit
SECTION_RULE = "=" * 42
MATCH_RULE = "-" * 42
CONTEXT_BEFORE_LABEL = "    Context Before: "
CONTEXT_AFTER_LABEL = "    Context After:  "
EXPORT_FORMATS = ("text", "json", "csv", "markdown")


class ExportError(Exception):
    """Base exception for export errors."""
    pass


class ClipboardError(ExportError):
    """Clipboard operation failed."""
    pass


class UnknownFormatError(ExportError):
    """Requested export format is not supported."""
    pass


def _format_match(match: dict) -> str:
    lines = [f"Match {match['ordinal']} - Line {match['line_number']}: {match['content']}"]
    if "context_before" in match:
        lines.append(f"{CONTEXT_BEFORE_LABEL}{match['context_before']}")
    if "context_after" in match:
        lines.append(f"{CONTEXT_AFTER_LABEL}{match['context_after']}")
    return "\n".join(lines)


def format_text(result: dict, show_stats: bool = True) -> str:
    """
    Render a search result as the plain-text terminal report.

    Args:
        result: Dictionary from cmd_search
        show_stats: Include the 'File Information' block

    Returns:
        Report string (no trailing newline)
    """
    if result.get("error"):
        return f"Error: {result['error']}"

    lines = []
    if show_stats and result.get("stats"):
        lines.append(format_stats(result["filepath"], FileStats(**result["stats"])))
        lines.append("")

    query = result["query"]
    lines.append(f'Searching for: "{query}"')
    lines.append(SECTION_RULE)

    matches = result["matches"]
    if not matches:
        lines.append(f'No matches found for "{query}" in the specified file.')
    else:
        lines.append(f"Found {len(matches)} match(es):")
        lines.append("")
        for match in matches:
            lines.append(_format_match(match))
            if result.get("context"):
                lines.append("")
            lines.append(MATCH_RULE)

    lines.append(SECTION_RULE)
    return "\n".join(lines)


def present(result: dict, out: Optional[TextIO] = None, show_stats: bool = True) -> None:
    """Write the plain-text report for a search result to out (stdout by default)."""
    if out is None:
        out = sys.stdout
    out.write(format_text(result, show_stats=show_stats) + "\n")


def _format_json(result: dict, pretty: bool = True) -> str:
    """
    Format a search result as JSON.

    Args:
        result: Dictionary from cmd_search
        pretty: Pretty-print with indentation

    Returns:
        JSON string
    """
    if pretty:
        return json.dumps(result, indent=2, ensure_ascii=False)
    return json.dumps(result, ensure_ascii=False)


def _format_csv(result: dict) -> str:
    """
    Format matches as CSV.

    Columns: ordinal, line_number, content, context_before, context_after
    """
    output = io.StringIO()
    writer = csv.writer(output)

    # Header
    writer.writerow(["ordinal", "line_number", "content", "context_before", "context_after"])

    # Rows
    for m in result.get("matches", []):
        writer.writerow([
            m["ordinal"],
            m["line_number"],
            m["content"],
            m.get("context_before", ""),
            m.get("context_after", ""),
        ])

    return output.getvalue()


def _format_markdown(result: dict) -> str:
    """
    Format a search result as Markdown.

    Args:
        result: Dictionary from cmd_search

    Returns:
        Markdown string
    """
    query = result.get("query", "")
    matches = result.get("matches", [])
    lines = [f"# Search Results: `{query}`\n"]

    lines.append(f"- **File:** `{result.get('filepath', 'unknown')}`")
    stats = result.get("stats")
    if stats:
        lines.append(
            f"- **Lines:** {stats['line_count']} | **Words:** {stats['word_count']}"
            f" | **Characters:** {stats['char_count']}"
        )
    lines.append(f"\n**{len(matches)} matches found**\n")

    for m in matches:
        lines.append(f"## {m['ordinal']}. Line {m['line_number']}")
        lines.append("")
        lines.append("```")
        if "context_before" in m:
            lines.append(m["context_before"])
        lines.append(m["content"])
        if "context_after" in m:
            lines.append(m["context_after"])
        lines.append("```")
        lines.append("")

    return "\n".join(lines)


def format_results(result: dict, fmt: str = "text", show_stats: bool = True) -> str:
    """
    Render a search result in one of EXPORT_FORMATS.

    Raises:
        UnknownFormatError: If fmt is not a supported format
    """
    if fmt == "text":
        return format_text(result, show_stats=show_stats) + "\n"
    elif fmt == "json":
        return _format_json(result) + "\n"
    elif fmt == "csv":
        return _format_csv(result)
    elif fmt == "markdown":
        return _format_markdown(result)
    raise UnknownFormatError(
        f"Unknown format: {fmt}. Use one of: {', '.join(EXPORT_FORMATS)}"
    )


def cmd_export(
    result: dict,
    fmt: str = "json",
    output: Optional[Union[str, Path]] = None,
    show_stats: bool = True,
) -> dict:
    """
    Export a search result to a file, or return it as a string.

    Args:
        result: Dictionary from cmd_search
        fmt: One of EXPORT_FORMATS
        output: File path to write; if None the content is returned
        show_stats: Include the file information block in text output

    Returns:
        Dictionary with:
        - success: bool
        - format: Format used
        - output: Output path, or None
        - content: Rendered content when output is None
        - match_count: Number of matches exported
        - error: Error message if any
    """
    status = {
        "success": False,
        "format": fmt,
        "output": str(output) if output else None,
        "content": None,
        "match_count": len(result.get("matches", [])),
        "error": None,
    }

    try:
        content = format_results(result, fmt, show_stats=show_stats)
    except UnknownFormatError as e:
        status["error"] = str(e)
        return status

    if output is None:
        status["content"] = content
        status["success"] = True
        return status

    out_path = Path(output).expanduser()
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.warning(f"Failed to write {out_path}: {e}")
        status["error"] = f"Could not write {out_path}: {e}"
        return status

    status["output"] = str(out_path)
    status["success"] = True
    return status


def copy_to_clipboard(content: str) -> int:
    """
    Copy content to the system clipboard using pyperclip.

    Raises:
        ClipboardError: If the content is too large or no clipboard
            mechanism is available

    Returns:
        Number of characters copied
    """
    if len(content) > CLIPBOARD_MAX_CHARS:
        raise ClipboardError(
            f"Content too large for clipboard ({len(content):,} chars > {CLIPBOARD_MAX_CHARS:,} limit)"
        )

    import pyperclip

    try:
        pyperclip.copy(content)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Clipboard copy failed: {e}") from e

    return len(content)
