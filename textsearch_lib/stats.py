#!/usr/bin/env python3
"""
File Statistics - Line, word and character counts for a loaded file.

Counts are derived from the terminator-stripped line list, so line
terminators never contribute to the character count.
"""

import logging
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Union

from textsearch_lib.errors import AccessError
from textsearch_lib.loader import load_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileStats:
    """Line/word/character counts for one file."""
    line_count: int
    word_count: int
    char_count: int

    def to_dict(self) -> dict:
        return asdict(self)


def compute_stats(lines: list[str]) -> FileStats:
    """
    Compute statistics over a line list.

    Words are maximal runs of non-whitespace, so leading, trailing and
    repeated whitespace never produce empty words.
    """
    return FileStats(
        line_count=len(lines),
        word_count=sum(len(line.split()) for line in lines),
        char_count=sum(len(line) for line in lines),
    )


def _human_readable_size(size_bytes: int) -> str:
    """Convert bytes to human-readable string."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.1f} GB"


def cmd_stats(filepath: Union[str, Path]) -> dict:
    """
    Get statistics for a single file.

    Returns:
        Dictionary containing:
        - filepath: Path as given
        - lines / words / characters: Counts from the loaded content
        - size_bytes / size_human: On-disk size
        - error: Error message, or None on success
    """
    try:
        lines = load_lines(filepath)
    except AccessError as e:
        return {"filepath": str(filepath), "error": str(e)}

    stats = compute_stats(lines)
    try:
        size_bytes = Path(filepath).stat().st_size
    except OSError as e:
        logger.warning(f"Could not stat {filepath}: {e}")
        size_bytes = 0

    return {
        "filepath": str(filepath),
        "lines": stats.line_count,
        "words": stats.word_count,
        "characters": stats.char_count,
        "size_bytes": size_bytes,
        "size_human": _human_readable_size(size_bytes),
        "error": None,
    }


def format_stats(filepath: Union[str, Path], stats: FileStats) -> str:
    """Render the 'File Information' block."""
    return "\n".join([
        "File Information:",
        f"  Path: {filepath}",
        f"  Lines: {stats.line_count}",
        f"  Words: {stats.word_count}",
        f"  Characters: {stats.char_count}",
    ])


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Show line/word/character counts for a file")
    parser.add_argument("path", help="File to inspect")
    args = parser.parse_args()

    result = cmd_stats(args.path)
    if result["error"]:
        print(f"Error: {result['error']}")
        sys.exit(1)
    print(format_stats(result["filepath"], FileStats(
        result["lines"], result["words"], result["characters"]
    )))
    print(f"  Size: {result['size_human']}")
