#!/usr/bin/env python3
"""
Line Loader - Read a text file into an ordered list of lines.

Provides:
- Whole-file load with per-line encoding fallback and terminator stripping
- Advisory file type detection by extension (never blocks a search)

Any byte sequence is accepted as text: the last encoding in the per-line
fallback chain (latin-1) decodes every byte.
"""

import codecs
import logging
import sys
from pathlib import Path
from typing import Union

from textsearch_lib.errors import AccessError

# Configure module logger
logger = logging.getLogger(__name__)

# File type constants
TEXT_EXTENSIONS = {
    # Programming languages
    '.py', '.js', '.ts', '.java', '.c', '.cpp', '.h', '.hpp',
    '.cs', '.go', '.rs', '.rb', '.php', '.swift',
    # Web
    '.html', '.htm', '.css', '.xml',
    # Data/config
    '.json', '.yaml', '.yml', '.toml', '.ini', '.cfg', '.conf',
    # Documentation/text
    '.md', '.txt', '.rst', '.log', '.csv',
    # Scripts
    '.sh', '.bat', '.sql',
}

# Known binary files; still searched, but warned about
BINARY_EXTENSIONS = {
    '.exe', '.dll', '.so', '.dylib', '.bin', '.dat',
    '.zip', '.tar', '.gz', '.bz2', '.xz', '.7z', '.rar',
    '.jpg', '.jpeg', '.png', '.gif', '.bmp', '.ico', '.webp',
    '.mp3', '.mp4', '.avi', '.mov', '.wav',
    '.pdf', '.docx', '.xlsx',
    '.pyc', '.pyo', '.class', '.o', '.obj',
    '.db', '.sqlite', '.sqlite3',
}

# Per-line encodings to try (in order). latin-1 never fails.
TEXT_ENCODINGS = ['utf-8', 'latin-1']


def detect_file_type(filepath: Union[str, Path]) -> str:
    """
    Classify a file by its extension.

    Args:
        filepath: Path to the file (need not exist)

    Returns:
        File type string: 'text', 'binary', or 'unknown'.
        A path without an extension is treated as 'text'.
    """
    suffix = Path(filepath).suffix.lower()

    if not suffix or suffix in TEXT_EXTENSIONS:
        return 'text'
    elif suffix in BINARY_EXTENSIONS:
        return 'binary'
    return 'unknown'


def check_format(filepath: Union[str, Path]) -> bool:
    """
    Advisory check that a file looks like a text file.

    Logs a warning for anything that is not recognised as text, but never
    raises: the caller searches the file regardless of the answer.

    Returns:
        True if the extension is a known text format
    """
    if detect_file_type(filepath) == 'text':
        return True

    suffix = Path(filepath).suffix.lower()
    logger.warning(f"'{suffix}' may not be a text file format. Attempting to search anyway...")
    return False


def _decode_line(raw: bytes) -> str:
    """Decode one line, falling back through TEXT_ENCODINGS."""
    for enc in TEXT_ENCODINGS:
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            continue
    # Unreachable while latin-1 is in the chain
    return raw.decode('latin-1')


def split_lines(raw: bytes) -> list[str]:
    """
    Split raw file content into decoded lines with terminators removed.

    \\r\\n and lone \\r count as terminators. A trailing terminator does
    not produce an extra empty line, and empty content yields no lines at
    all. Each line is decoded on its own, so a stray invalid byte only
    affects the line it sits on.
    """
    if raw.startswith(codecs.BOM_UTF8):
        raw = raw[len(codecs.BOM_UTF8):]
    chunks = raw.replace(b'\r\n', b'\n').replace(b'\r', b'\n').split(b'\n')
    if chunks[-1] == b'':
        chunks.pop()
    return [_decode_line(chunk) for chunk in chunks]


def load_lines(filepath: Union[str, Path]) -> list[str]:
    """
    Load a whole file into memory as a list of lines.

    Lines keep their original content and casing; only the line
    terminators (\\n, \\r\\n or \\r) are stripped.

    Args:
        filepath: Path to the file to read

    Raises:
        AccessError: If the path does not exist, is not a regular file,
            or cannot be opened for reading

    Returns:
        Ordered list of line strings (line 1 is index 0)
    """
    path = Path(filepath)

    try:
        exists = path.exists()
        is_file = exists and path.is_file()
    except (OSError, ValueError) as e:
        # e.g. embedded null byte, name too long, unreadable parent
        raise AccessError(f"Cannot access file '{filepath}': invalid path ({e})") from e

    if not exists:
        raise AccessError(f"Cannot access file '{filepath}': file does not exist")

    if not is_file:
        raise AccessError(f"Cannot access file '{filepath}': not a regular file")

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise AccessError(f"Cannot access file '{filepath}': {e.strerror or e}") from e

    logger.debug(f"Read {len(raw)} bytes from {filepath}")
    return split_lines(raw)


if __name__ == '__main__':
    # Simple test/demo
    import argparse

    parser = argparse.ArgumentParser(description='Load a file and print its lines')
    parser.add_argument('path', help='File to load')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    check_format(args.path)
    try:
        lines = load_lines(args.path)
    except AccessError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Type: {detect_file_type(args.path)}")
    print(f"Lines: {len(lines)}")
    for num, line in enumerate(lines[:10], 1):
        print(f"{num:4d}  {line}")
