"""
Text Search Library - Single-file, case-insensitive text search.

Loads one text file into memory, finds the lines containing a search term
(ignoring case), and reports each match with optional surrounding lines
plus basic file statistics.

Modules:
    errors  - AccessError / EmptyQueryError taxonomy
    loader  - Read a file into terminator-stripped lines; advisory format check
    stats   - Line, word and character counts
    search  - Line matcher and context search engine
    export  - Text report, JSON/CSV/Markdown export, clipboard copy
    session - Interactive prompt loop
"""

__version__ = "1.0.0"
__all__ = []
