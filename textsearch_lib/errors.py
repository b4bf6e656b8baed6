"""
Search errors shared by the loader, the search engine and the CLI.
"""


class SearchError(Exception):
    """Base exception for search errors."""
    pass


class AccessError(SearchError):
    """File is missing, unreadable, or the path is invalid."""
    pass


class EmptyQueryError(SearchError):
    """Search query is empty or whitespace-only."""
    pass
