"""
Selectors package
-----------------
Helpers that run a CSS selector against a WebDriver and read element state
(effective text, visibility, read-only flag).
"""

from .elements import is_read_only, is_shown, option_selector, query, read_text

__all__ = [
    "query",
    "option_selector",
    "read_text",
    "is_shown",
    "is_read_only",
]
