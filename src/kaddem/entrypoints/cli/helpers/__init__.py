"""CLI helpers for KADDEM.

Utilities used by the command-line interface: database URL resolution and
sanitization for safe display, logger-level option parsing, and message
emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .db_url import resolve_db_url, sanitize_url
from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = [
    "resolve_db_url",
    "sanitize_url",
    "parse_log_level",
    "warn",
    "success",
    "error",
]
