"""
envstruct Exception Hierarchy

Centralized exception classes for structured error handling across the codebase.
All envstruct-specific exceptions inherit from EnvstructError.

File read failures are not wrapped: the OSError raised by the read reaches the
caller unchanged.

Usage:
    from envstruct.exceptions import GoSyntaxError

    try:
        type_def.parse(path)
    except GoSyntaxError as e:
        logger.error(f"Parse failed: {e}")
"""

from typing import Optional


class EnvstructError(Exception):
    """Base exception for all envstruct errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(EnvstructError):
    """Error in envstruct configuration."""

    pass


# =============================================================================
# Parse Errors
# =============================================================================


class ParseError(EnvstructError):
    """Base class for source parsing errors."""

    pass


class GoSyntaxError(ParseError, SyntaxError):
    """Go source could not be parsed.

    Also a builtin SyntaxError, so callers catching SyntaxError see it with
    the usual filename/lineno/offset/text attributes.
    """

    def __init__(
        self,
        message: str,
        filename: Optional[str] = None,
        lineno: Optional[int] = None,
        offset: Optional[int] = None,
        text: Optional[str] = None,
    ):
        details = {}
        if filename:
            details["file"] = filename
        if lineno is not None:
            details["line"] = lineno
        if offset is not None:
            details["column"] = offset
        super().__init__(message, details)
        self.msg = message
        self.filename = filename
        self.lineno = lineno
        self.offset = offset
        self.text = text


class UnsupportedLanguageError(ParseError):
    """Grammar for a language could not be loaded."""

    pass
