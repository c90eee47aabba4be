"""Errors for expression building."""


class StyleForgeError(Exception):
    """Base exception for styleforge failures."""


class BindingsError(StyleForgeError, TypeError):
    """Raised when a scoped binding receives something other than a bindings wrapper."""
