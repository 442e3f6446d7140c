"""Custom exceptions for fcmd.

Filesystem failures are not wrapped: the builtin OSError subclasses raised by
the underlying calls propagate unchanged.
"""


class FcmdError(Exception):
    """Base exception for fcmd."""


class InvalidModeError(FcmdError, ValueError):
    """Permission mode is not a valid octal value."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid permission mode: {value!r} (expected octal, e.g. 750)")


class ConfigValidationError(FcmdError):
    """Config file is invalid or malformed."""
