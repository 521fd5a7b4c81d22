"""Exceptions raised by session commands.

Every error is raised before the session is mutated, so callers can report it
and carry on. Each class also derives from the closest builtin exception,
which keeps ``except ValueError`` style handlers working.
"""

from __future__ import annotations


class SessionError(Exception):
    """Base class for recoverable session errors."""


class ValidationError(SessionError, ValueError):
    """Raised when a command carries empty or otherwise invalid input."""


class NotFoundError(SessionError, LookupError):
    """Raised when a room code or entity id does not exist."""


class InvalidStateTransition(SessionError, RuntimeError):
    """Raised when a command is not allowed in the current state."""


class AuthorizationError(SessionError, PermissionError):
    """Raised when a participant issues a host-only command."""
