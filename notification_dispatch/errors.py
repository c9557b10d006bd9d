"""Domain exceptions raised by messages, providers and the manager."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for every error the manager knows how to log."""


class DataValidationError(NotificationError):
    """Message payload or provider name failed validation."""


class WrongImplementationError(NotificationError):
    """A provider received a message type it cannot deliver."""


class MissedConfigurationError(NotificationError):
    """Required configuration is missing or switched off."""


class MissedDependencyError(NotificationError):
    """An optional runtime dependency is not installed."""


class UnavailableForTestError(NotificationError):
    """The service refuses to run in a debug/test environment."""
