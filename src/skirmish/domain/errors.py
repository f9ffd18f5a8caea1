"""Custom exceptions for the domain layer."""


class SkirmishError(Exception):
    """Base exception for the domain layer."""


class PreconditionError(SkirmishError):
    """Raised when an action is attempted before its requirements are met."""


class NoWeaponEquippedError(PreconditionError):
    """Raised when a character attacks with an empty weapon slot."""
