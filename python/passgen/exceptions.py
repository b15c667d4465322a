"""
Custom exceptions for passgen.
"""


class PassgenException(Exception):
    """Base exception for passgen."""

    pass


class InvalidArgumentError(PassgenException, ValueError):
    """A generation request was rejected before sampling."""

    pass


class EmptySelectionError(InvalidArgumentError):
    """No character set was selected."""

    pass


class LengthTooShortError(InvalidArgumentError):
    """Requested password length is below the minimum."""

    pass


class UnknownCharacterSetError(InvalidArgumentError):
    """No character set is registered under the given name."""

    pass


class CoverageError(PassgenException, RuntimeError):
    """A built password does not use every selected character set."""

    pass
