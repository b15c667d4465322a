"""
passgen - password generation with guaranteed character set coverage.
"""

from .charsets import (
    CHARACTER_SETS,
    DIGITS,
    LOWER_CASE_LETTERS,
    SYMBOLS,
    UPPER_CASE_LETTERS,
    CharacterSet,
    get_character_set,
    make_character_set,
)
from .exceptions import (
    CoverageError,
    EmptySelectionError,
    InvalidArgumentError,
    LengthTooShortError,
    PassgenException,
    UnknownCharacterSetError,
)
from .generator import PasswordGenerator, Strategy, generate_password

__all__ = [
    'CHARACTER_SETS',
    'DIGITS',
    'LOWER_CASE_LETTERS',
    'SYMBOLS',
    'UPPER_CASE_LETTERS',
    'CharacterSet',
    'get_character_set',
    'make_character_set',
    'CoverageError',
    'EmptySelectionError',
    'InvalidArgumentError',
    'LengthTooShortError',
    'PassgenException',
    'UnknownCharacterSetError',
    'PasswordGenerator',
    'Strategy',
    'generate_password',
]
