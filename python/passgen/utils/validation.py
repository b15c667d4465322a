"""
Input validation utilities for passgen.
"""

from typing import Iterable, List

from ..charsets import CharacterSet
from ..exceptions import EmptySelectionError, InvalidArgumentError, LengthTooShortError

# Fixed lower bound, independent of how many sets are selected
MIN_LENGTH = 4


def validate_length(length: int) -> bool:
    """
    Validate a requested password length.

    Args:
        length: The length to validate

    Returns:
        True if length is an integer of at least MIN_LENGTH, False otherwise
    """
    if isinstance(length, bool) or not isinstance(length, int):
        return False

    return length >= MIN_LENGTH


def normalize_selection(character_sets: Iterable[CharacterSet]) -> List[CharacterSet]:
    """
    Collapse duplicates and order a selection canonically.

    Sets arrive as any iterable, including ``set`` objects whose iteration
    order changes between processes; sorting by name keeps seeded output
    stable.

    Args:
        character_sets: Selected character sets

    Returns:
        Distinct character sets sorted by name

    Raises:
        InvalidArgumentError: If the selection holds anything but character
            sets, e.g. a single CharacterSet passed without a collection
    """
    if isinstance(character_sets, CharacterSet):
        raise InvalidArgumentError(
            f"Expected a collection of character sets, got the single set '{character_sets.name}'"
        )

    selection = set(character_sets)
    for item in selection:
        if not isinstance(item, CharacterSet):
            raise InvalidArgumentError(f"Expected a character set, got {type(item).__name__}")

    return sorted(selection, key=lambda charset: (charset.name, charset.members))


def check_request(character_sets: Iterable[CharacterSet], length: int) -> List[CharacterSet]:
    """
    Validate a generation request.

    Args:
        character_sets: Selected character sets
        length: Requested password length

    Returns:
        Normalized selection, see :func:`normalize_selection`

    Raises:
        InvalidArgumentError: If the selection holds non character sets or
            length is not an integer
        EmptySelectionError: If no character set is selected
        LengthTooShortError: If length is below MIN_LENGTH or shorter than
            the number of selected sets
    """
    selection = normalize_selection(character_sets)
    if not selection:
        raise EmptySelectionError("At least one character set must be used")

    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgumentError(f"Password length must be an integer, got {type(length).__name__}")

    if not validate_length(length):
        raise LengthTooShortError(f"Password length must be at least {MIN_LENGTH}")

    # Only reachable with custom sets; the built-in registry has four
    if len(selection) > length:
        raise LengthTooShortError(
            f"Password length {length} cannot cover {len(selection)} character sets"
        )

    return selection
