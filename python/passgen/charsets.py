"""
Password character sets.

Each set is an immutable record holding its member characters and the subset
of members that are easy to confuse visually (``I``, ``O``, ``l``). Both
strings are kept sorted so membership checks are binary searches.
"""

import bisect
import random
import secrets
import string
from typing import Iterable, NamedTuple, Optional, Tuple

from .exceptions import UnknownCharacterSetError

# Shared source for callers that don't inject their own; draws from the OS
SYSTEM_RANDOM = secrets.SystemRandom()


def _contains(sorted_chars: str, char: str) -> bool:
    index = bisect.bisect_left(sorted_chars, char)
    return index < len(sorted_chars) and sorted_chars[index] == char


class CharacterSet(NamedTuple):
    """A named category of password characters."""

    name: str
    members: str
    ambiguous: str = ""

    def contains(self, char: str) -> bool:
        """Check whether a single character belongs to this set."""
        return _contains(self.members, char)

    def is_ambiguous(self, char: str) -> bool:
        """Check whether a character is flagged as visually ambiguous."""
        return bool(self.ambiguous) and _contains(self.ambiguous, char)

    def contains_any(self, candidate: Iterable[str]) -> bool:
        """
        Check whether a candidate password uses this set.

        Args:
            candidate: Password or any sequence of characters

        Returns:
            True if at least one character of the candidate is a member
        """
        return any(_contains(self.members, char) for char in candidate)

    def pick_random(self, allow_ambiguous: bool = False,
                    rng: Optional[random.Random] = None) -> str:
        """
        Draw one member uniformly at random.

        Ambiguous characters are re-drawn unless ``allow_ambiguous`` is set.
        Every set built with :func:`make_character_set` has at least one
        unambiguous member, so the loop terminates.

        Args:
            allow_ambiguous: Accept visually ambiguous characters
            rng: Random source (defaults to the system source)

        Returns:
            A single character from this set
        """
        rng = rng or SYSTEM_RANDOM
        while True:
            char = self.members[rng.randrange(len(self.members))]
            if allow_ambiguous or not self.is_ambiguous(char):
                return char

    def usable_members(self, allow_ambiguous: bool = False) -> str:
        """Members that may appear in a password under the ambiguity setting."""
        if allow_ambiguous or not self.ambiguous:
            return self.members
        return "".join(c for c in self.members if not self.is_ambiguous(c))


def make_character_set(name: str, members: str, ambiguous: str = "") -> CharacterSet:
    """
    Build a validated character set.

    Args:
        name: Set name used for lookup and display
        members: Member characters, in any order
        ambiguous: Members considered visually ambiguous

    Returns:
        CharacterSet with sorted members

    Raises:
        ValueError: If members are empty or duplicated, if ambiguous
            characters are not members, or if every member is ambiguous
    """
    if not members:
        raise ValueError(f"Character set '{name}' has no members")

    if len(set(members)) != len(members):
        raise ValueError(f"Character set '{name}' contains duplicate characters")

    strangers = set(ambiguous) - set(members)
    if strangers:
        raise ValueError(
            f"Ambiguous characters not in set '{name}': {''.join(sorted(strangers))}"
        )

    if not set(members) - set(ambiguous):
        raise ValueError(f"Character set '{name}' has no unambiguous members")

    return CharacterSet(name, "".join(sorted(members)), "".join(sorted(set(ambiguous))))


UPPER_CASE_LETTERS = make_character_set("upper", string.ascii_uppercase, "IO")
LOWER_CASE_LETTERS = make_character_set("lower", string.ascii_lowercase, "l")
DIGITS = make_character_set("digits", string.digits)
SYMBOLS = make_character_set("symbols", "@#$%&*()-+=^.,")

# Canonical order, also used for display
CHARACTER_SETS: Tuple[CharacterSet, ...] = (
    UPPER_CASE_LETTERS,
    LOWER_CASE_LETTERS,
    DIGITS,
    SYMBOLS,
)

DEFAULT_CHARACTER_SETS: Tuple[CharacterSet, ...] = (
    UPPER_CASE_LETTERS,
    LOWER_CASE_LETTERS,
    DIGITS,
)

_ALIASES = {
    "upper_case_letters": UPPER_CASE_LETTERS,
    "uppercase": UPPER_CASE_LETTERS,
    "lower_case_letters": LOWER_CASE_LETTERS,
    "lowercase": LOWER_CASE_LETTERS,
    "digit": DIGITS,
    "symbol": SYMBOLS,
    "punctuation": SYMBOLS,
}


def get_character_set(name: str) -> CharacterSet:
    """
    Look up a built-in character set by name.

    Args:
        name: Set name or alias, case-insensitive (e.g. "upper", "DIGITS")

    Returns:
        The matching CharacterSet

    Raises:
        UnknownCharacterSetError: If no set matches the name
    """
    key = name.strip().lower().replace("-", "_")
    for charset in CHARACTER_SETS:
        if charset.name == key:
            return charset

    if key in _ALIASES:
        return _ALIASES[key]

    known = ", ".join(charset.name for charset in CHARACTER_SETS)
    raise UnknownCharacterSetError(f"Unknown character set '{name}' (known: {known})")
