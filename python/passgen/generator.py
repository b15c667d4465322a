"""
Password generation with guaranteed character set coverage.

Every password returned here contains at least one character from each
selected character set. Two construction strategies are available:

- ``Strategy.COVERAGE`` places one character from each set, fills the rest
  from the union of the sets and shuffles. It never retries.
- ``Strategy.REJECTION`` fills every position from a randomly chosen set and
  discards candidates until one covers all sets. Kept so output can be
  compared against the rejection-sampling generator it replaces.

Instances are thread safe as long as the injected random source is; the
default system source is.
"""

import enum
import logging
import random
from typing import Iterable, List, Optional, Sequence

from .charsets import DEFAULT_CHARACTER_SETS, SYSTEM_RANDOM, CharacterSet
from .exceptions import CoverageError
from .utils.validation import check_request

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 16


class Strategy(enum.Enum):
    """How a password is assembled."""

    COVERAGE = "coverage"
    REJECTION = "rejection"


def covers_all(candidate: Sequence[str], character_sets: Iterable[CharacterSet]) -> bool:
    """Check that a candidate has at least one character from every set."""
    return all(charset.contains_any(candidate) for charset in character_sets)


class PasswordGenerator:
    """Generate passwords from a selection of character sets."""

    def __init__(self,
                 rng: Optional[random.Random] = None,
                 strategy: Strategy = Strategy.COVERAGE):
        """
        Initialize password generator.

        Args:
            rng: Random source; pass a seeded ``random.Random`` for
                reproducible output (defaults to ``secrets.SystemRandom``)
            strategy: Construction strategy
        """
        self.rng = rng or SYSTEM_RANDOM
        self.strategy = Strategy(strategy)

    def generate(self,
                 character_sets: Iterable[CharacterSet],
                 length: int,
                 allow_ambiguous: bool = False) -> str:
        """
        Generate a password.

        Args:
            character_sets: Character sets that must all be represented
            length: Password length (at least 4, no upper limit)
            allow_ambiguous: Allow visually ambiguous characters (I, O, l)

        Returns:
            Generated password string

        Raises:
            EmptySelectionError: If no character set is selected
            LengthTooShortError: If length is below 4
        """
        selection = check_request(character_sets, length)

        if self.strategy is Strategy.REJECTION:
            password = self._generate_rejection(selection, length, allow_ambiguous)
        else:
            password = self._generate_coverage(selection, length, allow_ambiguous)

        return "".join(password)

    def _generate_rejection(self, selection: List[CharacterSet], length: int,
                            allow_ambiguous: bool) -> List[str]:
        attempts = 0
        while True:
            attempts += 1
            password = [
                self.rng.choice(selection).pick_random(allow_ambiguous, self.rng)
                for _ in range(length)
            ]

            if covers_all(password, selection):
                logger.debug(f"Rejection sampling accepted candidate after {attempts} attempt(s)")
                return password

    def _generate_coverage(self, selection: List[CharacterSet], length: int,
                           allow_ambiguous: bool) -> List[str]:
        # One guaranteed character per set, the rest from the union
        password = [charset.pick_random(allow_ambiguous, self.rng) for charset in selection]

        pool = "".join(charset.usable_members(allow_ambiguous) for charset in selection)
        password.extend(self.rng.choice(pool) for _ in range(length - len(password)))

        self.rng.shuffle(password)
        logger.debug(f"Placed {len(selection)} required character(s), "
                     f"filled {length - len(selection)} from a pool of {len(pool)}")

        if not covers_all(password, selection):
            raise CoverageError("Generated password does not cover every selected character set")

        return password


def describe_character_sets(character_sets: Iterable[CharacterSet],
                            allow_ambiguous: bool = False) -> str:
    """
    Get human-readable description of a selection.

    Args:
        character_sets: Selected character sets
        allow_ambiguous: Whether ambiguous characters are allowed

    Returns:
        Description such as "upper, digits (excluding ambiguous chars)"
    """
    selection = list(dict.fromkeys(character_sets))
    info = ", ".join(charset.name for charset in selection)

    if not allow_ambiguous and any(charset.ambiguous for charset in selection):
        info += " (excluding ambiguous chars)"

    return info


def generate_password(length: int = DEFAULT_LENGTH,
                      character_sets: Optional[Iterable[CharacterSet]] = None,
                      allow_ambiguous: bool = False,
                      rng: Optional[random.Random] = None,
                      strategy: Strategy = Strategy.COVERAGE) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Password length (at least 4)
        character_sets: Character sets to use (upper, lower and digits by default)
        allow_ambiguous: Allow visually ambiguous characters
        rng: Random source
        strategy: Construction strategy

    Returns:
        Generated password string
    """
    if character_sets is None:
        character_sets = DEFAULT_CHARACTER_SETS

    generator = PasswordGenerator(rng=rng, strategy=strategy)
    return generator.generate(character_sets, length, allow_ambiguous)
