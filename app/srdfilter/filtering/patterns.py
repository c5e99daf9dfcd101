"""Block patterns for excluded content categories.

This module defines the name patterns that mark content as non-official
(Unearthed Arcana, playtest material, homebrew). The same pattern set is
applied to file names, directory names and the ``source`` field of every
JSON object.
"""

import re
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

# Default block patterns (regular expressions, matched case-insensitively
# anywhere in the value). Order is preserved. The short fragments ("ua",
# "brew") are intentionally broad and also catch abbreviations.
DEFAULT_BLOCK_PATTERNS: tuple[str, ...] = (
    # Unearthed Arcana
    r"ua",
    r"unearthed\s*arcana",
    # Playtest material
    r"play\s*test",
    r"playtest",
    # Homebrew
    r"home\s*brew",
    r"homebrew",
    r"brew",
)


class BlockPatternSet(BaseModel):
    """Immutable ordered set of case-insensitive block patterns.

    Pattern strings are validated and compiled once at construction and
    reused for every check during a run.

    Attributes:
        patterns: Regular expressions identifying excluded content.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    patterns: Annotated[
        tuple[str, ...],
        Field(description="Regular expressions matched with re.search"),
    ] = DEFAULT_BLOCK_PATTERNS

    _compiled: tuple[re.Pattern[str], ...] = PrivateAttr(default=())

    @field_validator("patterns")
    @classmethod
    def validate_patterns(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject empty or syntactically invalid regular expressions."""
        for pattern in v:
            if not pattern:
                msg = "Block pattern cannot be empty"
                raise ValueError(msg)
            try:
                re.compile(pattern)
            except re.error as e:
                msg = f"Invalid block pattern '{pattern}': {e}"
                raise ValueError(msg) from None
        return v

    def model_post_init(self, __context: object) -> None:
        """Compile the validated patterns."""
        self._compiled = tuple(re.compile(p, re.IGNORECASE) for p in self.patterns)

    @property
    def compiled(self) -> tuple[re.Pattern[str], ...]:
        """Compiled patterns in declaration order."""
        return self._compiled

    def matches(self, value: str) -> bool:
        """Check whether any pattern matches somewhere in ``value``."""
        return any(p.search(value) for p in self._compiled)

    def __len__(self) -> int:
        return len(self._compiled)


def is_blocked(value: object, patterns: BlockPatternSet) -> bool:
    """Check if a value is tagged as excluded content.

    Only strings can be blocked. ``None`` (an absent ``source``), numbers,
    booleans and containers are never blocked.

    Args:
        value: Candidate value, usually a ``source`` field or a path name.
        patterns: Pattern set to check against.

    Returns:
        True if ``value`` is a string matching any block pattern.
    """
    if not isinstance(value, str):
        return False
    return patterns.matches(value)
