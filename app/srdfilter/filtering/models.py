"""Filtering domain models.

This module defines the sentinel used to mark filtered-out JSON nodes and
the records produced while walking an input tree.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Final, Literal, TypeAlias

# Parsed JSON value (object, array or scalar)
JSONValue: TypeAlias = Any


class Removed(Enum):
    """Marker for a JSON node that was filtered out.

    Kept distinct from ``None`` so that a legitimate JSON ``null`` is never
    confused with a removed entry.
    """

    REMOVED = "removed"

    def __repr__(self) -> str:
        return "REMOVED"


REMOVED: Final = Removed.REMOVED

RemovedType: TypeAlias = Literal[Removed.REMOVED]


class EntryAction(str, Enum):
    """What happened to an entry of the input tree.

    Attributes:
        FILTERED: JSON file parsed, filtered and re-serialized.
        COPIED: Non-JSON file copied byte for byte.
        FALLBACK: JSON file that could not be loaded, copied verbatim.
        SKIPPED: Name matched a block pattern, nothing was written.
    """

    FILTERED = "filtered"
    COPIED = "copied"
    FALLBACK = "fallback"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class EntryResult:
    """Outcome for a single file or directory of the input tree.

    Attributes:
        path: Path relative to the input root, using forward slashes.
        action: What was done with the entry.
        is_dir: Whether the entry is a directory.
        removed_entries: Number of JSON nodes removed (FILTERED only).
    """

    path: str
    action: EntryAction
    is_dir: bool = False
    removed_entries: int = 0

    def __post_init__(self) -> None:
        """Validate entry result data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.removed_entries < 0:
            msg = f"Removed entries cannot be negative, got {self.removed_entries}"
            raise ValueError(msg)


@dataclass(slots=True)
class FilterReport:
    """Summary of a complete filter run.

    Attributes:
        input_dir: Root of the input tree.
        output_dir: Root of the output tree.
        results: Entry outcomes in visiting order.
    """

    input_dir: Path
    output_dir: Path
    results: list[EntryResult] = field(default_factory=list)

    def add(self, result: EntryResult) -> None:
        """Append an entry outcome."""
        self.results.append(result)

    def count(self, action: EntryAction) -> int:
        """Count entries with the given action."""
        return sum(1 for r in self.results if r.action == action)

    @property
    def filtered_count(self) -> int:
        """Number of JSON files filtered."""
        return self.count(EntryAction.FILTERED)

    @property
    def copied_count(self) -> int:
        """Number of non-JSON files copied."""
        return self.count(EntryAction.COPIED)

    @property
    def fallback_count(self) -> int:
        """Number of JSON files copied verbatim after a load failure."""
        return self.count(EntryAction.FALLBACK)

    @property
    def skipped_count(self) -> int:
        """Number of blocked files and directories."""
        return self.count(EntryAction.SKIPPED)

    @property
    def removed_entries(self) -> int:
        """Total JSON nodes removed across all files."""
        return sum(r.removed_entries for r in self.results)
