"""Content filtering module.

This module provides the block pattern set, the recursive JSON node
filter and the tree filter that mirrors an input directory into a
cleaned output directory.
"""

from srdfilter.filtering.document import FilteredDocument, filter_document, filter_node
from srdfilter.filtering.models import (
    REMOVED,
    EntryAction,
    EntryResult,
    FilterReport,
    Removed,
)
from srdfilter.filtering.patterns import DEFAULT_BLOCK_PATTERNS, BlockPatternSet, is_blocked
from srdfilter.filtering.tree import (
    InputDirectoryError,
    OutputDirectoryError,
    TreeFilter,
    TreeFilterError,
)

__all__ = [
    "DEFAULT_BLOCK_PATTERNS",
    "REMOVED",
    "BlockPatternSet",
    "EntryAction",
    "EntryResult",
    "FilterReport",
    "FilteredDocument",
    "InputDirectoryError",
    "OutputDirectoryError",
    "Removed",
    "TreeFilter",
    "TreeFilterError",
    "filter_document",
    "filter_node",
    "is_blocked",
]
