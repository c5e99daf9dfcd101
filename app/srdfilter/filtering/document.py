"""Recursive filtering of parsed JSON documents.

Objects whose ``source`` matches a block pattern are dropped together with
everything below them. Filtering never mutates the input: every function
returns a rebuilt tree, and removed nodes are signalled with the
``REMOVED`` sentinel rather than ``None``.
"""

import json
from dataclasses import dataclass
from pathlib import Path

from srdfilter.filtering.models import REMOVED, JSONValue, RemovedType
from srdfilter.filtering.patterns import BlockPatternSet, is_blocked

SOURCE_KEY = "source"

JSON_INDENT = 2


@dataclass(frozen=True, slots=True)
class FilteredDocument:
    """Result of filtering one document.

    Attributes:
        data: The rebuilt document.
        removed_entries: Number of objects dropped because of a blocked source.
    """

    data: JSONValue
    removed_entries: int

    @property
    def changed(self) -> bool:
        """Whether anything was removed."""
        return self.removed_entries > 0


class _Pruner:
    """Walks a JSON tree once, counting removed objects."""

    def __init__(self, patterns: BlockPatternSet) -> None:
        self._patterns = patterns
        self.removed = 0

    def node(self, node: JSONValue) -> JSONValue | RemovedType:
        if isinstance(node, list):
            return self.array(node)
        if isinstance(node, dict):
            return self.obj(node)
        return node

    def array(self, items: list[JSONValue]) -> list[JSONValue]:
        result: list[JSONValue] = []
        for item in items:
            filtered = self.node(item)
            if filtered is not REMOVED:
                result.append(filtered)
        return result

    def obj(self, obj: dict[str, JSONValue]) -> dict[str, JSONValue] | RemovedType:
        if is_blocked(obj.get(SOURCE_KEY), self._patterns):
            self.removed += 1
            return REMOVED
        return self.members(obj)

    def members(self, obj: dict[str, JSONValue]) -> dict[str, JSONValue]:
        result: dict[str, JSONValue] = {}
        for key, value in obj.items():
            if isinstance(value, (dict, list)):
                value = self.node(value)
                if value is REMOVED:
                    continue
            result[key] = value
        return result


def filter_node(node: JSONValue, patterns: BlockPatternSet) -> JSONValue | RemovedType:
    """Recursively filter a JSON node.

    - Arrays: every element is filtered and elements that resolve to
      ``REMOVED`` are dropped, keeping the order of the rest. Scalars,
      including ``None``, pass through.
    - Objects: a blocked ``source`` removes the whole object without
      descending. Otherwise container-valued properties are filtered and
      properties that resolve to ``REMOVED`` are omitted.
    - Scalars are returned unchanged.

    Args:
        node: Any parsed JSON value.
        patterns: Pattern set deciding which sources are blocked.

    Returns:
        The rebuilt node, or ``REMOVED`` if the node itself was filtered out.
    """
    return _Pruner(patterns).node(node)


def filter_document(document: JSONValue, patterns: BlockPatternSet) -> FilteredDocument:
    """Filter a whole document as loaded from one file.

    The root object is never removed, even if it carries a blocked
    ``source``: only its top-level values are filtered. Array values keep
    their surviving entries in order, object values that resolve to
    ``REMOVED`` are deleted, scalars are untouched. A root array is filtered
    like any nested array and a root scalar is returned as-is.

    Args:
        document: Parsed JSON document.
        patterns: Pattern set deciding which sources are blocked.

    Returns:
        FilteredDocument with the rebuilt data and the number of removed nodes.
    """
    pruner = _Pruner(patterns)

    if isinstance(document, dict):
        data: JSONValue = pruner.members(document)
    elif isinstance(document, list):
        data = pruner.array(document)
    else:
        data = document

    return FilteredDocument(data=data, removed_entries=pruner.removed)


def load_document(path: Path) -> JSONValue:
    """Read and parse a UTF-8 JSON file.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
        json.JSONDecodeError: If the content is not valid JSON.
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def dump_document(data: JSONValue, indent: int = JSON_INDENT) -> str:
    """Serialize a document as pretty-printed JSON with a trailing newline."""
    return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"


def write_document(data: JSONValue, path: Path, indent: int = JSON_INDENT) -> None:
    """Write a document to ``path`` as UTF-8, creating parent directories as needed.

    The document is fully encoded before the file is opened, so an
    encoding failure leaves no partial output behind.

    Raises:
        UnicodeEncodeError: If the data holds unpaired surrogates.
        OSError: If the file or its parent directory cannot be written.
    """
    payload = dump_document(data, indent=indent).encode("utf-8")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)
