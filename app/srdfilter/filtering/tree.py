"""Tree filter: mirrors an input directory into a cleaned output directory.

Blocked files and directories are skipped, JSON files are filtered and
re-serialized, everything else is copied byte for byte.
"""

import json
import logging
import shutil
from dataclasses import replace
from pathlib import Path

from srdfilter.filtering.document import (
    JSON_INDENT,
    filter_document,
    load_document,
    write_document,
)
from srdfilter.filtering.models import EntryAction, EntryResult, FilterReport
from srdfilter.filtering.patterns import BlockPatternSet

logger = logging.getLogger(__name__)

JSON_SUFFIX = ".json"


class TreeFilterError(Exception):
    """Base exception for tree filter errors."""


class InputDirectoryError(TreeFilterError):
    """Raised when the input root is missing or not a directory."""


class OutputDirectoryError(TreeFilterError):
    """Raised when the output root cannot hold the mirrored tree."""


class TreeFilter:
    """Writes a filtered mirror of a directory tree.

    Args:
        patterns: Block pattern set. Defaults to the built-in categories.
        indent: Indentation of the re-serialized JSON files.
    """

    def __init__(
        self,
        patterns: BlockPatternSet | None = None,
        *,
        indent: int = JSON_INDENT,
    ) -> None:
        self._patterns = patterns if patterns is not None else BlockPatternSet()
        self._indent = indent

    def run(self, input_dir: Path, output_dir: Path) -> FilterReport:
        """Filter ``input_dir`` into ``output_dir``.

        Args:
            input_dir: Root of the tree to read.
            output_dir: Root of the tree to write, created if absent.

        Returns:
            FilterReport listing what happened to every visited entry.

        Raises:
            InputDirectoryError: If ``input_dir`` is not an existing directory.
            OutputDirectoryError: If ``output_dir`` is an existing non-directory,
                or equals or lies inside ``input_dir``.
            OSError: If a directory cannot be created or a file cannot be copied.
        """
        self._validate_roots(input_dir, output_dir)

        report = FilterReport(input_dir=input_dir, output_dir=output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Filtering %s into %s", input_dir, output_dir)
        self._walk(input_dir, output_dir, input_dir, report)
        logger.info(
            "Done: %d filtered, %d copied, %d fallback, %d skipped, %d entries removed",
            report.filtered_count,
            report.copied_count,
            report.fallback_count,
            report.skipped_count,
            report.removed_entries,
        )
        return report

    def is_blocked_name(self, name: str) -> bool:
        """Check if a file or directory name matches a block pattern."""
        return self._patterns.matches(name)

    def process_file(self, in_file: Path, out_file: Path) -> EntryResult:
        """Filter a single JSON file, falling back to a verbatim copy.

        The output is always written, even when nothing was removed.

        Args:
            in_file: JSON file to read.
            out_file: Destination path.

        Returns:
            EntryResult with action FILTERED, or FALLBACK if the file could
            not be loaded, filtered or encoded.
        """
        try:
            document = load_document(in_file)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            logger.warning("Cannot load %s as JSON, copying verbatim: %s", in_file, e)
            return self._fallback_copy(in_file, out_file)

        try:
            filtered = filter_document(document, self._patterns)
            write_document(filtered.data, out_file, indent=self._indent)
        except RecursionError as e:
            logger.warning("%s is nested too deeply to filter, copying verbatim: %s", in_file, e)
            return self._fallback_copy(in_file, out_file)
        except UnicodeEncodeError as e:
            logger.warning("Cannot encode %s as UTF-8, copying verbatim: %s", in_file, e)
            return self._fallback_copy(in_file, out_file)

        if filtered.changed:
            logger.debug("Removed %d entries from %s", filtered.removed_entries, in_file)

        return EntryResult(
            path=in_file.name,
            action=EntryAction.FILTERED,
            removed_entries=filtered.removed_entries,
        )

    def _walk(self, in_dir: Path, out_dir: Path, root: Path, report: FilterReport) -> None:
        """Recursively mirror one directory level."""
        for entry in sorted(in_dir.iterdir()):
            rel = entry.relative_to(root).as_posix()
            target = out_dir / entry.name

            if entry.is_symlink():
                logger.debug("Not following symlink: %s", entry)
                continue

            if entry.is_dir():
                if self.is_blocked_name(entry.name):
                    logger.debug("Skipping blocked directory: %s", rel)
                    report.add(EntryResult(path=rel, action=EntryAction.SKIPPED, is_dir=True))
                    continue
                target.mkdir(parents=True, exist_ok=True)
                self._walk(entry, target, root, report)
                continue

            if not entry.is_file():
                logger.debug("Skipping special file: %s", entry)
                continue

            if self.is_blocked_name(entry.name):
                logger.debug("Skipping blocked file: %s", rel)
                report.add(EntryResult(path=rel, action=EntryAction.SKIPPED))
                continue

            if entry.suffix.lower() == JSON_SUFFIX:
                result = self.process_file(entry, target)
                report.add(replace(result, path=rel))
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(entry, target)
                report.add(EntryResult(path=rel, action=EntryAction.COPIED))

    def _fallback_copy(self, in_file: Path, out_file: Path) -> EntryResult:
        out_file.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(in_file, out_file)
        return EntryResult(path=in_file.name, action=EntryAction.FALLBACK)

    def _validate_roots(self, input_dir: Path, output_dir: Path) -> None:
        if not input_dir.is_dir():
            msg = f"Input directory not found: {input_dir}"
            raise InputDirectoryError(msg)

        if output_dir.exists() and not output_dir.is_dir():
            msg = f"Output path is not a directory: {output_dir}"
            raise OutputDirectoryError(msg)

        resolved_in = input_dir.resolve()
        resolved_out = output_dir.resolve()
        if resolved_out == resolved_in or resolved_in in resolved_out.parents:
            msg = f"Output directory must not be inside the input directory: {output_dir}"
            raise OutputDirectoryError(msg)
