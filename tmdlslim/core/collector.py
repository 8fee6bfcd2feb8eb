from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional

from tqdm import tqdm

from .errors import DocumentReadError, NoInputError
from .filter import DEFAULT_LOGGER_NAME, FileFilter
from .models import CollectionResult, Document, RuleSet
from .utils import read_document_text, split_lines


DOCUMENT_SUFFIX = ".tmdl"
SLOW_DOCUMENT_THRESHOLD_SECONDS = 1.0


def configure_logging(verbose: bool = False, logger_name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Configure and return the package logger.

    Ensures a handler exists even when ``logging.basicConfig`` was never
    called. ``verbose`` lowers the level from WARNING to INFO.
    """

    logger = logging.getLogger(logger_name)
    level = logging.INFO if verbose else logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
        )
        logger.addHandler(handler)

    return logger


def subtree_stats_key(subtree: str) -> str:
    return f"{subtree}-folder"


def load_document(path: Path, relative_path: str) -> Document:
    text, size = read_document_text(path)
    return Document(relative_path=relative_path, lines=split_lines(text), size=size)


class DocumentCollector:
    """Walks ``root`` for ``*.tmdl`` documents and feeds them to a FileFilter.

    Documents are visited in lexicographic order of their relative POSIX path.
    A document whose directory chain contains one of the rule set's excluded
    subtrees is skipped and counted under ``<subtree>-folder``.
    """

    def __init__(
        self,
        root: Path,
        rule_set: RuleSet,
        *,
        logger: Optional[logging.Logger] = None,
        verbose: bool = False,
        show_progress: bool = True,
        progress_desc: str = "Slimming documents",
        skip_paths: Iterable[Path] = (),
    ) -> None:
        self.root = root
        self.skip_paths = {Path(p).resolve() for p in skip_paths}
        self.rule_set = rule_set
        base_logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.logger = base_logger.getChild(self.__class__.__name__.lower())
        self.verbose = verbose
        if verbose:
            self.logger.setLevel(logging.INFO)
        self.file_filter = FileFilter(rule_set, logger=base_logger)
        self.show_progress = bool(show_progress)
        self.progress_desc = progress_desc
        self._slow_log_threshold = SLOW_DOCUMENT_THRESHOLD_SECONDS

    def _relative(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def _iter_documents(self) -> Iterator[Path]:
        def _raise(exc: OSError) -> None:
            raise DocumentReadError(Path(exc.filename or self.root), exc.strerror or str(exc)) from exc

        found = []
        for dirpath, _dirnames, filenames in os.walk(self.root, onerror=_raise):
            for filename in filenames:
                path = Path(dirpath) / filename
                if path.suffix.lower() != DOCUMENT_SUFFIX or not path.is_file():
                    continue
                if path.resolve() in self.skip_paths:
                    self.logger.info("Skipping %s (output of this run)", self._relative(path))
                    continue
                found.append(path)
        yield from sorted(found, key=self._relative)

    def excluded_subtree(self, relative_path: str) -> Optional[str]:
        folders = [part.lower() for part in relative_path.split("/")[:-1]]
        for subtree in self.rule_set.excluded_subtrees:
            if subtree.lower() in folders:
                return subtree
        return None

    def collect(self, stats: Dict[str, int]) -> CollectionResult:
        if not self.root.is_dir():
            raise NoInputError(self.root)
        files = list(self._iter_documents())
        if not files:
            raise NoInputError(self.root)

        result = CollectionResult(documents_found=len(files))
        self.logger.info("Discovered %d document(s) under %s", len(files), self.root)

        progress_bar = None
        if self.show_progress:
            progress_bar = tqdm(total=len(files), desc=self.progress_desc, unit="file")
        try:
            for path in files:
                relative_path = self._relative(path)
                if progress_bar is not None:
                    progress_bar.set_postfix_str(self._label(relative_path), refresh=False)
                self._collect_one(path, relative_path, stats, result)
                if progress_bar is not None:
                    progress_bar.update(1)
        finally:
            if progress_bar is not None:
                progress_bar.close()
        return result

    def _collect_one(self, path: Path, relative_path: str, stats: Dict[str, int], result: CollectionResult) -> None:
        subtree = self.excluded_subtree(relative_path)
        if subtree is not None:
            try:
                result.input_bytes += path.stat().st_size
            except OSError as exc:
                raise DocumentReadError(path, exc.strerror or str(exc)) from exc
            key = subtree_stats_key(subtree)
            stats[key] = stats.get(key, 0) + 1
            self.logger.info("Skipping %s (%s subtree)", relative_path, subtree)
            return

        start_time = time.perf_counter()
        document = load_document(path, relative_path)
        filtered = self.file_filter.filter(document, stats)
        result.lines.extend(filtered.lines)
        result.documents_processed += 1
        result.input_bytes += document.size
        duration = time.perf_counter() - start_time

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                "Processed %s (%d lines, kept=%d, removed=%d, block body=%d)",
                relative_path,
                len(document.lines),
                len(filtered.lines),
                filtered.removed_total,
                filtered.skipped_block_lines,
            )
            if duration >= self._slow_log_threshold:
                self.logger.debug("Slow document %s took %.2fs", relative_path, duration)
        elif self.verbose:
            self.logger.info("Processed %s", relative_path)

    @staticmethod
    def _label(relative_path: str) -> str:
        if len(relative_path) > 60:
            return f"...{relative_path[-57:]}"
        return relative_path


class SingleFileCollector:
    """Filters one document; subtree exclusion does not apply."""

    def __init__(
        self,
        file_path: Path,
        rule_set: RuleSet,
        *,
        logger: Optional[logging.Logger] = None,
        verbose: bool = False,
    ) -> None:
        self.file_path = file_path
        self.rule_set = rule_set
        base_logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.logger = base_logger.getChild(self.__class__.__name__.lower())
        self.verbose = verbose
        if verbose:
            self.logger.setLevel(logging.INFO)
        self.file_filter = FileFilter(rule_set, logger=base_logger)

    def collect(self, stats: Dict[str, int]) -> CollectionResult:
        if not self.file_path.is_file():
            raise NoInputError(self.file_path)
        document = load_document(self.file_path, self.file_path.name)
        filtered = self.file_filter.filter(document, stats)
        self.logger.info(
            "Processed %s (kept=%d, removed=%d)",
            self.file_path,
            len(filtered.lines),
            filtered.removed_total,
        )
        return CollectionResult(
            lines=list(filtered.lines),
            documents_found=1,
            documents_processed=1,
            input_bytes=document.size,
        )
