from __future__ import annotations

import logging
from typing import Dict, Optional

from .classifier import BlockSkipper, LineClassifier
from .models import Document, EnterBlock, FilterResult, Keep, RuleSet


DEFAULT_LOGGER_NAME = "tmdlslim"


class FileFilter:
    """Runs the line classifier and block skipper over one document at a time."""

    def __init__(self, rule_set: RuleSet, *, logger: Optional[logging.Logger] = None) -> None:
        self.rule_set = rule_set
        self.classifier = LineClassifier(rule_set)
        base_logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.logger = base_logger.getChild(self.__class__.__name__.lower())

    def filter(self, document: Document, stats: Dict[str, int]) -> FilterResult:
        """Filter ``document``, incrementing ``stats`` once per dropped line or block.

        Lines inside a skipped block are neither emitted nor counted in
        ``stats``; they are tallied in ``FilterResult.skipped_block_lines``.
        """
        result = FilterResult(relative_path=document.relative_path)
        skipper = BlockSkipper()

        for line in document.lines:
            if skipper.skipping:
                skipper.consume(line)
                result.skipped_block_lines += 1
                continue

            decision = self.classifier.classify(line)
            if isinstance(decision, Keep):
                result.lines.append(decision.line)
                continue

            name = decision.rule_name
            stats[name] = stats.get(name, 0) + 1
            result.removed[name] = result.removed.get(name, 0) + 1
            if isinstance(decision, EnterBlock):
                skipper.enter(decision.initial_delta)

        if skipper.skipping:
            self.logger.debug(
                "%s ended inside a skipped block (depth=%d)",
                document.relative_path,
                skipper.state.brace_depth,
            )
        return result
