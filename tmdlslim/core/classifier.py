from __future__ import annotations

from .models import Decision, DropSingle, EnterBlock, Keep, RuleSet, ScanState


def brace_delta(line: str) -> int:
    """Net ``{`` minus ``}`` on a single line; quoting is not considered."""
    return line.count("{") - line.count("}")


def strip_trailing(line: str) -> str:
    return line.rstrip(" \t")


class LineClassifier:
    """Applies a RuleSet to single lines, first matching rule wins."""

    def __init__(self, rule_set: RuleSet) -> None:
        self.rule_set = rule_set

    def classify(self, line: str) -> Decision:
        for rule in self.rule_set:
            if rule.matches(line):
                if rule.starts_block:
                    return EnterBlock(rule.name, brace_delta(line))
                return DropSingle(rule.name)
        return Keep(strip_trailing(line))


class BlockSkipper:
    """Block-skip state machine for one document.

    ``Normal`` and ``SkippingBlock`` are represented by
    ``ScanState.inside_skipped_block``. Depth may dip below zero on a stray
    closing brace; reaching ``<= 0`` ends the block and depth resets to 0.
    Unbalanced opening braces keep the rest of the document suppressed.
    """

    def __init__(self) -> None:
        self.state = ScanState()

    @property
    def skipping(self) -> bool:
        return self.state.inside_skipped_block

    def enter(self, initial_delta: int) -> None:
        # a starter whose braces balance on its own line is a single-line drop
        self.state.brace_depth = initial_delta
        if initial_delta > 0:
            self.state.inside_skipped_block = True
        else:
            self.state.brace_depth = 0

    def consume(self, line: str) -> None:
        """Swallow one line of the block body, leaving the block on balance."""
        self.state.brace_depth += brace_delta(line)
        if self.state.brace_depth <= 0:
            self.state.inside_skipped_block = False
            self.state.brace_depth = 0
