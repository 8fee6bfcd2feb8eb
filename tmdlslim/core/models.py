from __future__ import annotations
import re
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, List, Tuple, Union


@dataclass(frozen=True)
class SlimOptions:
    """Which metadata groups get stripped. Every toggle is on by default."""
    annotations: bool = True
    lineage: bool = True
    language_data: bool = True
    column_metadata: bool = True
    inferred_metadata: bool = True
    display_properties: bool = True

    @classmethod
    def toggle_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]


class RuleKind(str, Enum):
    SIMPLE = "simple"
    BLOCK_STARTER = "block_starter"


@dataclass(frozen=True)
class Rule:
    name: str
    kind: RuleKind
    matcher: re.Pattern

    @property
    def starts_block(self) -> bool:
        return self.kind is RuleKind.BLOCK_STARTER

    def matches(self, line: str) -> bool:
        return self.matcher.search(line) is not None


@dataclass(frozen=True)
class RuleSet:
    """Ordered rules; precedence is insertion order (first match wins)."""
    rules: Tuple[Rule, ...] = ()
    excluded_subtrees: Tuple[str, ...] = ()

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def names(self) -> List[str]:
        return [r.name for r in self.rules]


@dataclass
class Document:
    relative_path: str
    lines: List[str]
    size: int = 0  # bytes on disk


@dataclass
class ScanState:
    inside_skipped_block: bool = False
    brace_depth: int = 0


@dataclass(frozen=True)
class Keep:
    line: str


@dataclass(frozen=True)
class DropSingle:
    rule_name: str


@dataclass(frozen=True)
class EnterBlock:
    rule_name: str
    initial_delta: int


Decision = Union[Keep, DropSingle, EnterBlock]


@dataclass
class FilterResult:
    relative_path: str
    lines: List[str] = field(default_factory=list)
    removed: Dict[str, int] = field(default_factory=dict)  # per-rule drops in this document
    skipped_block_lines: int = 0

    @property
    def removed_total(self) -> int:
        return sum(self.removed.values())


@dataclass
class CollectionResult:
    lines: List[str] = field(default_factory=list)
    documents_found: int = 0
    documents_processed: int = 0
    input_bytes: int = 0
