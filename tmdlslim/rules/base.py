\
from __future__ import annotations
import re
from typing import List

from ..core.models import Rule, RuleKind


def key_value(name: str, kind: RuleKind = RuleKind.SIMPLE) -> Rule:
    """``name = ...`` or ``name: ...``, whatever the value."""
    return Rule(name, kind, re.compile(rf"^\s*{re.escape(name)}\s*(=|:)"))


def boolean(name: str, kind: RuleKind = RuleKind.SIMPLE) -> Rule:
    """Bare flag, optionally ``= true``/``: false`` and a trailing ``;``.

    Anchored at end of line so ``isHiddenMember`` never matches ``isHidden``.
    """
    return Rule(
        name,
        kind,
        re.compile(rf"^\s*{re.escape(name)}(\s*(=|:)\s*(true|false))?\s*;?\s*$"),
    )


def bare_prefix(name: str, kind: RuleKind = RuleKind.SIMPLE, prefix: str = "") -> Rule:
    """Constructs with no value syntax, e.g. ``annotation Foo = ...``."""
    lead = rf"{re.escape(prefix)}\s+" if prefix else ""
    return Rule(name, kind, re.compile(rf"^\s*{lead}{re.escape(name)}\b"))


class RuleGroup:
    """
    Base class for rule groups. Subclasses set NAME, TOGGLE (the SlimOptions
    field that enables them), ORDER and RULES at the top. A group may also
    list directory names in EXCLUDED_SUBTREES; documents below those are
    skipped wholesale while the group is enabled.
    """
    NAME: str = "base"
    TOGGLE: str = ""
    ORDER: int = 100
    # Settings (override in subclasses)
    RULES: List[Rule] = []
    EXCLUDED_SUBTREES: List[str] = []

    def rules(self) -> List[Rule]:
        return list(self.RULES)

    def excluded_subtrees(self) -> List[str]:
        return list(self.EXCLUDED_SUBTREES)
