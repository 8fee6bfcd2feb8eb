\
from __future__ import annotations
from .base import RuleGroup, key_value


class LineageGroup(RuleGroup):
    NAME = "lineage"
    TOGGLE = "lineage"
    ORDER = 20
    RULES = [
        key_value("lineageTag"),
        key_value("sourceLineageTag"),
    ]
