\
from __future__ import annotations
from .base import RuleGroup, boolean


class InferredMetadataGroup(RuleGroup):
    NAME = "inferred"
    TOGGLE = "inferred_metadata"
    ORDER = 50
    RULES = [
        boolean("isNameInferred"),
        boolean("isDataTypeInferred"),
    ]
