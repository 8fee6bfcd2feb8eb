\
from __future__ import annotations
from .base import RuleGroup, bare_prefix, key_value
from ..core.models import RuleKind


class AnnotationsGroup(RuleGroup):
    NAME = "annotations"
    TOGGLE = "annotations"
    ORDER = 10
    RULES = [
        bare_prefix("annotation"),
        key_value("extendedProperties", RuleKind.BLOCK_STARTER),
        bare_prefix("extendedProperty", RuleKind.BLOCK_STARTER),
        bare_prefix("changedProperty"),
    ]
