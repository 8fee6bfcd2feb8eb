\
from __future__ import annotations
from .base import RuleGroup, bare_prefix, key_value
from ..core.models import RuleKind


class LanguageDataGroup(RuleGroup):
    NAME = "language"
    TOGGLE = "language_data"
    ORDER = 30
    RULES = [
        key_value("linguisticMetadata", RuleKind.BLOCK_STARTER),
        bare_prefix("cultureInfo", prefix="ref"),
        key_value("sourceQueryCulture"),
    ]
    # translations live one file per culture under definition/cultures/
    EXCLUDED_SUBTREES = ["cultures"]
