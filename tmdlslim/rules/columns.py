\
from __future__ import annotations
from .base import RuleGroup, boolean, key_value


class ColumnMetadataGroup(RuleGroup):
    NAME = "columns"
    TOGGLE = "column_metadata"
    ORDER = 40
    # isKey / isUnique / isNullable are deliberately absent.
    RULES = [
        key_value("summarizeBy"),
        key_value("sourceColumn"),
        key_value("sourceProviderType"),
        key_value("formatString"),
        key_value("encodingHint"),
        boolean("isAvailableInMdx"),
        boolean("isDefaultLabel"),
        boolean("isDefaultImage"),
    ]
