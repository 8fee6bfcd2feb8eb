\
from __future__ import annotations
from .base import RuleGroup, boolean, key_value


class DisplayPropertiesGroup(RuleGroup):
    NAME = "display"
    TOGGLE = "display_properties"
    ORDER = 60
    RULES = [
        boolean("isHidden"),
        key_value("displayFolder"),
        boolean("showAsVariationsOnly"),
    ]
