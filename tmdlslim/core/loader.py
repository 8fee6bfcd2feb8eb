\
from __future__ import annotations
import importlib
import pkgutil
from typing import Dict, List, Optional, Type

from ..rules.base import RuleGroup
from .errors import RuleSetError
from .models import Rule, RuleSet, SlimOptions


def _discover_package_classes(pkg, base_cls) -> Dict[str, Type]:
    discovered: Dict[str, Type] = {}
    for m in pkgutil.iter_modules(pkg.__path__, pkg.__name__ + "."):
        module = importlib.import_module(m.name)
        for attr_name in dir(module):
            obj = getattr(module, attr_name)
            if isinstance(obj, type) and issubclass(obj, base_cls) and obj is not base_cls:
                name = getattr(obj, "NAME", obj.__name__).lower()
                discovered[name] = obj
    return discovered


def discover_rule_groups() -> Dict[str, RuleGroup]:
    from .. import rules as rules_pkg  # lazy import
    classes = _discover_package_classes(rules_pkg, RuleGroup)
    ordered = sorted(classes.items(), key=lambda item: (item[1].ORDER, item[0]))
    return {name: cls() for name, cls in ordered}


def select_rule_groups(all_groups: Dict[str, RuleGroup], options: SlimOptions) -> Dict[str, RuleGroup]:
    selected = {}
    for name, group in all_groups.items():
        if not hasattr(options, group.TOGGLE):
            raise RuleSetError(f"Rule group {name!r} refers to unknown toggle {group.TOGGLE!r}")
        if getattr(options, group.TOGGLE):
            selected[name] = group
    return selected


def build_rule_set(options: SlimOptions, groups: Optional[Dict[str, RuleGroup]] = None) -> RuleSet:
    """Build the ordered, immutable RuleSet for ``options``.

    Group precedence follows ``ORDER``; inside a group, rules keep their
    declared order. Rule names must be unique across the whole set.
    """
    if groups is None:
        groups = discover_rule_groups()
    rules: List[Rule] = []
    subtrees: List[str] = []
    seen = set()
    for group in select_rule_groups(groups, options).values():
        for rule in group.rules():
            if rule.name in seen:
                raise RuleSetError(f"Duplicate rule name: {rule.name}")
            seen.add(rule.name)
            rules.append(rule)
        for subtree in group.excluded_subtrees():
            if subtree not in subtrees:
                subtrees.append(subtree)
    return RuleSet(rules=tuple(rules), excluded_subtrees=tuple(subtrees))
