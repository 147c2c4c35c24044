from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Tuple

import yaml
from pydantic import BaseModel, Field

from .evaluator import RuleNodeError
from .models import (
    AllOfRule,
    ChainOfRule,
    ConditionalRule,
    FirstOfRule,
    PlainRule,
    RuleKind,
    RuleNode,
    ScopedFactsRule,
    TransformedRule,
)


class RuleOutline(BaseModel):
    kind: RuleKind
    # Role ("matcher", "action", ...) -> qualified name of the function.
    callables: Dict[str, str] = Field(default_factory=dict)
    children: List["RuleOutline"] = Field(default_factory=list)


def _callable_name(fn: Callable[..., Any]) -> str:
    module = getattr(fn, "__module__", None) or ""
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or type(fn).__name__
    return f"{module}.{name}" if module else name


def outline(rule: RuleNode) -> RuleOutline:
    """Describe a rule tree as nested ``RuleOutline`` models.

    The tree is walked with an explicit stack, so any tree that evaluates can
    also be outlined.
    """
    root: List[RuleOutline] = []
    pending: List[Tuple[RuleNode, List[RuleOutline]]] = [(rule, root)]
    while pending:
        node, siblings = pending.pop()
        callables, children = _describe(node)
        described = RuleOutline(
            kind=node.kind,
            callables={role: _callable_name(fn) for role, fn in callables.items()},
        )
        siblings.append(described)
        # Reversed so children are appended in their evaluation order.
        pending.extend((child, described.children) for child in reversed(children))
    return root[0]


def _describe(rule: Any) -> Tuple[Dict[str, Callable[..., Any]], List[RuleNode]]:
    if isinstance(rule, PlainRule):
        return {"matcher": rule.matcher, "action": rule.action}, []
    if isinstance(rule, ScopedFactsRule):
        return {"mapper": rule.mapper}, [rule.rule]
    if isinstance(rule, TransformedRule):
        return {"transformer": rule.transformer}, [rule.rule]
    if isinstance(rule, ConditionalRule):
        return {"matcher": rule.matcher}, [rule.rule]
    if isinstance(rule, (AllOfRule, FirstOfRule, ChainOfRule)):
        return {}, list(rule.rules)
    raise RuleNodeError(rule)


def dump_json(rule: RuleNode) -> str:
    # Serialisation is nested, so very deep trees are limited by json's recursion depth.
    return json.dumps(outline(rule).model_dump(mode="json"), indent=2, sort_keys=True)


def dump_yaml(rule: RuleNode) -> str:
    return yaml.safe_dump(outline(rule).model_dump(mode="json"), sort_keys=True)
