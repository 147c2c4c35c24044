"""Composable rules: build rule trees from small matcher/action pairs and run them.

This package intentionally contains only evaluation logic:
- Rules are plain immutable data built with the functions in ``builders``.
- Facts and values are supplied by the caller and never mutated here.
- No I/O, persistence or rule loading lives here.
"""

from .builders import all_of, chain_of, first_of, rule, scope_facts, transform_output, when
from .evaluator import RuleNodeError, evaluate
from .matchers import always, any_of, every_of, negate
from .models import (
    AllOfRule,
    ChainOfRule,
    ConditionalRule,
    EvalState,
    FirstOfRule,
    PlainRule,
    RuleKind,
    RuleNode,
    ScopedFactsRule,
    TransformedRule,
)
from .runner import detailed_run, run

__all__ = [
    "always",
    "negate",
    "any_of",
    "every_of",
    "rule",
    "scope_facts",
    "transform_output",
    "when",
    "all_of",
    "first_of",
    "chain_of",
    "evaluate",
    "run",
    "detailed_run",
    "RuleNodeError",
    "EvalState",
    "RuleKind",
    "RuleNode",
    "PlainRule",
    "ScopedFactsRule",
    "TransformedRule",
    "ConditionalRule",
    "AllOfRule",
    "FirstOfRule",
    "ChainOfRule",
]
