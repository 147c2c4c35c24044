"""Constructors for rule nodes.

Builders only wrap their inputs; nothing is validated until the tree is
evaluated. Child sequences are frozen into tuples so a node never changes
after it has been built.
"""

from __future__ import annotations

from typing import Iterable

from .models import (
    Action,
    AllOfRule,
    ChainOfRule,
    ConditionalRule,
    FirstOfRule,
    Mapper,
    Matcher,
    PlainRule,
    RuleNode,
    ScopedFactsRule,
    TransformedRule,
    Transformer,
)


def rule(matcher: Matcher, action: Action) -> PlainRule:
    return PlainRule(matcher=matcher, action=action)


def scope_facts(mapper: Mapper, child: RuleNode) -> ScopedFactsRule:
    """Run ``child`` against ``mapper(facts)`` instead of the caller's facts.

    The mapper should return a copy; the replacement is only visible inside
    ``child``:

        scope_facts(lambda facts: {**facts, "region": "eu"}, pricing_rule)
    """
    return ScopedFactsRule(mapper=mapper, rule=child)


def transform_output(fn: Transformer, child: RuleNode) -> TransformedRule:
    """Apply ``fn`` to the value produced by ``child``, but only if it matched."""
    return TransformedRule(transformer=fn, rule=child)


def when(matcher: Matcher, child: RuleNode) -> ConditionalRule:
    """Only evaluate ``child`` when ``matcher`` passes for the current facts and value."""
    return ConditionalRule(matcher=matcher, rule=child)


def all_of(rules: Iterable[RuleNode]) -> AllOfRule:
    """Run every rule in order; each one sees the value left by the previous."""
    return AllOfRule(rules=tuple(rules))


def first_of(rules: Iterable[RuleNode]) -> FirstOfRule:
    """Run rules in order until the first one matches."""
    return FirstOfRule(rules=tuple(rules))


def chain_of(rules: Iterable[RuleNode]) -> ChainOfRule:
    """Run rules in order for as long as each one matches."""
    return ChainOfRule(rules=tuple(rules))
