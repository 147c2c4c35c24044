"""Evaluation of rule trees.

Composite nodes are visited by generator handlers: a handler yields a
``_Visit`` for every child it wants evaluated and receives the child's
``EvalState`` back. ``evaluate`` drives the handlers from an explicit stack,
so the depth of a tree is bounded by memory rather than the interpreter's
recursion limit.

Exceptions raised by matchers, actions, mappers or transformers are not
caught here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generator, List, Optional, Type

from .models import (
    AllOfRule,
    ChainOfRule,
    ConditionalRule,
    EvalState,
    FirstOfRule,
    PlainRule,
    RuleNode,
    ScopedFactsRule,
    TransformedRule,
)

logger = logging.getLogger(__name__)


class RuleNodeError(TypeError):
    """Raised when something that is not a rule node shows up in a rule tree."""

    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"Unsupported rule node: {type(node).__name__}")


@dataclass(frozen=True)
class _Visit:
    node: Any
    facts: Any
    state: EvalState


_Handler = Generator[_Visit, EvalState, EvalState]


def _apply_plain(node: PlainRule, facts: Any, state: EvalState) -> EvalState:
    if node.matcher(facts, state.value):
        return EvalState(matched=True, value=node.action(facts, state.value))
    return EvalState(matched=False, value=state.value)


def _visit_scoped_facts(node: ScopedFactsRule, facts: Any, state: EvalState) -> _Handler:
    return (yield _Visit(node.rule, node.mapper(facts), state))


def _visit_transformed(node: TransformedRule, facts: Any, state: EvalState) -> _Handler:
    outcome = yield _Visit(node.rule, facts, state)
    if not outcome.matched:
        return outcome
    return EvalState(matched=True, value=node.transformer(outcome.value))


def _visit_conditional(node: ConditionalRule, facts: Any, state: EvalState) -> _Handler:
    if not node.matcher(facts, state.value):
        return EvalState(matched=False, value=state.value)
    return (yield _Visit(node.rule, facts, state))


def _visit_all_of(node: AllOfRule, facts: Any, state: EvalState) -> _Handler:
    current = state
    for child in node.rules:
        outcome = yield _Visit(child, facts, current)
        current = EvalState(matched=current.matched or outcome.matched, value=outcome.value)
    return current


def _visit_first_of(node: FirstOfRule, facts: Any, state: EvalState) -> _Handler:
    # Every alternative starts from the same incoming state.
    for child in node.rules:
        outcome = yield _Visit(child, facts, state)
        if outcome.matched:
            return outcome
    return state


def _visit_chain_of(node: ChainOfRule, facts: Any, state: EvalState) -> _Handler:
    current = state
    for child in node.rules:
        current = yield _Visit(child, facts, current)
        if not current.matched:
            break
    return current


_HANDLERS: Dict[Type[Any], Callable[[Any, Any, EvalState], _Handler]] = {
    ScopedFactsRule: _visit_scoped_facts,
    TransformedRule: _visit_transformed,
    ConditionalRule: _visit_conditional,
    AllOfRule: _visit_all_of,
    FirstOfRule: _visit_first_of,
    ChainOfRule: _visit_chain_of,
}


def _handler_for(node: Any) -> Callable[[Any, Any, EvalState], _Handler]:
    for cls in type(node).__mro__:
        handler = _HANDLERS.get(cls)
        if handler is not None:
            return handler
    raise RuleNodeError(node)


def evaluate(node: RuleNode, facts: Any, state: EvalState, *, trace: bool = False) -> EvalState:
    """Evaluate ``node`` against ``facts`` starting from ``state``.

    With ``trace`` enabled every visited node and its outcome is logged at
    DEBUG level.
    """
    stack: List[_Handler] = []
    pending: Optional[_Visit] = _Visit(node, facts, state)
    result: Optional[EvalState] = None

    while True:
        if pending is not None:
            visit, pending = pending, None
            if isinstance(visit.node, PlainRule):
                result = _apply_plain(visit.node, visit.facts, visit.state)
                if trace:
                    logger.debug("depth=%d plain matched=%s", len(stack), result.matched)
            else:
                handler = _handler_for(visit.node)
                if trace:
                    logger.debug("depth=%d enter %s", len(stack), visit.node.kind.value)
                stack.append(handler(visit.node, visit.facts, visit.state))
                result = None

        if not stack:
            return result  # type: ignore[return-value]

        try:
            pending = stack[-1].send(result)
        except StopIteration as done:
            stack.pop()
            result = done.value
            if trace:
                logger.debug("depth=%d exit matched=%s", len(stack), result.matched)
