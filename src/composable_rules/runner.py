"""Entry points for running a rule tree.

Both entry points are curried to three arguments, so these are equivalent:

    run(rule, facts, initial_value)
    run(rule)(facts, initial_value)
    run(rule, facts)(initial_value)

They never raise for failures inside the tree. The result is an
``(error, result)`` pair where exactly one side is ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from .config import trace_enabled
from .evaluator import evaluate
from .models import EvalState, RuleNode
from .util import curry_to_arity

logger = logging.getLogger(__name__)

RunResult = Tuple[Optional[Exception], Any]


def _detailed_run(rule: RuleNode, facts: Any, initial_value: Any) -> Tuple[Optional[Exception], Optional[EvalState]]:
    state = EvalState(matched=False, value=initial_value)
    try:
        result = evaluate(rule, facts, state, trace=trace_enabled())
    except Exception as exc:
        logger.debug("Rule evaluation failed: %s", exc, exc_info=True)
        return exc, None
    return None, result


def _run(rule: RuleNode, facts: Any, initial_value: Any) -> RunResult:
    err, result = _detailed_run(rule, facts, initial_value)
    if err is not None:
        return err, None
    return None, result.value


# Like run(), but returns the full EvalState (value and matched flag).
detailed_run = curry_to_arity(_detailed_run, 3)

run = curry_to_arity(_run, 3)
