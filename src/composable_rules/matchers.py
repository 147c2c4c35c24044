"""Combinators over matchers.

A matcher is a predicate ``(facts, value) -> bool``. Every combinator here
returns a new matcher, so they nest freely:

    is_admin_or_owner = any_of([is_admin, every_of([is_owner, negate(is_locked)])])
"""

from __future__ import annotations

from typing import Any, Iterable

from .models import Matcher


def always(*args: Any, **kwargs: Any) -> bool:
    return True


def negate(matcher: Matcher) -> Matcher:
    def _negated(facts: Any = None, value: Any = None) -> bool:
        return not matcher(facts, value)

    return _negated


def any_of(matchers: Iterable[Matcher]) -> Matcher:
    checks = tuple(matchers)

    def _any(facts: Any = None, value: Any = None) -> bool:
        return any(check(facts, value) for check in checks)

    return _any


def every_of(matchers: Iterable[Matcher]) -> Matcher:
    checks = tuple(matchers)

    def _every(facts: Any = None, value: Any = None) -> bool:
        return all(check(facts, value) for check in checks)

    return _every
