from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Generic, Tuple, TypeVar, Union

Facts = TypeVar("Facts")
Value = TypeVar("Value")

Matcher = Callable[..., bool]
Action = Callable[..., Any]
Mapper = Callable[[Any], Any]
Transformer = Callable[[Any], Any]


class RuleKind(str, Enum):
    PLAIN = "plain"
    SCOPED_FACTS = "scoped_facts"
    TRANSFORMED = "transformed"
    CONDITIONAL = "conditional"
    ALL_OF = "all_of"
    FIRST_OF = "first_of"
    CHAIN_OF = "chain_of"


@dataclass(frozen=True)
class EvalState(Generic[Value]):
    matched: bool
    value: Value


@dataclass(frozen=True)
class PlainRule:
    kind: ClassVar[RuleKind] = RuleKind.PLAIN

    matcher: Matcher
    action: Action


@dataclass(frozen=True)
class ScopedFactsRule:
    kind: ClassVar[RuleKind] = RuleKind.SCOPED_FACTS

    mapper: Mapper
    rule: "RuleNode"


@dataclass(frozen=True)
class TransformedRule:
    kind: ClassVar[RuleKind] = RuleKind.TRANSFORMED

    transformer: Transformer
    rule: "RuleNode"


@dataclass(frozen=True)
class ConditionalRule:
    kind: ClassVar[RuleKind] = RuleKind.CONDITIONAL

    matcher: Matcher
    rule: "RuleNode"


@dataclass(frozen=True)
class AllOfRule:
    kind: ClassVar[RuleKind] = RuleKind.ALL_OF

    rules: Tuple["RuleNode", ...] = ()


@dataclass(frozen=True)
class FirstOfRule:
    kind: ClassVar[RuleKind] = RuleKind.FIRST_OF

    rules: Tuple["RuleNode", ...] = ()


@dataclass(frozen=True)
class ChainOfRule:
    kind: ClassVar[RuleKind] = RuleKind.CHAIN_OF

    rules: Tuple["RuleNode", ...] = ()


RuleNode = Union[
    PlainRule,
    ScopedFactsRule,
    TransformedRule,
    ConditionalRule,
    AllOfRule,
    FirstOfRule,
    ChainOfRule,
]
