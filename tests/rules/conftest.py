import pytest

from composable_rules import rule


@pytest.fixture
def make_rule():
    """Plain rule that appends ``item`` to a list or string value when ``passes``."""

    def _make(passes: bool, item):
        return rule(lambda facts, value: passes, lambda facts, value: value + item)

    return _make


@pytest.fixture
def make_spy_rule():
    """Plain rule that records every action call in ``calls``."""

    def _make(passes: bool, item, calls: list):
        def _action(facts, value):
            calls.append(item)
            return value + item

        return rule(lambda facts, value: passes, _action)

    return _make


@pytest.fixture
def number_facts():
    return {"number": 2}


@pytest.fixture
def match_and_miss():
    is_two = lambda facts, value: facts["number"] == 2
    matching = rule(is_two, lambda facts, value: f"{value} Match!")
    missing = rule(lambda facts, value: not is_two(facts, value), lambda facts, value: f"{value} Miss!")
    return matching, missing
