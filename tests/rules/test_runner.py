import logging

from composable_rules import EvalState, all_of, always, detailed_run, first_of, negate, rule, run, when


def test_run_returns_accumulated_value(make_rule):
    err, result = run(all_of([make_rule(True, [1]), make_rule(True, [2])]), None, [])
    assert err is None
    assert result == [1, 2]


def test_run_returns_initial_value_when_nothing_matches(make_rule):
    initial = ["seed"]
    err, result = run(first_of([make_rule(False, [1])]), None, initial)
    assert err is None
    assert result is initial


def test_run_curried_forms_are_equivalent(match_and_miss, number_facts):
    matching, _ = match_and_miss
    node = all_of([matching, matching])
    expected = (None, "Initial. Match! Match!")
    assert run(node, number_facts, "Initial.") == expected
    assert run(node)(number_facts, "Initial.") == expected
    assert run(node, number_facts)("Initial.") == expected
    assert run(node)(number_facts)("Initial.") == expected


def test_run_returns_error_without_value():
    boom = ValueError("BOOM!")

    def explode(facts, value):
        raise boom

    err, result = run(rule(always, explode))(None, "i am ")
    assert err is boom
    assert result is None


def test_detailed_run_reports_no_match(make_rule):
    initial = {}
    err, state = detailed_run(when(always, make_rule(False, "running")))(None, initial)
    assert err is None
    assert state == EvalState(matched=False, value=initial)


def test_detailed_run_reports_match(make_rule):
    err, state = detailed_run(when(always, make_rule(True, "running")))(None, "i am ")
    assert err is None
    assert state.value == "i am running"
    assert state.matched is True


def test_detailed_run_returns_thrown_error():
    boom = RuntimeError("BOOM!")

    def explode(facts, value):
        raise boom

    err, state = detailed_run(rule(always, explode))(None, "i am ")
    assert err is boom
    assert state is None


def test_detailed_run_success_shape():
    err, state = detailed_run(rule(always, lambda facts, value: "stuff"))(None, "i am ")
    assert err is None
    assert state == EvalState(matched=True, value="stuff")


def test_matcher_failures_are_caught():
    def broken_matcher(facts, value):
        return facts["missing"]

    err, result = run(all_of([rule(broken_matcher, lambda f, v: v)]), {}, 1)
    assert isinstance(err, KeyError)
    assert result is None


def test_malformed_node_is_reported_as_error():
    err, result = run("not a rule", None, 1)
    assert isinstance(err, TypeError)
    assert result is None


def test_missing_facts_are_tolerated():
    is_missing = lambda facts, value: facts is None
    err, result = run(rule(negate(negate(is_missing)), lambda facts, value: "no facts"))()()
    assert err is None
    assert result == "no facts"


def test_failures_are_logged_at_debug(caplog):
    def explode(facts, value):
        raise RuntimeError("BOOM!")

    with caplog.at_level(logging.DEBUG, logger="composable_rules.runner"):
        run(rule(always, explode), None, None)

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.DEBUG
    assert "BOOM!" in record.getMessage()
    assert record.exc_info is not None


def test_trace_setting_enables_evaluator_logging(monkeypatch, make_rule, caplog):
    monkeypatch.setenv("COMPOSABLE_RULES_TRACE", "1")
    with caplog.at_level(logging.DEBUG, logger="composable_rules.evaluator"):
        run(make_rule(True, [1]), None, [])
    assert [r.getMessage() for r in caplog.records] == ["depth=0 plain matched=True"]


def test_run_ignores_invalid_log_level(monkeypatch):
    monkeypatch.setenv("COMPOSABLE_RULES_LOG_LEVEL", "chatty")
    assert run(rule(always, lambda facts, value: value + 1), None, 1) == (None, 2)
    err, state = detailed_run(rule(always, lambda facts, value: value + 1), None, 1)
    assert err is None
    assert state == EvalState(matched=True, value=2)


def test_invalid_trace_flag_is_returned_as_error(monkeypatch):
    monkeypatch.setenv("COMPOSABLE_RULES_TRACE", "sometimes")
    err, result = run(rule(always, lambda facts, value: value + 1), None, 1)
    assert isinstance(err, ValueError)
    assert "COMPOSABLE_RULES_TRACE" in str(err)
    assert result is None


def test_extra_arguments_are_ignored():
    node = rule(always, lambda facts, value: value + 1)
    assert run(node, None, 1, "extra") == (None, 2)
    assert run(node)(None, 1, "extra") == (None, 2)
    err, state = detailed_run(node, None, 1, "extra")
    assert err is None
    assert state == EvalState(matched=True, value=2)
