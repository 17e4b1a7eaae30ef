import pytest
from pydantic import ValidationError

from advisor.logic.exceptions import UnsupportedRulesError
from advisor.logic.settings import (
    DEFAULT_MAX_SUGGESTIONS,
    RuleSet,
    numeral_eye_indices,
    validate_rule_set,
)
from advisor.logic.tiles import CHUN_34


class TestRuleSetDefaults:
    def test_hubei_eyes(self):
        assert RuleSet().eye_tiles_34 == frozenset({1, 4, 7, 10, 13, 16, 19, 22, 25})

    def test_chun_must_be_declared(self):
        assert RuleSet().must_declare_34 == CHUN_34

    def test_default_limit(self):
        assert RuleSet().max_suggestions == DEFAULT_MAX_SUGGESTIONS == 5

    def test_describe(self):
        assert RuleSet().describe() == "eyes=2m,5m,8m,2p,5p,8p,2s,5s,8s declare=chun top=5"

    def test_describe_without_declare_rule(self):
        rules = RuleSet(eye_tiles_34=frozenset({27}), must_declare_34=None, max_suggestions=3)
        assert rules.describe() == "eyes=east declare=none top=3"

    def test_rule_set_is_frozen(self):
        rules = RuleSet()
        with pytest.raises(ValidationError):
            rules.max_suggestions = 10


class TestNumeralEyeIndices:
    def test_single_value_across_suits(self):
        assert numeral_eye_indices((1,)) == frozenset({0, 9, 18})

    def test_default_values(self):
        assert numeral_eye_indices() == RuleSet().eye_tiles_34


class TestValidateRuleSet:
    def test_defaults_are_valid(self):
        validate_rule_set(RuleSet())

    def test_empty_eye_set(self):
        with pytest.raises(UnsupportedRulesError, match="eye_tiles_34 must not be empty"):
            validate_rule_set(RuleSet(eye_tiles_34=frozenset()))

    def test_eye_index_out_of_range(self):
        with pytest.raises(UnsupportedRulesError, match=r"outside \[0, 33\]: \[34\]"):
            validate_rule_set(RuleSet(eye_tiles_34=frozenset({4, 34})))

    def test_unrestricted_eye_set(self):
        with pytest.raises(UnsupportedRulesError, match="must not cover every numeral tile"):
            validate_rule_set(RuleSet(eye_tiles_34=frozenset(range(27))))

    def test_honor_eyes_are_allowed(self):
        validate_rule_set(RuleSet(eye_tiles_34=frozenset({27, 28})))

    def test_must_declare_out_of_range(self):
        with pytest.raises(UnsupportedRulesError, match="must_declare_34=40"):
            validate_rule_set(RuleSet(must_declare_34=40))

    def test_no_declare_rule_is_valid(self):
        validate_rule_set(RuleSet(must_declare_34=None))

    def test_max_suggestions_below_one(self):
        with pytest.raises(UnsupportedRulesError, match="max_suggestions=0 must be at least 1"):
            validate_rule_set(RuleSet(max_suggestions=0))

    def test_reports_every_problem(self):
        rules = RuleSet(eye_tiles_34=frozenset(), must_declare_34=-1, max_suggestions=0)
        with pytest.raises(UnsupportedRulesError) as exc_info:
            validate_rule_set(rules)

        message = str(exc_info.value)
        assert message.count("; ") == 2
        assert "eye_tiles_34 must not be empty" in message
        assert "must_declare_34=-1" in message
        assert "max_suggestions=0" in message
