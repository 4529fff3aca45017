"""Unit tests for RetryableException rules and OR-combination."""

from __future__ import annotations

import pytest

from retrykit.config.validation import InvalidSettingValueError
from retrykit.resilience.matching import RetryableException, match_any


class ExceptionA(Exception):
    pass


class ExceptionB(ExceptionA):
    def __init__(self, code: int = 0) -> None:
        super().__init__(f"code={code}")
        self.code = code


class TestRetryableException:
    def test_matches_exact_type(self) -> None:
        assert RetryableException(ExceptionA).match(ExceptionA())

    def test_matches_subclass(self) -> None:
        assert RetryableException(ExceptionA).match(ExceptionB(1))

    def test_does_not_match_superclass(self) -> None:
        assert not RetryableException(ExceptionB).match(ExceptionA())

    def test_does_not_match_unrelated(self) -> None:
        assert not RetryableException(ExceptionA).match(ValueError())

    def test_condition_filters_fields(self) -> None:
        rule = RetryableException(ExceptionB, lambda e: e.code == 1001)
        assert rule.match(ExceptionB(1001))
        assert not rule.match(ExceptionB(666))

    def test_condition_not_called_for_wrong_type(self) -> None:
        calls: list[BaseException] = []

        def condition(exc: BaseException) -> bool:
            calls.append(exc)
            return True

        rule = RetryableException(ExceptionB, condition)
        assert not rule.match(ValueError())
        assert calls == []

    def test_rejects_non_exception_type(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RetryableException(int)  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        rule = RetryableException(ExceptionA)
        with pytest.raises(AttributeError):
            rule.exc_type = ValueError  # type: ignore[misc]


class TestMatchAny:
    def test_or_combination(self) -> None:
        rules = [RetryableException(KeyError), RetryableException(ExceptionA)]
        assert match_any(rules, KeyError("k"))
        assert match_any(rules, ExceptionB())
        assert not match_any(rules, ValueError())

    def test_condition_on_one_rule_does_not_restrict_others(self) -> None:
        rules = [
            RetryableException(ExceptionB, lambda e: e.code == 1),
            RetryableException(ExceptionA),
        ]
        assert match_any(rules, ExceptionB(2))

    def test_empty_rules_never_match(self) -> None:
        assert not match_any([], ExceptionA())
