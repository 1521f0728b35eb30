"""Tests for predicate combinators, including short-circuit behaviour."""

import pytest

from fncombinators import (
    all_pass,
    always_false,
    always_true,
    any_pass,
    both,
    complement,
    either,
    greater_than,
    less_than,
)


def is_even(value):
    return value % 2 == 0


def is_positive(value):
    return value > 0


class TestBothAndEither:
    """Test binary predicate composition."""

    @pytest.mark.parametrize("value", [-3, -2, 0, 1, 4])
    def test_both_matches_logical_and(self, value):
        """Test both(p, q)(a) == p(a) and q(a)."""
        assert both(is_even, is_positive)(value) == (is_even(value) and is_positive(value))

    @pytest.mark.parametrize("value", [-3, -2, 0, 1, 4])
    def test_either_matches_logical_or(self, value):
        """Test either(p, q)(a) == p(a) or q(a)."""
        assert either(is_even, is_positive)(value) == (is_even(value) or is_positive(value))

    def test_both_skips_second_when_first_fails(self, counting):
        """Test that q is not invoked when p fails."""
        second = counting(is_positive)

        assert both(is_even, second)(3) is False
        assert second.count == 0

        assert both(is_even, second)(4) is True
        assert second.count == 1

    def test_either_skips_second_when_first_holds(self, counting):
        """Test that q is not invoked when p holds."""
        second = counting(is_positive)

        assert either(is_even, second)(4) is True
        assert second.count == 0

        assert either(is_even, second)(3) is True
        assert second.count == 1

    def test_both_accepts_all_arguments_at_once(self):
        """Test the uncurried call form."""
        assert both(is_even, is_positive, 6) is True


class TestAllPassAndAnyPass:
    """Test sequence predicate composition."""

    def test_empty_all_pass_is_always_true(self):
        """Test vacuous truth for an empty predicate list."""
        check = all_pass([])
        assert all(check(value) for value in [0, "", None, object()])

    def test_empty_any_pass_is_always_false(self):
        """Test that an empty predicate list never holds."""
        check = any_pass([])
        assert not any(check(value) for value in [1, "x", True, object()])

    @pytest.mark.parametrize("value", [-4, -1, 2, 3, 12, 15])
    def test_all_pass_matches_and_fold(self, value):
        """Test all_pass against a left-to-right AND over the results."""
        predicates = [is_even, is_positive, less_than(10)]
        expected = is_even(value) and is_positive(value) and value < 10
        assert all_pass(predicates)(value) == expected

    @pytest.mark.parametrize("value", [-4, -1, 2, 3, 12, 15])
    def test_any_pass_matches_or_fold(self, value):
        """Test any_pass against a left-to-right OR over the results."""
        predicates = [is_even, greater_than(10)]
        expected = is_even(value) or value > 10
        assert any_pass(predicates)(value) == expected

    def test_all_pass_stops_at_first_failure(self, counting):
        """Test that predicates after a failing one are not called."""
        after = counting(always_true)
        check = all_pass([is_positive, is_even, after])

        assert check(3) is False
        assert after.count == 0

    def test_any_pass_stops_at_first_success(self, counting):
        """Test that predicates after a succeeding one are not called."""
        after = counting(always_false)
        check = any_pass([is_positive, is_even, after])

        assert check(3) is True
        assert after.count == 0

    def test_generators_are_reusable(self):
        """Test that a generator of predicates works on repeated calls."""
        check = all_pass(p for p in [is_even, is_positive])
        assert check(2) is True
        assert check(-2) is False
        assert check(2) is True


class TestComplement:
    """Test predicate negation."""

    @pytest.mark.parametrize("value", [-1, 0, 1, 2])
    def test_complement_negates(self, value):
        """Test that complement flips the result."""
        assert complement(is_even)(value) == (not is_even(value))

    @pytest.mark.parametrize("value", [-1, 0, 1, 2])
    def test_double_negation(self, value):
        """Test complement(complement(p)) == p."""
        assert complement(complement(is_even))(value) == is_even(value)


class TestConstantPredicates:
    """Test the constant predicates."""

    @pytest.mark.parametrize("value", [None, 0, "text", [1, 2]])
    def test_constants_ignore_input(self, value):
        """Test that constants return their fixed value for any input."""
        assert always_true(value) is True
        assert always_false(value) is False
