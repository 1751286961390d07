"""Tests for combining Results."""

from __future__ import annotations

from fallible.result import Result, combine_all


class TestCombine:
    def test_all_just_gives_tuple_of_values(self) -> None:
        result = Result.just_allow_null(1).combine(Result.just_allow_null("a"))
        assert result == Result.just_allow_null((1, "a"))

    def test_none_values_are_kept(self) -> None:
        result = Result.just_allow_null(None).combine(Result.just_allow_null(2), Result.just_allow_null(None))
        assert result.value == (None, 2, None)

    def test_errors_collected_in_operand_order(self) -> None:
        """Every operand contributes its error field, self first, None for Just Results."""
        result = Result.just_allow_null(1).combine(Result.error("e1"), Result.just_allow_null(3))
        assert result.has_error is True
        assert result.error == (None, "e1", None)

    def test_error_receiver_comes_first(self) -> None:
        result = Result.error("self").combine(Result.just_allow_null(2))
        assert result.error == ("self", None)

    def test_multiple_errors_are_all_kept(self) -> None:
        result = Result.error("a").combine(Result.error("b"), Result.just_allow_null(1), Result.error("c"))
        assert result.error == ("a", "b", None, "c")

    def test_error_with_none_payload_still_fails(self) -> None:
        result = Result.just_allow_null(1).combine(Result.error(None))
        assert result.has_error is True
        assert result.error == (None, None)

    def test_five_operands(self) -> None:
        result = Result.just_allow_null(0).combine(
            Result.just_allow_null(1),
            Result.just_allow_null(2),
            Result.just_allow_null(3),
            Result.just_allow_null(4),
            Result.just_allow_null(5),
        )
        assert result.value == (0, 1, 2, 3, 4, 5)


class TestCombineAll:
    def test_sequence_of_results(self) -> None:
        results = [Result.just_allow_null(n) for n in range(4)]
        assert combine_all(results).value == (0, 1, 2, 3)

    def test_accepts_generators(self) -> None:
        result = combine_all(Result.if_(n % 2 == 0, n, f"odd {n}") for n in range(3))
        assert result.error == (None, "odd 1", None)

    def test_empty_is_just_empty_tuple(self) -> None:
        assert combine_all([]) == Result.just_allow_null(())

    def test_matches_method_form(self) -> None:
        first = Result.just_allow_null("x")
        second = Result.error("bad")
        assert combine_all([first, second]) == first.combine(second)
