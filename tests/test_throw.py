"""
Tests for throw statistics.
"""
import random

import pytest

from dicecup import InvalidArgumentError, NoRollsError, Throw


class TestThrowStatistics:
    """Totals, extremes and top/bottom selections."""

    def test_statistics_match_rolls(self):
        rng = random.Random(42)
        for n in range(1, 30):
            rolls = [rng.randint(1, 12) for _ in range(n)]
            throw = Throw(rolls)
            assert throw.total == sum(rolls)
            assert throw.highest == max(rolls)
            assert throw.lowest == min(rolls)

    def test_get_highest(self):
        throw = Throw([3, 1, 6, 6, 2])
        assert throw.get_highest(1) == [6]
        assert throw.get_highest(3) == [6, 6, 3]
        assert throw.get_highest(5) == [6, 6, 3, 2, 1]

    def test_get_lowest(self):
        throw = Throw([3, 1, 6, 6, 2])
        assert throw.get_lowest(1) == [1]
        assert throw.get_lowest(3) == [1, 2, 3]
        assert throw.get_lowest(5) == [1, 2, 3, 6, 6]

    def test_top_and_bottom_are_sorted_selections(self):
        rng = random.Random(3)
        rolls = [rng.randint(1, 20) for _ in range(15)]
        throw = Throw(rolls)
        for k in range(len(rolls) + 1):
            assert throw.get_highest(k) == sorted(rolls, reverse=True)[:k]
            assert throw.get_lowest(k) == sorted(rolls)[:k]

    def test_count_over_rolls_rejected(self):
        throw = Throw([4, 5])
        with pytest.raises(InvalidArgumentError) as exc_info:
            throw.get_highest(3)
        assert exc_info.value.param == "count"
        with pytest.raises(InvalidArgumentError):
            throw.get_lowest(3)

    def test_negative_count_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Throw([4, 5]).get_highest(-1)

    def test_rolls_not_changed_by_queries(self):
        throw = Throw([2, 6, 4])
        throw.get_highest(3)
        throw.get_lowest(3)
        assert throw.rolls == (2, 6, 4)

    def test_source_list_is_copied(self):
        rolls = [1, 2]
        throw = Throw(rolls)
        rolls.append(6)
        assert throw.rolls == (1, 2)


class TestEmptyThrow:
    """An empty throw has a total but no extremes."""

    def test_total_is_zero(self):
        assert Throw([]).total == 0

    def test_zero_count_selections(self):
        throw = Throw([])
        assert throw.get_highest(0) == []
        assert throw.get_lowest(0) == []

    def test_selection_of_one_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Throw([]).get_highest(1)

    def test_highest_and_lowest_raise(self):
        throw = Throw([])
        with pytest.raises(NoRollsError):
            throw.highest
        with pytest.raises(NoRollsError):
            throw.lowest


class TestThrowClearing:
    """Releasing the rolls held by a throw."""

    def test_clear(self):
        throw = Throw([2, 6, 4])
        assert not throw.is_empty
        throw.clear()
        assert throw.is_empty
        assert throw.rolls == ()
        assert throw.total == 0
        with pytest.raises(InvalidArgumentError):
            throw.get_highest(1)

    def test_context_manager_clears_on_exit(self):
        with Throw([2, 6, 4]) as throw:
            assert throw.total == 12
        assert throw.is_empty

    def test_context_manager_clears_on_error(self):
        with pytest.raises(RuntimeError):
            with Throw([1, 2]) as throw:
                raise RuntimeError("boom")
        assert throw.is_empty

    def test_equality(self):
        assert Throw([1, 2]) == Throw((1, 2))
        assert Throw([1, 2]) != Throw([2, 1])
        assert str(Throw([1, 2])) == "Throw([1, 2])"
