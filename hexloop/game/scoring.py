"""Scoring for closed loops and board clears."""

from __future__ import annotations

from hexloop.game.models import Loop


def loop_points(n: int, lowest_value: int = 1, increment: int = 1) -> int:
    """Sum of an arithmetic series of *n* terms: lowest_value, +increment, ...

    With the defaults this is the n-th triangular number n(n+1)/2.
    """
    # n * (2a + (n-1)d) is always even for integer a, d
    return n * (2 * lowest_value + (n - 1) * increment) // 2


def batch_points(loops: list[Loop], lowest_value: int = 1, increment: int = 1) -> int:
    """Score loops closed by a single placement.

    Each loop scores loop_points(length); the sum is multiplied by the number
    of loops closed at once.
    """
    total = sum(loop_points(loop.length, lowest_value, increment) for loop in loops)
    return total * len(loops)


def board_clear_bonus(was_empty: bool, is_empty: bool, bonus: int) -> int:
    """Bonus for a clear-out that empties a board that was not already empty."""
    if is_empty and not was_empty:
        return bonus
    return 0
