"""Completion progress derived from a bucket's task counts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def progress_percent(todo_completed: int, todo_all: int) -> int:
    """
    Completed share of tasks as a whole percentage, rounded half up.

    A bucket with no tasks is at 0%.
    """
    if todo_all <= 0:
        return 0
    exact = Decimal(todo_completed * 100) / Decimal(todo_all)
    return int(exact.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def is_complete(percent: int) -> bool:
    return percent >= 100
