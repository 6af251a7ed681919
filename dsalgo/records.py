"""Student marks with grading, and summing a list of numbers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def grade(marks: int) -> str:
    """Return ``"A"`` for 75 and above, ``"B"`` for 50 to 74 and ``"F"`` below 50."""
    if marks < 50:
        return "F"
    if marks < 75:
        return "B"
    return "A"


@dataclass
class Student:
    """A student's name, class and marks."""

    name: str
    school_class: int
    marks: int

    def grade(self) -> str:
        """Return the grade earned by this student's marks."""
        return grade(self.marks)


def total(numbers: Iterable[int]) -> int:
    """Return the sum of ``numbers``."""
    return sum(numbers)