"""Plane shapes with a common interface for their name and area."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


class Shape(ABC):
    """A plane figure with a fixed kind name and a computable area."""

    name: ClassVar[str] = "Shape"

    @abstractmethod
    def area(self) -> float:
        """The area enclosed by the shape."""

    def __str__(self) -> str:
        return f"I am a {self.name}, my area is: {self.area():g}"


@dataclass(frozen=True)
class Circle(Shape):
    """A circle of the given radius."""

    radius: float
    name: ClassVar[str] = "Circle"

    def area(self) -> float:
        return self.radius * self.radius * math.pi


@dataclass(frozen=True)
class Rectangle(Shape):
    """An axis-aligned rectangle of the given basis and height."""

    basis: float
    height: float
    name: ClassVar[str] = "Rectangle"

    def area(self) -> float:
        return self.basis * self.height