"""Battlefield positions and the units that fight on them."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

REFERENCE_YEAR = 1975


@dataclass(frozen=True)
class Position:
    """A cell on the battlefield grid."""

    row: int = 0
    col: int = 0

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


class InfantryType(Enum):
    SNIPER = 0
    ANTIAIRCRAFTSQUAD = 1
    MORTARSQUAD = 2
    ENGINEER = 3
    SPECIALFORCES = 4
    REGULARINFANTRY = 5


class VehicleType(Enum):
    TRUCK = 0
    MORTAR = 1
    ANTIAIRCRAFT = 2
    ARMOREDCAR = 3
    APC = 4
    ARTILLERY = 5
    TANK = 6


def is_perfect_square(num: int) -> bool:
    """Return True when ``num`` is the square of a whole number."""
    if num < 0:
        return False
    root = math.isqrt(num)
    return root * root == num


def _digit_sum(n: int) -> int:
    return sum(int(digit) for digit in str(n))


def personal_number(value: int, year: int) -> int:
    """Add the digits of ``year`` to ``value`` and reduce to a single digit."""
    total = value + (_digit_sum(year) if year > 0 else 0)
    while total >= 10:
        total = _digit_sum(total)
    return total


class Unit(ABC):
    """A fighting unit with a quantity, a weight and a position."""

    def __init__(self, quantity: int, weight: int, position: Position) -> None:
        self.quantity = quantity
        self.weight = weight
        self.position = position
        self.attack_score = 0

    @property
    @abstractmethod
    def unit_type(self) -> InfantryType | VehicleType:
        """The concrete type of this unit."""

    @abstractmethod
    def compute_attack_score(self) -> int:
        """Compute, store and return the unit's attack score."""

    def clone(self) -> Unit:
        """Return an independent copy of this unit."""
        return copy.copy(self)

    @abstractmethod
    def __str__(self) -> str:
        """Describe the unit."""

    def __repr__(self) -> str:
        return str(self)


class Infantry(Unit):
    """A foot unit; its strength depends on numbers and training."""

    def __init__(
        self,
        quantity: int,
        weight: int,
        position: Position,
        infantry_type: InfantryType,
    ) -> None:
        super().__init__(quantity, weight, position)
        self.infantry_type = infantry_type

    @property
    def unit_type(self) -> InfantryType:
        return self.infantry_type

    def _base_score(self) -> int:
        return self.infantry_type.value * 56 + self.quantity * self.weight

    def compute_attack_score(self) -> int:
        """Score the unit, reinforcing or thinning its ranks on the way.

        The personal number of the score decides whether the quantity grows
        by 20% (above 7) or shrinks by 10% (below 3) before rescoring.
        """
        score = self._base_score()
        if self.infantry_type is InfantryType.SPECIALFORCES and is_perfect_square(self.weight):
            score += 75
        number = personal_number(score, REFERENCE_YEAR)
        if number > 7:
            self.quantity = math.ceil(self.quantity * 1.2)
        elif number < 3:
            self.quantity = math.ceil(self.quantity * 0.9)
        self.attack_score = self._base_score()
        return self.attack_score

    def __str__(self) -> str:
        return (
            f"Infantry[infantryType={self.infantry_type.name},quantity={self.quantity},"
            f"weight={self.weight},position={self.position}]"
        )


class Vehicle(Unit):
    """A vehicle unit; its strength comes mostly from its type."""

    def __init__(
        self,
        quantity: int,
        weight: int,
        position: Position,
        vehicle_type: VehicleType,
    ) -> None:
        super().__init__(quantity, weight, position)
        self.vehicle_type = vehicle_type

    @property
    def unit_type(self) -> VehicleType:
        return self.vehicle_type

    def compute_attack_score(self) -> int:
        """Score is ceil((type * 304 + quantity * weight) / 30)."""
        raw = self.vehicle_type.value * 304 + self.quantity * self.weight
        self.attack_score = -(-raw // 30)
        return self.attack_score

    def __str__(self) -> str:
        return (
            f"Vehicle[vehicleType={self.vehicle_type.name},quantity={self.quantity},"
            f"weight={self.weight},position={self.position}]"
        )