"""Armies built from units and the way they fight."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from itertools import compress
from typing import TYPE_CHECKING

from warfield.unit_list import UnitList
from warfield.units import Infantry, Unit, Vehicle

if TYPE_CHECKING:
    from warfield.terrain import BattleField

MAX_LF = 1000
MAX_EXP = 500


def _ceil(value: float) -> int:
    """Round up, ignoring floating-point noise around whole numbers."""
    nearest = round(value)
    if abs(value - nearest) < 1e-9:
        return int(nearest)
    return math.ceil(value)


class Army(ABC):
    """A named army whose strength is split into LF (vehicles) and EXP (infantry).

    The given units are scored, then copies of them are placed in the army's
    unit list, whose capacity derives from LF + EXP.
    """

    def __init__(
        self,
        units: Iterable[Unit],
        name: str,
        battlefield: BattleField | None = None,
    ) -> None:
        self.name = name
        self.battlefield = battlefield
        units = list(units)
        lf = exp = 0
        for unit in units:
            score = unit.compute_attack_score()
            if isinstance(unit, Vehicle):
                lf += score
            else:
                exp += score
        self.lf = min(lf, MAX_LF)
        self.exp = min(exp, MAX_EXP)
        self.unit_list = UnitList(self.lf + self.exp)
        self.unit_list.insert_all(unit.clone() for unit in units)

    def update_score(self, update: bool = True) -> None:
        """Recompute LF and EXP from the units' current attack scores."""
        if not update:
            return
        lf = sum(unit.attack_score for unit in self.unit_list if isinstance(unit, Vehicle))
        exp = sum(unit.attack_score for unit in self.unit_list if not isinstance(unit, Vehicle))
        self.lf = min(lf, MAX_LF)
        self.exp = min(exp, MAX_EXP)
        self.unit_list.capacity = UnitList(self.lf + self.exp).capacity

    def scale_weight(self, factor: float) -> None:
        """Multiply every unit's weight by ``factor``, rounding up."""
        for unit in self.unit_list:
            unit.weight = _ceil(unit.weight * factor)

    def scale_quantity(self, factor: float) -> None:
        """Multiply every unit's quantity by ``factor``, rounding up."""
        for unit in self.unit_list:
            unit.quantity = _ceil(unit.quantity * factor)

    def knapsack(self, units: Sequence[Unit], min_score: int) -> list[Unit]:
        """Return the non-empty subset with the smallest score sum above ``min_score``.

        Ties go to the first subset found; an empty list means none exists.
        """
        units = list(units)
        best: list[Unit] = []
        best_sum: int | None = None
        for mask in range(1, 1 << len(units)):
            subset = list(compress(units, ((mask >> i) & 1 for i in range(len(units)))))
            total = sum(unit.attack_score for unit in subset)
            if total > min_score and (best_sum is None or total < best_sum):
                best, best_sum = subset, total
        return best

    def units_of_type(self, kind: type[Unit]) -> list[Unit]:
        """Return copies of the army's infantry (last first) or vehicles."""
        if kind is Infantry:
            infantry = [unit for unit in self.unit_list if isinstance(unit, Infantry)]
            return [unit.clone() for unit in reversed(infantry)]
        if kind is Vehicle:
            return [unit.clone() for unit in self.unit_list if isinstance(unit, Vehicle)]
        raise ValueError(f"unsupported unit kind: {kind!r}")

    def _cloned_units(self) -> list[Unit]:
        return [unit.clone() for unit in self.unit_list]

    @abstractmethod
    def fight(self, enemy: Army | None, defense: bool = False) -> None:
        """Engage ``enemy``, attacking or, with ``defense``, defending."""

    @abstractmethod
    def __str__(self) -> str:
        """Describe the army."""

    def __repr__(self) -> str:
        return str(self)


class ARVN(Army):
    """The ARVN side."""

    def fight(self, enemy: Army | None, defense: bool = False) -> None:
        if enemy is None:
            return
        if not defense:
            self.scale_quantity(0.8)
            for unit in self.unit_list:
                if unit.quantity == 1:
                    self.unit_list.remove(unit)
            self.update_score(True)
            return

        infantry = enemy.units_of_type(Infantry)
        vehicles = enemy.units_of_type(Vehicle)
        combo_a = self.knapsack(infantry, self.exp)
        combo_b = self.knapsack(vehicles, self.lf)

        if combo_a and combo_b:
            self._overrun(enemy, combo_a + combo_b)
        elif combo_a and math.ceil(enemy.lf * 1.5) > self.lf:
            self._overrun(enemy, combo_a + vehicles)
        elif combo_b and math.ceil(enemy.exp * 1.5) > self.exp:
            self._overrun(enemy, combo_b + infantry)
        else:
            enemy.scale_weight(0.9)
            enemy.update_score(True)

    def _overrun(self, enemy: Army, removed: list[Unit]) -> None:
        enemy.unit_list.remove_all(removed)
        self.scale_weight(0.8)
        enemy.unit_list.insert_all(self._cloned_units())
        self.update_score(True)
        enemy.update_score(True)

    def __str__(self) -> str:
        field = str(self.battlefield) if self.battlefield is not None else ""
        return f"ARVN[LF={self.lf},EXP={self.exp},unitList={self.unit_list},battleField={field}]"