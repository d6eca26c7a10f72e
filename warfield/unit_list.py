"""An ordered collection of units with a bounded number of slots."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from warfield.units import Infantry, InfantryType, Unit, Vehicle, VehicleType

_SPECIAL_BASES = (3, 5, 7)
_LARGE_CAPACITY = 12
_SMALL_CAPACITY = 8


def _is_special(number: int, base: int) -> bool:
    """True when ``number`` is a sum of distinct powers of ``base``."""
    if number <= 0:
        return False
    while number:
        number, digit = divmod(number, base)
        if digit > 1:
            return False
    return True


def _slots_for(score: int) -> int:
    if any(_is_special(score, base) for base in _SPECIAL_BASES):
        return _LARGE_CAPACITY
    return _SMALL_CAPACITY


class UnitList:
    """Units of an army; infantry is kept in front, vehicles behind.

    ``capacity`` is the army's total score: the list holds 12 distinct units
    when that score is a sum of distinct powers of 3, 5 or 7, otherwise 8.
    A unit whose type is already present is merged into the existing entry.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = _slots_for(capacity)
        self._units: list[Unit] = []

    def _find(self, unit_type: InfantryType | VehicleType) -> Unit | None:
        return next((unit for unit in self._units if unit.unit_type is unit_type), None)

    def insert(self, unit: Unit | None) -> bool:
        """Add ``unit``; return True only when it took a new slot."""
        if unit is None or any(existing is unit for existing in self._units):
            return False
        existing = self._find(unit.unit_type)
        if existing is not None:
            existing.quantity += unit.quantity
            existing.compute_attack_score()
            return False
        if len(self._units) >= self.capacity:
            return False
        if isinstance(unit, Infantry):
            self._units.insert(0, unit)
        else:
            self._units.append(unit)
        return True

    def contains(self, unit_type: InfantryType | VehicleType) -> bool:
        return self._find(unit_type) is not None

    def remove(self, unit: Unit) -> bool:
        """Remove ``unit``, or the entry of the same type; report whether one went."""
        target = next((existing for existing in self._units if existing is unit), None)
        if target is None:
            target = self._find(unit.unit_type)
        if target is None:
            return False
        self._units = [existing for existing in self._units if existing is not target]
        return True

    def remove_all(self, units: Iterable[Unit]) -> int:
        """Remove each of ``units``; return how many entries were removed."""
        return sum(self.remove(unit) for unit in list(units))

    def insert_all(self, units: Iterable[Unit]) -> int:
        """Insert each of ``units``; return how many took new slots."""
        return sum(self.insert(unit) for unit in list(units))

    @property
    def count_vehicle(self) -> int:
        return sum(isinstance(unit, Vehicle) for unit in self._units)

    @property
    def count_infantry(self) -> int:
        return sum(isinstance(unit, Infantry) for unit in self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(list(self._units))

    def __len__(self) -> int:
        return len(self._units)

    def __str__(self) -> str:
        head = f"UnitList[count_vehicle={self.count_vehicle};count_infantry={self.count_infantry}"
        if self._units:
            head += ";" + ",".join(str(unit) for unit in self._units)
        return head + "]"