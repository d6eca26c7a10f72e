"""Reading battle setups from KEY=VALUE files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

from warfield.units import (
    Infantry,
    InfantryType,
    Position,
    Unit,
    Vehicle,
    VehicleType,
)

_POSITION = re.compile(r"\(\s*(-?\d+)\s*,\s*(-?\d+)\s*\)")
_UNIT = re.compile(
    r"([A-Z_]+)\s*\(\s*(-?\d+)\s*,\s*(-?\d+)\s*,"
    r"\s*\(\s*(-?\d+)\s*,\s*(-?\d+)\s*\)\s*,\s*(-?\d+)\s*\)"
)
_VEHICLE_NAMES = {kind.name for kind in VehicleType}
_INFANTRY_NAMES = {kind.name for kind in InfantryType}
_LIBERATION, _ARVN = 0, 1


def _bracketed(items: Iterable[object]) -> str:
    return "[" + ",".join(str(item) for item in items) + "]"


def _make_unit(name: str, quantity: int, weight: int, position: Position) -> Unit | None:
    if name in _VEHICLE_NAMES:
        return Vehicle(quantity, weight, position, VehicleType[name])
    if name in _INFANTRY_NAMES:
        return Infantry(quantity, weight, position, InfantryType[name])
    return None


class Configuration:
    """A battle setup: grid size, terrain positions, units and event code."""

    def __init__(self, filepath: str | os.PathLike[str]) -> None:
        self.num_rows = 0
        self.num_cols = 0
        self.event_code = 0
        self.forest: list[Position] = []
        self.river: list[Position] = []
        self.fortification: list[Position] = []
        self.urban: list[Position] = []
        self.special_zone: list[Position] = []
        self.liberation_units: list[Unit] = []
        self.arvn_units: list[Unit] = []
        self._arrays = {
            "ARRAY_FOREST": self.forest,
            "ARRAY_RIVER": self.river,
            "ARRAY_FORTIFICATION": self.fortification,
            "ARRAY_URBAN": self.urban,
            "ARRAY_SPECIAL_ZONE": self.special_zone,
        }
        with open(filepath, encoding="utf-8") as handle:
            for line in handle:
                self._read_line(line)

    def _read_line(self, raw: str) -> None:
        line = raw.strip()
        if "=" not in line:
            return
        key, _, value = line.partition("=")
        key, value = key.strip(), value.strip()
        if key == "NUM_ROWS":
            self.num_rows = int(value)
        elif key == "NUM_COLS":
            self.num_cols = int(value)
        elif key == "EVENT_CODE":
            code = int(value)
            self.event_code = 0 if code < 0 else code % 100
        elif key in self._arrays:
            self._arrays[key].extend(
                Position(int(row), int(col)) for row, col in _POSITION.findall(value)
            )
        elif key == "UNIT_LIST":
            self._read_units(value)

    def _read_units(self, value: str) -> None:
        for name, quantity, weight, row, col, side in _UNIT.findall(value):
            unit = _make_unit(name, int(quantity), int(weight), Position(int(row), int(col)))
            if unit is None:
                continue
            if int(side) == _LIBERATION:
                self.liberation_units.append(unit)
            elif int(side) == _ARVN:
                self.arvn_units.append(unit)

    def __str__(self) -> str:
        parts = [
            f"num_rows={self.num_rows}",
            f"num_cols={self.num_cols}",
            f"arrayForest={_bracketed(self.forest)}",
            f"arrayRiver={_bracketed(self.river)}",
            f"arrayFortification={_bracketed(self.fortification)}",
            f"arrayUrban={_bracketed(self.urban)}",
            f"arraySpecialZone={_bracketed(self.special_zone)}",
            f"liberationUnits={_bracketed(self.liberation_units)}",
            f"ARVNUnits={_bracketed(self.arvn_units)}",
            f"eventCode={self.event_code}",
        ]
        return "[" + ",".join(parts) + "]"