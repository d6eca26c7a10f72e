"""Terrain features and the battlefield grid that holds them."""

from __future__ import annotations

from collections.abc import Iterable

from warfield.units import Position


class TerrainElement:
    """A terrain feature occupying one cell of the battlefield."""

    def __init__(self, pos: Position) -> None:
        self.position = pos

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.position})"


class Road(TerrainElement):
    """An open track; every cell is a road unless something else is placed."""


class Mountain(TerrainElement):
    """Forested mountains."""


class River(TerrainElement):
    """A river crossing."""


class Urban(TerrainElement):
    """A built-up residential area."""


class Fortification(TerrainElement):
    """Trenches and fortified positions."""


class SpecialZone(TerrainElement):
    """A demilitarised zone."""


class BattleField:
    """A rectangular grid of terrain elements.

    Cells default to :class:`Road`; the given positions are then filled in the
    order forest, river, fortification, urban, special zone, so a later kind
    replaces an earlier one placed on the same cell.
    """

    def __init__(
        self,
        n_rows: int,
        n_cols: int,
        forest: Iterable[Position] = (),
        river: Iterable[Position] = (),
        fortification: Iterable[Position] = (),
        urban: Iterable[Position] = (),
        special_zone: Iterable[Position] = (),
    ) -> None:
        if n_rows < 0 or n_cols < 0:
            raise ValueError(f"battlefield size must not be negative: {n_rows}x{n_cols}")
        self.n_rows = n_rows
        self.n_cols = n_cols
        self._grid: list[list[TerrainElement]] = [
            [Road(Position(row, col)) for col in range(n_cols)] for row in range(n_rows)
        ]
        layers = (
            (Mountain, forest),
            (River, river),
            (Fortification, fortification),
            (Urban, urban),
            (SpecialZone, special_zone),
        )
        for kind, positions in layers:
            for pos in positions:
                self._place(kind(pos))

    def _in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.n_rows and 0 <= c < self.n_cols

    def _place(self, element: TerrainElement) -> None:
        row, col = element.position.row, element.position.col
        if not self._in_bounds(row, col):
            raise ValueError(f"position {element.position} lies outside the battlefield")
        self._grid[row][col] = element

    def element(self, r: int, c: int) -> TerrainElement | None:
        """Return the terrain at ``(r, c)``, or None outside the grid."""
        if self._in_bounds(r, c):
            return self._grid[r][c]
        return None

    def __str__(self) -> str:
        return f"BattleField[n_rows={self.n_rows},n_cols={self.n_cols}]"