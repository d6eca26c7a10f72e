# warfield

A small battle simulation library. Armies are built from infantry and
vehicle units placed on a grid, scored by attack strength, and can fight
one another. A battlefield is a grid of terrain elements, and a whole
setup can be read from a `KEY=value` file.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `warfield.units`: `Position` (a frozen `row`/`col` pair printed as
  `(row,col)`), the `InfantryType` and `VehicleType` enumerations, and the
  `Infantry` and `Vehicle` units. Each unit has `quantity`, `weight`,
  `position` and `attack_score`, and `compute_attack_score()` works out,
  stores and returns the score:
  - a vehicle scores `ceil((type * 304 + quantity * weight) / 30)`;
  - an infantry unit scores `type * 56 + quantity * weight`. The
    "personal number" of that score with the year 1975
    (`personal_number`) then adjusts the quantity: above 7 it grows by
    20%, below 3 it shrinks by 10% (both rounded up), and the score is
    recomputed. Special forces whose weight is a perfect square
    (`is_perfect_square`) get 75 extra points when the personal number is
    taken.
  - `clone()` returns an independent copy of a unit.
- `warfield.unit_list`: `UnitList`. Its number of slots comes from the
  army score it is given: 12 when that score is a sum of distinct powers
  of 3, 5 or 7, otherwise 8. Infantry go to the front, vehicles to the
  back. Inserting a unit of a type already held adds its quantity to the
  existing entry instead of taking a slot. `insert` returns True only when
  a new slot was taken; there are also `contains`, `remove`, `remove_all`,
  `insert_all`, `count_vehicle`, `count_infantry`, iteration and `len()`.
- `warfield.terrain`: `BattleField`, a grid of terrain elements (`Road`,
  `Mountain`, `River`, `Urban`, `Fortification`, `SpecialZone`). Every
  cell is a `Road` unless another kind is placed on it; `element(r, c)`
  returns the terrain at a cell, or `None` outside the grid. Placing
  terrain outside the grid, or a negative size, raises `ValueError`.
- `warfield.army`: the abstract `Army` and the concrete `ARVN`. An army
  sums its vehicle scores into `lf` (capped at 1000) and its infantry
  scores into `exp` (capped at 500), and keeps copies of its units in
  `unit_list`. `update_score()`, `scale_weight()`, `scale_quantity()`,
  `knapsack()` and `units_of_type()` support fighting.
  - `ARVN.fight(enemy)` (attacking) shrinks its own quantities by 20%,
    drops units left with a quantity of 1 and rescores.
  - `ARVN.fight(enemy, defense=True)` looks for the smallest group of
    enemy infantry beating its `exp` and of enemy vehicles beating its
    `lf`. Depending on what it finds, it removes those units from the
    enemy, lightens its own units by 20% and hands copies of them to the
    enemy; otherwise the enemy's units lose 10% of their weight.
- `warfield.configuration`: `Configuration`, which reads a setup file.

## Example

```python
from warfield.units import Infantry, InfantryType, Position, Vehicle, VehicleType
from warfield.army import ARVN

units = [
    Vehicle(5, 2, Position(1, 2), VehicleType.TANK),
    Vehicle(3, 1, Position(2, 2), VehicleType.TRUCK),
    Infantry(5, 2, Position(1, 1), InfantryType.SNIPER),
]
army = ARVN(units, "ARVN", None)
print(army.lf, army.exp)   # 63 10
print(army)
```

## Configuration files

```
NUM_ROWS=5
NUM_COLS=5
ARRAY_FOREST=[(1,1)]
ARRAY_RIVER=[(2,2)]
ARRAY_FORTIFICATION=[(3,3)]
ARRAY_URBAN=[(4,4)]
ARRAY_SPECIAL_ZONE=[(5,5)]
UNIT_LIST=[TANK(5,2,(1,2),0),SNIPER(5,2,(1,1),1)]
EVENT_CODE=23
```

```python
from warfield.configuration import Configuration

config = Configuration("battle.txt")
print(config.num_rows, config.event_code)
print(config.arvn_units)
```

Each unit entry is `TYPE(quantity,weight,(row,col),side)`; side `0` goes
to `liberation_units`, side `1` to `arvn_units`, and entries of unknown
type or side are skipped. A negative event code is read as `0`, and a code
above 99 keeps only its last two digits. Lines without `=` are ignored.

## What this package does not do

- Terrain elements only mark cells; they have no effect on armies or
  units.
- `ARVN` is the only concrete army; there is no opposing army class, so
  fights are run against any other `Army` subclass you write.
- There is no command-line program and no game loop: the package is a
  library, and nothing runs a whole battle from a configuration file.