import pytest

from warfield.units import (
    Infantry,
    InfantryType,
    Position,
    Unit,
    Vehicle,
    VehicleType,
    is_perfect_square,
    personal_number,
)


@pytest.mark.parametrize(
    "quantity, weight, vehicle_type, expected",
    [
        (5, 2, VehicleType.TANK, 62),
        (3, 1, VehicleType.TRUCK, 1),
        (8, 3, VehicleType.TANK, 62),
        (4, 2, VehicleType.MORTAR, 11),
        (6, 4, VehicleType.ARTILLERY, 52),
        (4, 3, VehicleType.ANTIAIRCRAFT, 21),
        (3, 1, VehicleType.TANK, 61),
        (9, 1, VehicleType.APC, 41),
        (5, 3, VehicleType.MORTAR, 11),
        (4, 2, VehicleType.ARTILLERY, 51),
        (10, 5, VehicleType.TRUCK, 2),
        (5, 2, VehicleType.ARMOREDCAR, 31),
        (2, 1, VehicleType.TANK, 61),
        (1, 1, VehicleType.APC, 41),
    ],
)
def test_vehicle_attack_score(quantity, weight, vehicle_type, expected):
    vehicle = Vehicle(quantity, weight, Position(1, 1), vehicle_type)
    assert vehicle.compute_attack_score() == expected
    assert vehicle.attack_score == expected
    assert vehicle.quantity == quantity


@pytest.mark.parametrize(
    "quantity, weight, infantry_type, expected_score, expected_quantity",
    [
        (5, 2, InfantryType.SNIPER, 10, 5),
        (6, 3, InfantryType.REGULARINFANTRY, 298, 6),
        (3, 2, InfantryType.SPECIALFORCES, 232, 4),
        (10, 4, InfantryType.MORTARSQUAD, 152, 10),
        (4, 4, InfantryType.ANTIAIRCRAFTSQUAD, 72, 4),
        (10, 2, InfantryType.MORTARSQUAD, 130, 9),
        (3, 5, InfantryType.SNIPER, 15, 3),
        (1, 1, InfantryType.SPECIALFORCES, 225, 1),
        (3, 1, InfantryType.SPECIALFORCES, 228, 4),
        (4, 1, InfantryType.SNIPER, 5, 5),
        (6, 5, InfantryType.SPECIALFORCES, 254, 6),
        (3, 3, InfantryType.ANTIAIRCRAFTSQUAD, 65, 3),
        (3, 2, InfantryType.REGULARINFANTRY, 286, 3),
        (7, 20, InfantryType.SNIPER, 180, 9),
    ],
)
def test_infantry_attack_score(quantity, weight, infantry_type, expected_score, expected_quantity):
    infantry = Infantry(quantity, weight, Position(2, 2), infantry_type)
    assert infantry.compute_attack_score() == expected_score
    assert infantry.attack_score == expected_score
    assert infantry.quantity == expected_quantity


@pytest.mark.parametrize(
    "value, expected",
    [(72, 4), (132, 1), (300, 7), (15, 1), (10, 5), (298, 5)],
)
def test_personal_number(value, expected):
    assert personal_number(value, 1975) == expected


def test_personal_number_without_year_digits():
    assert personal_number(5, 0) == 5
    assert personal_number(99, 0) == 9


@pytest.mark.parametrize(
    "num, expected",
    [(0, True), (1, True), (4, True), (9, True), (2, False), (8, False), (-4, False)],
)
def test_is_perfect_square(num, expected):
    assert is_perfect_square(num) is expected


def test_position_str():
    assert str(Position(3, 4)) == "(3,4)"
    assert str(Position()) == "(0,0)"


def test_infantry_str():
    infantry = Infantry(2, 5, Position(3, 4), InfantryType.SPECIALFORCES)
    assert str(infantry) == (
        "Infantry[infantryType=SPECIALFORCES,quantity=2,weight=5,position=(3,4)]"
    )


def test_vehicle_str():
    vehicle = Vehicle(3, 10, Position(1, 2), VehicleType.ARMOREDCAR)
    assert str(vehicle) == (
        "Vehicle[vehicleType=ARMOREDCAR,quantity=3,weight=10,position=(1,2)]"
    )


def test_unit_type_property():
    assert Infantry(1, 1, Position(), InfantryType.ENGINEER).unit_type is InfantryType.ENGINEER
    assert Vehicle(1, 1, Position(), VehicleType.APC).unit_type is VehicleType.APC


def test_clone_is_independent():
    original = Infantry(10, 5, Position(0, 1), InfantryType.SNIPER)
    original.compute_attack_score()
    copy = original.clone()
    assert str(copy) == str(original)
    assert copy.attack_score == original.attack_score
    copy.quantity = 99
    assert original.quantity == 12


def test_unit_is_abstract():
    with pytest.raises(TypeError):
        Unit(1, 1, Position())