"""Tests for the Plant value object."""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from plantcreator.domain.models import InvalidPlantError, Plant


@dataclass(frozen=True, slots=True, eq=False)
class Tree(Plant):
    """Plant kind used to check that equality spans the whole family."""


# ========================== Construction ==============================


@pytest.mark.parametrize(
    "min_h,max_h,leaves,petals,stem,bush",
    [
        (1, 1, False, False, True, False),
        (10, 30, False, False, True, True),
        (10_000, 10_000, True, True, True, True),
        (3, 7, True, False, True, False),
        (2, 4, False, True, True, False),
        (5, 5, False, False, False, True),
        (9_999, 1, True, True, True, False),
    ],
)
def test_create_returns_supplied_values(min_h, max_h, leaves, petals, stem, bush):
    plant = Plant.create(min_h, max_h, leaves, petals, stem, bush)

    assert plant.minimum_height == min_h
    assert plant.maximum_height == max_h
    assert plant.has_leaves is leaves
    assert plant.has_petals is petals
    assert plant.has_stem is stem
    assert plant.has_bush is bush


@pytest.mark.parametrize(
    "args,message",
    [
        ((0, 30, False, False, True, False), "Height cannot be below zero"),
        ((-5, 30, False, False, True, False), "Height cannot be below zero"),
        ((10, 0, False, False, True, False), "Height cannot be below zero"),
        ((10, -1, False, False, True, False), "Height cannot be below zero"),
        ((10, 30, True, False, False, False), "Cannot have leaves or petals without a stem"),
        ((10, 30, False, True, False, False), "Cannot have leaves or petals without a stem"),
        ((10, 30, True, True, False, True), "Cannot have leaves or petals without a stem"),
        ((10, 30, False, False, False, False), "This is not a plant"),
        ((0.5, 1.5, False, False, True, False), "whole number"),
        ((10, 30.0, False, False, True, False), "whole number"),
        (("10", 30, False, False, True, False), "whole number"),
        ((True, 30, False, False, True, False), "whole number"),
        ((10, None, False, False, True, False), "whole number"),
    ],
)
def test_create_rejects_invalid_attributes(args, message):
    with pytest.raises(InvalidPlantError, match=message):
        Plant.create(*args)


def test_validation_checks_heights_before_anatomy():
    with pytest.raises(InvalidPlantError, match="Height cannot be below zero"):
        Plant.create(0, 0, False, False, False, False)

    with pytest.raises(InvalidPlantError, match="without a stem"):
        Plant.create(1, 1, True, False, False, False)


def test_invalid_plant_error_is_a_value_error():
    with pytest.raises(ValueError):
        Plant.create(0, 30, False, False, True, False)


def test_minimum_height_may_exceed_maximum_height():
    plant = Plant.create(50, 10, False, False, True, False)
    assert plant.minimum_height > plant.maximum_height


def test_default_is_a_tree():
    plant = Plant.default()

    assert plant == Plant.create(10, 30, False, False, True, True)
    assert Plant() == plant


def test_plant_is_immutable():
    plant = Plant.default()

    with pytest.raises(FrozenInstanceError):
        plant.minimum_height = 1
    with pytest.raises(FrozenInstanceError):
        plant.has_leaves = True


# ========================== Equality & hashing ==============================


def test_equality_is_reflexive_symmetric_transitive():
    a = Plant.create(2, 4, True, True, True, False)
    b = Plant.create(2, 4, True, True, True, False)
    c = Plant.create(2, 4, True, True, True, False)

    assert a == a
    assert a == b and b == a
    assert b == c and a == c


def test_equal_plants_hash_equal():
    a = Plant.create(2, 4, True, True, True, False)
    b = Plant.create(2, 4, True, True, True, False)

    assert hash(a) == hash(b)
    assert len({a, b, Plant.default()}) == 2


@pytest.mark.parametrize(
    "other",
    [
        Plant.create(11, 30, False, False, True, True),
        Plant.create(10, 31, False, False, True, True),
        Plant.create(10, 30, True, False, True, True),
        Plant.create(10, 30, False, True, True, True),
        Plant.create(10, 30, False, False, True, False),
    ],
)
def test_plants_differing_in_one_attribute_are_not_equal(other):
    assert Plant.default() != other


def test_stem_is_compared_with_stem():
    with_stem = Plant.create(5, 5, False, False, True, True)
    without_stem = Plant.create(5, 5, False, False, False, True)

    assert with_stem != without_stem
    assert without_stem != with_stem


@pytest.mark.parametrize("other", [None, "tree", 10, (10, 30, False, False, True, True)])
def test_not_equal_to_other_types(other):
    assert Plant.default() != other
    assert not Plant.default() == other


def test_subclass_instances_compare_by_attributes():
    assert Tree() == Plant.default()
    assert Plant.default() == Tree()
    assert hash(Tree()) == hash(Plant.default())


# ========================== Ordering ==============================


def test_ordering_sorts_by_height_first():
    tall = Plant.create(20, 40, False, False, True, True)
    short = Plant.create(1, 2, True, True, True, False)
    medium = Plant.create(1, 10, False, False, True, False)

    assert sorted([tall, medium, short]) == [short, medium, tall]
    assert short < tall
    assert tall >= medium
    assert short <= Plant.create(1, 2, True, True, True, False)


def test_ordering_against_other_types_raises():
    with pytest.raises(TypeError):
        Plant.default() < 5


# ========================== String form ==============================


def test_str_lists_attributes_in_order():
    text = str(Plant.create(3, 7, True, False, True, False))

    assert text.splitlines() == [
        "This is a plant with",
        "minimum height: 3,",
        "maximum height: 7,",
        "has leaves: True,",
        "has petals: False,",
        "has stem: True,",
        "has bush: False",
    ]


def test_repr_names_the_class():
    assert repr(Plant.default()).startswith("Plant(minimum_height=10")
