import dataclasses
import random
import sys

import pytest

from glyphevolve.genotype import (
    MAX_COORD,
    NUM_LINES,
    Genotype,
    Individual,
    Line,
    Point,
)


def _coords(line):
    return (line.start.x, line.start.y, line.end.x, line.end.y)


def test_point_random_within_bounds():
    rng = random.Random(3)
    points = [Point.random(rng) for _ in range(500)]
    assert all(0 <= p.x <= MAX_COORD and 0 <= p.y <= MAX_COORD for p in points)


def test_point_is_immutable():
    point = Point(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.x = 5
    assert (point.x, point.y) == (1, 2)


def test_line_random_is_deterministic_for_seed():
    first = Line.random(random.Random(11))
    second = Line.random(random.Random(11))
    first_coords = _coords(first)
    assert first_coords == _coords(second)
    assert all(0 <= value <= MAX_COORD for value in first_coords)


def test_genotype_random_has_expected_line_count():
    genotype = Genotype.random(random.Random(0))
    assert len(genotype.lines) == NUM_LINES
    assert all(isinstance(line, Line) for line in genotype.lines)


def test_genotype_random_is_deterministic_for_seed():
    first = Genotype.random(random.Random(42))
    second = Genotype.random(random.Random(42))
    first_coords = [_coords(line) for line in first.lines]
    assert len(first_coords) == NUM_LINES
    assert first_coords == [_coords(line) for line in second.lines]


def test_genotype_random_differs_across_seeds():
    assert Genotype.random(random.Random(1)).lines != Genotype.random(random.Random(2)).lines


def test_individual_starts_with_worst_fitness():
    individual = Individual(Genotype.random(random.Random(5)))
    assert individual.fitness == sys.float_info.max


def test_individual_keeps_given_fitness():
    individual = Individual(Genotype([]), fitness=3.5)
    assert individual.fitness == 3.5
    assert individual.genotype.lines == []