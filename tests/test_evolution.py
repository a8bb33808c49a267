import random

import pytest

from glyphevolve.evolution import crossover, mutate, tournament_selection
from glyphevolve.genotype import (
    MAX_COORD,
    MUTATION_AMOUNT,
    NUM_LINES,
    Genotype,
    Individual,
    Line,
    Point,
)


class ScriptedRng:
    """Random source returning scripted values."""

    def __init__(self, ranges=(), value=0.0, default=0):
        self._ranges = iter(ranges)
        self._value = value
        self._default = default

    def randrange(self, *args):
        return next(self._ranges, self._default)

    def random(self):
        return self._value


def _uniform_genotype(x, y):
    return Genotype([Line(Point(x, y), Point(x, y)) for _ in range(NUM_LINES)])


def test_tournament_picks_fittest_participant():
    population = [Individual(Genotype([]), fitness=f) for f in (5.0, 3.0, 8.0, 1.0, 9.0, 2.0)]
    rng = ScriptedRng(ranges=[0, 2, 1, 4, 2])
    assert tournament_selection(population, rng) is population[1]


def test_tournament_tie_keeps_first_seen():
    population = [Individual(Genotype([]), fitness=4.0) for _ in range(3)]
    rng = ScriptedRng(ranges=[2, 0, 1, 0, 1])
    assert tournament_selection(population, rng) is population[2]


def test_tournament_returns_member_of_population():
    rng = random.Random(9)
    population = [Individual(Genotype([]), fitness=float(i)) for i in range(10)]
    for _ in range(50):
        assert any(tournament_selection(population, rng) is ind for ind in population)


def test_tournament_empty_population_raises():
    with pytest.raises(ValueError):
        tournament_selection([], random.Random(0))


def test_crossover_splits_at_cut_point():
    rng = random.Random(4)
    parent1 = Genotype.random(rng)
    parent2 = Genotype.random(rng)
    child = crossover(parent1, parent2, ScriptedRng(ranges=[10]))
    assert child.lines == parent1.lines[:10] + parent2.lines[10:]


def test_crossover_always_mixes_both_parents():
    rng = random.Random(8)
    parent1 = _uniform_genotype(1, 1)
    parent2 = _uniform_genotype(2, 2)
    for _ in range(100):
        child = crossover(parent1, parent2, rng)
        assert len(child.lines) == NUM_LINES
        assert child.lines[0] == parent1.lines[0]
        assert child.lines[-1] == parent2.lines[-1]


def test_crossover_rejects_wrong_length():
    good = _uniform_genotype(0, 0)
    bad = Genotype(good.lines[:-1])
    with pytest.raises(ValueError):
        crossover(good, bad, random.Random(0))
    with pytest.raises(ValueError):
        crossover(bad, good, random.Random(0))


def test_mutate_without_trigger_leaves_genotype_unchanged():
    genotype = Genotype.random(random.Random(2))
    before = list(genotype.lines)
    mutate(genotype, ScriptedRng(value=0.99))
    assert genotype.lines == before


def test_mutate_clamps_to_upper_bound():
    genotype = _uniform_genotype(MAX_COORD - 10, MAX_COORD - 10)
    mutate(genotype, ScriptedRng(value=0.0, default=MUTATION_AMOUNT - 1))
    for line in genotype.lines:
        assert line.start == Point(MAX_COORD, MAX_COORD)
        assert line.end == Point(MAX_COORD, MAX_COORD)


def test_mutate_clamps_to_lower_bound():
    genotype = _uniform_genotype(0, 0)
    mutate(genotype, ScriptedRng(value=0.0, default=-MUTATION_AMOUNT))
    assert all(line.start == Point(0, 0) and line.end == Point(0, 0) for line in genotype.lines)


def test_mutate_moves_by_at_most_mutation_amount():
    rng = random.Random(13)
    for _ in range(20):
        genotype = Genotype.random(rng)
        before = list(genotype.lines)
        mutate(genotype, rng)
        assert len(genotype.lines) == NUM_LINES
        for old, new in zip(before, genotype.lines):
            for a, b in ((old.start, new.start), (old.end, new.end)):
                assert abs(a.x - b.x) <= MUTATION_AMOUNT
                assert abs(a.y - b.y) <= MUTATION_AMOUNT
                assert 0 <= b.x <= MAX_COORD and 0 <= b.y <= MAX_COORD