"""Genetic operators: tournament selection, one-point crossover and mutation."""

from __future__ import annotations

import random
from collections.abc import Sequence

from glyphevolve.genotype import (
    MAX_COORD,
    MUTATION_AMOUNT,
    MUTATION_RATE,
    NUM_LINES,
    POINT_MUTATION_RATE,
    TOURNAMENT_SIZE,
    Genotype,
    Individual,
    Line,
    Point,
)


def tournament_selection(population: Sequence[Individual], rng: random.Random) -> Individual:
    """Pick TOURNAMENT_SIZE random individuals and return the fittest of them."""
    if not population:
        raise ValueError("cannot select from an empty population")
    best: Individual | None = None
    for _ in range(TOURNAMENT_SIZE):
        participant = population[rng.randrange(len(population))]
        if best is None or participant.fitness < best.fitness:
            best = participant
    return best


def crossover(parent1: Genotype, parent2: Genotype, rng: random.Random) -> Genotype:
    """Combine the head of ``parent1`` with the tail of ``parent2`` at a random cut."""
    for parent in (parent1, parent2):
        if len(parent.lines) != NUM_LINES:
            raise ValueError(
                f"parent must have {NUM_LINES} lines, got {len(parent.lines)}"
            )
    point = rng.randrange(1, NUM_LINES)
    return Genotype(parent1.lines[:point] + parent2.lines[point:])


def mutate(genotype: Genotype, rng: random.Random) -> None:
    """Randomly nudge line endpoints of ``genotype`` in place."""
    genotype.lines[:] = [_mutate_line(line, rng) for line in genotype.lines]


def _mutate_line(line: Line, rng: random.Random) -> Line:
    if rng.random() >= MUTATION_RATE:
        return line
    start, end = line.start, line.end
    if rng.random() < POINT_MUTATION_RATE:
        start = _mutate_point(start, rng)
    if rng.random() < POINT_MUTATION_RATE:
        end = _mutate_point(end, rng)
    return Line(start, end)


def _mutate_point(point: Point, rng: random.Random) -> Point:
    x = _mutate_coord(point.x, rng)
    y = _mutate_coord(point.y, rng)
    return Point(x, y)


def _mutate_coord(value: int, rng: random.Random) -> int:
    shifted = value + rng.randrange(-MUTATION_AMOUNT, MUTATION_AMOUNT)
    return min(max(shifted, 0), MAX_COORD)