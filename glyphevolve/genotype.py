"""Genome representation: points, line segments, genotypes and scored individuals."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field

MAX_COORD = 1000
NUM_LINES = 30

RENDER_SIZE = 256

POPULATION_SIZE = 50
NUM_GENERATIONS = 1000
OUTPUT_EVERY = 10
MUTATION_RATE = 0.1
POINT_MUTATION_RATE = 0.5
MUTATION_AMOUNT = 50
TOURNAMENT_SIZE = 5
ELITISM_COUNT = 2

UNEVALUATED_FITNESS = sys.float_info.max


@dataclass(frozen=True)
class Point:
    """A point in genome coordinate space, 0..MAX_COORD on each axis."""

    x: int
    y: int

    @classmethod
    def random(cls, rng: random.Random) -> Point:
        """Return a point with both coordinates drawn uniformly from 0..MAX_COORD."""
        return cls(rng.randint(0, MAX_COORD), rng.randint(0, MAX_COORD))


@dataclass(frozen=True)
class Line:
    """A straight segment between two points."""

    start: Point
    end: Point

    @classmethod
    def random(cls, rng: random.Random) -> Line:
        """Return a segment between two random points."""
        return cls(Point.random(rng), Point.random(rng))


@dataclass
class Genotype:
    """An ordered collection of line segments."""

    lines: list[Line] = field(default_factory=list)

    @classmethod
    def random(cls, rng: random.Random) -> Genotype:
        """Return a genotype of NUM_LINES random segments."""
        return cls([Line.random(rng) for _ in range(NUM_LINES)])


@dataclass
class Individual:
    """A genotype with its fitness; lower fitness is better."""

    genotype: Genotype
    fitness: float = UNEVALUATED_FITNESS