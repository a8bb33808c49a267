"""Command line entry point that evolves line drawings towards a font glyph."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from glyphevolve.evolution import crossover, mutate, tournament_selection
from glyphevolve.genotype import (
    ELITISM_COUNT,
    NUM_GENERATIONS,
    OUTPUT_EVERY,
    POPULATION_SIZE,
    Genotype,
    Individual,
)
from glyphevolve.render import (
    PixelBuffer,
    calculate_mse,
    render_genotype,
    render_target_glyph,
    save_buffer,
)

DEFAULT_FONT = "fonts/NotoSans-Light.ttf"
DEFAULT_CHAR = "A"
DEFAULT_OUTPUT = "results"


def _format_fitness(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def next_generation(population: Sequence[Individual], rng: random.Random) -> list[Individual]:
    """Build a new population from one already sorted by fitness, best first."""
    new_population = [
        replace(elite, genotype=Genotype(list(elite.genotype.lines)))
        for elite in population[:ELITISM_COUNT]
    ]
    while len(new_population) < POPULATION_SIZE:
        parent1 = tournament_selection(population, rng)
        parent2 = tournament_selection(population, rng)
        child = crossover(parent1.genotype, parent2.genotype, rng)
        mutate(child, rng)
        new_population.append(Individual(child))
    return new_population


def evolve(
    target: PixelBuffer,
    rng: random.Random,
    generations: int,
    output_dir: str | Path,
) -> Individual:
    """Evolve a population towards ``target`` and return the final best individual.

    Snapshots of the best individual are written to ``output_dir`` every
    OUTPUT_EVERY generations and after the last one.
    """
    output = Path(output_dir)
    population = [Individual(Genotype.random(rng)) for _ in range(POPULATION_SIZE)]

    frame_index = 1
    for generation in range(generations):
        for individual in population:
            individual.fitness = calculate_mse(render_genotype(individual.genotype), target)
        population.sort(key=lambda individual: individual.fitness)

        if generation % OUTPUT_EVERY == 0 or generation == generations - 1:
            best = population[0]
            print(f"Generation {generation}: Best fitness: {_format_fitness(best.fitness)}")
            save_buffer(render_genotype(best.genotype), output / f"best_{frame_index:04d}.png")
            frame_index += 1

        population = next_generation(population, rng)

    final_best = population[0]
    save_buffer(render_genotype(final_best.genotype), output / "_final_best.png")
    return final_best


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="glyphevolve",
        description="Evolve a set of straight lines to imitate a font glyph.",
    )
    parser.add_argument("--font", default=DEFAULT_FONT, help="TrueType font file")
    parser.add_argument("--char", default=DEFAULT_CHAR, help="character to imitate")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="directory for images")
    parser.add_argument(
        "--generations", type=int, default=NUM_GENERATIONS, help="number of generations"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if len(args.char) != 1:
        parser.error("--char must be a single character")
    if args.generations < 0:
        parser.error("--generations must not be negative")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the evolution; return the process exit status."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    output = Path(args.output)
    output.mkdir(parents=True, exist_ok=True)

    try:
        target = render_target_glyph(args.font, args.char)
        save_buffer(target, output / "_target.png")
        evolve(target, rng, args.generations, output)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())