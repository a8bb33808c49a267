# glyphevolve

glyphevolve evolves a small drawing made of straight, anti-aliased line
segments until it looks like a character rendered from a font.

Each candidate drawing is a genotype of 30 lines. The endpoints of each line
lie on a 1000 × 1000 integer grid. The lines are drawn into a 256 × 256
greyscale buffer with Xiaolin Wu's line algorithm. Where lines overlap, the
brighter value of a pixel is kept. The drawing is scored against the target
glyph by mean squared error, and a lower score is better. A population of 50
is improved generation by generation by:

- tournament selection with 5 participants,
- single-point crossover of the line lists,
- per-line mutation, which moves endpoints by -50 to +49 grid units and
  clamps them to the grid,
- elitism, which carries the best 2 individuals over unchanged.

## Installation

```
pip install .
```

The only runtime dependency is Pillow. It reads the font, rasterises the
target glyph and writes the PNG files.

## Running

```
glyphevolve
```

By default the command uses these settings:

- font: `fonts/NotoSans-Light.ttf`, relative to the current directory,
- character: `A`,
- output directory: `results/`, created if it does not exist,
- 1000 generations,
- a random seed that differs on every run.

You can change them with these options:

| Option              | Meaning                                      |
|---------------------|----------------------------------------------|
| `--font PATH`       | TrueType font file to render the target from |
| `--char C`          | the single character to imitate              |
| `--output DIR`      | directory the images are written to          |
| `--generations N`   | number of generations (not negative)         |
| `--seed N`          | seed for the random generator                |

The command writes these files to the output directory:

- `_target.png`: the rendered target glyph,
- `best_0001.png`, `best_0002.png`, and so on: the best drawing every 10
  generations and after the last generation,
- `_final_best.png`: the best drawing at the end of the run.

Each time it saves a snapshot, the command prints a line such as
`Generation 10: Best fitness: 1234.5`. If the font cannot be read or loaded,
it prints `error: ...` to standard error and exits with status 1.

## Using it as a library

```python
import random

from glyphevolve.cli import evolve
from glyphevolve.render import render_target_glyph, save_buffer

rng = random.Random(1234)
target = render_target_glyph("fonts/NotoSans-Light.ttf", "A")
save_buffer(target, "target.png")
best = evolve(target, rng, 200, "results")
print(best.fitness)
```

`evolve` writes its snapshots into the given directory, which must already
exist. It returns the final best `Individual`.

The modules:

- `glyphevolve.genotype`: the frozen dataclasses `Point` and `Line`, plus
  `Genotype` and `Individual`. `Point`, `Line` and `Genotype` each have a
  `random(rng)` constructor. An individual's fitness starts at the largest
  float. The module also defines the tuning constants, such as
  `NUM_LINES`, `POPULATION_SIZE` and `MUTATION_RATE`.
- `glyphevolve.evolution`:
  - `tournament_selection(population, rng)` raises `ValueError` on an empty
    population.
  - `crossover(parent1, parent2, rng)` raises `ValueError` unless both parents
    have exactly 30 lines.
  - `mutate(genotype, rng)` changes the genotype in place.
- `glyphevolve.render`: pixel buffers are `bytearray`s of 256 × 256 bytes.
  - `create_pixel_buffer()` returns a new buffer.
  - `set_pixel(buffer, x, y, color)` ignores writes that fall outside the
    buffer.
  - `draw_line(buffer, x0, y0, x1, y1)` draws in pixel coordinates.
  - `render_genotype(genotype)` renders every line of a genotype.
  - `render_target_glyph(font_path, char)` centres the character horizontally
    and places its baseline so that the font's ascent and descent are
    centred vertically.
  - `save_buffer(buffer, filename)` chooses the image format from the file
    extension and raises `ValueError` if the buffer has the wrong size.
  - `calculate_mse(buffer_a, buffer_b)` raises `ValueError` if the sizes
    differ.
- `glyphevolve.cli`:
  - `next_generation(population, rng)` expects a population sorted best
    first.
  - `evolve(target, rng, generations, output_dir)` runs the evolution
    described above.
  - `main(argv=None)` is the command.

Fitness is evaluated one individual at a time in a single process.

## Tests

```
pip install .[test]
pytest
```