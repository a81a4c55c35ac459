# particlesim

A particle-life simulation drawn in the terminal. There are three particle
types, shown as red `o`, green `*` and blue `+`. They attract or repel each
other according to an interaction preset. The simulation runs until you quit
(or until a step limit), and then it prints a summary of the run and writes a
short CSV report.

The prompts and the summary are in Russian.

## Installation

```
pip install .
```

## Running

```
particlesim
```

Anything not given on the command line is asked for interactively:

1. How many particles to simulate (a positive number; 50 to 500 is recommended).
2. Which interaction preset to use:
   - `1` Hunt: each type chases one type and flees another.
   - `2` Stratification: like types attract, unlike types repel.
   - `3` Chaos: mixed, asymmetric interactions.
   - `4` Alliances: two types team up against the third.
   - `5` Grouping: like types cluster, unlike types drift apart, and particles
     bounce off the walls of the field.
3. Whether to enable random events (`y`/`n`). With events on, each particle has
   a 1% chance per step of an event: it may be removed, change type, reproduce,
   teleport, change mass, jump in speed or fall asleep. Affected particles are
   highlighted for a few frames. Random events apply to presets 1-4.

Presets 1-4 run on a wrap-around (toroidal) field; preset 5 runs in a closed box.

### Options

| Option | Meaning |
| --- | --- |
| `--count N` | number of particles (must be positive) |
| `--preset {1,2,3,4,5}` | interaction preset |
| `--events` / `--no-events` | turn random events on or off |
| `--width N`, `--height N` | field size; the terminal size by default |
| `--steps N` | stop after `N` steps instead of running until `q` |
| `--delay SECONDS` | pause between frames (default `0.05`) |
| `--seed N` | random seed, for repeatable runs |
| `--csv PATH` | where to write the CSV report (default `statistics.csv`) |

For example:

```
particlesim --count 200 --preset 1 --no-events --steps 500 --seed 7
```

### Keys

When standard input is a terminal, these keys work while the simulation runs:

- `r` starts again with new particles and resets the statistics.
- `q` quits.

Ctrl-C also stops the run; the summary is still printed.

### Report

At the end the program prints:

- particle counts, average mass and average speed for each type;
- the event counters and how many particles had at least one event;
- mean distance between all particles and between particles of the same type;
- density, and the standard deviation of the positions;
- the three fastest, three slowest and three heaviest particles;
- the number of steps and the average particle count per frame;
- the number of close pairs (closer than 2.0) and the fullest cell of a 10x10 grid.

The CSV report holds per-type count, average mass and average speed, followed
by the event counters and the step count. If the file cannot be written, an
error is printed to standard error.

## Library use

- `particlesim.particle`: the `Particle` dataclass (`x`, `y`, `vx`, `vy`,
  `kind`, `mass`, `highlight_ticks`, `particle_id`, and a `speed` property), and
  `interaction_matrix(mode)`, which returns the 3x3 matrix of presets 1-4 and
  all zeros for any other mode.
- `particlesim.simulation`: `reset_particles(count, width, height, rng=None)`
  returns new particles; `simulate(particles, width, height, matrix,
  enable_random_events=False, stats=None, rng=None)` advances the list one step
  in place.
- `particlesim.group`: `init_group(count, width, height, rng=None)` and
  `update_group(particles, width, height)` for the grouping preset.
- `particlesim.renderer`: `render_frame(particles, width, height)` returns an
  ANSI frame as a string; `render(particles, width, height, stream=None)` writes
  it to a stream (standard output by default).
- `particlesim.statistics`: `Statistics` keeps the counters (`reset`,
  `record_random_event`, `increment_event_count`, `increment_step`,
  `update_particle_count`, ...) and produces the report with `summary`,
  `print_summary` and `save_csv`; `type_colored(particle_type)` gives the
  coloured type label.
- `particlesim.cli`: `main(argv=None)`, the command above.

```python
import random
from particlesim.particle import interaction_matrix
from particlesim.simulation import reset_particles, simulate
from particlesim.statistics import Statistics

rng = random.Random(1)
particles = reset_particles(100, 80, 24, rng)
stats = Statistics()
stats.reset(len(particles))
for _ in range(50):
    simulate(particles, 80, 24, interaction_matrix(2), True, stats, rng)
    stats.increment_step()
    stats.update_particle_count(len(particles))
print(stats.summary(particles))
```

## Tests

```
pip install .[test]
pytest
```