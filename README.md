# protolife

A particle-life simulation. Thousands of particles, each of one of up to six
colours, move over a world whose edges wrap around. Every pair of colours has
a weight that says how strongly one is drawn to, or pushed from, the other.
From these weights alone, cells, serpents and orbiting engines emerge.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## The command

The package installs a `protolife` command that runs the simulation without
a display and reports on the result:

```
protolife --help
protolife --list-presets
protolife --preset "Divine Engine" --steps 120 --seed 1
protolife --steps 60 --export > state.json
protolife --state state.json --steps 60
```

Options:

- `--width`, `--height`: the screen size (default 1920 by 1080). The world
  is never smaller than 1920 by 1080.
- `--steps`: how many frames to simulate (default 0; must not be negative).
- `--dt`: seconds per frame (default 1/60; must be positive).
- `--seed`: seed for the random number generator.
- `--preset`: a preset by number or by name (names match case-insensitively).
- `--state`: a JSON file written by `--export`; its parameters and weights
  replace those of the preset. A file that cannot be read or parsed prints an
  error to standard error and the command exits with status 1.
- `--export`: print the final parameters and weights as JSON instead of the
  particle counts.
- `--list-presets`: print the numbered presets and exit.

The command fills the world with 3000 particles, applies the preset and the
state if given, then steps the world frame by frame, recycling old particles
once every 0.1 simulated seconds. It then prints the number of particles and
how many there are of each colour, or the JSON state with `--export`.

## Pieces

- `protolife.math`: `Vec2`, `Rect` with toroidal displacement and wrapping,
  and the `lerp`, `inverse_lerp` and `remap` helpers.
- `protolife.spatial_hash`: `SpatialHashGrid`, a fixed grid of cells over a
  wrapping world. Radius queries see across the edges.
- `protolife.colour`: `ParticleColour`, the six colours Red, Green, Blue,
  Orange, Pink and Aqua, with their display `rgb` values.
- `protolife.params`: `SimulationParams` (friction, force strength, the
  repulsion, peak-attraction and attraction radii, decay rate, number of
  colours), the force curve `magnitude`, and `simulation_dimensions` and
  `scale_bounds` for a given screen.
- `protolife.shapes`: spawn shapes (`RectShape`, `CircleShape`,
  `HollowCircleShape`) and `SpawnerConfig` with its `SpawnerMode`.
- `protolife.model`: `Model`, the colour-to-colour weight matrix, the
  built-in `PRESETS` of `Preset` entries, `randomise`, and `export_state` /
  `import_state` for saving a set of laws as plain data.
- `protolife.world`: `Simulation` and its `Particle`s.
- `protolife.camera`: `Camera`, zooming, panning, pinching, following a
  particle, and the particle and eraser brushes.
- `protolife.cli`: the `protolife` command.

## Examples

Distances on a wrapping world:

```python
from protolife.math import Rect, Vec2

world = Rect.from_center_size(Vec2(0.0, 0.0), Vec2(100.0, 100.0))
world.toroidal_displacement(Vec2(0.0, 0.0), Vec2(75.0, 0.0))  # Vec2(-25.0, 0.0)
world.toroidal_wrap(Vec2(75.0, 75.0))                         # Vec2(-25.0, -25.0)
```

Neighbour queries that see across the edges:

```python
from protolife.math import Rect, Vec2
from protolife.spatial_hash import SpatialHashGrid

grid = SpatialHashGrid(Rect.from_center_half_size(Vec2(0.0, 0.0), Vec2(50.0, 50.0)), (10, 10))
grid.insert(Vec2(45.0, 0.0), "east")
[item for _, item in grid.query(Vec2(-45.0, 0.0), 20.0)]  # ["east"]
```

Weights between colours:

```python
from protolife.colour import ParticleColour
from protolife.model import Model

model = Model.from_3x3([[0.3, 0.4, 0.5], [0.7, -0.4, 0.3], [-0.5, 0.5, 0.0]])
model.weight(ParticleColour.GREEN, ParticleColour.RED)  # 0.7
```

How far the camera may zoom out on a small screen:

```python
from protolife.params import scale_bounds

scale_bounds(1280.0, 720.0)  # (0.1, 1.5)
```

Running a world by hand:

```python
import random

from protolife.model import PRESETS
from protolife.world import Simulation

sim = Simulation(1920.0, 1080.0, rng=random.Random(7))
sim.apply_preset(PRESETS[2])
sim.respawn()          # the world starts empty
for _ in range(6):
    sim.step(1 / 60)
sim.decay()
len(sim)               # 3000
```

## The simulation

A new `Simulation` is empty; `respawn` fills it with 3000 particles, coloured
in turn, placed according to its `SpawnerConfig`, and sets the decay rate to
80. On each `step` every particle feels the pull and push of its neighbours
within the attraction radius. Closer than the repulsion radius every colour
pushes away; between that and the peak-attraction radius the colour weight
rises to full strength; beyond it the weight fades to nothing at the
attraction radius. Velocity is damped by friction and capped at 200 units per
second, and positions wrap at the world's edges.

`decay` is meant to run every 0.1 seconds. Each call recycles
`decay_rate * 0.1` of the oldest particles, placing them anew at random with a
random colour, and spares the particle passed as `follow`. `clear_particles`
empties the world and turns decay off, for designing creatures by hand with
the particle brush. `spawn_particle` adds a particle, and once the world holds
3000 it recycles the oldest instead. `set_num_colours` recolours every
particle at random when the number changes.

## Saving laws

`export_state` gives a flat mapping of the parameter fields plus `weights`, a
list of 36 whole numbers of hundredths (rounded half away from zero).
`import_state` reads such a mapping back, ignoring unknown keys, and raises
`ValueError` when a field is missing or malformed.

## The camera

`Camera` keeps a zoom scale between 0.1 and the limit from `scale_bounds`.
The view stays at the origin; panning, pinching and following move the
particles instead, which on a wrapping world looks the same. `scroll_zoom`
moves the scale by at most 0.05 per event. `select_follow` picks the nearest
particle within 25 units, unless a pinch happened in the last 0.25 seconds;
`erase` removes every particle within 30 units; `brush` places one particle.

## What it does not do

There is no window, drawing or animation: the package computes the world, and
the `Camera` only holds zoom and follow state and moves particles in response
to input given to it as numbers. Pointer, touch and scroll events must be
turned into calls on `Camera` by whatever program displays the world. Saved
laws are plain mappings; sharing them is left to the caller, and the command
only reads and writes JSON.