# erosionsim

Procedural terrain built from layered Perlin noise, then shaped by a
droplet-based hydraulic erosion simulation. Simulated water droplets run
downhill over a height grid, picking up sediment where they can carry
more and dropping it where they slow down or climb, carving valleys and
ridges into the landscape.

The package is pure Python with no third-party dependencies and needs
Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command:

```
erosionsim --help
```

It builds a terrain grid from octave Perlin noise, erodes it and prints a
short report: the droplet count and lifetime, the number of erosion
batches, the number of recorded trail points and the minimum and maximum
grid height.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--width` | 300 | grid width in vertices |
| `--depth` | 300 | grid depth in vertices |
| `--spacing` | 1.0 | distance between vertices |
| `--frequency` | 3.0 | noise frequency |
| `--octaves` | 6 | noise octaves |
| `--height` | 90 | maximum terrain height |
| `--droplets` | 40000 | droplets to simulate |
| `--lifetime` | 30 | droplet lifetime (reported) |
| `--lock-ratio` | off | use the width as the depth too |
| `--seed` | none | random seed for droplet placement |
| `--output` | none | write the eroded grid as `x,y,z` CSV rows to this file |

The droplet count is rounded toward zero to a whole number of thousands
(`erosionsim.cli.round_droplet_count`) and run in batches of 1000
droplets. Each batch uses a fixed droplet lifetime of 30 steps; the
`--lifetime` value is printed but does not change the simulation.

```
erosionsim --width 128 --depth 128 --droplets 20000 --seed 7 --output grid.csv
```

## Library use

### Perlin noise

`erosionsim.perlin.PerlinNoise` is a seeded, deterministic noise source.
Its permutation table is shuffled with a Mersenne Twister
(`erosionsim.perlin.MT19937`, the standard 32-bit mt19937 sequence), so
the same seed always gives the same noise. `reseed` also accepts any
callable that returns random integers. Without a seed the classic
permutation table is used.

```python
from erosionsim.perlin import PerlinNoise

noise = PerlinNoise(123456)

value = noise.noise2d(0.25, 0.75)                 # in [-1, 1]
height = noise.octave2d_01(0.25, 0.75, 6, 0.5)    # clamped to [0, 1]
smooth = noise.normalized_octave2d(0.25, 0.75, 6, 0.5)

state = noise.serialize()       # the 256-entry permutation table as bytes
copy = PerlinNoise(1)
copy.deserialize(state)         # now produces the same noise as `noise`
```

`deserialize` raises `ValueError` unless it is given exactly 256 entries.

Each method exists for one, two and three dimensions (`1d`, `2d`, `3d`):

- `noise1d`, `noise2d`, `noise3d`: raw noise in `[-1, 1]`
- `noise1d_01` ...: remapped to `[0, 1]`
- `octave1d` ...: summed over octaves, unbounded
- `octave1d_11` ...: octave noise clamped to `[-1, 1]`
- `octave1d_01` ...: octave noise clamped and remapped to `[0, 1]`
- `normalized_octave1d` ...: octave noise divided by the total amplitude
- `normalized_octave1d_01` ...: the same, remapped to `[0, 1]`

The octave methods take `persistence` with a default of 0.5. The helpers
`fade`, `lerp`, `grad` and `max_amplitude` are available as module
functions.

### Terrain and erosion

Height grids are row-major lists of mutable `[x, y, z]` vertices, `y`
being the height.

- `erosionsim.terrain.TerrainGenerator` is the abstract strategy with
  `generate_terrain(height_grid, width, depth, spacing, max_height)`.
- `erosionsim.terrain.PerlinNoiseGenerator` fills the grid from
  fixed-seed octave noise, with `frequency`, `octaves` and `max_height`
  attributes.
- `erosionsim.erosion.HydraulicErosion` runs the droplet simulation over
  a height grid in place (`erode`) and records every droplet step as an
  `(x, height, z, lifetime)` tuple in `trail_points`
  (`clear_trail_points` empties it). It takes an optional
  `random.Random` for droplet placement. Its rates (`erosion_rate`,
  `deposition_rate`, `evaporation_rate`, `inertia_factor`, `gravity`,
  `erosion_radius` and others) are plain attributes.
  `height_and_gradient` returns a `HeightAndGradient` with the bilinearly
  interpolated height and gradient at a world position.
- `erosionsim.plane.Plane` ties these together: it owns the grid and its
  triangle mesh (`vertices`), regenerates the terrain (`generate`,
  `regenerate`), passes frequency and octave changes to a Perlin
  generator (`set_noise_frequency`, `set_noise_octaves`, applied on the
  next regenerate), swaps the generator (`set_terrain_generator`), erodes
  (`apply_hydraulic_erosion`) and rebuilds the mesh (`refresh_mesh`).
- `erosionsim.plane.build_triangle_mesh` expands a grid into two
  triangles per cell; grids narrower than two vertices give an empty mesh.

```python
import random
from erosionsim.plane import Plane

plane = Plane(64, 64, 1.0, random.Random(0))
plane.apply_hydraulic_erosion(1000, 30)
print(len(plane.vertices), len(plane.trail_points))
```

### Interaction state

`erosionsim.scene.Scene` holds a plane together with view state and
responds to the controls of an interactive viewer: `resize` (rebuilds
the perspective projection), terrain updates (`update_terrain_frequency`,
`update_terrain_octaves`, `update_grid_width`, `update_grid_depth`,
`update_terrain_height`, each regenerating the plane), erosion runs
(`call_erosion_event`, returning the number of batches) and keys
(`key_press` with `Key.E` to erode 40000 droplets, `Key.W` to toggle
wireframe mode, `Key.V` to toggle trail display; `key_release`;
`process_keys` returning the `(dx, dz)` movement of the held arrow keys
in `keys_pressed`). Set `on_update` to a callable to be told when the
view should be redrawn.

`erosionsim.camera.CameraControl` turns mouse presses, drags and wheel
movement into rotation (left button), panning (right button) and zoom
along z, kept in `WinParams` and `model_pos`.

`erosionsim.trails.DropletVisualizer` turns trail points into positions
and RGBA colours (`trail_vertex_data`), with the lifetime mapped to the
red channel; `toggle` switches trail display on and off.

## What it does not do

The package does not open a window or draw anything. There is no
graphical viewer, no OpenGL rendering and no shaders: `Scene`,
`CameraControl` and `DropletVisualizer` compute the state and vertex data
such a viewer would use, and the command line reports on the terrain and
can save it as CSV.