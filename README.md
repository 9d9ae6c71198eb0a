# simlab

A collection of small numerical experiments gathered into one package:

- **Images** – read and write 24-bit uncompressed BMP files, convert between
  RGB and YCbCr, compress images with a Haar wavelet transform or by cutting
  frequencies of a 2-D Fourier transform, and measure an image's total
  variation.
- **Simulations** – "particle life" with a colour interaction matrix (an
  all-pairs version and an array version with a spatial grid), 2-D gravity
  between point masses, and a small 3-D ray caster over bounded planes.
- **Automata and numbers** – a random percolation growth automaton, a
  two-channel vector cell automaton, Syracuse (Collatz) stopping times, a
  text format for drawings, and prime-factor counts drawn as a "prime galaxy".

Python 3.10 or later is required; the only runtime dependency is NumPy.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

### Total variation

```
simlab-total-variation picture.bmp
```

Reads a 24-bit BMP, converts it to a luminosity plane scaled to [0, 1] and
prints `Total Variation: <value>`. It exits with status 1 and a message on
standard error when the argument count is wrong, the file cannot be opened or
it is not a supported BMP.

### Compression

```
simlab-compress picture.bmp 50
simlab-compress picture.bmp 50 smaller.bmp --method fourier
simlab-compress picture.bmp 20 --method naive
simlab-compress picture.bmp 50 --levels 4
```

Arguments:

- `input` – the BMP file to read (24-bit, uncompressed).
- `rate` – an integer compression rate.
- `output` (optional) – where to write the result; by default
  `<name>_compressed.bmp` next to the input.
- `-m/--method` – `wavelet` (default), `fourier` or `naive`.
- `-l/--levels` – number of wavelet levels (default 3).

With `wavelet` each of the Y, Cb and Cr planes is thresholded at `rate / 100`
and the coefficient statistics of each plane are printed. With `fourier` the
rate is the cutoff radius of the smooth low-pass filter; with `naive` it is
the cutoff of the box filter computed with term-by-term transforms (slow on
large images).

## Library use

### Images

```python
from simlab.bmp import BmpFormatError, read_bmp, write_bmp
from simlab.compress import compress_fourier, compress_wavelet

try:
    pixels = read_bmp("picture.bmp")
except BmpFormatError as exc:
    print("cannot use this file:", exc)
else:
    image, stats = compress_wavelet(pixels, 3, 0.5)
    for plane_stats in stats:
        print(plane_stats)
    write_bmp("picture-wavelet.bmp", image)

    write_bmp("picture-fourier.bmp", compress_fourier(pixels, 100))
```

- `simlab.bmp` – `read_bmp(path)` returns rows of `RGB` pixels, top row
  first; `read_bmp_grayscale(path)` returns a NumPy luminosity plane in
  [0, 1]; `write_bmp(path, pixels)` writes rows of `(r, g, b)` values.
  Unsupported files raise `BmpFormatError` (a `ValueError`).
- `simlab.color` – the `RGB` named tuple, `rgb_to_y`, `rgb_to_cb`,
  `rgb_to_cr`, `ycbcr_to_rgb`, `image_to_planes` and `planes_to_image`.
- `simlab.wavelet` – `haar_decompose` and `haar_reconstruct` for one 1-D
  step; `WaveletTransform(width, height, levels)` with `forward(plane)`,
  `threshold(value)` (returns how many coefficients it cleared) and
  `inverse()`; `wavelet_compress(plane, levels, threshold)`, which returns
  the reconstructed plane and a `CompressionStats` (`total`, `zeroed`,
  `threshold`, `percentage`); plus `next_power_of_2`, `magnitude_spectrum`
  and `normalize_for_display` for turning coefficients into bytes.
- `simlab.fourier` – `dft`, `idft`, `dft_2d`, `idft_2d`, and the filters
  `smooth_lowpass(plane, cutoff)` (exponential roll-off past the cutoff
  radius) and `box_lowpass(plane, cutoff)` (hard cut per axis).
- `simlab.compress` – `compress_fourier(pixels, cutoff)`,
  `compress_fourier_naive(pixels, rate)` and
  `compress_wavelet(pixels, levels, threshold)`.
- `simlab.total_variation` – `rgb_to_gray(r, g, b)` and
  `total_variation(image, h)`.

### Particle life

```python
import random

from simlab.particle_grid import ParticleSystem, SpatialGrid, compute_forces
from simlab.particle_life import random_interaction_matrix

rng = random.Random(1)
matrix = random_interaction_matrix(3, rng)
system = ParticleSystem.random(1000, 800, 800, 3, rng)
grid = SpatialGrid(800, 800, 300.0)

for _ in range(100):
    grid.update(system)
    compute_forces(system, grid, matrix, 5.0, 300.0, 10.0)
    system.step(100.0, 0.993, 800, 800)
```

`simlab.particle_life` holds the all-pairs version: the `Particle` dataclass
with `advance(time_step)`, `interact(a, b, r_min, r_max, matrix, repulse)`,
`random_interaction_matrix` and `particle_color`, which maps colours 0, 1, 2
to green, red and blue.

### Gravity

`simlab.gravity` provides the `Body` dataclass with `advance(time_step)`,
`gravitate(a, b, g)` (attraction `m_a * m_b / (g * d^2)`), `repulse` (stops
two bodies within unit distance), `collide_box`, `wrap_torus` and
`simulate_step(bodies, g, time_step, pairwise)`; with `pairwise=False` only
pairs involving the last body attract.

### Ray casting

`simlab.raycast` provides `solve_3x3` (raises `ValueError` on a singular
matrix), `Plane` with `intersect(direction, origin)`, `rotate_ray`,
`raycast(planes, depth, size, origin, theta)`, which returns a
`(size, size, 3)` image, `point_on_line`, and the `Particle3D` dataclass with
`advance` and `gravitate_3d`.

### Automata and numbers

```python
from simlab.automata import stopping_time, syracuse
from simlab.primes import count_prime_factors, render_primeness

print(syracuse(7))                # 22
print(stopping_time(6))           # 8
print(count_prime_factors(12))    # 3  (2 * 2 * 3)

image = render_primeness(400, (200, 200), zoom=2, max_radius=10_000)
```

- `simlab.automata` – `count_neighbours`, `percolation_step`,
  `vector_cell_step`, `syracuse`, `stopping_time`, `syracuse_color` and
  `drawing_to_text`.
- `simlab.primes` – `count_prime_factors`, `prime_factor_counts`,
  `primeness`, `primeness_color`, `render_primeness`, `zoom_in` and
  `zoom_out`.

## What it does not do

simlab opens no windows and takes no keyboard or mouse input: the
simulations, automata and renderers return plain data (numbers, lists, NumPy
arrays, RGB tuples) for you to step, inspect, plot or save yourself. The only
commands are the two described above.