# musclflow

`musclflow` advances a density field by one explicit finite-volume step on a
structured 2-D (r, z) grid. Face states come from a MUSCL kappa-scheme
reconstruction. A slope limiter bounds them: `b = 2` gives superbee and
`b = 1` gives minmod. Fluxes are upwinded on the face velocity.

Everything lives in `musclflow.superbee`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import numpy as np
from musclflow.superbee import minmod, muscl_superbee_e

nx, ny = 16, 16
rho = np.zeros((nx + 1, ny + 1))
rho[4:8, 4:8] = 1.0
u = np.full_like(rho, 0.1)      # r velocity on cell faces
v = np.full_like(rho, 0.2)      # z velocity on cell faces
sr = np.ones_like(rho)          # r face areas
sz = np.ones_like(rho)          # z face areas
vol = np.ones_like(rho)         # cell volumes
flags = np.zeros(rho.shape, dtype=int)

muscl_superbee_e(rho, u, v, 0.1, 1.0 / 3.0, 2.0, nx, ny,
                 sr, sz, vol, flags, flags, flags)
```

## Functions

- `minmod(r1, r2, b)` is the limiter on its own. It takes scalars or arrays, and the sign of the result follows `r2`. `max3(a, b, c)` and `min2(a, b)` are the small helpers it is built from.
- `muscl_superbee(rho, u, v, dt, kappa, b, nx, ny, sr, sz, vol, iflag, jflag, outflag, upwind_on_zero)` performs one step. It updates `rho` in place and also returns it.
- `muscl_superbee_pion`, `muscl_superbee_e` and `muscl_superbee_mion` take the same arguments but leave out `upwind_on_zero`. The electron variant passes `True`, so a z velocity of exactly zero is treated as positive. The two ion variants pass `False`.

## Arguments and behaviour

- Index `i` runs along r (axis 0) and `j` runs along z (axis 1). Every array must be 2-D and at least `nx` x `ny`.
- `rho` must be a floating-point numpy array. A `TypeError` is raised otherwise.
- A `ValueError` is raised if `nx` or `ny` is not positive, or if any array is too small.
- Cells below index 0 are read as zero density.
- A neighbour just beyond `nx - 1` or `ny - 1` is read from `rho` when the array extends that far. Otherwise it is read as zero.
- The flux through the lower r face of the first row (`i = 0`) is zero.
- Only cells `[:nx-1, :ny-1]` are updated. The last row and the last column are left as they are.
- `iflag` marks cells that use a first-order flux, built from the cell's own density, on their lower r face.
- `jflag` marks cells that do the same on their upper z face.
- `outflag` marks cells that do both.
- `kappa` weights the two limited slopes in the reconstruction.

## What it does not do

This package provides only the transport step. It does not generate meshes,
solve for the electric field, compute drift velocities or reaction rates, or
run a time loop. The caller supplies the velocities, face areas, volumes and
flag arrays, and calls the step repeatedly.