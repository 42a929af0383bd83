"""One MUSCL advection step with superbee/minmod limiting on (r, z) grids."""

__version__ = "0.1.0"
__all__ = ["__version__"]