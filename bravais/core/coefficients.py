"""
Periodic coefficient functions defined on a lattice.

These are pure functions of position handed to a finite-element layer:

- LatticeCoefficient: piecewise constant, one value inside cylindrical
  rods joining each lattice point to its Wigner-Seitz neighbours, another
  value elsewhere
- RealModeCoefficient / ImagModeCoefficient: one plane-wave Fourier mode of
  the reciprocal lattice, amp * exp(i G·x) with G = Σ n_i b_i
- RealPhaseCoefficient / ImagPhaseCoefficient: Bloch phase
  amp * exp(i κ·x) for an arbitrary wave vector κ

All coefficients accept a single point of shape (dim,) or an array of
points of shape (N, dim).
"""

import numpy as np
from typing import Sequence

from .lattice.base import BravaisLattice


class LatticeCoefficient:
    """
    Indicator of the rods along the Wigner-Seitz translation vectors.

    Parameters
    ----------
    lattice : BravaisLattice
        Lattice providing translation vectors and face radii
    frac : float
        Rod radius as a fraction of the face's inscribed radius, 0 < frac <= 1
    val0 : float
        Value outside the rods
    val1 : float
        Value inside the rods

    Notes
    -----
    A point is first mapped into the Wigner-Seitz cell.  It lies in a rod if
    its distance to the line through the origin along some translation
    vector t is at most frac times the inscribed radius of t's face.
    """

    def __init__(self, lattice: BravaisLattice, frac: float = 0.5,
                 val0: float = 0.0, val1: float = 1.0):
        if not 0 < frac <= 1:
            raise ValueError(f"frac must lie in (0, 1], got {frac}")
        self.lattice = lattice
        self.frac = frac
        self.val0 = val0
        self.val1 = val1
        t = lattice.get_translation_vectors()
        self._axes = t / np.linalg.norm(t, axis=1)[:, None]
        self._radii = frac * lattice.get_face_radii()

    def in_rod(self, x: np.ndarray) -> bool:
        y, _ = self.lattice.map_to_wigner_seitz_cell(x)
        along = self._axes @ y
        distances = np.sqrt(np.maximum(y @ y - along ** 2, 0.0))
        return bool(np.any(distances <= self._radii))

    def __call__(self, x: np.ndarray):
        x = np.asarray(x, dtype=float)
        if x.ndim == 1:
            return self.val1 if self.in_rod(x) else self.val0
        return np.array([self.val1 if self.in_rod(p) else self.val0 for p in x])


class _ModeCoefficient:
    def __init__(self, lattice: BravaisLattice, n: Sequence[int], amp: float = 1.0):
        n = np.asarray(n, dtype=int)
        if n.shape != (lattice.dim,):
            raise ValueError(f"mode index must have {lattice.dim} entries, got {n.tolist()}")
        self.n = n
        self.amp = amp
        self.wave_vector = n @ lattice.get_reciprocal_vectors()

    def _phase(self, x) -> np.ndarray:
        return np.asarray(x, dtype=float) @ self.wave_vector


class RealModeCoefficient(_ModeCoefficient):
    """amp * cos((n0 b0 + n1 b1 + n2 b2) · x)"""

    def __call__(self, x):
        return self.amp * np.cos(self._phase(x))


class ImagModeCoefficient(_ModeCoefficient):
    """amp * sin((n0 b0 + n1 b1 + n2 b2) · x)"""

    def __call__(self, x):
        return self.amp * np.sin(self._phase(x))


class _PhaseCoefficient:
    def __init__(self, kappa: Sequence[float], amp: float = 1.0):
        self.kappa = np.asarray(kappa, dtype=float)
        self.amp = amp

    def _phase(self, x) -> np.ndarray:
        return np.asarray(x, dtype=float) @ self.kappa


class RealPhaseCoefficient(_PhaseCoefficient):
    """amp * cos(κ · x)"""

    def __call__(self, x):
        return self.amp * np.cos(self._phase(x))


class ImagPhaseCoefficient(_PhaseCoefficient):
    """amp * sin(κ · x)"""

    def __call__(self, x):
        return self.amp * np.sin(self._phase(x))
