"""
Tetragonal lattices: primitive and body-centered.
"""

import logging
import numpy as np

from .base import BravaisLattice, LatticeParameters, LatticeType
from ..symmetry import GAMMA, tetragonal_folding

logger = logging.getLogger(__name__)


class TetragonalLattice(BravaisLattice):
    """
    Primitive tetragonal Bravais lattice, a = b != c.

    Wigner-Seitz cell: square prism.
    Paths: Γ-X-M-Γ-Z-R-A-Z | X-R | M-A
    """

    lattice_type = LatticeType.PRIMITIVE_TETRAGONAL
    label = 'TET'
    _parameter_names = ('a', 'c')

    def __init__(self, a: float = 1.0, c: float = 0.5):
        super().__init__(LatticeParameters(a=a, b=a, c=c))

    def _validate(self):
        super()._validate()
        p = self.parameters
        self._require(p.a != p.c, f"c != a, got a = c = {p.a} (use a cubic lattice)")

    def _lattice_vectors(self):
        p = self.parameters
        return np.diag([p.a, p.a, p.c])

    def _wigner_seitz_faces(self):
        return 'square prism', [(1, 0, 0), (0, 1, 0), (0, 0, 1)]

    def _symmetry_table(self):
        points = [
            (GAMMA, (0, 0, 0)),
            ('A', (0.5, 0.5, 0.5)),
            ('M', (0.5, 0.5, 0)),
            ('R', (0, 0.5, 0.5)),
            ('X', (0, 0.5, 0)),
            ('Z', (0, 0, 0.5)),
        ]
        paths = [[GAMMA, 'X', 'M', GAMMA, 'Z', 'R', 'A', 'Z'], ['X', 'R'], ['M', 'A']]
        return 'TET', points, paths

    def _point_group(self):
        return tetragonal_folding()


class BodyCenteredTetragonalLattice(BravaisLattice):
    """
    Body-centered tetragonal Bravais lattice.

    Primitive vectors: (-a/2, a/2, c/2), (a/2, -a/2, c/2), (a/2, a/2, -c/2)

    The Wigner-Seitz cell bifurcates at c = √2 a:

    - c < √2 a: truncated octahedron, 7 face pairs
    - c >= √2 a: elongated dodecahedron, 6 face pairs; the square faces
      normal to a1 + a2 = (0, 0, c) shrink to nothing at the threshold

    The symmetry table has two variants: BCT1 (c < a, 7 points) and BCT2
    (c > a, 9 points).

    Parameters
    ----------
    a : float
        Length of the square base
    c : float
        Height of the conventional cell, c != a
    """

    lattice_type = LatticeType.BODY_CENTERED_TETRAGONAL
    label = 'BCT'
    _parameter_names = ('a', 'c')

    def __init__(self, a: float = 1.0, c: float = 0.5):
        super().__init__(LatticeParameters(a=a, b=a, c=c))

    def _validate(self):
        super()._validate()
        p = self.parameters
        self._require(p.a != p.c, f"c != a, got a = c = {p.a} (use a BCC lattice)")

    def _lattice_vectors(self):
        p = self.parameters
        a, c = p.a, p.c
        return [[-a / 2, a / 2, c / 2], [a / 2, -a / 2, c / 2], [a / 2, a / 2, -c / 2]]

    def _wigner_seitz_faces(self):
        p = self.parameters
        pairs = [(1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 1, 1), (0, 1, 1), (1, 0, 1)]
        if p.c >= np.sqrt(2) * p.a:
            return 'elongated dodecahedron', pairs
        return 'truncated octahedron', pairs + [(1, 1, 0)]

    def _symmetry_table(self):
        p = self.parameters
        a, c = p.a, p.c
        if c < a:
            eta = (1 + c ** 2 / a ** 2) / 4
            points = [
                (GAMMA, (0, 0, 0)),
                ('M', (-0.5, 0.5, 0.5)),
                ('N', (0, 0.5, 0)),
                ('P', (0.25, 0.25, 0.25)),
                ('X', (0, 0, 0.5)),
                ('Z', (eta, eta, -eta)),
                ('Z1', (-eta, 1 - eta, eta)),
            ]
            paths = [[GAMMA, 'X', 'M', GAMMA, 'Z', 'P', 'N', 'Z1', 'M'], ['X', 'P']]
            return 'BCT1', points, paths

        eta = (1 + a ** 2 / c ** 2) / 4
        zeta = a ** 2 / (2 * c ** 2)
        points = [
            (GAMMA, (0, 0, 0)),
            ('N', (0, 0.5, 0)),
            ('P', (0.25, 0.25, 0.25)),
            ('Σ', (-eta, eta, eta)),
            ('Σ1', (eta, 1 - eta, -eta)),
            ('X', (0, 0, 0.5)),
            ('Y', (-zeta, zeta, 0.5)),
            ('Y1', (0.5, 0.5, -zeta)),
            ('Z', (0.5, 0.5, -0.5)),
        ]
        paths = [[GAMMA, 'X', 'Y', 'Σ', GAMMA, 'Z', 'Σ1', 'N', 'P', 'Y1', 'Z'], ['X', 'P']]
        return 'BCT2', points, paths

    def _point_group(self):
        return tetragonal_folding()
