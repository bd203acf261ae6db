"""
Cubic lattices: simple cubic, face-centered cubic and body-centered cubic.

Primitive vectors follow Setyawan & Curtarolo (2010):

    CUB: (a, 0, 0), (0, a, 0), (0, 0, a)
    FCC: (0, a/2, a/2), (a/2, 0, a/2), (a/2, a/2, 0)
    BCC: (-a/2, a/2, a/2), (a/2, -a/2, a/2), (a/2, a/2, -a/2)
"""

import numpy as np

from .base import BravaisLattice, LatticeParameters, LatticeType
from ..symmetry import GAMMA, cubic_folding


class CubicLattice(BravaisLattice):
    """
    Simple cubic Bravais lattice.

    Wigner-Seitz cell: cube (3 face pairs).

    High-symmetry points (fractional reciprocal coordinates):
        Γ = (0, 0, 0), M = (1/2, 1/2, 0), R = (1/2, 1/2, 1/2), X = (0, 1/2, 0)

    Paths: Γ-X-M-Γ-R-X | M-R

    Parameters
    ----------
    a : float, optional
        Lattice constant (default: 1.0)

    Examples
    --------
    >>> lattice = CubicLattice(a=2.0)
    >>> lattice.unit_cell_volume
    8.0
    >>> lattice.get_path_labels()
    [['Γ', 'X', 'M', 'Γ', 'R', 'X'], ['M', 'R']]
    """

    lattice_type = LatticeType.PRIMITIVE_CUBIC
    label = 'CUB'
    _parameter_names = ('a',)

    def __init__(self, a: float = 1.0):
        super().__init__(LatticeParameters(a=a, b=a, c=a))

    def _lattice_vectors(self):
        return self.parameters.a * np.eye(3)

    def _wigner_seitz_faces(self):
        return 'cube', [(1, 0, 0), (0, 1, 0), (0, 0, 1)]

    def _symmetry_table(self):
        points = [
            (GAMMA, (0, 0, 0)),
            ('M', (0.5, 0.5, 0)),
            ('R', (0.5, 0.5, 0.5)),
            ('X', (0, 0.5, 0)),
        ]
        paths = [[GAMMA, 'X', 'M', GAMMA, 'R', 'X'], ['M', 'R']]
        return 'CUB', points, paths

    def _point_group(self):
        return cubic_folding()


class FaceCenteredCubicLattice(BravaisLattice):
    """
    Face-centered cubic Bravais lattice.

    Wigner-Seitz cell: rhombic dodecahedron (6 face pairs, the 12 nearest
    neighbours).  Brillouin zone: truncated octahedron.

    Paths: Γ-X-W-K-Γ-L-U-W-L-K | U-X
    """

    lattice_type = LatticeType.FACE_CENTERED_CUBIC
    label = 'FCC'
    _parameter_names = ('a',)

    def __init__(self, a: float = 1.0):
        super().__init__(LatticeParameters(a=a, b=a, c=a))

    def _lattice_vectors(self):
        a = self.parameters.a
        return [[0, a / 2, a / 2], [a / 2, 0, a / 2], [a / 2, a / 2, 0]]

    def _wigner_seitz_faces(self):
        return 'rhombic dodecahedron', [
            (1, 0, 0), (0, 1, 0), (0, 0, 1),
            (1, -1, 0), (0, 1, -1), (1, 0, -1),
        ]

    def _symmetry_table(self):
        points = [
            (GAMMA, (0, 0, 0)),
            ('K', (3 / 8, 3 / 8, 3 / 4)),
            ('L', (0.5, 0.5, 0.5)),
            ('U', (5 / 8, 1 / 4, 5 / 8)),
            ('W', (0.5, 0.25, 0.75)),
            ('X', (0.5, 0, 0.5)),
        ]
        paths = [[GAMMA, 'X', 'W', 'K', GAMMA, 'L', 'U', 'W', 'L', 'K'], ['U', 'X']]
        return 'FCC', points, paths

    def _point_group(self):
        return cubic_folding()


class BodyCenteredCubicLattice(BravaisLattice):
    """
    Body-centered cubic Bravais lattice.

    Wigner-Seitz cell: truncated octahedron (8 nearest and 6 next-nearest
    neighbours, 7 face pairs).  Brillouin zone: rhombic dodecahedron.

    Paths: Γ-H-N-Γ-P-H | P-N
    """

    lattice_type = LatticeType.BODY_CENTERED_CUBIC
    label = 'BCC'
    _parameter_names = ('a',)

    def __init__(self, a: float = 1.0):
        super().__init__(LatticeParameters(a=a, b=a, c=a))

    def _lattice_vectors(self):
        a = self.parameters.a
        return [[-a / 2, a / 2, a / 2], [a / 2, -a / 2, a / 2], [a / 2, a / 2, -a / 2]]

    def _wigner_seitz_faces(self):
        return 'truncated octahedron', [
            (1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 1, 1),
            (0, 1, 1), (1, 0, 1), (1, 1, 0),
        ]

    def _symmetry_table(self):
        points = [
            (GAMMA, (0, 0, 0)),
            ('H', (0.5, -0.5, 0.5)),
            ('P', (0.25, 0.25, 0.25)),
            ('N', (0, 0, 0.5)),
        ]
        paths = [[GAMMA, 'H', 'N', GAMMA, 'P', 'H'], ['P', 'N']]
        return 'BCC', points, paths

    def _point_group(self):
        return cubic_folding()
