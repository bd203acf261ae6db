"""
The five planar Bravais lattices.

All planar lattices put a1 along x:

    square:               a1 = (a, 0),          a2 = (0, a)
    hexagonal:            a1 = (a, 0),          a2 = (a/2, a√3/2)
    rectangular:          a1 = (a, 0),          a2 = (0, b)
    centered rectangular: a1 = (a/2, -b/2),     a2 = (a/2, b/2)
    oblique:              a1 = (a, 0),          a2 = (b cos γ, b sin γ)
"""

import logging
import numpy as np

from .base import BravaisLattice, LatticeParameters, LatticeType
from ..symmetry import (
    GAMMA,
    square_folding,
    hexagon_folding,
    rectangle_folding,
    oblique_folding,
)

logger = logging.getLogger(__name__)


def _ordered_pair(label: str, a: float, b: float):
    """Swap a and b so that a <= b."""
    if a > b:
        logger.info(f"{label}: swapping a={a} and b={b} so that a < b")
        return b, a
    return a, b


class SquareLattice(BravaisLattice):
    """
    Square Bravais lattice.

    Wigner-Seitz cell: square.  Symmetry points Γ, X, M; path Γ-X-M-Γ.

    Parameters
    ----------
    a : float, optional
        Lattice constant (default: 1.0)

    Examples
    --------
    >>> lattice = SquareLattice(a=1.0)
    >>> lattice.unit_cell_volume
    1.0
    >>> lattice.get_number_symmetry_points()
    3
    """

    lattice_type = LatticeType.PRIMITIVE_SQUARE
    label = 'SQR'
    dim = 2
    _parameter_names = ('a',)

    def __init__(self, a: float = 1.0):
        super().__init__(LatticeParameters(a=a, b=a, gamma=0.5 * np.pi))

    def _lattice_vectors(self):
        a = self.parameters.a
        return [[a, 0.0], [0.0, a]]

    def _wigner_seitz_faces(self):
        return 'square', [(1, 0), (0, 1)]

    def _symmetry_table(self):
        points = [(GAMMA, (0, 0)), ('X', (0.5, 0)), ('M', (0.5, 0.5))]
        return 'SQR', points, [[GAMMA, 'X', 'M', GAMMA]]

    def _point_group(self):
        return square_folding()


class HexagonalLattice(BravaisLattice):
    """
    Hexagonal (triangular) planar Bravais lattice.

    Wigner-Seitz cell: regular hexagon.

    High-symmetry points in the Brillouin zone:
        Γ = [0, 0]
        M = (b1 + b2)/2, edge midpoint
        K = (2 b1 + b2)/3 = (4π/3a) [1, 0], corner

    Parameters
    ----------
    a : float, optional
        Lattice constant (default: 1.0)
    """

    lattice_type = LatticeType.PRIMITIVE_HEXAGONAL
    label = 'HEX2D'
    dim = 2
    _parameter_names = ('a',)

    def __init__(self, a: float = 1.0):
        super().__init__(LatticeParameters(a=a, b=a, gamma=np.pi / 3))

    def _lattice_vectors(self):
        a = self.parameters.a
        return [[a, 0.0], [a / 2.0, a * np.sqrt(3) / 2.0]]

    def _wigner_seitz_faces(self):
        return 'hexagon', [(1, 0), (0, 1), (1, -1)]

    def _symmetry_table(self):
        points = [(GAMMA, (0, 0)), ('M', (0.5, 0.5)), ('K', (2 / 3, 1 / 3))]
        return 'HEX2D', points, [[GAMMA, 'M', 'K', GAMMA]]

    def _point_group(self):
        return hexagon_folding()


class RectangularLattice(BravaisLattice):
    """
    Rectangular Bravais lattice with 0 < a < b.

    Parameters
    ----------
    a, b : float
        Side lengths; swapped if a > b
    """

    lattice_type = LatticeType.PRIMITIVE_RECTANGULAR
    label = 'RECT'
    dim = 2
    _parameter_names = ('a', 'b')

    def __init__(self, a: float = 0.5, b: float = 1.0):
        a, b = _ordered_pair(self.label, a, b)
        super().__init__(LatticeParameters(a=a, b=b, gamma=0.5 * np.pi))

    def _validate(self):
        super()._validate()
        p = self.parameters
        self._require(p.a != p.b, f"a != b, got a = b = {p.a} (use a square lattice)")

    def _lattice_vectors(self):
        p = self.parameters
        return [[p.a, 0.0], [0.0, p.b]]

    def _wigner_seitz_faces(self):
        return 'rectangle', [(1, 0), (0, 1)]

    def _symmetry_table(self):
        points = [(GAMMA, (0, 0)), ('X', (0.5, 0)), ('S', (0.5, 0.5)), ('Y', (0, 0.5))]
        return 'RECT', points, [[GAMMA, 'X', 'S', 'Y', GAMMA]]

    def _point_group(self):
        return rectangle_folding()


class CenteredRectangularLattice(BravaisLattice):
    """
    Centered rectangular Bravais lattice with 0 < a < b.

    The conventional cell is a x b with a lattice point at its centre.
    The Wigner-Seitz cell is a hexagon bounded by the bisectors of a1, a2
    and a1 + a2.

    Symmetry points (ζ = (1 + a²/b²)/4):
        X = (ζ, ζ), S = (0, 1/2), X1 = (-ζ, 1-ζ), Y = (-1/2, 1/2)
    """

    lattice_type = LatticeType.CENTERED_RECTANGULAR
    label = 'CRECT'
    dim = 2
    _parameter_names = ('a', 'b')

    def __init__(self, a: float = 0.5, b: float = 1.0):
        a, b = _ordered_pair(self.label, a, b)
        super().__init__(LatticeParameters(a=a, b=b, gamma=0.5 * np.pi))

    def _validate(self):
        super()._validate()
        p = self.parameters
        self._require(p.a != p.b, f"a != b, got a = b = {p.a} (use a square lattice)")

    def _lattice_vectors(self):
        p = self.parameters
        return [[p.a / 2, -p.b / 2], [p.a / 2, p.b / 2]]

    def _wigner_seitz_faces(self):
        return 'hexagon', [(1, 0), (0, 1), (1, 1)]

    def _symmetry_table(self):
        p = self.parameters
        zeta = (1 + p.a ** 2 / p.b ** 2) / 4
        points = [
            (GAMMA, (0, 0)),
            ('X', (zeta, zeta)),
            ('S', (0, 0.5)),
            ('X1', (-zeta, 1 - zeta)),
            ('Y', (-0.5, 0.5)),
        ]
        return 'CRECT', points, [[GAMMA, 'X', 'S', 'X1', 'Y', GAMMA]]

    def _point_group(self):
        return rectangle_folding()


class ObliqueLattice(BravaisLattice):
    """
    Oblique Bravais lattice.

    Parameters
    ----------
    a, b : float
        Lengths of a1 and a2
    gamma : float
        Angle between a1 and a2 in radians, 0 < γ < π, γ != π/2

    Notes
    -----
    The Wigner-Seitz hexagon is found by the Voronoi-relevance search.
    The third symmetry point C is the midpoint of b1 + b2 when the reciprocal
    vectors enclose an obtuse angle, and of b1 - b2 otherwise.
    """

    lattice_type = LatticeType.PRIMITIVE_OBLIQUE
    label = 'OBL'
    dim = 2
    _parameter_names = ('a', 'b', 'gamma')

    def __init__(self, a: float = 1.0, b: float = 1.2, gamma: float = 0.4 * np.pi):
        super().__init__(LatticeParameters(a=a, b=b, gamma=gamma))

    def _validate(self):
        self._require_positive('a', 'b')
        gamma = self.parameters.gamma
        self._require(0 < gamma < np.pi, f"0 < gamma < π, got {gamma}")
        self._require(not np.isclose(gamma, 0.5 * np.pi),
                      "gamma != π/2 (use a rectangular lattice)")

    def _lattice_vectors(self):
        p = self.parameters
        return [[p.a, 0.0], [p.b * np.cos(p.gamma), p.b * np.sin(p.gamma)]]

    def _wigner_seitz_faces(self):
        return None, None

    def _symmetry_table(self):
        b1, b2 = self.get_reciprocal_vectors()
        corner = (0.5, 0.5) if b1 @ b2 < 0 else (0.5, -0.5)
        points = [(GAMMA, (0, 0)), ('X', (0.5, 0)), ('Y', (0, 0.5)), ('C', corner)]
        return 'OBL', points, [['X', GAMMA, 'Y'], ['C', GAMMA]]

    def _point_group(self):
        return oblique_folding()
