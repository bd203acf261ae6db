"""
Hexagonal family: hexagonal prism and rhombohedral lattices.
"""

import numpy as np

from .base import BravaisLattice, LatticeParameters, LatticeType
from ..symmetry import GAMMA, PointGroupFolding, hexagonal_folding


class HexagonalPrismLattice(BravaisLattice):
    """
    Primitive hexagonal Bravais lattice (3D).

    Primitive vectors: (a/2, -a√3/2, 0), (a/2, a√3/2, 0), (0, 0, c)

    Wigner-Seitz cell: hexagonal prism.
    Paths: Γ-M-K-Γ-A-L-H-A | L-M | K-H
    """

    lattice_type = LatticeType.PRIMITIVE_HEXAGONAL_PRISM
    label = 'HEX'
    _parameter_names = ('a', 'c')

    def __init__(self, a: float = 1.0, c: float = 1.0):
        super().__init__(LatticeParameters(a=a, b=a, c=c, gamma=2 * np.pi / 3))

    def _lattice_vectors(self):
        p = self.parameters
        a, c = p.a, p.c
        return [[a / 2, -a * np.sqrt(3) / 2, 0], [a / 2, a * np.sqrt(3) / 2, 0], [0, 0, c]]

    def _wigner_seitz_faces(self):
        return 'hexagonal prism', [(1, 0, 0), (0, 1, 0), (1, 1, 0), (0, 0, 1)]

    def _symmetry_table(self):
        points = [
            (GAMMA, (0, 0, 0)),
            ('A', (0, 0, 0.5)),
            ('H', (1 / 3, 1 / 3, 0.5)),
            ('K', (1 / 3, 1 / 3, 0)),
            ('L', (0.5, 0, 0.5)),
            ('M', (0.5, 0, 0)),
        ]
        paths = [
            [GAMMA, 'M', 'K', GAMMA, 'A', 'L', 'H', 'A'],
            ['L', 'M'], ['K', 'H'],
        ]
        return 'HEX', points, paths

    def _point_group(self):
        return hexagonal_folding()


class RhombohedralLattice(BravaisLattice):
    """
    Rhombohedral (trigonal) Bravais lattice.

    Three primitive vectors of length a with equal mutual angle alpha,
    arranged symmetrically about the z axis:

        a1 = (a cos(α/2), -a sin(α/2), 0)
        a2 = (a cos(α/2),  a sin(α/2), 0)
        a3 = (a cos α / cos(α/2), 0, a sqrt(1 - cos²α / cos²(α/2)))

    Regimes
    -------
    α < π/2 : Wigner-Seitz rhombic dodecahedron (a_i and a_i - a_j),
              symmetry table RHL1
    α >= π/2: Wigner-Seitz truncated octahedron (a_i, a_i + a_j and
              a1 + a2 + a3), symmetry table RHL2

    At α = π/2 the lattice is simple cubic; the extra truncated-octahedron
    faces have zero area and the cell is the cube.

    Parameters
    ----------
    a : float
        Rhombohedral edge length
    alpha : float
        Angle between any two primitive vectors, 0 < α < 2π/3
    """

    lattice_type = LatticeType.PRIMITIVE_RHOMBOHEDRAL
    label = 'RHL'
    _parameter_names = ('a', 'alpha')

    def __init__(self, a: float = 1.0, alpha: float = 0.25 * np.pi):
        super().__init__(LatticeParameters(a=a, b=a, c=a, alpha=alpha, beta=alpha, gamma=alpha))

    def _validate(self):
        self._require_positive('a')
        alpha = self.parameters.alpha
        self._require(0 < alpha < 2 * np.pi / 3, f"0 < alpha < 2π/3, got {alpha}")

    def _lattice_vectors(self):
        p = self.parameters
        a, alpha = p.a, p.alpha
        ch, sh = np.cos(alpha / 2), np.sin(alpha / 2)
        ratio = np.cos(alpha) / ch
        return [
            [a * ch, -a * sh, 0],
            [a * ch, a * sh, 0],
            [a * ratio, 0, a * np.sqrt(1 - ratio ** 2)],
        ]

    def _wigner_seitz_faces(self):
        if self.parameters.alpha < 0.5 * np.pi:
            return 'rhombic dodecahedron', [
                (1, 0, 0), (0, 1, 0), (0, 0, 1),
                (1, -1, 0), (0, 1, -1), (1, 0, -1),
            ]
        return 'truncated octahedron', [
            (1, 0, 0), (0, 1, 0), (0, 0, 1),
            (1, 1, 0), (0, 1, 1), (1, 0, 1), (1, 1, 1),
        ]

    def _symmetry_table(self):
        alpha = self.parameters.alpha
        if alpha < 0.5 * np.pi:
            eta = (1 + 4 * np.cos(alpha)) / (2 + 4 * np.cos(alpha))
            nu = 0.75 - eta / 2
            points = [
                (GAMMA, (0, 0, 0)),
                ('B', (eta, 0.5, 1 - eta)),
                ('B1', (0.5, 1 - eta, eta - 1)),
                ('F', (0.5, 0.5, 0)),
                ('L', (0.5, 0, 0)),
                ('L1', (0, 0, -0.5)),
                ('P', (eta, nu, nu)),
                ('P1', (1 - nu, 1 - nu, 1 - eta)),
                ('P2', (nu, nu, eta - 1)),
                ('Q', (1 - nu, nu, 0)),
                ('X', (nu, 0, -nu)),
                ('Z', (0.5, 0.5, 0.5)),
            ]
            paths = [
                [GAMMA, 'L', 'B1'],
                ['B', 'Z', GAMMA, 'X'],
                ['Q', 'F', 'P1', 'Z'],
                ['L', 'P'],
            ]
            return 'RHL1', points, paths

        eta = 1 / (2 * np.tan(alpha / 2) ** 2)
        nu = 0.75 - eta / 2
        points = [
            (GAMMA, (0, 0, 0)),
            ('F', (0.5, -0.5, 0)),
            ('L', (0.5, 0, 0)),
            ('P', (1 - nu, -nu, 1 - nu)),
            ('P1', (nu, nu - 1, nu - 1)),
            ('Q', (eta, eta, eta)),
            ('Q1', (1 - eta, -eta, -eta)),
            ('Z', (0.5, -0.5, 0.5)),
        ]
        paths = [[GAMMA, 'P', 'Z', 'Q', GAMMA, 'F', 'P1', 'Q1', 'L', 'Z']]
        return 'RHL2', points, paths

    def _point_group(self):
        # D3d: inversion along the three-fold axis, then the A2 chamber
        a1, a2, a3 = self.get_lattice_vectors()
        return PointGroupFolding('D3d',
                                 walls=[a1 - a2, a2 - a3],
                                 inversion_axis=a1 + a2 + a3)
