"""
Orthorhombic lattices: primitive, face-centered, body-centered and
base-centered.

For ORC, ORCF and ORCI the axial lengths are sorted so that a < b < c.
For ORCC a and b are swapped if needed so that a < b.
"""

import logging
import numpy as np

from .base import BravaisLattice, LatticeParameters, LatticeType
from ..symmetry import GAMMA, orthorhombic_folding

logger = logging.getLogger(__name__)


def _sorted_lengths(label: str, a: float, b: float, c: float):
    lengths = sorted((a, b, c))
    if lengths != [a, b, c]:
        logger.info(f"{label}: reordering axial lengths ({a}, {b}, {c}) "
                    f"to ({lengths[0]}, {lengths[1]}, {lengths[2]})")
    return lengths


class _SortedOrthorhombic(BravaisLattice):
    """Shared validation for lattices with a < b < c."""

    _parameter_names = ('a', 'b', 'c')

    def __init__(self, a: float, b: float, c: float):
        a, b, c = _sorted_lengths(self.label, a, b, c)
        super().__init__(LatticeParameters(a=a, b=b, c=c))

    def _validate(self):
        super()._validate()
        p = self.parameters
        self._require(p.a < p.b < p.c,
                      f"three distinct lengths, got ({p.a}, {p.b}, {p.c})")

    def _point_group(self):
        return orthorhombic_folding()


class OrthorhombicLattice(_SortedOrthorhombic):
    """
    Primitive orthorhombic Bravais lattice.

    Wigner-Seitz cell: rectangular cuboid.
    Paths: Γ-X-S-Y-Γ-Z-U-R-T-Z | Y-T | U-X | S-R
    """

    lattice_type = LatticeType.PRIMITIVE_ORTHORHOMBIC
    label = 'ORC'

    def __init__(self, a: float = 0.5, b: float = 0.8, c: float = 1.0):
        super().__init__(a, b, c)

    def _lattice_vectors(self):
        p = self.parameters
        return np.diag([p.a, p.b, p.c])

    def _wigner_seitz_faces(self):
        return 'rectangular cuboid', [(1, 0, 0), (0, 1, 0), (0, 0, 1)]

    def _symmetry_table(self):
        points = [
            (GAMMA, (0, 0, 0)),
            ('R', (0.5, 0.5, 0.5)),
            ('S', (0.5, 0.5, 0)),
            ('T', (0, 0.5, 0.5)),
            ('U', (0.5, 0, 0.5)),
            ('X', (0.5, 0, 0)),
            ('Y', (0, 0.5, 0)),
            ('Z', (0, 0, 0.5)),
        ]
        paths = [
            [GAMMA, 'X', 'S', 'Y', GAMMA, 'Z', 'U', 'R', 'T', 'Z'],
            ['Y', 'T'], ['U', 'X'], ['S', 'R'],
        ]
        return 'ORC', points, paths


class FaceCenteredOrthorhombicLattice(_SortedOrthorhombic):
    """
    Face-centered orthorhombic Bravais lattice.

    Primitive vectors: (0, b/2, c/2), (a/2, 0, c/2), (a/2, b/2, 0)

    The Wigner-Seitz cell takes several shapes without a single threshold
    and is found by the Voronoi-relevance search.  The symmetry table
    depends on the sign of 1/a² - 1/b² - 1/c²: ORCF1 (> 0), ORCF2 (< 0) and
    ORCF3 (= 0).
    """

    lattice_type = LatticeType.FACE_CENTERED_ORTHORHOMBIC
    label = 'ORCF'

    def __init__(self, a: float = 1.0, b: float = 1.2, c: float = 1.6):
        super().__init__(a, b, c)

    def _lattice_vectors(self):
        p = self.parameters
        a, b, c = p.a, p.b, p.c
        return [[0, b / 2, c / 2], [a / 2, 0, c / 2], [a / 2, b / 2, 0]]

    def _wigner_seitz_faces(self):
        return None, None

    def _symmetry_table(self):
        p = self.parameters
        a, b, c = p.a, p.b, p.c
        discriminant = 1 / a ** 2 - 1 / b ** 2 - 1 / c ** 2

        if np.isclose(discriminant * a ** 2, 0.0):
            variant = 'ORCF3'
        elif discriminant > 0:
            variant = 'ORCF1'
        else:
            variant = 'ORCF2'

        if variant == 'ORCF2':
            eta = (1 + a ** 2 / b ** 2 - a ** 2 / c ** 2) / 4
            phi = (1 + c ** 2 / b ** 2 - c ** 2 / a ** 2) / 4
            delta = (1 + b ** 2 / a ** 2 - b ** 2 / c ** 2) / 4
            points = [
                (GAMMA, (0, 0, 0)),
                ('C', (0.5, 0.5 - eta, 1 - eta)),
                ('C1', (0.5, 0.5 + eta, eta)),
                ('D', (0.5 - delta, 0.5, 1 - delta)),
                ('D1', (0.5 + delta, 0.5, delta)),
                ('L', (0.5, 0.5, 0.5)),
                ('H', (1 - phi, 0.5 - phi, 0.5)),
                ('H1', (phi, 0.5 + phi, 0.5)),
                ('X', (0, 0.5, 0.5)),
                ('Y', (0.5, 0, 0.5)),
                ('Z', (0.5, 0.5, 0)),
            ]
            paths = [
                [GAMMA, 'Y', 'C', 'D', 'X', GAMMA, 'Z', 'D1', 'H', 'C'],
                ['C1', 'Z'], ['X', 'H1'], ['H', 'Y'], ['L', GAMMA],
            ]
            return variant, points, paths

        zeta = (1 + a ** 2 / b ** 2 - a ** 2 / c ** 2) / 4
        eta = (1 + a ** 2 / b ** 2 + a ** 2 / c ** 2) / 4
        points = [
            (GAMMA, (0, 0, 0)),
            ('A', (0.5, 0.5 + zeta, zeta)),
            ('A1', (0.5, 0.5 - zeta, 1 - zeta)),
            ('L', (0.5, 0.5, 0.5)),
            ('T', (1, 0.5, 0.5)),
            ('X', (0, eta, eta)),
            ('Y', (0.5, 0, 0.5)),
            ('Z', (0.5, 0.5, 0)),
        ]
        if variant == 'ORCF1':
            points.insert(6, ('X1', (1, 1 - eta, 1 - eta)))
            paths = [
                [GAMMA, 'Y', 'T', 'Z', GAMMA, 'X', 'A1', 'Y'],
                ['T', 'X1'], ['X', 'A', 'Z'], ['L', GAMMA],
            ]
        else:
            paths = [
                [GAMMA, 'Y', 'T', 'Z', GAMMA, 'X', 'A1', 'Y'],
                ['X', 'A', 'Z'], ['L', GAMMA],
            ]
        return variant, points, paths


class BodyCenteredOrthorhombicLattice(_SortedOrthorhombic):
    """
    Body-centered orthorhombic Bravais lattice.

    Primitive vectors: (-a/2, b/2, c/2), (a/2, -b/2, c/2), (a/2, b/2, -c/2)

    Like BCT, the Wigner-Seitz cell is an elongated dodecahedron when
    c >= sqrt(a² + b²) and a truncated octahedron otherwise.
    """

    lattice_type = LatticeType.BODY_CENTERED_ORTHORHOMBIC
    label = 'ORCI'

    def __init__(self, a: float = 1.0, b: float = 1.2, c: float = 1.6):
        super().__init__(a, b, c)

    def _lattice_vectors(self):
        p = self.parameters
        a, b, c = p.a, p.b, p.c
        return [[-a / 2, b / 2, c / 2], [a / 2, -b / 2, c / 2], [a / 2, b / 2, -c / 2]]

    def _wigner_seitz_faces(self):
        p = self.parameters
        pairs = [(1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 1, 1), (0, 1, 1), (1, 0, 1)]
        if p.c >= np.hypot(p.a, p.b):
            return 'elongated dodecahedron', pairs
        return 'truncated octahedron', pairs + [(1, 1, 0)]

    def _symmetry_table(self):
        p = self.parameters
        a, b, c = p.a, p.b, p.c
        zeta = (1 + a ** 2 / c ** 2) / 4
        eta = (1 + b ** 2 / c ** 2) / 4
        delta = (b ** 2 - a ** 2) / (4 * c ** 2)
        mu = (a ** 2 + b ** 2) / (4 * c ** 2)
        points = [
            (GAMMA, (0, 0, 0)),
            ('L', (-mu, mu, 0.5 - delta)),
            ('L1', (mu, -mu, 0.5 + delta)),
            ('L2', (0.5 - delta, 0.5 + delta, -mu)),
            ('R', (0, 0.5, 0)),
            ('S', (0.5, 0, 0)),
            ('T', (0, 0, 0.5)),
            ('W', (0.25, 0.25, 0.25)),
            ('X', (-zeta, zeta, zeta)),
            ('X1', (zeta, 1 - zeta, -zeta)),
            ('Y', (eta, -eta, eta)),
            ('Y1', (1 - eta, eta, -eta)),
            ('Z', (0.5, 0.5, -0.5)),
        ]
        paths = [
            [GAMMA, 'X', 'L', 'T', 'W', 'R', 'X1', 'Z', GAMMA, 'Y', 'S', 'W'],
            ['L1', 'Y'], ['Y1', 'Z'],
        ]
        return 'ORCI', points, paths


class BaseCenteredOrthorhombicLattice(BravaisLattice):
    """
    Base-centered (C-centered) orthorhombic Bravais lattice, a < b.

    Primitive vectors: (a/2, -b/2, 0), (a/2, b/2, 0), (0, 0, c)

    Wigner-Seitz cell: hexagonal prism whose cross-section is the
    centered-rectangular hexagon.
    """

    lattice_type = LatticeType.BASE_CENTERED_ORTHORHOMBIC
    label = 'ORCC'
    _parameter_names = ('a', 'b', 'c')

    def __init__(self, a: float = 0.5, b: float = 1.0, c: float = 1.0):
        if a > b:
            logger.info(f"{self.label}: swapping a={a} and b={b} so that a < b")
            a, b = b, a
        super().__init__(LatticeParameters(a=a, b=b, c=c))

    def _validate(self):
        super()._validate()
        p = self.parameters
        self._require(p.a != p.b, f"a != b, got a = b = {p.a}")

    def _lattice_vectors(self):
        p = self.parameters
        a, b, c = p.a, p.b, p.c
        return [[a / 2, -b / 2, 0], [a / 2, b / 2, 0], [0, 0, c]]

    def _wigner_seitz_faces(self):
        return 'hexagonal prism', [(1, 0, 0), (0, 1, 0), (1, 1, 0), (0, 0, 1)]

    def _symmetry_table(self):
        p = self.parameters
        zeta = (1 + p.a ** 2 / p.b ** 2) / 4
        points = [
            (GAMMA, (0, 0, 0)),
            ('A', (zeta, zeta, 0.5)),
            ('A1', (-zeta, 1 - zeta, 0.5)),
            ('R', (0, 0.5, 0.5)),
            ('S', (0, 0.5, 0)),
            ('T', (-0.5, 0.5, 0.5)),
            ('X', (zeta, zeta, 0)),
            ('X1', (-zeta, 1 - zeta, 0)),
            ('Y', (-0.5, 0.5, 0)),
            ('Z', (0, 0, 0.5)),
        ]
        paths = [
            [GAMMA, 'X', 'S', 'R', 'A', 'Z', GAMMA, 'Y', 'X1', 'A1', 'T', 'Y'],
            ['Z', 'T'],
        ]
        return 'ORCC', points, paths

    def _point_group(self):
        return orthorhombic_folding()
