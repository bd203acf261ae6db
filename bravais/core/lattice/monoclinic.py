"""
Monoclinic lattices: primitive and base-centered.

The unique axis is a1 along x; alpha is the angle between the b and c axes
in the yz plane.
"""

import logging
import numpy as np

from .base import BravaisLattice, LatticeParameters, LatticeType
from ..symmetry import GAMMA, monoclinic_folding

logger = logging.getLogger(__name__)


class MonoclinicLattice(BravaisLattice):
    """
    Primitive monoclinic Bravais lattice.

    Primitive vectors: (a, 0, 0), (0, b, 0), (0, c cos α, c sin α)

    Parameters
    ----------
    a, b, c : float
        Axial lengths; b and c are swapped if b > c
    alpha : float
        Angle between b and c, arccos(b / 2c) < α < π/2

    Notes
    -----
    Under the constraint on alpha the (b, c) net is already reduced, and
    the Wigner-Seitz cell is the hexagonal prism bounded by a1, a2, a3 and
    a3 - a2.

    Paths: Γ-Y-H-C-E-M1-A-X-H1 | M-D-Z | Y-D
    """

    lattice_type = LatticeType.PRIMITIVE_MONOCLINIC
    label = 'MCL'
    _parameter_names = ('a', 'b', 'c', 'alpha')

    def __init__(self, a: float = 1.0, b: float = 1.0, c: float = 1.2,
                 alpha: float = 0.4 * np.pi):
        if b > c:
            logger.info(f"{self.label}: swapping b={b} and c={c} so that b <= c")
            b, c = c, b
        super().__init__(LatticeParameters(a=a, b=b, c=c, alpha=alpha))

    def _validate(self):
        self._require_positive('a', 'b', 'c')
        p = self.parameters
        lower = np.arccos(p.b / (2 * p.c))
        self._require(lower < p.alpha < 0.5 * np.pi,
                      f"arccos(b/2c) = {lower:.6g} < alpha < π/2, got {p.alpha}")

    def _lattice_vectors(self):
        p = self.parameters
        return [
            [p.a, 0, 0],
            [0, p.b, 0],
            [0, p.c * np.cos(p.alpha), p.c * np.sin(p.alpha)],
        ]

    def _wigner_seitz_faces(self):
        return 'hexagonal prism', [(1, 0, 0), (0, 1, 0), (0, 0, 1), (0, -1, 1)]

    def _symmetry_table(self):
        p = self.parameters
        b, c, alpha = p.b, p.c, p.alpha
        eta = (1 - b * np.cos(alpha) / c) / (2 * np.sin(alpha) ** 2)
        nu = 0.5 - eta * c * np.cos(alpha) / b
        points = [
            (GAMMA, (0, 0, 0)),
            ('A', (0.5, 0.5, 0)),
            ('C', (0, 0.5, 0.5)),
            ('D', (0.5, 0, 0.5)),
            ('D1', (0.5, 0, -0.5)),
            ('E', (0.5, 0.5, 0.5)),
            ('H', (0, eta, 1 - nu)),
            ('H1', (0, 1 - eta, nu)),
            ('H2', (0, eta, -nu)),
            ('M', (0.5, eta, 1 - nu)),
            ('M1', (0.5, 1 - eta, nu)),
            ('M2', (0.5, eta, -nu)),
            ('X', (0, 0.5, 0)),
            ('Y', (0, 0, 0.5)),
            ('Y1', (0, 0, -0.5)),
            ('Z', (0.5, 0, 0)),
        ]
        paths = [
            [GAMMA, 'Y', 'H', 'C', 'E', 'M1', 'A', 'X', 'H1'],
            ['M', 'D', 'Z'],
            ['Y', 'D'],
        ]
        return 'MCL', points, paths

    def _point_group(self):
        return monoclinic_folding()


class BaseCenteredMonoclinicLattice(BravaisLattice):
    """
    Base-centered monoclinic Bravais lattice.

    Primitive vectors: (a/2, b/2, 0), (-a/2, b/2, 0), (0, c cos α, c sin α)

    The Wigner-Seitz cell is an elongated dodecahedron or a truncated
    octahedron depending on all four parameters.  With x = 2 b c cos α the
    primitive vectors contain an obtuse superbase, whose seven pair sums
    bound the cell, in two regimes:

    - a <= b and b² - a² <= x <= a² + b², 2x <= 4c² + b² - a²
    - a >= b and x <= 2b², x <= 2c²

    A face pair whose Selling parameter vanishes on a boundary of these
    regimes has zero area and is dropped, leaving the elongated
    dodecahedron.  Outside both regimes (long, strongly inclined c axes)
    the cell is found by the Voronoi-relevance search.

    Variants are chosen from the reciprocal angle k_γ between b1 and b2:

    - k_γ > 90°: MCLC1
    - k_γ = 90°: MCLC2
    - k_γ < 90°: MCLC3, MCLC4 or MCLC5 as b cos α / c + b² sin² α / a²
      is below, equal to or above 1
    """

    lattice_type = LatticeType.BASE_CENTERED_MONOCLINIC
    label = 'MCLC'
    _parameter_names = ('a', 'b', 'c', 'alpha')

    def __init__(self, a: float = 1.0, b: float = 1.0, c: float = 1.2,
                 alpha: float = 0.4 * np.pi):
        super().__init__(LatticeParameters(a=a, b=b, c=c, alpha=alpha))

    def _validate(self):
        self._require_positive('a', 'b', 'c')
        alpha = self.parameters.alpha
        self._require(0 < alpha < 0.5 * np.pi, f"0 < alpha < π/2, got {alpha}")

    def _lattice_vectors(self):
        p = self.parameters
        return [
            [p.a / 2, p.b / 2, 0],
            [-p.a / 2, p.b / 2, 0],
            [0, p.c * np.cos(p.alpha), p.c * np.sin(p.alpha)],
        ]

    def _wigner_seitz_faces(self):
        p = self.parameters
        a2, b2, c2 = p.a ** 2, p.b ** 2, p.c ** 2
        x = 2 * p.b * p.c * np.cos(p.alpha)
        if p.a <= p.b and b2 - a2 <= x <= a2 + b2 and 2 * x <= 4 * c2 + b2 - a2:
            # Obtuse superbase a1, -a2, a2 - a3, a3 - a1
            return 'truncated octahedron', [(1, 0, 0), (0, 1, 0), (0, 0, 1), (1, -1, 0),
                                            (0, 1, -1), (1, 0, -1), (1, 1, -1)]
        if p.a >= p.b and x <= 2 * b2 and x <= 2 * c2:
            # Obtuse superbase a1, a2, -a3, a3 - a1 - a2
            return 'truncated octahedron', [(1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 1, 0),
                                            (1, 0, -1), (0, 1, -1), (1, 1, -1)]
        return None, None

    def _select_variant(self) -> str:
        p = self.parameters
        b1, b2, _ = self.get_reciprocal_vectors()
        cos_kgamma = b1 @ b2 / (np.linalg.norm(b1) * np.linalg.norm(b2))
        if np.isclose(cos_kgamma, 0.0):
            return 'MCLC2'
        if cos_kgamma < 0:
            return 'MCLC1'
        test = p.b * np.cos(p.alpha) / p.c + p.b ** 2 * np.sin(p.alpha) ** 2 / p.a ** 2
        if np.isclose(test, 1.0):
            return 'MCLC4'
        return 'MCLC3' if test < 1 else 'MCLC5'

    def _symmetry_table(self):
        p = self.parameters
        a, b, c, alpha = p.a, p.b, p.c, p.alpha
        cos, sin2 = np.cos(alpha), np.sin(alpha) ** 2
        variant = self._select_variant()

        if variant in ('MCLC1', 'MCLC2'):
            zeta = (2 - b * cos / c) / (4 * sin2)
            eta = 0.5 + 2 * zeta * c * cos / b
            psi = 0.75 - a ** 2 / (4 * b ** 2 * sin2)
            phi = psi + (0.75 - psi) * b * cos / c
            points = [
                (GAMMA, (0, 0, 0)),
                ('N', (0.5, 0, 0)),
                ('N1', (0, -0.5, 0)),
                ('F', (1 - zeta, 1 - zeta, 1 - eta)),
                ('F1', (zeta, zeta, eta)),
                ('F2', (-zeta, -zeta, 1 - eta)),
                ('I', (phi, 1 - phi, 0.5)),
                ('I1', (1 - phi, phi - 1, 0.5)),
                ('L', (0.5, 0.5, 0.5)),
                ('M', (0.5, 0, 0.5)),
                ('X', (1 - psi, psi - 1, 0)),
                ('X1', (psi, 1 - psi, 0)),
                ('X2', (psi - 1, -psi, 0)),
                ('Y', (0.5, 0.5, 0)),
                ('Y1', (-0.5, -0.5, 0)),
                ('Z', (0, 0, 0.5)),
            ]
            if variant == 'MCLC1':
                paths = [
                    [GAMMA, 'Y', 'F', 'L', 'I'],
                    ['I1', 'Z', 'F1'],
                    ['Y', 'X1'],
                    ['X', GAMMA, 'N'],
                    ['M', GAMMA],
                ]
            else:
                paths = [
                    [GAMMA, 'Y', 'F', 'L', 'I'],
                    ['I1', 'Z', 'F1'],
                    ['N', GAMMA, 'M'],
                ]
            return variant, points, paths

        if variant in ('MCLC3', 'MCLC4'):
            mu = (1 + b ** 2 / a ** 2) / 4
            delta = b * c * cos / (2 * a ** 2)
            zeta = mu - 0.25 + (1 - b * cos / c) / (4 * sin2)
            eta = 0.5 + 2 * zeta * c * cos / b
            phi = 1 + zeta - 2 * mu
            psi = eta - 2 * delta
            points = [
                (GAMMA, (0, 0, 0)),
                ('F', (1 - phi, 1 - phi, 1 - psi)),
                ('F1', (phi, phi - 1, psi)),
                ('F2', (1 - phi, -phi, 1 - psi)),
                ('H', (zeta, zeta, eta)),
                ('H1', (1 - zeta, -zeta, 1 - eta)),
                ('H2', (-zeta, -zeta, 1 - eta)),
                ('I', (0.5, -0.5, 0.5)),
                ('M', (0.5, 0, 0.5)),
                ('N', (0.5, 0, 0)),
                ('N1', (0, -0.5, 0)),
                ('X', (0.5, -0.5, 0)),
                ('Y', (mu, mu, delta)),
                ('Y1', (1 - mu, -mu, -delta)),
                ('Y2', (-mu, -mu, -delta)),
                ('Y3', (mu, mu - 1, delta)),
                ('Z', (0, 0, 0.5)),
            ]
            if variant == 'MCLC3':
                first = [GAMMA, 'Y', 'F', 'H', 'Z', 'I', 'F1']
            else:
                first = [GAMMA, 'Y', 'F', 'H', 'Z', 'I']
            paths = [first, ['H1', 'Y1', 'X', GAMMA, 'N'], ['M', GAMMA]]
            return variant, points, paths

        zeta = (b ** 2 / a ** 2 + (1 - b * cos / c) / sin2) / 4
        eta = 0.5 + 2 * zeta * c * cos / b
        mu = eta / 2 + b ** 2 / (4 * a ** 2) - b * c * cos / (2 * a ** 2)
        nu = 2 * mu - zeta
        omega = (4 * nu - 1 - b ** 2 * sin2 / a ** 2) * c / (2 * b * cos)
        delta = zeta * c * cos / b + omega / 2 - 0.25
        rho = 1 - zeta * a ** 2 / b ** 2
        points = [
            (GAMMA, (0, 0, 0)),
            ('F', (nu, nu, omega)),
            ('F1', (1 - nu, 1 - nu, 1 - omega)),
            ('F2', (nu, nu - 1, omega)),
            ('H', (zeta, zeta, eta)),
            ('H1', (1 - zeta, -zeta, 1 - eta)),
            ('H2', (-zeta, -zeta, 1 - eta)),
            ('I', (rho, 1 - rho, 0.5)),
            ('I1', (1 - rho, rho - 1, 0.5)),
            ('L', (0.5, 0.5, 0.5)),
            ('M', (0.5, 0, 0.5)),
            ('N', (0.5, 0, 0)),
            ('N1', (0, -0.5, 0)),
            ('X', (0.5, -0.5, 0)),
            ('Y', (mu, mu, delta)),
            ('Y1', (1 - mu, -mu, -delta)),
            ('Y2', (-mu, -mu, -delta)),
            ('Y3', (mu, mu - 1, delta)),
            ('Z', (0, 0, 0.5)),
        ]
        paths = [
            [GAMMA, 'Y', 'F', 'L', 'I'],
            ['I1', 'Z', 'H', 'F1'],
            ['H1', 'Y1', 'X', GAMMA, 'N'],
            ['M', GAMMA],
        ]
        return 'MCLC5', points, paths

    def _point_group(self):
        return monoclinic_folding()
