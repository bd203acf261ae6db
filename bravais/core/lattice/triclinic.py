"""
Triclinic lattice.
"""

import itertools
import logging
import numpy as np
from typing import Optional, Tuple

from .base import BravaisLattice, LatticeParameters, LatticeType
from ..symmetry import GAMMA, triclinic_folding

logger = logging.getLogger(__name__)


class TriclinicLattice(BravaisLattice):
    """
    Primitive triclinic Bravais lattice.

    Primitive vectors:

        a1 = (a, 0, 0)
        a2 = (b cos γ, b sin γ, 0)
        a3 = (c cos β, c (cos α - cos β cos γ) / sin γ, V / (a b sin γ))

    Parameters
    ----------
    a, b, c : float
        Axial lengths
    alpha, beta, gamma : float
        Interaxial angles in radians, each in (0, π) and none equal to π/2

    Notes
    -----
    The symmetry-point tables refer to a reduced reciprocal basis
    (b1', b2', b3') with reciprocal angles k_α, k_β, k_γ between (b2', b3'),
    (b1', b3') and (b1', b2'):

    - TRI1a: all three obtuse, k_γ the smallest
    - TRI1b: all three acute, k_γ the largest
    - TRI2a, TRI2b: k_γ = 90°, the other two obtuse or acute

    The basis is the shortest triple of Brillouin-zone face vectors that
    spans the reciprocal lattice, is size reduced
    (|2 b_i'·b_j'| <= min(|b_i'|², |b_j'|²)) and fits one of the four
    cases.  Catalog coordinates are converted back to b1, b2, b3.  The
    Wigner-Seitz cell is found by the Voronoi-relevance search.
    """

    lattice_type = LatticeType.PRIMITIVE_TRICLINIC
    label = 'TRI'
    _parameter_names = ('a', 'b', 'c', 'alpha', 'beta', 'gamma')

    def __init__(self, a: float = 1.0, b: float = 1.2, c: float = 1.5,
                 alpha: float = 0.4 * np.pi, beta: float = 0.45 * np.pi,
                 gamma: float = 0.35 * np.pi):
        super().__init__(LatticeParameters(a=a, b=b, c=c,
                                           alpha=alpha, beta=beta, gamma=gamma))

    def _validate(self):
        self._require_positive('a', 'b', 'c')
        p = self.parameters
        for name in ('alpha', 'beta', 'gamma'):
            angle = getattr(p, name)
            self._require(0 < angle < np.pi, f"0 < {name} < π, got {angle}")
            self._require(not np.isclose(angle, 0.5 * np.pi),
                          f"{name} != π/2 (use a monoclinic or orthorhombic lattice)")
        self._require(self._volume_factor() > 0,
                      f"angles forming a non-degenerate cell, got "
                      f"({p.alpha}, {p.beta}, {p.gamma})")

    def _volume_factor(self) -> float:
        ca, cb, cg = (np.cos(x) for x in (self.parameters.alpha,
                                          self.parameters.beta,
                                          self.parameters.gamma))
        return 1 + 2 * ca * cb * cg - ca ** 2 - cb ** 2 - cg ** 2

    def _lattice_vectors(self):
        p = self.parameters
        ca, cb, cg = np.cos(p.alpha), np.cos(p.beta), np.cos(p.gamma)
        sg = np.sin(p.gamma)
        return [
            [p.a, 0, 0],
            [p.b * cg, p.b * sg, 0],
            [p.c * cb, p.c * (ca - cb * cg) / sg, p.c * np.sqrt(self._volume_factor()) / sg],
        ]

    def _wigner_seitz_faces(self):
        return None, None

    def _reciprocal_setting(self) -> Tuple[str, np.ndarray]:
        """
        Variant and reduced reciprocal basis.

        Returns
        -------
        variant : str
            'TRI1a', 'TRI1b', 'TRI2a' or 'TRI2b'
        U : np.ndarray of int, shape (3, 3)
            Unimodular matrix; rows of U @ b are b1', b2', b3'
        """
        B = self.get_reciprocal_vectors()
        faces = self.get_brillouin_zone().translation_vectors
        coefficients = np.rint(faces @ self.get_lattice_vectors().T / (2 * np.pi)).astype(int)

        best = None
        for rows in itertools.combinations(range(len(faces)), 3):
            # Flipping all three signs leaves every angle unchanged
            for signs in itertools.product((1, -1), repeat=2):
                U = coefficients[list(rows)] * np.array((1,) + signs)[:, None]
                if abs(int(round(np.linalg.det(U)))) != 1:
                    continue
                setting = _match_setting(U @ B)
                if setting is None:
                    continue
                variant, order = setting
                U = U[order]
                length = float(np.linalg.norm(U @ B, axis=1).sum())
                if best is None or length < best[0] * (1 - 1e-12):
                    best = (length, variant, U)

        if best is None:
            # More than one right reciprocal angle
            logger.warning(f"{self.label}: no reduced reciprocal basis fits the "
                           f"tables, using b1, b2, b3")
            angles = _angles(B)
            number = '2' if np.isclose(angles[2], 0.5 * np.pi) else '1'
            letter = 'a' if np.sum(angles > 0.5 * np.pi + 1e-12) >= 2 else 'b'
            return f'TRI{number}{letter}', np.eye(3, dtype=int)

        _, variant, U = best
        logger.debug(f"{self.label}: {variant} with reciprocal basis rows {U.tolist()}")
        return variant, U

    def get_reduced_reciprocal_vectors(self) -> np.ndarray:
        """Reciprocal basis (b1', b2', b3') the symmetry points refer to."""
        _, U = self._reciprocal_setting()
        vectors = U @ self.get_reciprocal_vectors()
        vectors.setflags(write=False)
        return vectors

    def reciprocal_angles(self) -> np.ndarray:
        """(k_α, k_β, k_γ) of the reduced reciprocal basis."""
        return _angles(self.get_reduced_reciprocal_vectors())

    def _symmetry_table(self):
        variant, U = self._reciprocal_setting()

        if variant.endswith('a'):
            points = [
                (GAMMA, (0, 0, 0)),
                ('L', (0.5, 0.5, 0)),
                ('M', (0, 0.5, 0.5)),
                ('N', (0.5, 0, 0.5)),
                ('R', (0.5, 0.5, 0.5)),
                ('X', (0.5, 0, 0)),
                ('Y', (0, 0.5, 0)),
                ('Z', (0, 0, 0.5)),
            ]
        else:
            points = [
                (GAMMA, (0, 0, 0)),
                ('L', (0.5, -0.5, 0)),
                ('M', (0, 0, 0.5)),
                ('N', (-0.5, -0.5, 0.5)),
                ('R', (0, -0.5, 0.5)),
                ('X', (0, -0.5, 0)),
                ('Y', (0.5, 0, 0)),
                ('Z', (-0.5, 0, 0.5)),
            ]
        # Coordinates in b1', b2', b3' to coordinates in b1, b2, b3
        points = [(label, tuple(np.asarray(f, dtype=float) @ U)) for label, f in points]
        paths = [['X', GAMMA, 'Y'], ['L', GAMMA, 'Z'], ['N', GAMMA, 'M'], ['R', GAMMA]]
        return variant, points, paths

    def _point_group(self):
        return triclinic_folding()


def _angles(vectors: np.ndarray) -> np.ndarray:
    """Angles between rows (2, 3), (1, 3) and (1, 2)."""
    def angle(u, v):
        return np.arccos(np.clip(u @ v / (np.linalg.norm(u) * np.linalg.norm(v)), -1, 1))
    v1, v2, v3 = vectors
    return np.array([angle(v2, v3), angle(v1, v3), angle(v1, v2)])


def _match_setting(vectors: np.ndarray, tol: float = 1e-9) -> Optional[Tuple[str, list]]:
    """
    Match a reciprocal basis to one of the four triclinic settings.

    Returns the variant and the row order that puts k_γ between the first
    two vectors, or None if the basis is not size reduced or mixes acute
    and obtuse angles.
    """
    pairs = ((1, 2), (0, 2), (0, 1))
    norms2 = np.sum(vectors ** 2, axis=1)
    dots = np.array([vectors[i] @ vectors[j] for i, j in pairs])
    shorter = np.array([min(norms2[i], norms2[j]) for i, j in pairs])
    if np.any(2 * np.abs(dots) > shorter * (1 + tol)):
        return None

    cosines = dots / np.sqrt([norms2[i] * norms2[j] for i, j in pairs])
    right = np.abs(cosines) <= tol
    if not np.any(right):
        if np.all(cosines < 0):
            variant, pick = 'TRI1a', int(np.argmax(cosines))
        elif np.all(cosines > 0):
            variant, pick = 'TRI1b', int(np.argmin(cosines))
        else:
            return None
    elif np.sum(right) == 1:
        others = cosines[~right]
        if np.all(others < 0):
            variant = 'TRI2a'
        elif np.all(others > 0):
            variant = 'TRI2b'
        else:
            return None
        pick = int(np.argmax(right))
    else:
        return None

    i, j = pairs[pick]
    return variant, [i, j, 3 - i - j]
