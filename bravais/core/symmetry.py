"""
Symmetry-point catalog and point-group folding.

The catalog stores, for one lattice instance, the high-symmetry points of
the irreducible Brillouin-zone wedge, the band-structure paths connecting
them and the midpoints of every path segment.  Tables are supplied by the
concrete lattice classes; this module only validates and indexes them.

Folding maps a point into the irreducible wedge of a point group.  The
holohedries of the Bravais lattices are reflection groups, possibly extended
by the inversion or by a two-fold rotation (D3d, C2h, Ci and planar C2), so
folding is done by reflecting across violated chamber walls and then
applying the extra operation when required.

References
----------
W. Setyawan and S. Curtarolo, "High-throughput electronic band structure
calculations: challenges and tools", Comp. Mat. Sci. 49, 299-312 (2010).
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .exceptions import InvalidLatticeConfiguration, UnknownSymmetryPointError


GAMMA = 'Γ'

# Conventional labels for lines between symmetry points.  Missing entries
# fall back to '<start>-<end>'.
LINE_LABELS = {
    'SQR': {('Γ', 'X'): 'Δ', ('X', 'M'): 'Z', ('M', 'Γ'): 'Σ'},
    'HEX2D': {('Γ', 'M'): 'Σ', ('M', 'K'): "T'", ('K', 'Γ'): 'T'},
    'CUB': {('Γ', 'X'): 'Δ', ('X', 'M'): 'Z', ('M', 'Γ'): 'Σ',
            ('Γ', 'R'): 'Λ', ('R', 'X'): 'S', ('M', 'R'): 'T'},
    'FCC': {('Γ', 'X'): 'Δ', ('X', 'W'): 'Z', ('K', 'Γ'): 'Σ',
            ('Γ', 'L'): 'Λ', ('L', 'W'): 'Q', ('U', 'X'): 'S'},
    'BCC': {('Γ', 'H'): 'Δ', ('H', 'N'): 'G', ('N', 'Γ'): 'Σ',
            ('Γ', 'P'): 'Λ', ('P', 'H'): 'F', ('P', 'N'): 'D'},
    'HEX': {('Γ', 'M'): 'Σ', ('M', 'K'): "T'", ('K', 'Γ'): 'T',
            ('Γ', 'A'): 'Δ', ('A', 'L'): 'R', ('L', 'H'): "S'",
            ('H', 'A'): 'S', ('L', 'M'): 'U', ('K', 'H'): 'P'},
}


@dataclass(frozen=True)
class SymmetryPoint:
    """
    High-symmetry point of the irreducible Brillouin-zone wedge.

    Attributes
    ----------
    label : str
        Conventional label ('Γ', 'X', 'M', ...)
    fractional : np.ndarray
        Coordinates in units of the reciprocal lattice vectors
    cartesian : np.ndarray
        Cartesian coordinates in reciprocal space
    """
    label: str
    fractional: np.ndarray
    cartesian: np.ndarray


@dataclass(frozen=True)
class IntermediatePoint:
    """Midpoint of one path segment (an edge of the irreducible wedge)."""
    label: str
    path: int
    segment: int
    cartesian: np.ndarray


def _read_only(array) -> np.ndarray:
    array = np.array(array, dtype=float)
    array.setflags(write=False)
    return array


class SymmetryCatalog:
    """
    Indexed table of symmetry points, paths and intermediate points.

    Parameters
    ----------
    variant : str
        Table identifier, e.g. 'BCT1' or 'MCLC3'
    points : Sequence[Tuple[str, Sequence[float]]]
        (label, fractional coordinates) pairs in catalog order
    paths : Sequence[Sequence[str]]
        Each path is a sequence of labels; consecutive labels are segments
    reciprocal_vectors : np.ndarray, shape (dim, dim)
        Rows b_i used to convert fractional to Cartesian coordinates
    """

    def __init__(self,
                 variant: str,
                 points: Sequence[Tuple[str, Sequence[float]]],
                 paths: Sequence[Sequence[str]],
                 reciprocal_vectors: np.ndarray):
        self.variant = variant
        rec = np.asarray(reciprocal_vectors, dtype=float)

        self._points: List[SymmetryPoint] = []
        self._index: Dict[str, int] = {}
        for label, frac in points:
            if label in self._index:
                raise InvalidLatticeConfiguration(
                    f"Duplicate symmetry point label '{label}' in {variant} table")
            frac = np.asarray(frac, dtype=float)
            if frac.shape != (rec.shape[0],):
                raise InvalidLatticeConfiguration(
                    f"Symmetry point '{label}' has {frac.size} coordinates, "
                    f"expected {rec.shape[0]}")
            self._index[label] = len(self._points)
            self._points.append(SymmetryPoint(label, _read_only(frac),
                                              _read_only(frac @ rec)))

        self._paths: List[Tuple[int, ...]] = []
        for path in paths:
            if len(path) < 2:
                raise InvalidLatticeConfiguration(
                    f"Path {list(path)} in {variant} table has no segments")
            indices = tuple(self.index(label) for label in path)
            for e0, e1 in zip(indices[:-1], indices[1:]):
                if e0 == e1:
                    raise InvalidLatticeConfiguration(
                        f"Path {list(path)} in {variant} table repeats a point")
            self._paths.append(indices)

        line_labels = LINE_LABELS.get(variant, {})
        self._intermediate: List[List[IntermediatePoint]] = []
        for p, indices in enumerate(self._paths):
            segment_points = []
            for s, (e0, e1) in enumerate(zip(indices[:-1], indices[1:])):
                l0, l1 = self._points[e0].label, self._points[e1].label
                label = line_labels.get((l0, l1)) or line_labels.get((l1, l0)) \
                    or f"{l0}-{l1}"
                mid = 0.5 * (self._points[e0].cartesian + self._points[e1].cartesian)
                segment_points.append(IntermediatePoint(label, p, s, _read_only(mid)))
            self._intermediate.append(segment_points)

    # ------------------------------------------------------------------
    # Symmetry points
    # ------------------------------------------------------------------
    @property
    def num_points(self) -> int:
        return len(self._points)

    @property
    def labels(self) -> List[str]:
        return [pt.label for pt in self._points]

    def point(self, i: int) -> SymmetryPoint:
        _check_index(i, len(self._points), 'symmetry point')
        return self._points[i]

    def index(self, label: str) -> int:
        """Reverse lookup of a label; raises UnknownSymmetryPointError."""
        try:
            return self._index[label]
        except KeyError:
            raise UnknownSymmetryPointError(label, self._index) from None

    def points(self) -> List[SymmetryPoint]:
        return list(self._points)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------
    @property
    def num_paths(self) -> int:
        return len(self._paths)

    def path(self, p: int) -> Tuple[int, ...]:
        _check_index(p, len(self._paths), 'path')
        return self._paths[p]

    def num_segments(self, p: int) -> int:
        return len(self.path(p)) - 1

    def segment(self, p: int, s: int) -> Tuple[int, int]:
        indices = self.path(p)
        _check_index(s, len(indices) - 1, f'segment of path {p}')
        return indices[s], indices[s + 1]

    # ------------------------------------------------------------------
    # Intermediate points
    # ------------------------------------------------------------------
    @property
    def num_intermediate_points(self) -> int:
        return sum(len(seg) for seg in self._intermediate)

    def intermediate_point(self, p: int, s: int) -> IntermediatePoint:
        self.segment(p, s)
        return self._intermediate[p][s]

    def intermediate_points(self) -> Dict[int, List[IntermediatePoint]]:
        return {p: list(seg) for p, seg in enumerate(self._intermediate)}


def _check_index(i: int, n: int, what: str) -> None:
    if not 0 <= i < n:
        raise IndexError(f"{what} index {i} out of range [0, {n})")


class PointGroupFolding:
    """
    Maps points into the irreducible wedge of a lattice point group.

    Parameters
    ----------
    name : str
        Schoenflies symbol of the holohedry ('Oh', 'D4h', 'C2h', ...)
    walls : Sequence[np.ndarray]
        Inward normals n_k of the reflection chamber {x : n_k·x >= 0}.
        They must be the simple roots of the reflection subgroup.
    inversion_axis : np.ndarray, optional
        If given, x -> -x is applied first whenever u·x < 0.  The
        reflections must leave u·x unchanged.
    rotation : Tuple[np.ndarray, np.ndarray], optional
        (axis r, reference w) of a two-fold rotation applied last whenever
        w·x < 0; r must be one of the walls and w perpendicular to it.

    Notes
    -----
    Folding preserves |x| and the Wigner-Seitz cell, since every operation
    is an orthogonal map of the lattice onto itself.
    """

    MAX_REFLECTIONS = 64

    def __init__(self,
                 name: str,
                 walls: Sequence[Sequence[float]] = (),
                 inversion_axis: Optional[Sequence[float]] = None,
                 rotation: Optional[Tuple[Sequence[float], Sequence[float]]] = None):
        self.name = name
        self.walls = [_unit(w) for w in walls]
        self.inversion_axis = None if inversion_axis is None else _unit(inversion_axis)
        if rotation is None:
            self.rotation = None
        else:
            self.rotation = (_unit(rotation[0]), _unit(rotation[1]))

    def fold(self, x: np.ndarray, tol: float = 1e-12) -> np.ndarray:
        x = np.array(x, dtype=float)

        if self.inversion_axis is not None and x @ self.inversion_axis < -tol:
            x = -x

        for _ in range(self.MAX_REFLECTIONS):
            dots = [x @ n for n in self.walls]
            if not dots or min(dots) >= -tol:
                break
            n = self.walls[int(np.argmin(dots))]
            x = x - 2.0 * (x @ n) * n
        else:
            raise RuntimeError(f"{self.name} folding did not converge for {x}")

        if self.rotation is not None:
            axis, reference = self.rotation
            if x @ reference < -tol:
                x = 2.0 * (x @ axis) * axis - x

        return x

    def contains(self, x: np.ndarray, tol: float = 1e-12) -> bool:
        """True if x already lies in the irreducible wedge."""
        x = np.asarray(x, dtype=float)
        if self.inversion_axis is not None and x @ self.inversion_axis < -tol:
            return False
        if any(x @ n < -tol for n in self.walls):
            return False
        if self.rotation is not None and x @ self.rotation[1] < -tol:
            return False
        return True

    def __repr__(self) -> str:
        return f"PointGroupFolding({self.name}, walls={len(self.walls)})"


def _unit(v) -> np.ndarray:
    v = np.asarray(v, dtype=float)
    return v / np.linalg.norm(v)


# Chamber walls shared by several lattice families
SQRT3 = np.sqrt(3.0)


def cubic_folding() -> PointGroupFolding:
    """Oh: x >= y >= z >= 0."""
    return PointGroupFolding('Oh', walls=[(0, 0, 1), (0, 1, -1), (1, -1, 0)])


def tetragonal_folding() -> PointGroupFolding:
    """D4h: x >= y >= 0, z >= 0."""
    return PointGroupFolding('D4h', walls=[(0, 0, 1), (0, 1, 0), (1, -1, 0)])


def orthorhombic_folding() -> PointGroupFolding:
    """D2h: x, y, z >= 0."""
    return PointGroupFolding('D2h', walls=[(1, 0, 0), (0, 1, 0), (0, 0, 1)])


def hexagonal_folding() -> PointGroupFolding:
    """D6h: 30 degree wedge 0 <= y <= x/sqrt(3), z >= 0."""
    return PointGroupFolding('D6h', walls=[(0, 0, 1), (0, 1, 0), (0.5, -SQRT3 / 2, 0)])


def monoclinic_folding() -> PointGroupFolding:
    """C2h with the two-fold axis along x: x >= 0, y >= 0."""
    return PointGroupFolding('C2h', walls=[(1, 0, 0)], rotation=((1, 0, 0), (0, 1, 0)))


def triclinic_folding() -> PointGroupFolding:
    """Ci: x >= 0."""
    return PointGroupFolding('Ci', inversion_axis=(1, 0, 0))


def square_folding() -> PointGroupFolding:
    return PointGroupFolding('D4', walls=[(0, 1), (1, -1)])


def hexagon_folding() -> PointGroupFolding:
    return PointGroupFolding('D6', walls=[(0, 1), (0.5, -SQRT3 / 2)])


def rectangle_folding() -> PointGroupFolding:
    return PointGroupFolding('D2', walls=[(1, 0), (0, 1)])


def oblique_folding() -> PointGroupFolding:
    return PointGroupFolding('C2', inversion_axis=(1, 0))
