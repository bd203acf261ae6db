"""
Abstract base class for Bravais lattices.

This module defines the interface that all 19 lattice types implement.
A lattice is fully determined at construction: primitive and reciprocal
vectors, the Wigner-Seitz cell, the symmetry-point catalog and the coarse
mesh are computed once in __init__ and never change afterwards.
"""

import logging
import numpy as np
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from enum import IntEnum
from typing import Dict, List, Optional, Sequence, Tuple

from ..exceptions import InvalidLatticeConfiguration
from ..symmetry import (
    SymmetryCatalog,
    SymmetryPoint,
    IntermediatePoint,
    PointGroupFolding,
)
from ..wigner_seitz import (
    WignerSeitzCell,
    CoarseMesh,
    build_wigner_seitz_cell,
    build_coarse_mesh,
    relevant_vectors,
)

logger = logging.getLogger(__name__)


class LatticeType(IntEnum):
    """
    The 5 planar and 14 spatial Bravais lattice types.

    Members can be looked up by value, by name or by the short code used in
    band-structure tables (see `LatticeType.lookup`).
    """
    INVALID_TYPE = 0
    PRIMITIVE_SQUARE = 1
    PRIMITIVE_HEXAGONAL = 2
    PRIMITIVE_RECTANGULAR = 3
    CENTERED_RECTANGULAR = 4
    PRIMITIVE_OBLIQUE = 5
    PRIMITIVE_CUBIC = 6
    FACE_CENTERED_CUBIC = 7
    BODY_CENTERED_CUBIC = 8
    PRIMITIVE_TETRAGONAL = 9
    BODY_CENTERED_TETRAGONAL = 10
    PRIMITIVE_ORTHORHOMBIC = 11
    FACE_CENTERED_ORTHORHOMBIC = 12
    BODY_CENTERED_ORTHORHOMBIC = 13
    BASE_CENTERED_ORTHORHOMBIC = 14
    PRIMITIVE_HEXAGONAL_PRISM = 15
    PRIMITIVE_RHOMBOHEDRAL = 16
    PRIMITIVE_MONOCLINIC = 17
    BASE_CENTERED_MONOCLINIC = 18
    PRIMITIVE_TRICLINIC = 19

    @property
    def short_code(self) -> str:
        return SHORT_CODES.get(self, 'INVALID')

    @property
    def dimension(self) -> int:
        if self == LatticeType.INVALID_TYPE:
            return 0
        return 2 if self <= LatticeType.PRIMITIVE_OBLIQUE else 3

    @classmethod
    def lookup(cls, value) -> 'LatticeType':
        """
        Resolve an enum member, integer, member name or short code.

        Raises
        ------
        InvalidLatticeConfiguration
            If the value does not name a lattice type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
            for member, code in SHORT_CODES.items():
                if code == key:
                    return member
            raise InvalidLatticeConfiguration(f"Unknown lattice type: {value}")
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise InvalidLatticeConfiguration(f"Unknown lattice type: {value}") from None


SHORT_CODES = {
    LatticeType.PRIMITIVE_SQUARE: 'SQR',
    LatticeType.PRIMITIVE_HEXAGONAL: 'HEX2D',
    LatticeType.PRIMITIVE_RECTANGULAR: 'RECT',
    LatticeType.CENTERED_RECTANGULAR: 'CRECT',
    LatticeType.PRIMITIVE_OBLIQUE: 'OBL',
    LatticeType.PRIMITIVE_CUBIC: 'CUB',
    LatticeType.FACE_CENTERED_CUBIC: 'FCC',
    LatticeType.BODY_CENTERED_CUBIC: 'BCC',
    LatticeType.PRIMITIVE_TETRAGONAL: 'TET',
    LatticeType.BODY_CENTERED_TETRAGONAL: 'BCT',
    LatticeType.PRIMITIVE_ORTHORHOMBIC: 'ORC',
    LatticeType.FACE_CENTERED_ORTHORHOMBIC: 'ORCF',
    LatticeType.BODY_CENTERED_ORTHORHOMBIC: 'ORCI',
    LatticeType.BASE_CENTERED_ORTHORHOMBIC: 'ORCC',
    LatticeType.PRIMITIVE_HEXAGONAL_PRISM: 'HEX',
    LatticeType.PRIMITIVE_RHOMBOHEDRAL: 'RHL',
    LatticeType.PRIMITIVE_MONOCLINIC: 'MCL',
    LatticeType.BASE_CENTERED_MONOCLINIC: 'MCLC',
    LatticeType.PRIMITIVE_TRICLINIC: 'TRI',
}


@dataclass(frozen=True)
class LatticeParameters:
    """
    Geometric parameters of a lattice.

    Attributes
    ----------
    a, b, c : float
        Axial lengths
    alpha, beta, gamma : float
        Interaxial angles in radians (alpha between b and c, beta between
        a and c, gamma between a and b)

    Notes
    -----
    Planar lattices use a, b and gamma only.
    """
    a: float = 1.0
    b: float = 1.0
    c: float = 1.0
    alpha: float = 0.5 * np.pi
    beta: float = 0.5 * np.pi
    gamma: float = 0.5 * np.pi

    def to_dict(self) -> Dict[str, float]:
        return {k: float(v) for k, v in asdict(self).items()}


def compute_reciprocal_vectors(lattice_vectors: np.ndarray) -> np.ndarray:
    """
    Reciprocal lattice vectors.

    Parameters
    ----------
    lattice_vectors : np.ndarray, shape (dim, dim)
        Rows a_i

    Returns
    -------
    vectors : np.ndarray, shape (dim, dim)
        Rows b_i satisfying a_i · b_j = 2π δ_ij

    Notes
    -----
    3D: b1 = 2π (a2 × a3) / (a1 · (a2 × a3)) and cyclic permutations.
    2D: b1 = 2π a2_perp / (a1 · a2_perp) with a_perp = (a_y, -a_x).
    """
    A = np.asarray(lattice_vectors, dtype=float)
    if A.shape == (3, 3):
        a1, a2, a3 = A
        volume = a1 @ np.cross(a2, a3)
        return 2 * np.pi * np.array([
            np.cross(a2, a3),
            np.cross(a3, a1),
            np.cross(a1, a2),
        ]) / volume

    a1, a2 = A
    a1_perp = np.array([a1[1], -a1[0]])
    a2_perp = np.array([a2[1], -a2[0]])
    return 2 * np.pi * np.array([
        a2_perp / (a1 @ a2_perp),
        a1_perp / (a2 @ a1_perp),
    ])


def _read_only(array) -> np.ndarray:
    array = np.array(array, dtype=float)
    array.setflags(write=False)
    return array


class BravaisLattice(ABC):
    """
    Abstract base class for Bravais lattices.

    Concrete classes provide the geometry of one lattice type:

    - `_lattice_vectors`: primitive vectors in the canonical orientation
    - `_wigner_seitz_faces`: regime test and face-pair table (or None for
      the generic Voronoi-relevance search)
    - `_symmetry_table`: variant name, symmetry points and paths
    - `_point_group`: folding into the irreducible wedge

    Everything else (reciprocal lattice, volumes, Wigner-Seitz cell, coarse
    mesh, catalog accessors and point mapping) is shared.

    Design Philosophy
    -----------------
    Instances are immutable.  Parameters are validated and normalized before
    any geometry is built, so a failed construction never leaves a partially
    built lattice behind.  Returned arrays are read-only.
    """

    lattice_type: LatticeType = LatticeType.INVALID_TYPE
    label: str = ''
    dim: int = 3

    # Parameters reported by __repr__ and to_dict
    _parameter_names: Tuple[str, ...] = ('a',)

    def __init__(self, parameters: LatticeParameters):
        self._parameters = parameters
        self._validate()

        vectors = np.asarray(self._lattice_vectors(), dtype=float)
        volume = abs(float(np.linalg.det(vectors)))
        if not volume > 0:
            raise InvalidLatticeConfiguration(
                f"{self.label} lattice vectors are degenerate: {vectors.tolist()}")

        self._vectors = _read_only(vectors)
        self._reciprocal = _read_only(compute_reciprocal_vectors(vectors))
        self._volume = volume
        self._tol = 1e-10 * float(np.linalg.norm(vectors, axis=1).max())
        self._rec_tol = 1e-10 * float(np.linalg.norm(self._reciprocal, axis=1).max())

        shape, coefficients = self._wigner_seitz_faces()
        if coefficients is None:
            coefficients = relevant_vectors(vectors)
        self._cell = build_wigner_seitz_cell(vectors, coefficients, shape)
        self._zone = build_wigner_seitz_cell(self._reciprocal,
                                             relevant_vectors(self._reciprocal))
        self._check_volume(self._cell, self._volume, 'Wigner-Seitz cell')
        self._check_volume(self._zone, self.brillouin_zone_volume, 'Brillouin zone')
        self._mesh = build_coarse_mesh(self._cell)

        variant, points, paths = self._symmetry_table()
        self._catalog = SymmetryCatalog(variant, points, paths, self._reciprocal)
        self._folding = self._point_group()

        logger.info(f"Constructed {self!r}")
        logger.debug(f"{self.label}: variant {variant}, Wigner-Seitz {self._cell.shape} "
                     f"with {self._cell.num_faces} faces, "
                     f"{self._catalog.num_points} symmetry points, "
                     f"{self._catalog.num_paths} paths")
        self._frozen = True

    def __setattr__(self, name, value):
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; "
                                 f"cannot set '{name}'")
        super().__setattr__(name, value)

    # ------------------------------------------------------------------
    # Type-specific hooks
    # ------------------------------------------------------------------
    def _validate(self) -> None:
        """Check the constraint table; raise InvalidLatticeConfiguration."""
        self._require_positive(*self._parameter_names)

    @abstractmethod
    def _lattice_vectors(self) -> np.ndarray:
        """Primitive vectors (rows) in the canonical orientation."""
        pass

    @abstractmethod
    def _wigner_seitz_faces(self) -> Tuple[Optional[str], Optional[Sequence[Sequence[int]]]]:
        """
        Regime of the Wigner-Seitz cell.

        Returns
        -------
        shape : str or None
            Name of the polytope in this regime
        coefficients : Sequence[Sequence[int]] or None
            Integer combinations of the lattice vectors, one per face pair.
            None requests the generic Voronoi-relevance search.
        """
        pass

    @abstractmethod
    def _symmetry_table(self) -> Tuple[str, List[Tuple[str, Sequence[float]]], List[List[str]]]:
        """
        Symmetry-point table of the selected variant.

        Returns
        -------
        variant : str
            Variant name, e.g. 'BCT1'
        points : List[Tuple[str, Sequence[float]]]
            (label, fractional reciprocal coordinates), 'Γ' first
        paths : List[List[str]]
            Label sequences of the band-structure paths
        """
        pass

    @abstractmethod
    def _point_group(self) -> PointGroupFolding:
        """Folding into the irreducible wedge of the holohedry."""
        pass

    def _require_positive(self, *names: str) -> None:
        for name in names:
            value = getattr(self._parameters, name)
            if not value > 0:
                raise InvalidLatticeConfiguration(
                    f"{self.label} lattice requires {name} > 0, got {value}")

    def _require(self, condition: bool, message: str) -> None:
        if not condition:
            raise InvalidLatticeConfiguration(f"{self.label} lattice requires {message}")

    def _check_volume(self, cell: WignerSeitzCell, expected: float, name: str) -> None:
        # The cell must tile space with the lattice
        if not np.isclose(cell.volume, expected, rtol=1e-8, atol=0.0):
            raise InvalidLatticeConfiguration(
                f"{self.label} {name} volume {cell.volume:.12g} differs from "
                f"the primitive volume {expected:.12g}")

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def parameters(self) -> LatticeParameters:
        return self._parameters

    @property
    def variant(self) -> str:
        """Symmetry-table variant selected at construction."""
        return self._catalog.variant

    def get_lattice_vectors(self) -> np.ndarray:
        """
        Get primitive lattice vectors in real space.

        Returns
        -------
        vectors : np.ndarray, shape (dim, dim)
            Read-only array, each row a primitive vector a_i

        Examples
        --------
        For a cubic lattice with a = 2:
            [[2.0, 0.0, 0.0],
             [0.0, 2.0, 0.0],
             [0.0, 0.0, 2.0]]
        """
        return self._vectors

    def get_primitive_vectors(self) -> np.ndarray:
        """Alias of get_lattice_vectors."""
        return self._vectors

    def get_reciprocal_vectors(self) -> np.ndarray:
        """
        Get reciprocal lattice vectors.

        Returns
        -------
        vectors : np.ndarray, shape (dim, dim)
            Read-only array, rows b_i with a_i · b_j = 2π δ_ij
        """
        return self._reciprocal

    def get_translation_vectors(self) -> np.ndarray:
        """
        One lattice vector per pair of opposite Wigner-Seitz faces.

        These are the vectors t whose bisecting planes x·t = |t|²/2 bound
        the cell, in the order of the face-pair table.
        """
        return _read_only(self._cell.translation_vectors)

    def get_face_radii(self) -> np.ndarray:
        """
        Inscribed radius of each Wigner-Seitz face pair.

        Aligned with get_translation_vectors().
        """
        return _read_only(self._cell.face_radii())

    @property
    def unit_cell_volume(self) -> float:
        """Volume (area in 2D) of the primitive cell, |det A|."""
        return self._volume

    @property
    def brillouin_zone_volume(self) -> float:
        """(2π)^dim divided by the unit-cell volume."""
        return (2 * np.pi) ** self.dim / self._volume

    def get_unit_cell_volume(self) -> float:
        return self._volume

    def get_axial_lengths(self) -> np.ndarray:
        """|a_i| for every primitive vector."""
        return np.linalg.norm(self._vectors, axis=1)

    def get_interaxial_angles(self) -> np.ndarray:
        """
        Angles between primitive vectors in radians.

        Returns
        -------
        angles : np.ndarray
            3D: (angle(a2, a3), angle(a1, a3), angle(a1, a2));
            2D: (angle(a1, a2),)
        """
        if self.dim == 2:
            return np.array([_angle(self._vectors[0], self._vectors[1])])
        a1, a2, a3 = self._vectors
        return np.array([_angle(a2, a3), _angle(a1, a3), _angle(a1, a2)])

    def get_lattice_constant(self) -> float:
        """Length of a1."""
        return float(np.linalg.norm(self._vectors[0]))

    def real_to_fractional(self, position: np.ndarray) -> np.ndarray:
        """
        Convert real-space coordinates to fractional coordinates.

        Parameters
        ----------
        position : np.ndarray, shape (dim,)
            Position in real space

        Returns
        -------
        fractional : np.ndarray, shape (dim,)
            Coefficients n such that position = Σ n_i a_i
        """
        return self._reciprocal @ np.asarray(position, dtype=float) / (2 * np.pi)

    def fractional_to_real(self, fractional: np.ndarray) -> np.ndarray:
        """Inverse of real_to_fractional: Σ n_i a_i."""
        return np.asarray(fractional, dtype=float) @ self._vectors

    # ------------------------------------------------------------------
    # Wigner-Seitz cell, Brillouin zone and mesh
    # ------------------------------------------------------------------
    def get_wigner_seitz_cell(self) -> WignerSeitzCell:
        return self._cell

    def get_brillouin_zone(self) -> WignerSeitzCell:
        """Wigner-Seitz cell of the reciprocal lattice."""
        return self._zone

    @property
    def wigner_seitz_shape(self) -> str:
        return self._cell.shape

    def get_coarse_wigner_seitz_mesh(self) -> CoarseMesh:
        """
        Coarse simplicial mesh of the Wigner-Seitz cell.

        Returns
        -------
        mesh : CoarseMesh
            Tetrahedra (3D) or triangles (2D) fanned from the origin.
            Boundary attributes are pair index + 1, so opposite faces
            carry the same attribute.
        """
        return self._mesh

    # ------------------------------------------------------------------
    # Point mapping
    # ------------------------------------------------------------------
    def map_to_primitive_cell(self, pt: np.ndarray) -> Tuple[np.ndarray, bool]:
        """
        Translate a point into the primitive parallelepiped.

        Parameters
        ----------
        pt : np.ndarray, shape (dim,)
            Point in real space

        Returns
        -------
        ipt : np.ndarray
            Equivalent point with fractional coordinates in [-1/2, 1/2)
        moved : bool
            True if ipt differs from pt

        Notes
        -----
        Type independent and idempotent.
        """
        pt = self._as_point(pt)
        return self._reduce(pt, self._vectors, self._reciprocal)

    def map_to_wigner_seitz_cell(self, pt: np.ndarray) -> Tuple[np.ndarray, bool]:
        """Translate a point into the Wigner-Seitz cell."""
        pt = self._as_point(pt)
        ipt = self._voronoi_reduce(pt, self._vectors, self._reciprocal, self._cell)
        return ipt, not np.allclose(ipt, pt, rtol=0, atol=self._tol)

    def map_to_fundamental_domain(self, pt: np.ndarray) -> Tuple[np.ndarray, bool]:
        """
        Map a point into the fundamental domain of the lattice.

        The point is translated into the Wigner-Seitz cell, folded into the
        irreducible wedge by the point group of the lattice and finally
        translated back into the primitive cell.  The result is equivalent
        to pt under the full space group of the lattice and is left
        unchanged by map_to_primitive_cell.

        Returns
        -------
        ipt : np.ndarray
            Point in the fundamental domain
        moved : bool
            True if ipt differs from pt beyond tolerance

        Notes
        -----
        For the rectangular families (SQR, RECT, CUB, TET, ORC) the
        Wigner-Seitz cell is the primitive cell and the fundamental domain
        is the irreducible wedge itself.  Otherwise parts of the wedge that
        stick out of the primitive parallelepiped are translated back in.
        """
        pt = self._as_point(pt)
        ipt = self._voronoi_reduce(pt, self._vectors, self._reciprocal, self._cell)
        ipt = self._folding.fold(ipt, tol=self._tol)
        ipt, _ = self._reduce(ipt, self._vectors, self._reciprocal)
        return ipt, not np.allclose(ipt, pt, rtol=0, atol=self._tol)

    def map_to_brillouin_zone(self, k: np.ndarray) -> Tuple[np.ndarray, bool]:
        """Translate a wave vector into the first Brillouin zone."""
        k = self._as_point(k)
        ik = self._voronoi_reduce(k, self._reciprocal, self._vectors, self._zone)
        return ik, not np.allclose(ik, k, rtol=0, atol=self._rec_tol)

    def map_to_irreducible_brillouin_zone(self, k: np.ndarray) -> Tuple[np.ndarray, bool]:
        """Map a wave vector into the irreducible wedge of the Brillouin zone."""
        k = self._as_point(k)
        ik = self._voronoi_reduce(k, self._reciprocal, self._vectors, self._zone)
        ik = self._folding.fold(ik, tol=self._rec_tol)
        return ik, not np.allclose(ik, k, rtol=0, atol=self._rec_tol)

    def _as_point(self, pt) -> np.ndarray:
        pt = np.array(pt, dtype=float)
        if pt.shape != (self.dim,):
            raise ValueError(f"{self.label} expects a point of shape ({self.dim},), "
                             f"got {pt.shape}")
        return pt

    def _reduce(self, pt, vectors, dual) -> Tuple[np.ndarray, bool]:
        # dual rows satisfy vectors_i · dual_j = 2π δ_ij
        fractional = dual @ pt / (2 * np.pi)
        shift = np.floor(fractional + 0.5)
        # Rounding in f + 1/2 can land the remainder just outside [-1/2, 1/2)
        remainder = fractional - shift
        shift[remainder >= 0.5] += 1
        shift[remainder < -0.5] -= 1
        if not np.any(shift):
            return pt, False
        return pt - shift @ vectors, True

    def _voronoi_reduce(self, pt, vectors, dual, cell: WignerSeitzCell) -> np.ndarray:
        x, _ = self._reduce(pt, vectors, dual)
        planes = cell.face_vectors
        offsets = 0.5 * np.sum(planes ** 2, axis=1)
        tol = 1e-10 * float(offsets.max())
        # Each step shortens x by more than tol, so the loop terminates
        while True:
            excess = planes @ x - offsets
            k = int(np.argmax(excess))
            if excess[k] <= tol:
                return x
            x = x - planes[k]

    # ------------------------------------------------------------------
    # Symmetry points and paths
    # ------------------------------------------------------------------
    def get_number_symmetry_points(self) -> int:
        return self._catalog.num_points

    def get_symmetry_point(self, i: int, fractional: bool = False) -> np.ndarray:
        """
        Coordinates of the i-th symmetry point.

        Parameters
        ----------
        i : int
            Catalog index, 0 <= i < get_number_symmetry_points()
        fractional : bool
            Return coordinates in units of the reciprocal vectors instead of
            Cartesian coordinates

        Raises
        ------
        IndexError
            If i is out of range
        """
        point = self._catalog.point(i)
        return point.fractional if fractional else point.cartesian

    def get_symmetry_point_label(self, i: int) -> str:
        return self._catalog.point(i).label

    def get_symmetry_point_index(self, label: str) -> int:
        """
        Reverse lookup of a symmetry-point label.

        Raises
        ------
        UnknownSymmetryPointError
            A KeyError subclass, if the label is not in the catalog
        """
        return self._catalog.index(label)

    def get_symmetry_points(self) -> List[SymmetryPoint]:
        return self._catalog.points()

    def get_high_symmetry_points(self) -> Dict[str, np.ndarray]:
        """
        Get high-symmetry points in the Brillouin zone.

        Returns
        -------
        points : Dict[str, np.ndarray]
            Label -> Cartesian k-vector, in catalog order
        """
        return {pt.label: pt.cartesian for pt in self._catalog.points()}

    def get_number_intermediate_points(self) -> int:
        return self._catalog.num_intermediate_points

    def get_intermediate_point(self, p: int, s: int) -> np.ndarray:
        """Midpoint of segment s of path p."""
        return self._catalog.intermediate_point(p, s).cartesian

    def get_intermediate_point_label(self, p: int, s: int) -> str:
        return self._catalog.intermediate_point(p, s).label

    def get_intermediate_points(self) -> Dict[int, List[IntermediatePoint]]:
        return self._catalog.intermediate_points()

    def get_number_paths(self) -> int:
        return self._catalog.num_paths

    def get_number_path_segments(self, p: int) -> int:
        return self._catalog.num_segments(p)

    def get_path_segment_end_point_indices(self, p: int, s: int) -> Tuple[int, int]:
        """Symmetry-point indices (start, end) of segment s of path p."""
        return self._catalog.segment(p, s)

    def get_path_labels(self) -> List[List[str]]:
        return [[self._catalog.point(i).label for i in self._catalog.path(p)]
                for p in range(self._catalog.num_paths)]

    def sample_path(self,
                    p: int,
                    density: float = 20.0) -> Tuple[np.ndarray, np.ndarray, List[Tuple[int, str]]]:
        """
        Sample k-points along a band-structure path.

        Parameters
        ----------
        p : int
            Path index
        density : float
            Points per unit length in reciprocal space; every segment gets
            at least 2 points

        Returns
        -------
        kpoints : np.ndarray, shape (N, dim)
            k-points along the path, segment end points included once
        distances : np.ndarray, shape (N,)
            Cumulative path length, for the x axis of band plots
        ticks : List[Tuple[int, str]]
            (index into kpoints, label) of every symmetry point on the path
        """
        if not density > 0:
            raise ValueError(f"density must be positive, got {density}")
        indices = self._catalog.path(p)

        kpoints, ticks = [], []
        for e0, e1 in zip(indices[:-1], indices[1:]):
            k0 = self._catalog.point(e0).cartesian
            k1 = self._catalog.point(e1).cartesian
            num = max(2, int(round(np.linalg.norm(k1 - k0) * density)))
            ticks.append((len(kpoints), self._catalog.point(e0).label))
            kpoints.extend(np.linspace(k0, k1, num, endpoint=False))
        ticks.append((len(kpoints), self._catalog.point(indices[-1]).label))
        kpoints.append(self._catalog.point(indices[-1]).cartesian)

        kpoints = np.array(kpoints)
        steps = np.linalg.norm(np.diff(kpoints, axis=0), axis=1)
        distances = np.concatenate([[0.0], np.cumsum(steps)])
        return kpoints, distances, ticks

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict:
        """
        Configuration dictionary accepted by lattice_from_config.

        Returns
        -------
        config : Dict
            {'type': <enum name>, <parameter>: <value>, ...}
        """
        config = {'type': self.lattice_type.name}
        for name in self._parameter_names:
            config[name] = float(getattr(self._parameters, name))
        return config

    def __repr__(self) -> str:
        """String representation of the lattice."""
        name = self.__class__.__name__
        params = ', '.join(f"{n}={getattr(self._parameters, n):.4g}"
                           for n in self._parameter_names)
        return f"{name}({params})"


def _angle(u: np.ndarray, v: np.ndarray) -> float:
    cos = (u @ v) / (np.linalg.norm(u) * np.linalg.norm(v))
    return float(np.arccos(np.clip(cos, -1.0, 1.0)))
