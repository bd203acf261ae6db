"""
Wigner-Seitz cell construction and coarse volumetric meshing.

The Wigner-Seitz cell of a lattice is the set of points closer to the
origin than to any other lattice point,

    WS = { x : x·t <= |t|^2 / 2  for every Voronoi-relevant t }.

Each relevant vector t contributes a pair of opposite faces (for t and -t).
The lattice classes supply the face-pair coefficients for their current
regime; `relevant_vectors` finds them directly for the lattices whose cell
shape has no simple regime threshold.

The coarse mesh is the input handed to the finite-element layer: tetrahedra
fanned from the origin through every face centre (3D) or triangles fanned
from the origin (2D).  Boundary attributes are shared by opposite faces so
that the FEM layer can identify periodic boundaries.
"""

import logging
import itertools
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import ConvexHull, HalfspaceIntersection

logger = logging.getLogger(__name__)


SHAPE_NAMES = {
    2: {4: 'parallelogram', 6: 'hexagon'},
    3: {6: 'parallelepiped', 8: 'hexagonal prism',
        12: 'elongated dodecahedron', 14: 'truncated octahedron'},
}


def _freeze(obj, name: str, dtype) -> None:
    """Store a read-only copy of an array attribute of a frozen dataclass."""
    array = np.array(getattr(obj, name), dtype=dtype)
    array.setflags(write=False)
    object.__setattr__(obj, name, array)


def _gram_schmidt(B: np.ndarray) -> np.ndarray:
    ortho = np.zeros_like(B)
    for i, b in enumerate(B):
        v = b.copy()
        for u in ortho[:i]:
            v -= (b @ u) / (u @ u) * u
        ortho[i] = v
    return ortho


def reduce_basis(lattice_vectors: np.ndarray, delta: float = 0.99) -> np.ndarray:
    """
    LLL reduction of a lattice basis.

    Parameters
    ----------
    lattice_vectors : np.ndarray, shape (dim, dim)
        Rows a_i
    delta : float
        Lovász parameter, 1/4 < delta <= 1

    Returns
    -------
    U : np.ndarray of int, shape (dim, dim)
        Unimodular matrix; the rows of U @ lattice_vectors are the reduced
        basis
    """
    B = np.array(lattice_vectors, dtype=float)
    dim = B.shape[0]
    U = np.eye(dim, dtype=int)
    k = 1
    while k < dim:
        # Size reduction leaves the Gram-Schmidt vectors unchanged
        ortho = _gram_schmidt(B)
        for j in range(k - 1, -1, -1):
            q = int(np.rint(B[k] @ ortho[j] / (ortho[j] @ ortho[j])))
            if q:
                B[k] -= q * B[j]
                U[k] -= q * U[j]
        mu = B[k] @ ortho[k - 1] / (ortho[k - 1] @ ortho[k - 1])
        if ortho[k] @ ortho[k] >= (delta - mu ** 2) * (ortho[k - 1] @ ortho[k - 1]):
            k += 1
        else:
            B[[k - 1, k]] = B[[k, k - 1]]
            U[[k - 1, k]] = U[[k, k - 1]]
            k = max(k - 1, 1)
    return U


def relevant_vectors(lattice_vectors: np.ndarray,
                     rtol: float = 1e-9) -> List[Tuple[int, ...]]:
    """
    Voronoi-relevant vectors of a lattice, one per opposite pair.

    A lattice vector is Voronoi-relevant iff it is the unique (up to sign)
    shortest vector of its coset in L / 2L.

    Parameters
    ----------
    lattice_vectors : np.ndarray, shape (dim, dim)
        Rows a_i
    rtol : float
        Relative tolerance for ties in length

    Returns
    -------
    List[Tuple[int, ...]]
        Integer coefficients n with t = n @ lattice_vectors, sorted by |t|

    Notes
    -----
    The search runs on the LLL-reduced basis R.  The shortest member of a
    coset is no longer than its representative c @ R with c in {0, 1}^dim,
    and a vector x of length r has coefficients |n_i| <= r |R^-1 e_i|, which
    bounds the enumeration for arbitrarily skewed input bases.
    """
    A = np.asarray(lattice_vectors, dtype=float)
    dim = A.shape[0]
    U = reduce_basis(A)
    R = U @ A

    cosets = np.array([c for c in itertools.product((0, 1), repeat=dim) if any(c)])
    radius = np.linalg.norm(cosets @ R, axis=1).max() * (1.0 + rtol)
    bound = np.floor(radius * np.linalg.norm(np.linalg.inv(R), axis=0) + 1e-9).astype(int)
    reach = (bound + 1) // 2
    shifts = np.array(list(itertools.product(*(range(-m, m + 1) for m in reach))))

    found = []
    for coset in cosets:
        members = coset + 2 * shifts
        lengths = np.linalg.norm(members @ R, axis=1)
        shortest = lengths.min()
        ties = np.flatnonzero(lengths <= shortest * (1.0 + rtol))
        # t and -t belong to the same coset
        if len(ties) != 2:
            continue
        n = members[ties[0]] @ U
        first = n[np.flatnonzero(n)[0]]
        if first < 0:
            n = -n
        found.append((shortest, tuple(int(v) for v in n)))

    found.sort()
    logger.debug(f"{len(found)} Voronoi-relevant pair(s) within |n_i| <= {bound.tolist()}")
    return [n for _, n in found]


@dataclass(frozen=True)
class WignerSeitzCell:
    """
    Convex Wigner-Seitz polytope (polygon in 2D).

    Attributes
    ----------
    dim : int
        2 or 3
    vertices : np.ndarray, shape (V, dim)
        Cell vertices
    faces : Tuple[np.ndarray, ...]
        Vertex indices of each face, counter-clockwise seen from outside
        (two indices per edge in 2D)
    face_vectors : np.ndarray, shape (F, dim)
        Lattice vector t of each face; the face lies on x·t = |t|^2/2
    face_pairs : np.ndarray, shape (F,)
        Index of the opposite-face pair each face belongs to
    translation_vectors : np.ndarray, shape (P, dim)
        One representative t per face pair
    shape : str
        Name of the polytope

    Notes
    -----
    Instances are frozen and every array is read-only.
    """
    dim: int
    vertices: np.ndarray
    faces: Tuple[np.ndarray, ...]
    face_vectors: np.ndarray
    face_pairs: np.ndarray
    translation_vectors: np.ndarray
    shape: str = ''

    def __post_init__(self):
        _freeze(self, 'vertices', float)
        _freeze(self, 'face_vectors', float)
        _freeze(self, 'face_pairs', int)
        _freeze(self, 'translation_vectors', float)
        faces = []
        for face in self.faces:
            face = np.array(face, dtype=int)
            face.setflags(write=False)
            faces.append(face)
        object.__setattr__(self, 'faces', tuple(faces))

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_faces(self) -> int:
        return len(self.faces)

    @property
    def num_face_pairs(self) -> int:
        return len(self.translation_vectors)

    @property
    def face_centers(self) -> np.ndarray:
        return 0.5 * self.face_vectors

    @property
    def volume(self) -> float:
        """Cell volume (area in 2D)."""
        return float(ConvexHull(self.vertices).volume)

    def contains(self, x: np.ndarray, tol: float = 1e-9) -> bool:
        x = np.asarray(x, dtype=float)
        offsets = 0.5 * np.sum(self.face_vectors ** 2, axis=1)
        scale = max(1.0, float(offsets.max()))
        return bool(np.all(self.face_vectors @ x <= offsets + tol * scale))

    def face_radii(self) -> np.ndarray:
        """
        Inscribed radius of the first face of every pair.

        In 3D this is the distance from the face centre t/2 to the nearest
        edge line of the face; in 2D half the edge length.
        """
        radii = np.zeros(self.num_face_pairs)
        done = np.zeros(self.num_face_pairs, dtype=bool)
        for face, t, pair in zip(self.faces, self.face_vectors, self.face_pairs):
            if done[pair]:
                continue
            center = 0.5 * t
            poly = self.vertices[face]
            if self.dim == 2:
                radii[pair] = 0.5 * np.linalg.norm(poly[1] - poly[0])
            else:
                distances = []
                for p, q in zip(poly, np.roll(poly, -1, axis=0)):
                    d = (q - p) / np.linalg.norm(q - p)
                    r = center - p
                    distances.append(np.linalg.norm(r - (r @ d) * d))
                radii[pair] = min(distances)
            done[pair] = True
        return radii

    def edges(self) -> List[Tuple[int, int]]:
        """Unique vertex index pairs bounding the faces (for plotting)."""
        if self.dim == 2:
            return [tuple(int(i) for i in face) for face in self.faces]
        seen = set()
        for face in self.faces:
            for i, j in zip(face, np.roll(face, -1)):
                seen.add((int(min(i, j)), int(max(i, j))))
        return sorted(seen)




def _unique_points(points: np.ndarray, tol: float) -> np.ndarray:
    """Drop points lying within tol of an earlier point."""
    distances = np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)
    duplicate = np.triu(distances <= tol, k=1).any(axis=0)
    return points[~duplicate]


def build_wigner_seitz_cell(lattice_vectors: np.ndarray,
                            face_coefficients: Sequence[Sequence[int]],
                            shape: Optional[str] = None,
                            rtol: float = 1e-9) -> WignerSeitzCell:
    """
    Intersect the half-spaces of the given face pairs.

    Parameters
    ----------
    lattice_vectors : np.ndarray, shape (dim, dim)
        Rows a_i
    face_coefficients : Sequence[Sequence[int]]
        One integer combination of the a_i per candidate face pair
    shape : str, optional
        Name of the polytope; derived from the face count if omitted
    rtol : float
        Relative tolerance for incidence and degeneracy tests

    Returns
    -------
    WignerSeitzCell

    Notes
    -----
    Vertices come from scipy's HalfspaceIntersection with the origin as
    interior point.  Candidate pairs whose faces degenerate to zero area
    (exactly at a regime threshold) are dropped together with their
    translation vector.
    """
    A = np.asarray(lattice_vectors, dtype=float)
    dim = A.shape[0]
    coeffs = np.asarray(face_coefficients, dtype=float).reshape(-1, dim)
    pair_vectors = coeffs @ A
    n_pairs = len(pair_vectors)

    planes = np.vstack([pair_vectors, -pair_vectors])
    pair_of_plane = np.concatenate([np.arange(n_pairs), np.arange(n_pairs)])
    offsets = 0.5 * np.sum(planes ** 2, axis=1)

    scale = float(np.linalg.norm(planes, axis=1).max())
    plane_tol = rtol * scale ** 2
    point_tol = rtol * scale * 10.0

    # Halfspaces in qhull form: planes @ x - offsets <= 0
    halfspaces = np.hstack([planes, -offsets[:, None]])
    intersection = HalfspaceIntersection(halfspaces, np.zeros(dim))
    # Vertices shared by more than dim planes are reported once per facet
    vertices = _unique_points(intersection.intersections, point_tol)

    faces, face_planes = [], []
    for k, t in enumerate(planes):
        on_plane = np.flatnonzero(np.abs(vertices @ t - offsets[k]) <= plane_tol)
        if len(on_plane) < dim:
            continue
        ordered = _order_face(vertices, on_plane, t)
        if ordered is None or _face_measure(vertices[ordered], t) <= point_tol * scale:
            continue
        faces.append(ordered)
        face_planes.append(k)

    # Keep only pairs with both faces present and renumber them
    surviving = [p for p in range(n_pairs)
                 if p in face_planes and p + n_pairs in face_planes]
    dropped = n_pairs - len(surviving)
    if dropped:
        logger.debug(f"Dropped {dropped} degenerate face pair(s)")
    renumber = {p: i for i, p in enumerate(surviving)}

    kept_faces, kept_vectors, kept_pairs = [], [], []
    for face, k in zip(faces, face_planes):
        pair = int(pair_of_plane[k])
        if pair not in renumber:
            continue
        kept_faces.append(face)
        kept_vectors.append(planes[k])
        kept_pairs.append(renumber[pair])

    if shape is None or dropped:
        shape = SHAPE_NAMES[dim].get(len(kept_faces), f'{len(kept_faces)}-face polytope')

    cell = WignerSeitzCell(
        dim=dim,
        vertices=vertices,
        faces=tuple(kept_faces),
        face_vectors=np.array(kept_vectors),
        face_pairs=np.array(kept_pairs, dtype=int),
        translation_vectors=pair_vectors[surviving],
        shape=shape,
    )
    logger.debug(f"Wigner-Seitz {shape}: {cell.num_vertices} vertices, "
                 f"{cell.num_faces} faces")
    return cell



def _order_face(vertices: np.ndarray, indices: np.ndarray, t: np.ndarray):
    """Order face vertices counter-clockwise about the outward normal t."""
    pts = vertices[indices]
    if len(t) == 2:
        if len(indices) != 2:
            return None
        # Edge runs counter-clockwise around the origin
        if pts[0, 0] * pts[1, 1] - pts[0, 1] * pts[1, 0] < 0:
            indices = indices[::-1]
        return np.array(indices, dtype=int)

    center = 0.5 * t
    normal = t / np.linalg.norm(t)
    rel = pts - center
    u = rel[np.argmax(np.linalg.norm(rel, axis=1))]
    u = u / np.linalg.norm(u)
    w = np.cross(normal, u)
    angles = np.arctan2(rel @ w, rel @ u)
    return np.array(indices[np.argsort(angles)], dtype=int)


def _face_measure(pts: np.ndarray, t: np.ndarray) -> float:
    """Edge length (2D) or polygon area (3D)."""
    if len(t) == 2:
        return float(np.linalg.norm(pts[1] - pts[0]))
    total = np.zeros(3)
    for p, q in zip(pts, np.roll(pts, -1, axis=0)):
        total += np.cross(p, q)
    return 0.5 * abs(total @ t) / np.linalg.norm(t)



@dataclass(frozen=True)
class CoarseMesh:
    """
    Coarse simplicial mesh of a Wigner-Seitz cell.

    Attributes
    ----------
    dim : int
        Spatial dimension
    vertices : np.ndarray, shape (N, dim)
        Vertex coordinates; vertex 0 is the origin
    elements : np.ndarray, shape (M, dim + 1)
        Tetrahedra (3D) or triangles (2D), positively oriented
    element_attributes : np.ndarray, shape (M,)
        Material attribute per element (all 1)
    boundary_elements : np.ndarray, shape (B, dim)
        Triangles (3D) or segments (2D) on the cell surface, outward facing
    boundary_attributes : np.ndarray, shape (B,)
        Face pair index + 1; opposite faces share the attribute

    Notes
    -----
    Instances are frozen and every array is read-only.
    """
    dim: int
    vertices: np.ndarray
    elements: np.ndarray
    element_attributes: np.ndarray
    boundary_elements: np.ndarray
    boundary_attributes: np.ndarray
    element_geometry: str = field(default='')
    boundary_geometry: str = field(default='')

    def __post_init__(self):
        _freeze(self, 'vertices', float)
        for name in ('elements', 'element_attributes',
                     'boundary_elements', 'boundary_attributes'):
            _freeze(self, name, int)

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_elements(self) -> int:
        return len(self.elements)

    @property
    def num_boundary_elements(self) -> int:
        return len(self.boundary_elements)

    def element_volumes(self) -> np.ndarray:
        """Signed simplex volumes (positive for every element)."""
        return _simplex_volumes(self.vertices, self.elements)

    @property
    def volume(self) -> float:
        return float(self.element_volumes().sum())


def _simplex_volumes(vertices: np.ndarray, elements: np.ndarray) -> np.ndarray:
    simplices = vertices[elements]
    edges = simplices[:, 1:, :] - simplices[:, :1, :]
    factorial = 6.0 if vertices.shape[1] == 3 else 2.0
    return np.linalg.det(edges) / factorial


def build_coarse_mesh(cell: WignerSeitzCell) -> CoarseMesh:
    """Fan the Wigner-Seitz cell into simplices from the origin."""
    dim = cell.dim
    origin = np.zeros((1, dim))
    elements, boundary, attributes = [], [], []

    if dim == 2:
        vertices = np.vstack([origin, cell.vertices])
        for face, pair in zip(cell.faces, cell.face_pairs):
            p, q = int(face[0]) + 1, int(face[1]) + 1
            elements.append((0, p, q))
            boundary.append((p, q))
            attributes.append(pair + 1)
        element_geometry, boundary_geometry = 'triangle', 'segment'
    else:
        n_cell = cell.num_vertices
        vertices = np.vstack([origin, cell.vertices, cell.face_centers])
        for f, (face, pair) in enumerate(zip(cell.faces, cell.face_pairs)):
            c = n_cell + 1 + f
            for i, j in zip(face, np.roll(face, -1)):
                p, q = int(i) + 1, int(j) + 1
                elements.append((0, c, p, q))
                boundary.append((c, p, q))
                attributes.append(pair + 1)
        element_geometry, boundary_geometry = 'tetrahedron', 'triangle'

    elements = np.array(elements, dtype=int)
    # Swap two vertices of any negatively oriented simplex
    negative = _simplex_volumes(vertices, elements) < 0
    if np.any(negative):
        elements[negative, -2:] = elements[negative][:, [-1, -2]]

    mesh = CoarseMesh(
        dim=dim,
        vertices=vertices,
        elements=elements,
        element_attributes=np.ones(len(elements), dtype=int),
        boundary_elements=np.array(boundary, dtype=int),
        boundary_attributes=np.array(attributes, dtype=int),
        element_geometry=element_geometry,
        boundary_geometry=boundary_geometry,
    )
    logger.debug(f"Coarse mesh: {mesh.num_vertices} vertices, "
                 f"{mesh.num_elements} {element_geometry} elements, "
                 f"{mesh.num_boundary_elements} boundary elements")
    return mesh
