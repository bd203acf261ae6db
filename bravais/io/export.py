"""
Export of symmetry catalogs and coarse meshes.

Tables go through pandas DataFrames (CSV on disk); meshes are written as
JSON with arrays serialized to nested lists.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np
import pandas as pd

from ..core.lattice import BravaisLattice
from ..core.wigner_seitz import CoarseMesh

logger = logging.getLogger(__name__)


def serialize_array(obj):
    """Recursively convert numpy arrays and tuples into JSON types."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, np.generic):
        return obj.item()
    elif isinstance(obj, dict):
        return {k: serialize_array(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [serialize_array(item) for item in obj]
    return obj


def symmetry_points_to_dataframe(lattice: BravaisLattice) -> pd.DataFrame:
    """
    Tabulate the symmetry points of a lattice.

    Returns
    -------
    df : pd.DataFrame
        One row per point with columns label, f1..f{dim} (fractional) and
        kx, ky[, kz] (Cartesian), indexed by catalog position
    """
    axes = ['kx', 'ky', 'kz'][:lattice.dim]
    rows = []
    for pt in lattice.get_symmetry_points():
        row = {'label': pt.label}
        row.update({f'f{i + 1}': v for i, v in enumerate(pt.fractional)})
        row.update(dict(zip(axes, pt.cartesian)))
        rows.append(row)
    df = pd.DataFrame(rows)
    df.index.name = 'index'
    return df


def intermediate_points_to_dataframe(lattice: BravaisLattice) -> pd.DataFrame:
    """One row per path segment: path, segment, end-point labels, midpoint."""
    axes = ['kx', 'ky', 'kz'][:lattice.dim]
    rows = []
    for p in range(lattice.get_number_paths()):
        for s in range(lattice.get_number_path_segments(p)):
            e0, e1 = lattice.get_path_segment_end_point_indices(p, s)
            row = {
                'path': p,
                'segment': s,
                'label': lattice.get_intermediate_point_label(p, s),
                'start': lattice.get_symmetry_point_label(e0),
                'end': lattice.get_symmetry_point_label(e1),
            }
            row.update(dict(zip(axes, lattice.get_intermediate_point(p, s))))
            rows.append(row)
    return pd.DataFrame(rows)


def save_symmetry_points(lattice: BravaisLattice, path: Union[str, Path]) -> Path:
    """Write symmetry_points_to_dataframe(lattice) as CSV."""
    path = Path(path)
    symmetry_points_to_dataframe(lattice).to_csv(path)
    logger.info(f"Saved {lattice.get_number_symmetry_points()} symmetry points to {path}")
    return path


def mesh_to_dict(mesh: CoarseMesh) -> Dict[str, Any]:
    return serialize_array({
        'dim': mesh.dim,
        'element_geometry': mesh.element_geometry,
        'boundary_geometry': mesh.boundary_geometry,
        'vertices': mesh.vertices,
        'elements': mesh.elements,
        'element_attributes': mesh.element_attributes,
        'boundary_elements': mesh.boundary_elements,
        'boundary_attributes': mesh.boundary_attributes,
    })


def save_coarse_mesh(lattice: BravaisLattice, path: Union[str, Path]) -> Path:
    """
    Save the coarse Wigner-Seitz mesh of a lattice to JSON.

    The file also records the lattice configuration and its translation
    vectors, which the FEM layer needs to stitch periodic boundaries.
    """
    path = Path(path)
    data = {
        'lattice': lattice.to_dict(),
        'wigner_seitz_shape': lattice.wigner_seitz_shape,
        'translation_vectors': serialize_array(lattice.get_translation_vectors()),
        'mesh': mesh_to_dict(lattice.get_coarse_wigner_seitz_mesh()),
    }
    with open(path, 'w') as f:
        json.dump(data, f, indent=4)
    logger.info(f"Saved coarse mesh of {lattice!r} to {path}")
    return path
