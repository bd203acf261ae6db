"""
Input/output: YAML configuration and export of catalogs and meshes.
"""

from .config import load_config, save_config, lattice_from_config
from .export import (
    symmetry_points_to_dataframe,
    intermediate_points_to_dataframe,
    save_symmetry_points,
    mesh_to_dict,
    save_coarse_mesh,
)

__all__ = [
    'load_config',
    'save_config',
    'lattice_from_config',
    'symmetry_points_to_dataframe',
    'intermediate_points_to_dataframe',
    'save_symmetry_points',
    'mesh_to_dict',
    'save_coarse_mesh',
]
