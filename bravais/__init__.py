"""
bravais: Bravais lattice geometry for periodic media

A Python package describing the 5 planar and 14 spatial Bravais lattices:
primitive and reciprocal vectors, Wigner-Seitz cells and Brillouin zones,
mapping of points into the fundamental domain, the high-symmetry points and
band-structure paths of Setyawan & Curtarolo, and a coarse simplicial mesh
of the Wigner-Seitz cell for finite-element band-structure solvers.

Main Components
---------------
core : Lattice types, symmetry catalog, Wigner-Seitz cell, coefficients
io : YAML configuration, CSV / JSON export
visualization : Brillouin-zone and Wigner-Seitz plots
utils : Logging

Quick Start
-----------
>>> from bravais import bravais_lattice_factory, LatticeType
>>>
>>> # Body-centered tetragonal lattice with c < a
>>> lattice = bravais_lattice_factory(LatticeType.BODY_CENTERED_TETRAGONAL, a=1.0, c=0.5)
>>> lattice.variant
'BCT1'
>>> lattice.get_number_symmetry_points()
7
>>>
>>> # Fold an arbitrary point into the fundamental domain
>>> ipt, moved = lattice.map_to_fundamental_domain([0.9, -0.3, 0.2])
>>>
>>> # Coarse mesh of the Wigner-Seitz cell
>>> mesh = lattice.get_coarse_wigner_seitz_mesh()
>>> print(lattice.wigner_seitz_shape, mesh.num_elements)

Current Version: 0.1.0
"""

__version__ = "0.1.0"

# High-level API exports
from .core import (
    # Errors
    BravaisError,
    InvalidLatticeConfiguration,
    UnknownSymmetryPointError,

    # Lattice
    BravaisLattice,
    LatticeParameters,
    LatticeType,
    bravais_lattice_factory,
    create_lattice,

    # Wigner-Seitz cell
    WignerSeitzCell,
    CoarseMesh,
)
from .io import lattice_from_config, load_config
from .utils import setup_logging

__all__ = [
    # Version info
    '__version__',

    # Core abstractions
    'BravaisError',
    'InvalidLatticeConfiguration',
    'UnknownSymmetryPointError',
    'BravaisLattice',
    'LatticeParameters',
    'LatticeType',
    'bravais_lattice_factory',
    'create_lattice',
    'WignerSeitzCell',
    'CoarseMesh',
    'lattice_from_config',
    'load_config',
    'setup_logging',
]
