"""
Core domain models for the bravais package.

This module contains the fundamental abstractions:
- Lattice: Bravais lattice geometry, point mapping and symmetry catalog
- Wigner-Seitz: cell construction and coarse meshing
- Coefficients: periodic functions of position on a lattice

These are the building blocks used by the I/O and visualization layers.
"""

from .exceptions import (
    BravaisError,
    InvalidLatticeConfiguration,
    UnknownSymmetryPointError,
)

from .lattice import (
    BravaisLattice,
    LatticeParameters,
    LatticeType,
    LATTICE_REGISTRY,
    DEFAULT_PARAMETERS,
    bravais_lattice_factory,
    create_lattice,
)

from .symmetry import SymmetryCatalog, SymmetryPoint, IntermediatePoint, PointGroupFolding
from .wigner_seitz import WignerSeitzCell, CoarseMesh, relevant_vectors

from .coefficients import (
    LatticeCoefficient,
    RealModeCoefficient,
    ImagModeCoefficient,
    RealPhaseCoefficient,
    ImagPhaseCoefficient,
)

__all__ = [
    # Errors
    'BravaisError',
    'InvalidLatticeConfiguration',
    'UnknownSymmetryPointError',

    # Lattice
    'BravaisLattice',
    'LatticeParameters',
    'LatticeType',
    'LATTICE_REGISTRY',
    'DEFAULT_PARAMETERS',
    'bravais_lattice_factory',
    'create_lattice',

    # Symmetry catalog
    'SymmetryCatalog',
    'SymmetryPoint',
    'IntermediatePoint',
    'PointGroupFolding',

    # Wigner-Seitz cell
    'WignerSeitzCell',
    'CoarseMesh',
    'relevant_vectors',

    # Coefficients
    'LatticeCoefficient',
    'RealModeCoefficient',
    'ImagModeCoefficient',
    'RealPhaseCoefficient',
    'ImagPhaseCoefficient',
]
