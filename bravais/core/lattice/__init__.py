"""
Lattice geometry module.

This module provides the abstract base class and the 19 concrete Bravais
lattices:

- Planar: SquareLattice, HexagonalLattice, RectangularLattice,
  CenteredRectangularLattice, ObliqueLattice
- Cubic: CubicLattice, FaceCenteredCubicLattice, BodyCenteredCubicLattice
- Tetragonal: TetragonalLattice, BodyCenteredTetragonalLattice
- Orthorhombic: OrthorhombicLattice, FaceCenteredOrthorhombicLattice,
  BodyCenteredOrthorhombicLattice, BaseCenteredOrthorhombicLattice
- Hexagonal: HexagonalPrismLattice, RhombohedralLattice
- Monoclinic: MonoclinicLattice, BaseCenteredMonoclinicLattice
- Triclinic: TriclinicLattice
"""

from .base import BravaisLattice, LatticeParameters, LatticeType, compute_reciprocal_vectors
from .planar import (
    SquareLattice,
    HexagonalLattice,
    RectangularLattice,
    CenteredRectangularLattice,
    ObliqueLattice,
)
from .cubic import CubicLattice, FaceCenteredCubicLattice, BodyCenteredCubicLattice
from .tetragonal import TetragonalLattice, BodyCenteredTetragonalLattice
from .orthorhombic import (
    OrthorhombicLattice,
    FaceCenteredOrthorhombicLattice,
    BodyCenteredOrthorhombicLattice,
    BaseCenteredOrthorhombicLattice,
)
from .hexagonal import HexagonalPrismLattice, RhombohedralLattice
from .monoclinic import MonoclinicLattice, BaseCenteredMonoclinicLattice
from .triclinic import TriclinicLattice
from .presets import (
    LATTICE_REGISTRY,
    DEFAULT_PARAMETERS,
    bravais_lattice_factory,
    create_lattice,
)

__all__ = [
    'BravaisLattice',
    'LatticeParameters',
    'LatticeType',
    'compute_reciprocal_vectors',
    'SquareLattice',
    'HexagonalLattice',
    'RectangularLattice',
    'CenteredRectangularLattice',
    'ObliqueLattice',
    'CubicLattice',
    'FaceCenteredCubicLattice',
    'BodyCenteredCubicLattice',
    'TetragonalLattice',
    'BodyCenteredTetragonalLattice',
    'OrthorhombicLattice',
    'FaceCenteredOrthorhombicLattice',
    'BodyCenteredOrthorhombicLattice',
    'BaseCenteredOrthorhombicLattice',
    'HexagonalPrismLattice',
    'RhombohedralLattice',
    'MonoclinicLattice',
    'BaseCenteredMonoclinicLattice',
    'TriclinicLattice',
    'LATTICE_REGISTRY',
    'DEFAULT_PARAMETERS',
    'bravais_lattice_factory',
    'create_lattice',
]
