"""
Registry, defaults and factory for the 19 Bravais lattice types.

`bravais_lattice_factory` takes a lattice type and all six geometric
parameters and consults only the ones relevant to the type; a negative
relevant parameter selects the type's default.  `create_lattice` is the
registry-based keyword variant.
"""

import logging
import numpy as np
from typing import Dict, Type, Union

from .base import BravaisLattice, LatticeType
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
from ..exceptions import InvalidLatticeConfiguration
from ...utils.logging import setup_logging

logger = logging.getLogger(__name__)


# Lattice registry for type- and config-based construction
LATTICE_REGISTRY: Dict[LatticeType, Type[BravaisLattice]] = {
    LatticeType.PRIMITIVE_SQUARE: SquareLattice,
    LatticeType.PRIMITIVE_HEXAGONAL: HexagonalLattice,
    LatticeType.PRIMITIVE_RECTANGULAR: RectangularLattice,
    LatticeType.CENTERED_RECTANGULAR: CenteredRectangularLattice,
    LatticeType.PRIMITIVE_OBLIQUE: ObliqueLattice,
    LatticeType.PRIMITIVE_CUBIC: CubicLattice,
    LatticeType.FACE_CENTERED_CUBIC: FaceCenteredCubicLattice,
    LatticeType.BODY_CENTERED_CUBIC: BodyCenteredCubicLattice,
    LatticeType.PRIMITIVE_TETRAGONAL: TetragonalLattice,
    LatticeType.BODY_CENTERED_TETRAGONAL: BodyCenteredTetragonalLattice,
    LatticeType.PRIMITIVE_ORTHORHOMBIC: OrthorhombicLattice,
    LatticeType.FACE_CENTERED_ORTHORHOMBIC: FaceCenteredOrthorhombicLattice,
    LatticeType.BODY_CENTERED_ORTHORHOMBIC: BodyCenteredOrthorhombicLattice,
    LatticeType.BASE_CENTERED_ORTHORHOMBIC: BaseCenteredOrthorhombicLattice,
    LatticeType.PRIMITIVE_HEXAGONAL_PRISM: HexagonalPrismLattice,
    LatticeType.PRIMITIVE_RHOMBOHEDRAL: RhombohedralLattice,
    LatticeType.PRIMITIVE_MONOCLINIC: MonoclinicLattice,
    LatticeType.BASE_CENTERED_MONOCLINIC: BaseCenteredMonoclinicLattice,
    LatticeType.PRIMITIVE_TRICLINIC: TriclinicLattice,
}


# Default value of every parameter each type consults
DEFAULT_PARAMETERS: Dict[LatticeType, Dict[str, float]] = {
    LatticeType.PRIMITIVE_SQUARE: {'a': 1.0},
    LatticeType.PRIMITIVE_HEXAGONAL: {'a': 1.0},
    LatticeType.PRIMITIVE_RECTANGULAR: {'a': 0.5, 'b': 1.0},
    LatticeType.CENTERED_RECTANGULAR: {'a': 0.5, 'b': 1.0},
    LatticeType.PRIMITIVE_OBLIQUE: {'a': 1.0, 'b': 1.2, 'gamma': 0.4 * np.pi},
    LatticeType.PRIMITIVE_CUBIC: {'a': 1.0},
    LatticeType.FACE_CENTERED_CUBIC: {'a': 1.0},
    LatticeType.BODY_CENTERED_CUBIC: {'a': 1.0},
    LatticeType.PRIMITIVE_TETRAGONAL: {'a': 1.0, 'c': 0.5},
    LatticeType.BODY_CENTERED_TETRAGONAL: {'a': 1.0, 'c': 0.5},
    LatticeType.PRIMITIVE_ORTHORHOMBIC: {'a': 0.5, 'b': 0.8, 'c': 1.0},
    LatticeType.FACE_CENTERED_ORTHORHOMBIC: {'a': 1.0, 'b': 1.2, 'c': 1.6},
    LatticeType.BODY_CENTERED_ORTHORHOMBIC: {'a': 1.0, 'b': 1.2, 'c': 1.6},
    LatticeType.BASE_CENTERED_ORTHORHOMBIC: {'a': 0.5, 'b': 1.0, 'c': 1.0},
    LatticeType.PRIMITIVE_HEXAGONAL_PRISM: {'a': 1.0, 'c': 1.0},
    LatticeType.PRIMITIVE_RHOMBOHEDRAL: {'a': 1.0, 'alpha': 0.25 * np.pi},
    LatticeType.PRIMITIVE_MONOCLINIC: {'a': 1.0, 'b': 1.0, 'c': 1.2, 'alpha': 0.4 * np.pi},
    LatticeType.BASE_CENTERED_MONOCLINIC: {'a': 1.0, 'b': 1.0, 'c': 1.2, 'alpha': 0.4 * np.pi},
    LatticeType.PRIMITIVE_TRICLINIC: {'a': 1.0, 'b': 1.2, 'c': 1.5, 'alpha': 0.4 * np.pi,
                                      'beta': 0.45 * np.pi, 'gamma': 0.35 * np.pi},
}


def bravais_lattice_factory(lattice_type: Union[LatticeType, int, str],
                            a: float = -1.0,
                            b: float = -1.0,
                            c: float = -1.0,
                            alpha: float = -1.0,
                            beta: float = -1.0,
                            gamma: float = -1.0,
                            verbosity: int = 0) -> BravaisLattice:
    """
    Construct a lattice of the given type.

    Parameters
    ----------
    lattice_type : LatticeType, int or str
        Type to build (enum member, value, member name or short code)
    a, b, c : float
        Axial lengths; only the ones the type uses are consulted
    alpha, beta, gamma : float
        Interaxial angles in radians; only the ones the type uses are
        consulted
    verbosity : int
        0 quiet, 1 info, 2 or more debug logging (see setup_logging)

    Returns
    -------
    lattice : BravaisLattice

    Raises
    ------
    InvalidLatticeConfiguration
        If the type is INVALID_TYPE or unknown, or if the parameters violate
        the type's constraints after default substitution

    Notes
    -----
    Any consulted parameter that is negative is replaced by the type's
    default, so bravais_lattice_factory(LatticeType.PRIMITIVE_CUBIC) builds
    a unit cube.

    Examples
    --------
    >>> lattice = bravais_lattice_factory(LatticeType.PRIMITIVE_CUBIC, a=-1)
    >>> lattice.parameters.a
    1.0
    """
    if verbosity > 0:
        setup_logging(verbosity)

    lattice_type = LatticeType.lookup(lattice_type)
    if lattice_type not in LATTICE_REGISTRY:
        raise InvalidLatticeConfiguration(f"Unknown lattice type: {lattice_type.name}")

    given = {'a': a, 'b': b, 'c': c, 'alpha': alpha, 'beta': beta, 'gamma': gamma}
    kwargs = {}
    for name, default in DEFAULT_PARAMETERS[lattice_type].items():
        value = given[name]
        if value < 0:
            logger.info(f"{lattice_type.short_code}: using default {name}={default:.6g}")
            value = default
        kwargs[name] = value

    logger.debug(f"Building {lattice_type.name} with {kwargs}")
    return LATTICE_REGISTRY[lattice_type](**kwargs)


def create_lattice(lattice_type: Union[LatticeType, int, str], **kwargs) -> BravaisLattice:
    """
    Factory function to create lattices from names.

    Parameters
    ----------
    lattice_type : LatticeType, int or str
        Enum member, value, member name ('BODY_CENTERED_TETRAGONAL') or
        short code ('BCT')
    **kwargs
        Arguments passed to the lattice constructor (e.g. a=1.0, c=0.5);
        missing ones take the constructor defaults

    Returns
    -------
    lattice : BravaisLattice
        Instantiated lattice object

    Examples
    --------
    >>> lattice = create_lattice('BCT', a=1.0, c=2.0)
    >>> lattice.variant
    'BCT2'

    Raises
    ------
    InvalidLatticeConfiguration
        If lattice_type is not recognized or a keyword does not apply to it
    """
    lattice_type = LatticeType.lookup(lattice_type)
    if lattice_type not in LATTICE_REGISTRY:
        available = ', '.join(t.short_code for t in LATTICE_REGISTRY)
        raise InvalidLatticeConfiguration(
            f"Unknown lattice type: {lattice_type.name}. Available types: {available}")

    cls = LATTICE_REGISTRY[lattice_type]
    unexpected = set(kwargs) - set(DEFAULT_PARAMETERS[lattice_type])
    if unexpected:
        raise InvalidLatticeConfiguration(
            f"{cls.__name__} does not take parameter(s) {sorted(unexpected)}; "
            f"expected {sorted(DEFAULT_PARAMETERS[lattice_type])}")
    return cls(**kwargs)
