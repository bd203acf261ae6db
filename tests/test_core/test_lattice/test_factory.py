"""
Tests for the lattice registry and factory functions.
"""

import logging

import numpy as np
import pytest
from bravais.core.exceptions import InvalidLatticeConfiguration
from bravais.core.lattice import (
    LATTICE_REGISTRY,
    DEFAULT_PARAMETERS,
    LatticeType,
    BodyCenteredTetragonalLattice,
    CubicLattice,
    bravais_lattice_factory,
    create_lattice,
)


class TestLatticeType:
    """Test the lattice-type enumeration."""

    def test_registry_is_complete(self):
        """Every valid type has a class and a defaults entry."""
        valid = [t for t in LatticeType if t != LatticeType.INVALID_TYPE]
        assert len(valid) == 19
        assert set(LATTICE_REGISTRY) == set(valid)
        assert set(DEFAULT_PARAMETERS) == set(valid)

    def test_dimensions(self):
        assert LatticeType.PRIMITIVE_OBLIQUE.dimension == 2
        assert LatticeType.PRIMITIVE_CUBIC.dimension == 3
        planar = [t for t in LATTICE_REGISTRY if t.dimension == 2]
        assert len(planar) == 5

    @pytest.mark.parametrize("value", [
        LatticeType.BODY_CENTERED_TETRAGONAL,
        10,
        'BODY_CENTERED_TETRAGONAL',
        'body_centered_tetragonal',
        'BCT',
        'bct',
    ])
    def test_lookup(self, value):
        assert LatticeType.lookup(value) == LatticeType.BODY_CENTERED_TETRAGONAL

    @pytest.mark.parametrize("value", [99, -3, 'XYZ', None])
    def test_lookup_unknown(self, value):
        with pytest.raises(InvalidLatticeConfiguration):
            LatticeType.lookup(value)


class TestBravaisLatticeFactory:
    """Test bravais_lattice_factory."""

    def test_default_substitution(self):
        """Negative relevant parameters take the type's defaults."""
        lattice = bravais_lattice_factory(LatticeType.PRIMITIVE_CUBIC, a=-1)
        assert isinstance(lattice, CubicLattice)
        assert lattice.parameters.a == 1.0

    def test_irrelevant_parameters_ignored(self):
        """A cubic lattice never consults b, c or the angles."""
        lattice = bravais_lattice_factory(LatticeType.PRIMITIVE_CUBIC, a=2.0,
                                          b=7.0, c=-5.0, alpha=3.0)
        assert np.allclose(lattice.get_lattice_vectors(), 2.0 * np.eye(3))

    def test_explicit_parameters(self):
        lattice = bravais_lattice_factory('bct', a=1.0, c=2.0)
        assert isinstance(lattice, BodyCenteredTetragonalLattice)
        assert lattice.variant == 'BCT2'

    def test_partial_defaults(self):
        lattice = bravais_lattice_factory(LatticeType.BODY_CENTERED_TETRAGONAL, a=2.0)
        assert lattice.parameters.a == 2.0
        assert lattice.parameters.c == 0.5

    @pytest.mark.parametrize("lattice_type", [LatticeType.INVALID_TYPE, 0, 99])
    def test_invalid_type_raises(self, lattice_type):
        with pytest.raises(InvalidLatticeConfiguration, match="Unknown lattice type"):
            bravais_lattice_factory(lattice_type)

    def test_constraint_violation_raises(self):
        with pytest.raises(InvalidLatticeConfiguration):
            bravais_lattice_factory(LatticeType.PRIMITIVE_TETRAGONAL, a=1.0, c=1.0)

    @pytest.mark.parametrize("lattice_type", list(LATTICE_REGISTRY))
    def test_all_defaults_construct(self, lattice_type):
        lattice = bravais_lattice_factory(lattice_type)
        assert lattice.lattice_type == lattice_type
        assert lattice.dim == lattice_type.dimension
        assert lattice.get_symmetry_point_label(0) == 'Γ'

    def test_default_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger='bravais'):
            bravais_lattice_factory(LatticeType.PRIMITIVE_SQUARE)
        assert "using default a" in caplog.text


class TestCreateLattice:
    """Test the keyword factory."""

    def test_constructor_defaults(self):
        lattice = create_lattice('FCC')
        assert lattice.parameters.a == 1.0

    def test_keywords(self):
        lattice = create_lattice(LatticeType.PRIMITIVE_ORTHORHOMBIC, a=1.0, b=2.0, c=3.0)
        assert np.isclose(lattice.unit_cell_volume, 6.0)

    def test_unknown_keyword_raises(self):
        with pytest.raises(InvalidLatticeConfiguration, match="does not take"):
            create_lattice('CUB', a=1.0, c=2.0)

    def test_to_dict_round_trip(self):
        lattice = create_lattice('MCLC', a=1.0, b=1.1, c=1.3, alpha=0.35 * np.pi)
        config = lattice.to_dict()
        rebuilt = create_lattice(config.pop('type'), **config)
        assert np.allclose(rebuilt.get_lattice_vectors(), lattice.get_lattice_vectors())
        assert rebuilt.variant == lattice.variant
