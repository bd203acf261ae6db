"""
Unit tests for the tetragonal and orthorhombic lattices.

Covers the regime bifurcation of the Wigner-Seitz cell and the selection
of symmetry-table variants.
"""

import numpy as np
import pytest
from bravais.core.exceptions import InvalidLatticeConfiguration
from bravais.core.lattice import (
    TetragonalLattice,
    BodyCenteredTetragonalLattice,
    OrthorhombicLattice,
    FaceCenteredOrthorhombicLattice,
    BodyCenteredOrthorhombicLattice,
    BaseCenteredOrthorhombicLattice,
)


class TestTetragonal:
    """Test the primitive tetragonal lattice."""

    def test_geometry(self):
        lattice = TetragonalLattice(a=1.0, c=0.5)
        assert np.isclose(lattice.unit_cell_volume, 0.5)
        assert lattice.wigner_seitz_shape == 'square prism'
        assert lattice.get_number_symmetry_points() == 6
        assert lattice.get_number_paths() == 3

    def test_equal_axes_raise(self):
        with pytest.raises(InvalidLatticeConfiguration, match="c != a"):
            TetragonalLattice(a=1.0, c=1.0)


class TestBodyCenteredTetragonal:
    """Test BCT regimes and variants."""

    def test_bct1_truncated_octahedron(self):
        """c < a: BCT1 table and truncated-octahedron cell."""
        lattice = BodyCenteredTetragonalLattice(a=1.0, c=0.5)
        assert lattice.variant == 'BCT1'
        assert lattice.get_number_symmetry_points() == 7
        assert lattice.wigner_seitz_shape == 'truncated octahedron'
        assert lattice.get_wigner_seitz_cell().num_faces == 14
        assert len(lattice.get_translation_vectors()) == 7

    def test_bct2_elongated_dodecahedron(self):
        """c > √2 a: BCT2 table and elongated-dodecahedron cell."""
        lattice = BodyCenteredTetragonalLattice(a=1.0, c=2.0)
        assert lattice.variant == 'BCT2'
        assert lattice.get_number_symmetry_points() == 9
        assert lattice.wigner_seitz_shape == 'elongated dodecahedron'
        assert lattice.get_wigner_seitz_cell().num_faces == 12
        assert 'Σ' in lattice.get_high_symmetry_points()

    def test_between_thresholds(self):
        """a < c < √2 a: BCT2 table, truncated-octahedron cell."""
        lattice = BodyCenteredTetragonalLattice(a=1.0, c=1.2)
        assert lattice.variant == 'BCT2'
        assert lattice.get_wigner_seitz_cell().num_faces == 14

    def test_volume(self):
        lattice = BodyCenteredTetragonalLattice(a=1.0, c=2.0)
        assert np.isclose(lattice.unit_cell_volume, 1.0)
        assert np.isclose(lattice.get_wigner_seitz_cell().volume, 1.0)

    def test_equal_axes_raise(self):
        with pytest.raises(InvalidLatticeConfiguration):
            BodyCenteredTetragonalLattice(a=1.0, c=1.0)


class TestOrthorhombic:
    """Test the orthorhombic family."""

    def test_lengths_are_sorted(self):
        lattice = OrthorhombicLattice(1.0, 0.5, 0.8)
        p = lattice.parameters
        assert (p.a, p.b, p.c) == (0.5, 0.8, 1.0)
        assert np.allclose(lattice.get_lattice_vectors(), np.diag([0.5, 0.8, 1.0]))

    def test_repeated_length_raises(self):
        with pytest.raises(InvalidLatticeConfiguration, match="distinct"):
            OrthorhombicLattice(1.0, 1.0, 2.0)

    def test_orc_catalog(self):
        lattice = OrthorhombicLattice()
        assert lattice.get_number_symmetry_points() == 8
        assert lattice.get_number_paths() == 4

    def test_orcf_variants(self):
        """Sign of 1/a² - 1/b² - 1/c² selects ORCF1 or ORCF2."""
        assert FaceCenteredOrthorhombicLattice(1.0, 1.2, 1.6).variant == 'ORCF2'
        assert FaceCenteredOrthorhombicLattice(1.0, 2.0, 3.0).variant == 'ORCF1'

    def test_orcf_cell(self):
        lattice = FaceCenteredOrthorhombicLattice()
        cell = lattice.get_wigner_seitz_cell()
        assert np.isclose(cell.volume, lattice.unit_cell_volume)
        assert np.isclose(lattice.unit_cell_volume, 1.0 * 1.2 * 1.6 / 4)

    def test_orci_regimes(self):
        assert BodyCenteredOrthorhombicLattice(1.0, 1.2, 1.4).get_wigner_seitz_cell().num_faces == 14
        assert BodyCenteredOrthorhombicLattice(1.0, 1.2, 2.0).get_wigner_seitz_cell().num_faces == 12

    def test_orcc(self):
        lattice = BaseCenteredOrthorhombicLattice(a=1.0, b=0.5, c=1.0)
        assert lattice.parameters.a == 0.5
        assert lattice.wigner_seitz_shape == 'hexagonal prism'
        assert lattice.get_wigner_seitz_cell().num_faces == 8
        assert lattice.get_number_symmetry_points() == 10
