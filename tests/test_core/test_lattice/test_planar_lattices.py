"""
Unit tests for the five planar lattices.
"""

import numpy as np
import pytest
from bravais.core.exceptions import InvalidLatticeConfiguration
from bravais.core.lattice import (
    SquareLattice,
    HexagonalLattice,
    RectangularLattice,
    CenteredRectangularLattice,
    ObliqueLattice,
)


class TestSquareLattice:
    """Test the square lattice."""

    def test_geometry(self):
        lattice = SquareLattice(a=1.0)
        assert lattice.dim == 2
        assert np.isclose(lattice.unit_cell_volume, 1.0)
        assert np.allclose(lattice.get_reciprocal_vectors(), 2 * np.pi * np.eye(2))

    def test_catalog(self):
        """Γ, X, M on a single path Γ-X-M-Γ."""
        lattice = SquareLattice(a=1.0)
        assert lattice.get_number_symmetry_points() == 3
        assert lattice.get_path_labels() == [['Γ', 'X', 'M', 'Γ']]
        m = lattice.get_symmetry_point(lattice.get_symmetry_point_index('M'))
        assert np.allclose(m, [np.pi, np.pi])

    def test_wigner_seitz(self):
        cell = SquareLattice(a=1.0).get_wigner_seitz_cell()
        assert cell.shape == 'square'
        assert cell.num_faces == 4
        assert np.isclose(cell.volume, 1.0)


class TestHexagonalLattice:
    """Test the triangular net."""

    def test_volume(self):
        lattice = HexagonalLattice(a=1.0)
        assert np.isclose(lattice.unit_cell_volume, np.sqrt(3) / 2)

    def test_wigner_seitz_hexagon(self):
        cell = HexagonalLattice().get_wigner_seitz_cell()
        assert cell.shape == 'hexagon'
        assert cell.num_faces == 6
        assert cell.num_vertices == 6

    def test_k_point_is_zone_corner(self):
        """K = (4π/3a, 0) and lies on a Brillouin-zone vertex."""
        lattice = HexagonalLattice(a=1.0)
        k = lattice.get_symmetry_point(lattice.get_symmetry_point_index('K'))
        assert np.allclose(k, [4 * np.pi / 3, 0.0])

        zone = lattice.get_brillouin_zone()
        distances = np.linalg.norm(zone.vertices - k, axis=1)
        assert np.isclose(distances.min(), 0.0, atol=1e-9)

    def test_m_point_is_edge_midpoint(self):
        lattice = HexagonalLattice(a=1.0)
        m = lattice.get_symmetry_point(lattice.get_symmetry_point_index('M'))
        assert np.isclose(np.linalg.norm(m), 2 * np.pi / np.sqrt(3))


class TestRectangularLattices:
    """Test RECT and CRECT."""

    def test_lengths_are_swapped(self):
        lattice = RectangularLattice(a=2.0, b=1.0)
        assert lattice.parameters.a == 1.0
        assert lattice.parameters.b == 2.0
        assert np.allclose(lattice.get_lattice_vectors(), [[1.0, 0.0], [0.0, 2.0]])

    def test_equal_lengths_raise(self):
        with pytest.raises(InvalidLatticeConfiguration, match="a != b"):
            RectangularLattice(a=1.0, b=1.0)
        with pytest.raises(InvalidLatticeConfiguration):
            CenteredRectangularLattice(a=1.0, b=1.0)

    def test_rectangular_catalog(self):
        lattice = RectangularLattice(a=0.5, b=1.0)
        assert lattice.get_path_labels() == [['Γ', 'X', 'S', 'Y', 'Γ']]
        assert lattice.wigner_seitz_shape == 'rectangle'

    def test_centered_rectangular(self):
        """Hexagonal Wigner-Seitz cell of half the conventional area."""
        lattice = CenteredRectangularLattice(a=0.5, b=1.0)
        assert np.isclose(lattice.unit_cell_volume, 0.25)
        cell = lattice.get_wigner_seitz_cell()
        assert cell.num_faces == 6
        assert np.isclose(cell.volume, 0.25)
        assert lattice.get_number_symmetry_points() == 5


class TestObliqueLattice:
    """Test the oblique lattice."""

    def test_default(self):
        lattice = ObliqueLattice()
        assert np.isclose(lattice.unit_cell_volume, 1.2 * np.sin(0.4 * np.pi))
        assert lattice.get_wigner_seitz_cell().num_faces == 6
        assert lattice.get_number_paths() == 2
        assert lattice.get_path_labels() == [['X', 'Γ', 'Y'], ['C', 'Γ']]

    def test_interaxial_angle(self):
        lattice = ObliqueLattice(a=1.0, b=1.5, gamma=0.3 * np.pi)
        assert np.allclose(lattice.get_interaxial_angles(), [0.3 * np.pi])
        assert np.allclose(lattice.get_axial_lengths(), [1.0, 1.5])

    @pytest.mark.parametrize("gamma", [0.0, 0.5 * np.pi, np.pi, 4.0])
    def test_invalid_angle_raises(self, gamma):
        with pytest.raises(InvalidLatticeConfiguration):
            ObliqueLattice(gamma=gamma)
