"""
Unit tests for the cubic lattices (CUB, FCC, BCC).

Tests geometric properties:
- Primitive and reciprocal vectors
- Volumes
- Symmetry points, paths and intermediate points
- Wigner-Seitz shapes
"""

import numpy as np
import pytest
from bravais.core.lattice import (
    CubicLattice,
    FaceCenteredCubicLattice,
    BodyCenteredCubicLattice,
)


class TestCubicLatticeGeometry:
    """Test basic geometric properties."""

    def test_lattice_vectors(self):
        """Test primitive lattice vectors scale with a."""
        lattice = CubicLattice(a=2.0)
        assert np.allclose(lattice.get_lattice_vectors(), 2.0 * np.eye(3))

    def test_reciprocal_vectors(self):
        """Test b_i = (2π/a) e_i."""
        lattice = CubicLattice(a=2.0)
        assert np.allclose(lattice.get_reciprocal_vectors(), np.pi * np.eye(3))

    def test_volumes(self):
        """Test unit cell and Brillouin zone volumes."""
        lattice = CubicLattice(a=2.0)
        assert np.isclose(lattice.unit_cell_volume, 8.0)
        assert np.isclose(lattice.brillouin_zone_volume, np.pi ** 3)

    def test_translation_vectors(self):
        """Cube faces come from the three axes."""
        lattice = CubicLattice(a=2.0)
        assert np.allclose(lattice.get_translation_vectors(), 2.0 * np.eye(3))
        assert np.allclose(lattice.get_face_radii(), [1.0, 1.0, 1.0])

    def test_axial_lengths_and_angles(self):
        lattice = CubicLattice(a=2.0)
        assert np.allclose(lattice.get_axial_lengths(), [2.0, 2.0, 2.0])
        assert np.allclose(lattice.get_interaxial_angles(), np.pi / 2)
        assert np.isclose(lattice.get_lattice_constant(), 2.0)


class TestCubicSymmetryCatalog:
    """Test symmetry points and paths of the cubic lattice."""

    def test_symmetry_points(self):
        """Four points: Γ, M, R, X."""
        lattice = CubicLattice(a=2.0)
        assert lattice.get_number_symmetry_points() == 4
        labels = [lattice.get_symmetry_point_label(i) for i in range(4)]
        assert labels == ['Γ', 'M', 'R', 'X']

        # X = b2/2 = (0, π/a, 0)
        x = lattice.get_symmetry_point(lattice.get_symmetry_point_index('X'))
        assert np.allclose(x, [0.0, np.pi / 2, 0.0])

    def test_paths(self):
        """Two paths: Γ-X-M-Γ-R-X and M-R."""
        lattice = CubicLattice(a=2.0)
        assert lattice.get_number_paths() == 2
        assert lattice.get_path_labels() == [['Γ', 'X', 'M', 'Γ', 'R', 'X'], ['M', 'R']]
        assert lattice.get_number_path_segments(0) == 5
        assert lattice.get_number_path_segments(1) == 1

    def test_segment_end_points(self):
        lattice = CubicLattice()
        e0, e1 = lattice.get_path_segment_end_point_indices(0, 0)
        assert lattice.get_symmetry_point_label(e0) == 'Γ'
        assert lattice.get_symmetry_point_label(e1) == 'X'

    def test_intermediate_points(self):
        """Midpoints carry the conventional line labels."""
        lattice = CubicLattice(a=2.0)
        assert lattice.get_number_intermediate_points() == 6
        assert lattice.get_intermediate_point_label(0, 0) == 'Δ'
        assert lattice.get_intermediate_point_label(1, 0) == 'T'

        gamma = lattice.get_symmetry_point(0)
        x = lattice.get_symmetry_point(3)
        assert np.allclose(lattice.get_intermediate_point(0, 0), 0.5 * (gamma + x))

    def test_high_symmetry_dict(self):
        points = CubicLattice().get_high_symmetry_points()
        assert list(points) == ['Γ', 'M', 'R', 'X']
        assert np.allclose(points['Γ'], 0.0)


class TestFaceCenteredCubic:
    """Test the FCC lattice."""

    def test_volume(self):
        """Primitive cell holds a quarter of the conventional cube."""
        lattice = FaceCenteredCubicLattice(a=2.0)
        assert np.isclose(lattice.unit_cell_volume, 2.0)

    def test_wigner_seitz_is_rhombic_dodecahedron(self):
        lattice = FaceCenteredCubicLattice()
        cell = lattice.get_wigner_seitz_cell()
        assert cell.num_faces == 12
        assert cell.num_vertices == 14
        assert len(lattice.get_translation_vectors()) == 6

    def test_brillouin_zone_is_truncated_octahedron(self):
        lattice = FaceCenteredCubicLattice()
        zone = lattice.get_brillouin_zone()
        assert zone.num_faces == 14
        assert np.isclose(zone.volume, lattice.brillouin_zone_volume)

    def test_catalog(self):
        lattice = FaceCenteredCubicLattice()
        assert lattice.variant == 'FCC'
        assert lattice.get_number_symmetry_points() == 6
        assert lattice.get_path_labels()[1] == ['U', 'X']


class TestBodyCenteredCubic:
    """Test the BCC lattice."""

    def test_volume(self):
        lattice = BodyCenteredCubicLattice(a=2.0)
        assert np.isclose(lattice.unit_cell_volume, 4.0)

    def test_wigner_seitz_is_truncated_octahedron(self):
        lattice = BodyCenteredCubicLattice()
        cell = lattice.get_wigner_seitz_cell()
        assert cell.shape == 'truncated octahedron'
        assert cell.num_faces == 14
        assert cell.num_vertices == 24

    def test_catalog(self):
        lattice = BodyCenteredCubicLattice(a=1.0)
        assert lattice.get_number_symmetry_points() == 4
        # H = (2π/a) (0, 1, 0)
        h = lattice.get_symmetry_point(lattice.get_symmetry_point_index('H'))
        assert np.allclose(h, [0.0, 2 * np.pi, 0.0])


class TestCubicValidation:
    """Test constraint checks."""

    @pytest.mark.parametrize("cls", [CubicLattice, FaceCenteredCubicLattice,
                                     BodyCenteredCubicLattice])
    def test_non_positive_constant_raises(self, cls):
        with pytest.raises(ValueError, match="a > 0"):
            cls(a=0.0)
