"""
Tests for the symmetry-point catalog accessors, path sampling and the
invariants shared by every lattice type.
"""

import numpy as np
import pytest
from bravais.core.exceptions import UnknownSymmetryPointError
from bravais.core.lattice import (
    LATTICE_REGISTRY,
    LatticeType,
    CubicLattice,
    SquareLattice,
    bravais_lattice_factory,
)

ALL_TYPES = list(LATTICE_REGISTRY)
CONVENTIONAL_TYPES = [
    LatticeType.PRIMITIVE_SQUARE,
    LatticeType.PRIMITIVE_HEXAGONAL,
    LatticeType.PRIMITIVE_RECTANGULAR,
    LatticeType.CENTERED_RECTANGULAR,
    LatticeType.PRIMITIVE_CUBIC,
    LatticeType.FACE_CENTERED_CUBIC,
    LatticeType.BODY_CENTERED_CUBIC,
    LatticeType.PRIMITIVE_TETRAGONAL,
    LatticeType.PRIMITIVE_ORTHORHOMBIC,
    LatticeType.BASE_CENTERED_ORTHORHOMBIC,
    LatticeType.PRIMITIVE_HEXAGONAL_PRISM,
]


class TestCatalogInvariants:
    """Properties every lattice type satisfies."""

    @pytest.mark.parametrize("lattice_type", ALL_TYPES)
    def test_reciprocal_orthogonality(self, lattice_type):
        """a_i · b_j = 2π δ_ij"""
        lattice = bravais_lattice_factory(lattice_type)
        A = lattice.get_lattice_vectors()
        B = lattice.get_reciprocal_vectors()
        assert np.allclose(A @ B.T, 2 * np.pi * np.eye(lattice.dim))

    @pytest.mark.parametrize("lattice_type", ALL_TYPES)
    def test_volumes(self, lattice_type):
        lattice = bravais_lattice_factory(lattice_type)
        A = lattice.get_lattice_vectors()
        assert np.isclose(lattice.unit_cell_volume, abs(np.linalg.det(A)))
        assert np.isclose(lattice.unit_cell_volume * lattice.brillouin_zone_volume,
                          (2 * np.pi) ** lattice.dim)

    @pytest.mark.parametrize("lattice_type", ALL_TYPES)
    def test_path_indices_valid(self, lattice_type):
        lattice = bravais_lattice_factory(lattice_type)
        n = lattice.get_number_symmetry_points()
        assert lattice.get_symmetry_point_label(0) == 'Γ'
        assert np.allclose(lattice.get_symmetry_point(0), 0.0)
        total = 0
        for p in range(lattice.get_number_paths()):
            segments = lattice.get_number_path_segments(p)
            assert segments >= 1
            total += segments
            for s in range(segments):
                e0, e1 = lattice.get_path_segment_end_point_indices(p, s)
                assert 0 <= e0 < n and 0 <= e1 < n
                assert e0 != e1
        assert lattice.get_number_intermediate_points() == total

    @pytest.mark.parametrize("lattice_type", ALL_TYPES)
    def test_labels_round_trip(self, lattice_type):
        lattice = bravais_lattice_factory(lattice_type)
        for i in range(lattice.get_number_symmetry_points()):
            label = lattice.get_symmetry_point_label(i)
            assert lattice.get_symmetry_point_index(label) == i

    @pytest.mark.parametrize("lattice_type", ALL_TYPES)
    def test_fractional_coordinates(self, lattice_type):
        lattice = bravais_lattice_factory(lattice_type)
        B = lattice.get_reciprocal_vectors()
        for i in range(lattice.get_number_symmetry_points()):
            frac = lattice.get_symmetry_point(i, fractional=True)
            assert np.allclose(frac @ B, lattice.get_symmetry_point(i))

    @pytest.mark.parametrize("lattice_type", CONVENTIONAL_TYPES)
    def test_points_inside_brillouin_zone(self, lattice_type):
        lattice = bravais_lattice_factory(lattice_type)
        zone = lattice.get_brillouin_zone()
        for k in lattice.get_high_symmetry_points().values():
            assert zone.contains(k)


class TestCatalogErrors:
    """Test lookup failures."""

    def test_unknown_label(self):
        lattice = CubicLattice()
        with pytest.raises(UnknownSymmetryPointError, match="Q"):
            lattice.get_symmetry_point_index('Q')

    def test_unknown_label_is_key_error(self):
        with pytest.raises(KeyError):
            CubicLattice().get_symmetry_point_index('K')

    def test_error_lists_available_labels(self):
        try:
            SquareLattice().get_symmetry_point_index('R')
        except UnknownSymmetryPointError as err:
            assert err.label == 'R'
            assert err.available == ('Γ', 'X', 'M')
        else:
            pytest.fail("expected UnknownSymmetryPointError")

    @pytest.mark.parametrize("i", [-1, 4, 100])
    def test_point_index_out_of_range(self, i):
        with pytest.raises(IndexError):
            CubicLattice().get_symmetry_point(i)

    def test_path_index_out_of_range(self):
        lattice = CubicLattice()
        with pytest.raises(IndexError):
            lattice.get_number_path_segments(2)
        with pytest.raises(IndexError):
            lattice.get_path_segment_end_point_indices(1, 1)
        with pytest.raises(IndexError):
            lattice.get_intermediate_point(0, -1)


class TestSamplePath:
    """Test k-point sampling along paths."""

    def test_ticks(self):
        lattice = CubicLattice(a=1.0)
        kpoints, distances, ticks = lattice.sample_path(0, density=10.0)
        assert [label for _, label in ticks] == ['Γ', 'X', 'M', 'Γ', 'R', 'X']
        assert ticks[0][0] == 0
        assert ticks[-1][0] == len(kpoints) - 1
        for index, label in ticks:
            k = lattice.get_symmetry_point(lattice.get_symmetry_point_index(label))
            assert np.allclose(kpoints[index], k)

    def test_distances(self):
        lattice = CubicLattice(a=1.0)
        kpoints, distances, _ = lattice.sample_path(0, density=10.0)
        assert len(distances) == len(kpoints)
        assert distances[0] == 0.0
        assert np.all(np.diff(distances) > 0)

        labels = lattice.get_path_labels()[0]
        corners = [lattice.get_high_symmetry_points()[l] for l in labels]
        length = sum(np.linalg.norm(q - p) for p, q in zip(corners[:-1], corners[1:]))
        assert np.isclose(distances[-1], length)

    def test_minimum_points_per_segment(self):
        kpoints, _, ticks = CubicLattice().sample_path(1, density=1e-6)
        assert len(kpoints) == 3
        assert [i for i, _ in ticks] == [0, 2]

    def test_invalid_density(self):
        with pytest.raises(ValueError, match="density"):
            CubicLattice().sample_path(0, density=0.0)


class TestImmutability:
    """Lattices cannot be modified after construction."""

    def test_attribute_assignment(self):
        lattice = CubicLattice()
        with pytest.raises(AttributeError, match="immutable"):
            lattice.foo = 1
        with pytest.raises(AttributeError):
            lattice._vectors = np.zeros((3, 3))

    def test_arrays_read_only(self):
        lattice = CubicLattice()
        with pytest.raises(ValueError):
            lattice.get_lattice_vectors()[0, 0] = 5.0
        with pytest.raises(ValueError):
            lattice.get_reciprocal_vectors()[0, 0] = 5.0
        with pytest.raises(ValueError):
            lattice.get_symmetry_point(1)[0] = 5.0

    def test_parameters_frozen(self):
        lattice = CubicLattice()
        with pytest.raises(AttributeError):
            lattice.parameters.a = 3.0

    def test_repr_and_to_dict(self):
        lattice = CubicLattice(a=2.0)
        assert repr(lattice) == "CubicLattice(a=2)"
        assert lattice.to_dict() == {'type': 'PRIMITIVE_CUBIC', 'a': 2.0}
