"""
Tests for the symmetry catalog and point-group folding.
"""

import numpy as np
import pytest
from bravais.core.exceptions import InvalidLatticeConfiguration
from bravais.core.symmetry import (
    SymmetryCatalog,
    cubic_folding,
    hexagon_folding,
    monoclinic_folding,
    triclinic_folding,
)


class TestSymmetryCatalog:
    """Test table validation."""

    def _catalog(self, points, paths):
        return SymmetryCatalog('TEST', points, paths, 2 * np.pi * np.eye(2))

    def test_valid(self):
        catalog = self._catalog([('Γ', (0, 0)), ('X', (0.5, 0))], [['Γ', 'X']])
        assert catalog.num_points == 2
        assert catalog.labels == ['Γ', 'X']
        assert np.allclose(catalog.point(1).cartesian, [np.pi, 0.0])
        assert catalog.intermediate_point(0, 0).label == 'Γ-X'

    def test_duplicate_label(self):
        with pytest.raises(InvalidLatticeConfiguration, match="Duplicate"):
            self._catalog([('Γ', (0, 0)), ('Γ', (0.5, 0))], [])

    def test_wrong_dimension(self):
        with pytest.raises(InvalidLatticeConfiguration, match="coordinates"):
            self._catalog([('Γ', (0, 0, 0))], [])

    def test_short_path(self):
        with pytest.raises(InvalidLatticeConfiguration, match="no segments"):
            self._catalog([('Γ', (0, 0))], [['Γ']])

    def test_repeated_point(self):
        with pytest.raises(InvalidLatticeConfiguration, match="repeats"):
            self._catalog([('Γ', (0, 0)), ('X', (0.5, 0))], [['Γ', 'X', 'X']])

    def test_unknown_path_label(self):
        with pytest.raises(KeyError):
            self._catalog([('Γ', (0, 0))], [['Γ', 'Y']])


class TestPointGroupFolding:
    """Test folding into irreducible wedges."""

    def test_cubic(self):
        folding = cubic_folding()
        assert np.allclose(folding.fold([0.3, -0.5, 0.9]), [0.9, 0.5, 0.3])
        assert folding.contains([0.9, 0.5, 0.3])
        assert not folding.contains([0.3, -0.5, 0.9])

    def test_cubic_orbit(self):
        """All 48 images of a generic point fold to the same representative."""
        folding = cubic_folding()
        base = np.array([0.1, 0.2, 0.3])
        results = set()
        for perm in [(0, 1, 2), (0, 2, 1), (1, 0, 2), (1, 2, 0), (2, 0, 1), (2, 1, 0)]:
            for signs in np.ndindex(2, 2, 2):
                x = base[list(perm)] * (1 - 2 * np.array(signs))
                results.add(tuple(np.round(folding.fold(x), 12)))
        assert results == {(0.3, 0.2, 0.1)}

    def test_monoclinic(self):
        """C2h: mirror x -> -x and two-fold rotation about x."""
        folding = monoclinic_folding()
        assert np.allclose(folding.fold([-1.0, -2.0, 3.0]), [1.0, 2.0, -3.0])

    def test_triclinic(self):
        folding = triclinic_folding()
        assert np.allclose(folding.fold([-1.0, 2.0, 3.0]), [1.0, -2.0, -3.0])
        assert np.allclose(folding.fold([1.0, 2.0, 3.0]), [1.0, 2.0, 3.0])

    def test_hexagon_wedge(self):
        """D6 folds onto the 30° wedge 0 <= y <= x / √3."""
        folding = hexagon_folding()
        rng = np.random.default_rng(3)
        for x in rng.normal(size=(20, 2)):
            y = folding.fold(x)
            assert np.isclose(np.linalg.norm(y), np.linalg.norm(x))
            assert -1e-12 <= y[1] <= y[0] / np.sqrt(3) + 1e-12
