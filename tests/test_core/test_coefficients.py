"""
Tests for the periodic coefficient functions.
"""

import numpy as np
import pytest
from bravais.core.coefficients import (
    LatticeCoefficient,
    RealModeCoefficient,
    ImagModeCoefficient,
    RealPhaseCoefficient,
    ImagPhaseCoefficient,
)
from bravais.core.lattice import CubicLattice, SquareLattice, BodyCenteredCubicLattice


class TestLatticeCoefficient:
    """Test the rod indicator."""

    def test_cubic_rods(self):
        coef = LatticeCoefficient(CubicLattice(a=1.0), frac=0.5, val0=0.0, val1=1.0)
        # Rod radius 0.25 around each axis
        assert coef([0.4, 0.1, 0.1]) == 1.0
        assert coef([0.3, 0.3, 0.3]) == 0.0

    def test_periodic(self):
        coef = LatticeCoefficient(CubicLattice(a=1.0), frac=0.5)
        assert coef([1.4, 0.1, 0.0]) == 1.0
        assert coef([0.4, 0.1, 0.0]) == coef([-2.6, 3.1, 5.0])

    def test_array_input(self):
        coef = LatticeCoefficient(SquareLattice(a=1.0), frac=0.4, val0=2.0, val1=5.0)
        values = coef(np.array([[0.3, 0.05], [0.3, 0.3]]))
        assert np.allclose(values, [5.0, 2.0])

    def test_full_radius_in_bcc(self):
        coef = LatticeCoefficient(BodyCenteredCubicLattice(), frac=1.0)
        assert coef([0.0, 0.0, 0.0]) == 1.0

    @pytest.mark.parametrize("frac", [0.0, -0.1, 1.5])
    def test_invalid_fraction(self, frac):
        with pytest.raises(ValueError, match="frac"):
            LatticeCoefficient(CubicLattice(), frac=frac)


class TestModeCoefficients:
    """Test the plane-wave Fourier modes."""

    def test_cos_and_sin(self):
        lattice = CubicLattice(a=1.0)
        re = RealModeCoefficient(lattice, (1, 0, 0), amp=2.0)
        im = ImagModeCoefficient(lattice, (1, 0, 0), amp=2.0)
        x = np.array([0.25, 0.0, 0.0])
        assert np.isclose(re(x), 0.0, atol=1e-12)
        assert np.isclose(im(x), 2.0)
        assert np.allclose(re.wave_vector, [2 * np.pi, 0.0, 0.0])

    def test_lattice_periodic(self):
        lattice = BodyCenteredCubicLattice(a=1.3)
        mode = RealModeCoefficient(lattice, (1, -2, 1))
        x = np.array([0.1, 0.2, 0.3])
        shift = lattice.fractional_to_real([2, -1, 3])
        assert np.isclose(mode(x), mode(x + shift))

    def test_array_input(self):
        mode = ImagModeCoefficient(SquareLattice(), (0, 1))
        values = mode(np.array([[0.0, 0.0], [0.0, 0.25], [0.0, 0.5]]))
        assert np.allclose(values, [0.0, 1.0, 0.0], atol=1e-12)

    def test_wrong_index_length(self):
        with pytest.raises(ValueError, match="mode index"):
            RealModeCoefficient(CubicLattice(), (1, 0))


class TestPhaseCoefficients:
    """Test the Bloch phase factors."""

    def test_values(self):
        re = RealPhaseCoefficient([np.pi, 0.0])
        im = ImagPhaseCoefficient([np.pi, 0.0], amp=3.0)
        assert np.isclose(re([1.0, 7.0]), -1.0)
        assert np.isclose(im([0.5, 0.0]), 3.0)
