"""
Tests for the logging setup.
"""

import io
import logging

from bravais.core.lattice import LatticeType, bravais_lattice_factory
from bravais.utils.logging import PACKAGE_LOGGER, setup_logging, verbosity_to_level


def _package_handlers():
    logger = logging.getLogger(PACKAGE_LOGGER)
    return [h for h in logger.handlers if getattr(h, '_bravais', False)]


class TestSetupLogging:
    """Test handler installation and verbosity levels."""

    def test_levels(self):
        assert verbosity_to_level(0) == logging.WARNING
        assert verbosity_to_level(1) == logging.INFO
        assert verbosity_to_level(3) == logging.DEBUG

    def test_single_handler(self):
        setup_logging(1)
        setup_logging(2)
        assert len(_package_handlers()) == 1
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        setup_logging(0)

    def test_factory_verbosity(self):
        stream = io.StringIO()
        setup_logging(0, stream=stream)
        bravais_lattice_factory(LatticeType.PRIMITIVE_HEXAGONAL_PRISM, verbosity=1)
        output = stream.getvalue()
        assert "using default a" in output
        assert "Constructed HexagonalPrismLattice" in output
        setup_logging(0)
