"""
Error taxonomy for the lattice engine.

All errors are raised where they are detected and propagate to the caller.
A failed construction never yields a partially built lattice.
"""


class BravaisError(Exception):
    """Base class for all errors raised by the bravais package."""


class InvalidLatticeConfiguration(BravaisError, ValueError):
    """
    Unknown lattice type or geometric parameters violating the
    constraint table of the requested type.
    """


class UnknownSymmetryPointError(BravaisError, KeyError):
    """Symmetry point label not present in the lattice's catalog."""

    def __init__(self, label, available=()):
        self.label = label
        self.available = tuple(available)
        super().__init__(label)

    def __str__(self) -> str:
        known = ', '.join(self.available)
        return f"Unknown symmetry point '{self.label}'. Available labels: {known}"
