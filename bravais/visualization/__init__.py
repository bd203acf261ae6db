"""
Visualization tools (matplotlib).
"""

from .brillouin_zone_plotter import (
    DEFAULT_PLOT_CONFIG,
    plot_brillouin_zone,
    plot_wigner_seitz_cell,
    plot_band_path,
)

__all__ = [
    'DEFAULT_PLOT_CONFIG',
    'plot_brillouin_zone',
    'plot_wigner_seitz_cell',
    'plot_band_path',
]
