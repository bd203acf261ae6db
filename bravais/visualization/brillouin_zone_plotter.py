"""
Plots of Wigner-Seitz cells, Brillouin zones and band-structure paths.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Any, Dict, Optional

from ..core.lattice import BravaisLattice
from ..core.wigner_seitz import WignerSeitzCell

# Default plot configuration
DEFAULT_PLOT_CONFIG = {
    'figsize': (6, 6),
    'title': None,
    'title_fontsize': 14,
    'cell_color': 'k',
    'cell_linewidth': 1.5,
    'path_color': 'tab:red',
    'path_linewidth': 2,
    'hsp_marker': 'o',
    'hsp_color': 'tab:blue',
    'hsp_size': 30,
    'hsp_text_offset': (5, 5),
    'show_vectors': True,
    'vector_color': 'tab:green',
}


def _make_axes(dim: int, ax, cfg):
    if ax is not None:
        return ax.figure, ax
    fig = plt.figure(figsize=cfg['figsize'])
    if dim == 3:
        ax = fig.add_subplot(projection='3d')
    else:
        ax = fig.add_subplot()
    return fig, ax


def _draw_cell(ax, cell: WignerSeitzCell, cfg) -> None:
    """Draws the edges of a Wigner-Seitz cell."""
    for i, j in cell.edges():
        segment = cell.vertices[[i, j]]
        ax.plot(*segment.T, color=cfg['cell_color'], linewidth=cfg['cell_linewidth'])


def _draw_vectors(ax, vectors: np.ndarray, cfg) -> None:
    origin = np.zeros(vectors.shape[1])
    for i, v in enumerate(vectors):
        segment = np.vstack([origin, v])
        ax.plot(*segment.T, color=cfg['vector_color'], linestyle='--')
        ax.text(*v, f"$\\mathbf{{b}}_{i + 1}$", color=cfg['vector_color'])


def _finish(ax, dim: int, cfg) -> None:
    if cfg['title']:
        ax.set_title(cfg['title'], fontsize=cfg['title_fontsize'])
    if dim == 2:
        ax.set_aspect('equal')
    else:
        ax.set_box_aspect((1, 1, 1))


def plot_brillouin_zone(lattice: BravaisLattice,
                        ax: Optional[plt.Axes] = None,
                        config: Optional[Dict[str, Any]] = None) -> plt.Figure:
    """
    Plot the first Brillouin zone with its symmetry points and paths.

    Parameters
    ----------
    lattice : BravaisLattice
        Lattice to plot
    ax : plt.Axes, optional
        Target axes (3D axes for spatial lattices); created if omitted
    config : dict, optional
        Overrides of DEFAULT_PLOT_CONFIG

    Returns
    -------
    fig : plt.Figure
    """
    cfg = DEFAULT_PLOT_CONFIG.copy()
    if config:
        cfg.update(config)
    dim = lattice.dim
    fig, ax = _make_axes(dim, ax, cfg)

    _draw_cell(ax, lattice.get_brillouin_zone(), cfg)
    if cfg['show_vectors']:
        _draw_vectors(ax, lattice.get_reciprocal_vectors(), cfg)

    for labels in lattice.get_path_labels():
        path = np.array([lattice.get_symmetry_point(lattice.get_symmetry_point_index(l))
                         for l in labels])
        ax.plot(*path.T, color=cfg['path_color'], linewidth=cfg['path_linewidth'])

    for label, k in lattice.get_high_symmetry_points().items():
        ax.scatter(*k, c=cfg['hsp_color'], s=cfg['hsp_size'],
                   marker=cfg['hsp_marker'], zorder=6)
        if dim == 2:
            ax.annotate(label, k, xytext=cfg['hsp_text_offset'],
                        textcoords='offset points', zorder=7)
        else:
            ax.text(*k, label)

    if cfg['title'] is None:
        cfg['title'] = f"{lattice.label} ({lattice.variant}) Brillouin zone"
    _finish(ax, dim, cfg)
    return fig


def plot_wigner_seitz_cell(lattice: BravaisLattice,
                           ax: Optional[plt.Axes] = None,
                           config: Optional[Dict[str, Any]] = None) -> plt.Figure:
    """Plot the Wigner-Seitz cell and the translation vectors of its faces."""
    cfg = DEFAULT_PLOT_CONFIG.copy()
    if config:
        cfg.update(config)
    dim = lattice.dim
    fig, ax = _make_axes(dim, ax, cfg)

    cell = lattice.get_wigner_seitz_cell()
    _draw_cell(ax, cell, cfg)
    ax.scatter(*cell.face_centers.T, c=cfg['hsp_color'], s=cfg['hsp_size'] / 2)
    if cfg['show_vectors']:
        origin = np.zeros(dim)
        for t in lattice.get_translation_vectors():
            ax.plot(*np.vstack([origin, t]).T, color=cfg['vector_color'], linestyle='--')

    if cfg['title'] is None:
        cfg['title'] = f"{lattice.label} Wigner-Seitz cell ({cell.shape})"
    _finish(ax, dim, cfg)
    return fig


def plot_band_path(lattice: BravaisLattice,
                   p: int = 0,
                   density: float = 20.0,
                   ax: Optional[plt.Axes] = None) -> plt.Axes:
    """
    Prepare band-structure axes for path p: x axis in path length with
    ticks and dashed guides at the symmetry points.
    """
    _, distances, ticks = lattice.sample_path(p, density)
    if ax is None:
        _, ax = plt.subplots(figsize=DEFAULT_PLOT_CONFIG['figsize'])
    x_points = [distances[i] for i, _ in ticks]
    ax.set_xticks(x_points)
    ax.set_xticklabels([label for _, label in ticks])
    ax.set_xlim(x_points[0], x_points[-1])
    for x_pos in x_points:
        ax.axvline(x=x_pos, color='gray', linestyle='--', alpha=0.5)
    return ax
